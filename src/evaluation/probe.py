"""Tabulate what a policy answers for every job of a workload."""
from __future__ import annotations

from typing import Container, Optional

import pandas as pd

from ..analysis.space import IndexSet
from ..policies.base import IdleTimePolicy
from ..theory.time_model import is_infinite
from ..utils.logger import get_logger
from ..workloads.workload import Workload

LOGGER = get_logger("evaluation.probe")

PROBE_COLUMNS = ["task_id", "job_id", "priority", "phase", "now", "latest_start", "blocks"]


def probe_policy(
    policy: IdleTimePolicy,
    workload: Workload,
    scheduled: Optional[Container[int]] = None,
) -> pd.DataFrame:
    """Query ``policy`` for each job at its earliest arrival.

    ``blocks`` is true where the policy returns a finite latest start, i.e.
    where the analysis would have to consider idling before the job.
    """

    if scheduled is None:
        scheduled = IndexSet()

    rows = []
    for job in workload:
        latest = policy.latest_start(job, job.earliest_arrival, scheduled)
        rows.append({
            "task_id": job.task_id,
            "job_id": job.job_id,
            "priority": job.priority,
            "phase": job.phase.name if job.phase is not None else None,
            "now": job.earliest_arrival,
            "latest_start": latest,
            "blocks": not is_infinite(latest),
        })

    df = pd.DataFrame(rows, columns=PROBE_COLUMNS)
    blocked = int(df["blocks"].sum())
    LOGGER.info("Policy %s bounds the start of %s/%s jobs", policy.name, blocked, len(df))
    return df
