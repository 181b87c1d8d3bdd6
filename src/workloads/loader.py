"""Load job sets from CSV files."""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

import pandas as pd

from ..theory.time_model import Interval
from ..utils.io import PathLike, read_dataframe
from ..utils.logger import get_logger
from .jobs import Job, Phase
from .workload import Workload

LOGGER = get_logger("workloads.loader")

REQUIRED_COLUMNS = (
    "Task ID",
    "Job ID",
    "Arrival min",
    "Arrival max",
    "Cost min",
    "Cost max",
    "Deadline",
    "Priority",
)
PHASE_COLUMN = "Phase"


def _as_time(value):
    # keep discrete job sets integral
    number = pd.to_numeric(value)
    if float(number).is_integer():
        return int(number)
    return float(number)


def assign_phases_by_parity(jobs: Iterable[Job]) -> List[Job]:
    """Tag each job with the phase implied by the parity of its job id."""

    return [replace(job, phase=Phase.from_job_id(job.job_id)) for job in jobs]


def jobs_from_dataframe(df: pd.DataFrame, parity_phases: bool = False) -> List[Job]:
    """Convert a job-set dataframe into :class:`Job` records.

    An explicit ``Phase`` column wins over ``parity_phases``.
    """

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Job set is missing columns: {', '.join(missing)}")

    has_phase = PHASE_COLUMN in df.columns
    jobs = []
    for values in df.to_dict(orient="records"):
        phase = None
        if has_phase and pd.notna(values[PHASE_COLUMN]):
            phase = Phase.parse(values[PHASE_COLUMN])
        elif parity_phases:
            phase = Phase.from_job_id(int(values["Job ID"]))
        jobs.append(
            Job(
                task_id=int(values["Task ID"]),
                job_id=int(values["Job ID"]),
                priority=_as_time(values["Priority"]),
                arrival=Interval(_as_time(values["Arrival min"]), _as_time(values["Arrival max"])),
                deadline=_as_time(values["Deadline"]),
                cost=Interval(_as_time(values["Cost min"]), _as_time(values["Cost max"])),
                phase=phase,
            )
        )
    return jobs


def load_jobs(path: PathLike, parity_phases: bool = False) -> Workload:
    """Read a job-set CSV file and build its :class:`Workload`."""

    df = read_dataframe(path)
    workload = Workload(jobs_from_dataframe(df, parity_phases=parity_phases))
    LOGGER.info("Loaded workload with %s jobs and %s tasks", len(workload), len(workload.task_ids))
    return workload
