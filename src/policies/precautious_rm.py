"""Precautious rate-monotonic idle-time insertion policy."""
from __future__ import annotations

from bisect import bisect_right
from typing import Tuple

from ..theory.time_model import INFINITY, Time
from ..utils.logger import get_logger
from ..workloads.jobs import Job
from ..workloads.workload import Workload
from .base import EngineView, Scheduled

LOGGER = get_logger("policies.precautious_rm")


def highest_priority(workload: Workload) -> Time:
    """Smallest priority value in ``workload`` (``INFINITY`` if empty)."""

    priority = INFINITY
    for job in workload:
        priority = min(priority, job.priority)
    return priority


class PrecautiousRMPolicy:
    """Keep lower-priority work from delaying the next top-priority job.

    Under non-preemption a lower-priority job that starts just before a
    maximum-priority job arrives blocks it for its full cost. The policy
    therefore delays a lower-priority job ``j`` past the point where the next
    pending maximum-priority job ``h`` could still meet its deadline:
    ``h.deadline - h.maximal_cost - j.maximal_cost``.
    """

    name = "p-rm"
    can_block = True

    def __init__(self, space: EngineView, workload: Workload) -> None:
        self.space = space
        self.max_priority = highest_priority(workload)
        hp_jobs = sorted(
            (job for job in workload if job.priority == self.max_priority),
            key=lambda job: job.latest_arrival,
        )
        self._hp_jobs: Tuple[Job, ...] = tuple(hp_jobs)
        self._hp_keys: Tuple[Time, ...] = tuple(job.latest_arrival for job in hp_jobs)
        LOGGER.debug("IIP max priority = %s (%s jobs)", self.max_priority, len(self._hp_jobs))

    def latest_start(self, job: Job, now: Time, scheduled: Scheduled) -> Time:
        # never block maximum-priority jobs
        if job.priority == self.max_priority:
            LOGGER.debug("P-RM for %s: self", job)
            return INFINITY

        for index in range(bisect_right(self._hp_keys, now), len(self._hp_jobs)):
            hp_job = self._hp_jobs[index]
            if self.space.incomplete(scheduled, hp_job):
                latest = hp_job.deadline - hp_job.maximal_cost - job.maximal_cost
                LOGGER.debug("P-RM for %s: latest=%s due to %s", job, latest, hp_job)
                return latest

        LOGGER.debug("P-RM for %s: none", job)
        return INFINITY
