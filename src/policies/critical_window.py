"""Critical-window idle-time insertion policy.

The policy bounds how long a candidate job may be delayed by one job per task:
the pending jobs of the *other* tasks, completed by the earliest future release
of every task not represented yet, up to a cost-derived horizon. The
representatives are then stacked back to back from the latest deadline down to
the earliest, which yields the latest instant the candidate can start without
pushing any of them past its deadline.
"""
from __future__ import annotations

from typing import Dict, List

from ..analysis.errors import ContractViolation
from ..theory.time_model import INFINITY, Time
from ..utils.logger import get_logger
from ..workloads.jobs import Job
from ..workloads.workload import Workload
from .base import EngineView, Scheduled

LOGGER = get_logger("policies.critical_window")


class CriticalWindowPolicy:
    name = "cw"
    can_block = True

    def __init__(self, space: EngineView, workload: Workload) -> None:
        self.space = space
        self.max_cost = max((job.maximal_cost for job in workload), default=0)
        self.n_tasks = len({job.task_id for job in workload})

    def latest_start(self, job: Job, now: Time, scheduled: Scheduled) -> Time:
        latest = INFINITY
        # from the job with the latest deadline to the one with the earliest
        for ij in reversed(self.influencing_jobs(job, now, scheduled)):
            latest = min(latest, ij.deadline) - ij.maximal_cost
        LOGGER.debug("CW for %s: latest=%s", job, latest)
        return latest - job.maximal_cost

    def influencing_jobs(self, j_i: Job, at: Time, already_scheduled: Scheduled) -> List[Job]:
        """One representative job per task, sorted by deadline."""

        ijs: Dict[int, Job] = {}

        # first, everything already pending at `at`
        for job in self.space.jobs_by_window_containing(at):
            tid = job.task_id
            if (
                job.scheduling_window.contains(at)
                and tid != j_i.task_id
                and self.space.incomplete(already_scheduled, job)
                and (tid not in ijs or ijs[tid].earliest_arrival > job.earliest_arrival)
            ):
                ijs[tid] = job

        # how far do we need to look into future releases?
        latest_deadline = 0
        for ij in ijs.values():
            latest_deadline = max(latest_deadline, ij.deadline)

        # second, go looking for later releases while tasks are still missing
        for job in self.space.jobs_by_earliest_arrival_after(at):
            if len(ijs) >= self.n_tasks - 1:
                break
            if not self.space.incomplete(already_scheduled, job):
                LOGGER.error("Future job %s is already scheduled at t=%s", job, at)
                raise ContractViolation(f"Job {job} released after t={at} is already complete")

            tid = job.task_id
            if tid not in ijs:
                ijs[tid] = job
                latest_deadline = max(latest_deadline, job.deadline)

            # past the horizon nothing can influence the latest start anymore
            if latest_deadline + self.max_cost < job.earliest_arrival:
                break

        return sorted(ijs.values(), key=lambda ij: ij.deadline)
