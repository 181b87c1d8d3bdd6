"""Acquisition/restitution (AER) idle-time insertion policy.

Every job of an AER workload either acquires a core (acquisition phase) or
hands it back (restitution phase). An acquisition may only start while a core
is free; otherwise the analysis has to consider idling until a restitution
releases one.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from ..analysis.errors import ContractViolation
from ..theory.time_model import INFINITY, Time
from ..utils.logger import get_logger
from ..workloads.jobs import Job, Phase
from ..workloads.workload import Workload
from .base import EngineView, Scheduled

LOGGER = get_logger("policies.aer")


class AERPolicy:
    """Block acquisition jobs while every core is claimed.

    A restitution job is never blocked. Its acquisition must have finished by
    the time the restitution is considered, which holds because the
    acquisition's deadline is no later than the restitution's release; the
    constructor rejects workloads where that ordering does not hold.
    """

    name = "aer"
    can_block = True

    def __init__(self, space: EngineView, workload: Workload) -> None:
        self.space = space
        self.workload = workload
        self._phases: Tuple[Phase, ...] = tuple(self._phase_of(job) for job in workload)
        self._check_restitution_pairs(workload)

    @staticmethod
    def _phase_of(job: Job) -> Phase:
        if job.phase is None:
            raise ContractViolation(f"Job {job} carries no acquisition/restitution phase")
        return job.phase

    @staticmethod
    def _check_restitution_pairs(workload: Workload) -> None:
        by_task: Dict[int, List[Job]] = {}
        for job in workload:
            by_task.setdefault(job.task_id, []).append(job)

        for jobs in by_task.values():
            acquisition = None
            for job in sorted(jobs, key=lambda j: j.job_id):
                if job.phase is Phase.ACQUISITION:
                    acquisition = job
                    continue
                if acquisition is None:
                    raise ContractViolation(f"Restitution {job} has no preceding acquisition")
                if acquisition.deadline > job.earliest_arrival:
                    raise ContractViolation(
                        f"Acquisition {acquisition} may still run when restitution {job} is released"
                    )
                acquisition = None

    def latest_start(self, job: Job, now: Time, scheduled: Scheduled) -> Time:
        if job.is_restitution():
            LOGGER.debug("%s releases a core, schedulable at t=%s", job, now)
            return INFINITY

        free_cores = self.available_cores(scheduled)
        LOGGER.debug("t=%s scheduled=%s free cores=%s", now, scheduled, free_cores)
        if free_cores > 0:
            LOGGER.debug("%s is schedulable at t=%s", job, now)
            return INFINITY
        # no core left: not IIP-eligible now
        return 0

    def busy_cores(self, scheduled: Scheduled) -> int:
        """Scheduled acquisitions minus scheduled restitutions.

        A dispatched restitution has always finished by the next scheduling
        decision, so it counts as a released core right away.
        """

        busy = 0
        for index, phase in enumerate(self._phases):
            if index not in scheduled:
                continue
            if phase is Phase.ACQUISITION:
                busy += 1
            else:
                busy -= 1
        return busy

    def available_cores(self, scheduled: Scheduled) -> int:
        return self.space.num_cores - self.busy_cores(scheduled)
