"""Synthetic periodic job sets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from ..theory.time_model import Interval
from .jobs import Job, Phase
from .workload import Workload


@dataclass(frozen=True)
class PeriodicTask:
    task_id: int
    period: int
    cost_min: int
    cost_max: int
    deadline: Optional[int] = None  # relative; defaults to the period
    priority: int = 0
    jitter: int = 0

    @property
    def relative_deadline(self) -> int:
        return self.period if self.deadline is None else self.deadline


def hyperperiod(tasks: Iterable[PeriodicTask]) -> int:
    periods = np.array([task.period for task in tasks], dtype=np.int64)
    if periods.size == 0:
        return 0
    return int(np.lcm.reduce(periods))


def periodic_jobs(
    tasks: Iterable[PeriodicTask],
    horizon: Optional[int] = None,
    aer: bool = False,
) -> Workload:
    """Expand periodic tasks into the jobs released in ``[0, horizon)``.

    With ``aer=True`` every release becomes an acquisition job followed by a
    restitution job; the restitution arrives at the acquisition's deadline.
    """

    tasks = list(tasks)
    if horizon is None:
        horizon = hyperperiod(tasks)

    jobs: List[Job] = []
    for task in tasks:
        releases = np.arange(0, horizon, task.period, dtype=np.int64)
        for k, release in enumerate(releases.tolist()):
            deadline = release + task.relative_deadline
            if not aer:
                jobs.append(
                    Job(
                        task_id=task.task_id,
                        job_id=k + 1,
                        priority=task.priority,
                        arrival=Interval(release, release + task.jitter),
                        deadline=deadline,
                        cost=Interval(task.cost_min, task.cost_max),
                    )
                )
                continue
            jobs.append(
                Job(
                    task_id=task.task_id,
                    job_id=2 * k + 1,
                    priority=task.priority,
                    arrival=Interval(release, release + task.jitter),
                    deadline=deadline,
                    cost=Interval(task.cost_min, task.cost_max),
                    phase=Phase.ACQUISITION,
                )
            )
            jobs.append(
                Job(
                    task_id=task.task_id,
                    job_id=2 * k + 2,
                    priority=task.priority,
                    arrival=Interval(deadline, deadline),
                    deadline=deadline + task.period,
                    cost=Interval(task.cost_min, task.cost_max),
                    phase=Phase.RESTITUTION,
                )
            )
    return Workload(jobs)
