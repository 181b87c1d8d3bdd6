"""Job records of a non-preemptive workload."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..theory.time_model import Interval, Time


class Phase(enum.Enum):
    """Resource phase of a job under the acquisition/restitution protocol."""

    ACQUISITION = "A"
    RESTITUTION = "R"

    @classmethod
    def from_job_id(cls, job_id: int) -> "Phase":
        """Legacy encoding: odd job ids acquire a core, even ids release it."""

        return cls.ACQUISITION if job_id % 2 else cls.RESTITUTION

    @classmethod
    def parse(cls, value: str) -> "Phase":
        text = str(value).strip().upper()
        for phase in cls:
            if text in (phase.value, phase.name):
                return phase
        raise ValueError(f"Unknown job phase: {value!r}")


@dataclass(frozen=True)
class Job:
    """One instance of a recurring task.

    ``priority`` follows the fixed-priority convention: a lower value means
    higher precedence. ``phase`` is only meaningful for acquisition/restitution
    workloads and stays ``None`` elsewhere.
    """

    task_id: int
    job_id: int
    priority: Time
    arrival: Interval
    deadline: Time
    cost: Interval
    phase: Optional[Phase] = None

    def __post_init__(self) -> None:
        if self.cost.min < 0:
            raise ValueError(f"Job T{self.task_id}J{self.job_id} has a negative cost")

    @property
    def earliest_arrival(self) -> Time:
        return self.arrival.min

    @property
    def latest_arrival(self) -> Time:
        return self.arrival.max

    @property
    def least_cost(self) -> Time:
        return self.cost.min

    @property
    def maximal_cost(self) -> Time:
        return self.cost.max

    @property
    def scheduling_window(self) -> Interval:
        """All instants at which the job may be pending."""

        return Interval(self.earliest_arrival, max(self.earliest_arrival, self.deadline))

    @property
    def key(self) -> tuple:
        return (self.task_id, self.job_id)

    def is_acquisition(self) -> bool:
        return self.phase is Phase.ACQUISITION

    def is_restitution(self) -> bool:
        return self.phase is Phase.RESTITUTION

    def __str__(self) -> str:
        return (
            f"T{self.task_id}J{self.job_id}(arrival={self.arrival}, cost={self.cost}, "
            f"dl={self.deadline}, prio={self.priority})"
        )
