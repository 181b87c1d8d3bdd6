"""Contract shared by the idle-time insertion policies.

An idle-time insertion policy (IIP) tells a non-preemptive schedulability
analysis whether it may model deliberate idling instead of dispatching the
highest-priority ready job. The engine builds one policy per analysis run and
then asks, for a candidate job at a given time and scheduled set, for the
latest instant at which that job may start. ``INFINITY`` means the policy puts
no bound on the start, i.e. dispatching now is work-conserving and fine.

The four policies share this call contract and nothing else: they are
structurally typed against :class:`IdleTimePolicy` and never subclass it.
"""
from __future__ import annotations

from typing import Container, Iterator, Protocol, Sequence

from ..analysis.space import ResponseTimeTable
from ..theory.time_model import Time
from ..workloads.jobs import Job
from ..workloads.workload import Workload

Scheduled = Container[int]


class EngineView(Protocol):
    """The parts of the analysis engine a policy reads."""

    num_cores: int
    rta: ResponseTimeTable

    def incomplete(self, scheduled: Scheduled, job: Job) -> bool:
        ...

    def jobs_by_window_containing(self, t: Time) -> Sequence[Job]:
        ...

    def jobs_by_earliest_arrival_after(self, t: Time) -> Iterator[Job]:
        ...


class IdleTimePolicy(Protocol):
    name: str
    can_block: bool

    def __init__(self, space: EngineView, workload: Workload) -> None:
        ...

    def latest_start(self, job: Job, now: Time, scheduled: Scheduled) -> Time:
        ...
