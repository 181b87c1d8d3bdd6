"""Read-only view of the analysis engine handed to idle-time policies."""
from __future__ import annotations

from typing import Container, Dict, FrozenSet, Iterable, Iterator, List, Optional

from ..theory.time_model import Interval, Time
from ..utils.logger import get_logger
from ..workloads.jobs import Job
from ..workloads.workload import Workload
from .errors import ContractViolation

LOGGER = get_logger("analysis.space")


class IndexSet:
    """Immutable set of workload positions: the jobs a search state dispatched."""

    __slots__ = ("_members",)

    def __init__(self, indices: Iterable[int] = ()) -> None:
        self._members: FrozenSet[int] = frozenset(indices)

    def __contains__(self, index: object) -> bool:
        return index in self._members

    def contains(self, index: int) -> bool:
        return index in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def with_index(self, index: int) -> "IndexSet":
        return IndexSet(self._members | {index})

    def __repr__(self) -> str:
        return f"IndexSet({sorted(self._members)})"


class ResponseTimeTable:
    """Finalized ``[min, max]`` completion bounds, written once per job."""

    def __init__(self) -> None:
        self._bounds: Dict[tuple, Interval] = {}

    def finalize(self, job: Job, bounds: Interval) -> None:
        if job.key in self._bounds:
            raise ContractViolation(f"Response time of T{job.task_id}J{job.job_id} finalized twice")
        self._bounds[job.key] = bounds

    def is_final(self, job: Job) -> bool:
        return job.key in self._bounds

    def __getitem__(self, job: Job) -> Interval:
        try:
            return self._bounds[job.key]
        except KeyError:
            LOGGER.error("Read of non-finalized response time for %s", job)
            raise ContractViolation(
                f"Response time of T{job.task_id}J{job.job_id} read before it was finalized"
            ) from None

    def __contains__(self, job: object) -> bool:
        return isinstance(job, Job) and job.key in self._bounds

    def __len__(self) -> int:
        return len(self._bounds)


class AnalysisSpace:
    """What a policy may see of the engine: cores, results and job indices."""

    def __init__(
        self,
        workload: Workload,
        num_cores: int = 1,
        rta: Optional[ResponseTimeTable] = None,
    ) -> None:
        if num_cores < 1:
            raise ValueError("num_cores must be at least 1")
        self.workload = workload
        self.num_cores = num_cores
        self.rta = rta if rta is not None else ResponseTimeTable()

    def incomplete(self, scheduled: Container[int], job: Job) -> bool:
        return self.workload.index_of(job) not in scheduled

    def jobs_by_window_containing(self, t: Time) -> List[Job]:
        return self.workload.jobs_by_window_containing(t)

    def jobs_by_earliest_arrival_after(self, t: Time) -> Iterator[Job]:
        return self.workload.jobs_by_earliest_arrival_after(t)
