"""Fixed job collection of one analysis run and its lookup indices."""
from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..theory.time_model import Time
from ..utils.logger import get_logger
from .jobs import Job

LOGGER = get_logger("workloads.workload")


class Workload:
    """Immutable job set plus an earliest-arrival index and a window index.

    Jobs are addressed by their position in the input order; that position is
    what the engine stores in a scheduled set.
    """

    def __init__(self, jobs: Iterable[Job]) -> None:
        self._jobs: Tuple[Job, ...] = tuple(jobs)
        self._positions: Dict[tuple, int] = {}
        for index, job in enumerate(self._jobs):
            if job.key in self._positions:
                raise ValueError(f"Duplicate job T{job.task_id}J{job.job_id} in workload")
            self._positions[job.key] = index

        # sorted() is stable: equal arrivals keep workload order
        order = sorted(range(len(self._jobs)), key=lambda i: self._jobs[i].earliest_arrival)
        self._by_arrival: Tuple[Job, ...] = tuple(self._jobs[i] for i in order)
        self._arrival_keys: Tuple[Time, ...] = tuple(j.earliest_arrival for j in self._by_arrival)

        # windows start at the earliest arrival, so the arrival order doubles
        # as the window-start order
        self._max_window = max(
            (j.scheduling_window.max - j.scheduling_window.min for j in self._jobs),
            default=0,
        )
        self._task_ids = frozenset(j.task_id for j in self._jobs)
        LOGGER.debug("Indexed %s jobs of %s tasks", len(self._jobs), len(self._task_ids))

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __getitem__(self, index: int) -> Job:
        return self._jobs[index]

    @property
    def jobs(self) -> Sequence[Job]:
        return self._jobs

    @property
    def task_ids(self) -> frozenset:
        return self._task_ids

    def index_of(self, job: Job) -> int:
        try:
            return self._positions[job.key]
        except KeyError:
            raise KeyError(f"Job T{job.task_id}J{job.job_id} is not part of this workload") from None

    def jobs_by_earliest_arrival_after(self, t: Time) -> Iterator[Job]:
        """Jobs with ``earliest_arrival > t`` in increasing arrival order."""

        start = bisect_right(self._arrival_keys, t)
        return islice(self._by_arrival, start, None)

    def jobs_by_window_containing(self, t: Time) -> List[Job]:
        """Jobs whose scheduling window contains ``t``, by earliest arrival."""

        first = bisect_left(self._arrival_keys, t - self._max_window)
        last = bisect_right(self._arrival_keys, t)
        return [
            job for job in self._by_arrival[first:last]
            if job.scheduling_window.contains(t)
        ]
