"""Time domain shared by the workload model and the policies.

Times are plain ``int`` (discrete time) or ``float`` (dense time) values.
The infinity sentinel is ``float("inf")``: it compares larger than every
finite time, and ``INFINITY - finite`` stays ``INFINITY``, so the policy
arithmetic never wraps or saturates to a finite bound.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Time = Union[int, float]

INFINITY: float = math.inf


def is_infinite(value: Time) -> bool:
    return value == INFINITY


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[min, max]`` of time values."""

    min: Time
    max: Time

    def __post_init__(self) -> None:
        if math.isnan(self.min) or math.isnan(self.max):
            raise ValueError("Interval bounds must not be NaN")
        if self.min > self.max:
            raise ValueError(f"Empty interval [{self.min}, {self.max}]")

    def contains(self, point: Time) -> bool:
        return self.min <= point <= self.max

    def __contains__(self, point: Time) -> bool:
        return self.contains(point)

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"
