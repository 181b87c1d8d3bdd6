"""Time domain shared by workloads and policies."""

from .time_model import INFINITY, Interval, Time, is_infinite

__all__ = [
    "INFINITY",
    "Interval",
    "Time",
    "is_infinite",
]
