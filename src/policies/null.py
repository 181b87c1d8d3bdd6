"""Work-conserving policy: never insert idle time."""
from __future__ import annotations

from ..theory.time_model import INFINITY, Time
from ..workloads.jobs import Job
from ..workloads.workload import Workload
from .base import EngineView, Scheduled


class NullPolicy:
    name = "null"
    # lets the engine skip idle-branch exploration altogether
    can_block = False

    def __init__(self, space: EngineView, workload: Workload) -> None:
        pass

    def latest_start(self, job: Job, now: Time, scheduled: Scheduled) -> Time:
        return INFINITY
