"""Job records, workloads and job-set sources."""

from .jobs import Job, Phase
from .workload import Workload
from .loader import assign_phases_by_parity, jobs_from_dataframe, load_jobs
from .generators import PeriodicTask, hyperperiod, periodic_jobs

__all__ = [
    "Job",
    "Phase",
    "Workload",
    "assign_phases_by_parity",
    "jobs_from_dataframe",
    "load_jobs",
    "PeriodicTask",
    "hyperperiod",
    "periodic_jobs",
]
