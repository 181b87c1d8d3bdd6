"""Run configuration and policy probes."""

from .config import AnalysisConfig, load_config
from .probe import PROBE_COLUMNS, probe_policy

__all__ = [
    "AnalysisConfig",
    "load_config",
    "PROBE_COLUMNS",
    "probe_policy",
]
