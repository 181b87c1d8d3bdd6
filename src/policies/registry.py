"""Lookup of idle-time insertion policies by name."""
from __future__ import annotations

from typing import Dict, List

from ..utils.logger import get_logger
from ..workloads.workload import Workload
from .aer import AERPolicy
from .base import EngineView, IdleTimePolicy
from .critical_window import CriticalWindowPolicy
from .null import NullPolicy
from .precautious_rm import PrecautiousRMPolicy

LOGGER = get_logger("policies.registry")

POLICIES: Dict[str, type] = {
    policy.name: policy
    for policy in (NullPolicy, AERPolicy, PrecautiousRMPolicy, CriticalWindowPolicy)
}


def available_policies() -> List[str]:
    return sorted(POLICIES)


def make_policy(name: str, space: EngineView, workload: Workload) -> IdleTimePolicy:
    """Construct the policy registered under ``name`` for one analysis run."""

    key = name.strip().lower()
    if key not in POLICIES:
        raise ValueError(f"Unknown idle-time policy {name!r}; expected one of {available_policies()}")
    LOGGER.info("Using idle-time policy %s on %s jobs", key, len(workload))
    return POLICIES[key](space, workload)
