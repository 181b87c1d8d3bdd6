"""Idle-time insertion policies."""

from .base import EngineView, IdleTimePolicy
from .null import NullPolicy
from .aer import AERPolicy
from .precautious_rm import PrecautiousRMPolicy
from .critical_window import CriticalWindowPolicy
from .registry import POLICIES, available_policies, make_policy

__all__ = [
    "EngineView",
    "IdleTimePolicy",
    "NullPolicy",
    "AERPolicy",
    "PrecautiousRMPolicy",
    "CriticalWindowPolicy",
    "POLICIES",
    "available_policies",
    "make_policy",
]
