"""Boundary between the analysis engine and the idle-time policies."""

from .errors import ContractViolation
from .space import AnalysisSpace, IndexSet, ResponseTimeTable

__all__ = [
    "ContractViolation",
    "AnalysisSpace",
    "IndexSet",
    "ResponseTimeTable",
]
