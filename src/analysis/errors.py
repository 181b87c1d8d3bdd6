"""Errors raised when the analysis engine breaks a policy precondition."""
from __future__ import annotations


class ContractViolation(AssertionError):
    """An impossible search state or a read of a non-finalized result.

    Continuing after one of these could yield an optimistic (unsound)
    response-time bound, so it must abort the analysis run. Unlike a bare
    ``assert`` it is not stripped under ``python -O``.
    """
