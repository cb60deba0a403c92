"""Error types for conditional combinators."""

from __future__ import annotations


class CondError(Exception):
    """Base class for condkit errors."""


class NoMatchingConditionError(CondError):
    """Error raised when an exhaustive conditional finds no true predicate.

    Raised by cond() and cond_m() when the branch list is empty or every
    predicate is false. It is never caught inside condkit.
    """

    def __init__(self, operation: str, branch_count: int = 0) -> None:
        self.operation = operation
        self.branch_count = branch_count
        super().__init__(f"{operation}: no matching conditions")

    def __repr__(self) -> str:
        return (
            f"NoMatchingConditionError({self.operation!r}, "
            f"branch_count={self.branch_count!r})"
        )


class EmptyResultError(CondError, ValueError):
    """Error raised when unwrapping a computation that produced no result."""
