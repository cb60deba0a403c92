"""Outcome containers for deferred computations and tail-recursive loops."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from condkit.errors import EmptyResultError

V = TypeVar("V")
A = TypeVar("A")


@dataclass(frozen=True)
class Control:
    """
    Control directive attached to a Result.

    Kinds:
    - continue: The computation produced a value; sequencing proceeds
    - empty: The computation produced no result (the failure value);
      sequencing stops and the empty result propagates
    """

    kind: Literal["continue", "empty"]
    reason: Any | None = None

    @staticmethod
    def Continue() -> Control:
        return Control(kind="continue")

    @staticmethod
    def Empty(reason: Any = None) -> Control:
        return Control(kind="empty", reason=reason)


@dataclass(frozen=True)
class Result(Generic[V]):
    """
    The outcome of running an Action.

    Attributes:
        value: Output of the computation (None is a legitimate value)
        control: Whether a value was produced at all
    """

    value: V | None = None
    control: Control = Control.Continue()

    @property
    def is_empty(self) -> bool:
        return self.control.kind == "empty"

    def _require_value(self) -> V:
        if self.is_empty:
            raise EmptyResultError("Result is empty.")
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True)
class Loop(Generic[A]):
    """Tail-recursion step: run another iteration with a new seed."""

    state: A


@dataclass(frozen=True)
class Done(Generic[V]):
    """Tail-recursion step: stop and produce the value."""

    value: V
