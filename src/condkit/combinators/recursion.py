"""Constant-stack recursion over any computation kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from condkit.kernel.ports import Monad
from condkit.kernel.result import Done, Loop

A = TypeVar("A")


def tail_rec(kind: type[Monad], step: Callable[[A], Any], seed: A) -> Any:
    """Run step(seed) until it produces Done(value), then yield value.

    Uses kind.tail_rec when available and falls back to recursion through
    bind otherwise.
    """
    native = getattr(kind, "tail_rec", None)
    if native is not None:
        return native(step, seed)

    def resume(outcome: Loop[A] | Done[Any]) -> Any:
        if isinstance(outcome, Done):
            return kind.unit(outcome.value)
        return step(outcome.state).bind(resume)

    return step(seed).bind(resume)


def labeled(comp: Any, label: str) -> Any:
    """Tag comp with label for tracing, when its kind supports it."""
    named = getattr(comp, "named", None)
    if callable(named):
        return named(label)
    return comp
