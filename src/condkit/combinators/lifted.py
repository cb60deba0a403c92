"""Conditional and boolean operators lifted to sequenced computations.

Every operator here is short-circuiting in the computation: only the
computations needed to determine the result are run. The computation kind
used for unit()/zero() is the type of the first computation received.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from condkit.combinators.recursion import labeled, tail_rec
from condkit.errors import NoMatchingConditionError
from condkit.kernel.ports import MonadPlus
from condkit.kernel.result import Done, Loop

logger = logging.getLogger(__name__)


def kind_of(comp: Any) -> Any:
    return type(comp)


def void(comp: Any) -> Any:
    """Run comp and discard its value."""
    kind = kind_of(comp)
    return comp.bind(lambda _: kind.unit(None))


def if_m(predicate: Any, then_comp: Any, else_comp: Any) -> Any:
    """if_() lifted to a monad.

    Runs the predicate, then exactly one of then_comp and else_comp.
    """
    return predicate.bind(lambda ok: then_comp if ok else else_comp)


def or_m(left: Any, right: Any) -> Any:
    """Lifted boolean or; right is not run when left yields True."""
    return if_m(left, kind_of(left).unit(True), right)


def and_m(left: Any, right: Any) -> Any:
    """Lifted boolean and; right is not run when left yields False."""
    return if_m(left, right, kind_of(left).unit(False))


def not_m(comp: Any) -> Any:
    """Lifted boolean negation."""
    kind = kind_of(comp)
    return comp.bind(lambda value: kind.unit(not value))


def _scan_branches(pairs: list[tuple[Any, Any]], kind: Any, exhausted: Callable[[], Any]) -> Any:
    """Run predicates in order; yield the value of the first true branch.

    exhausted() supplies the outcome once every predicate was false.
    """
    def step(index: int) -> Any:
        if index == len(pairs):
            return exhausted()
        predicate, value = pairs[index]
        return predicate.bind(
            lambda ok: value.bind(lambda v: kind.unit(Done(v))) if ok else kind.unit(Loop(index + 1))
        )

    return tail_rec(kind, step, 0)


def cond_m(branches: Iterable[tuple[Any, Any]]) -> Any:
    """cond() lifted to a monad.

    Predicates run in order until one yields True; only that branch's
    value computation runs.

    Raises:
        NoMatchingConditionError: Immediately for an empty branch list, or
            when the scan runs out of branches
    """
    pairs = list(branches)
    if not pairs:
        raise NoMatchingConditionError("cond_m", 0)

    def exhausted() -> Any:
        logger.debug("cond_m exhausted %d branches", len(pairs))
        raise NoMatchingConditionError("cond_m", len(pairs))

    return labeled(_scan_branches(pairs, kind_of(pairs[0][0]), exhausted), "cond_m")


def cond_or_else_m(branches: Iterable[tuple[Any, Any]], kind: type[MonadPlus] | None = None) -> Any:
    """cond_or_else() lifted to a monad.

    Yields kind.zero() instead of raising when no predicate is true. kind
    defaults to the type of the first predicate and is required for an
    empty branch list.
    """
    pairs = list(branches)
    if kind is None:
        if not pairs:
            raise TypeError("cond_or_else_m needs an explicit kind for an empty branch list")
        kind = kind_of(pairs[0][0])

    return labeled(_scan_branches(pairs, kind, kind.zero), "cond_or_else_m")


def when_m(predicate: Any, action: Any) -> Any:
    """Run action, discarding its value, only if the predicate yields True."""
    return if_m(predicate, void(action), kind_of(predicate).unit(None))


def unless_m(predicate: Any, action: Any) -> Any:
    """Run action, discarding its value, only if the predicate yields False."""
    return if_m(predicate, kind_of(predicate).unit(None), void(action))


def guard_m(predicate: Any) -> Any:
    """Yield unit(None) if the predicate yields True, otherwise zero()."""
    kind = kind_of(predicate)
    return predicate.bind(lambda ok: kind.unit(None) if ok else kind.zero())


cond_plus_m = cond_or_else_m
