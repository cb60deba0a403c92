"""Pure conditionals: scalar, Lisp-style, function-level and monoid-level."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from condkit.errors import NoMatchingConditionError
from condkit.kernel.ports import MonadPlus
from condkit.kernel.transform import identity_function

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def if_(predicate: Any, then_value: T, else_value: T) -> T:
    """A simple conditional function.

    Both values are evaluated before the call; pass callables and call the
    result when only the selected branch should be computed.
    """
    return then_value if predicate else else_value


def cond2(then_value: T, else_value: T, predicate: Any) -> T:
    """if_() with the predicate last."""
    return if_(predicate, then_value, else_value)


def bool_fold(false_value: T, true_value: T, predicate: Any) -> T:
    """A catamorphism for bool, analogous to functools.reduce over a list.

    The first argument is the false case, the second the true case, and the
    last the predicate.
    """
    return if_(predicate, true_value, false_value)


def cond(branches: Iterable[tuple[Any, T]]) -> T:
    """Lisp-style conditional.

    Returns the value paired with the first true predicate::

        def signum(x):
            return cond([(x > 0, 1),
                         (x < 0, -1),
                         (True, 0)])

    Raises:
        NoMatchingConditionError: If no predicate is true
    """
    count = 0
    for predicate, value in branches:
        count += 1
        if predicate:
            return value
    logger.debug("cond exhausted %d branches", count)
    raise NoMatchingConditionError("cond", count)


def cond_or_else(branches: Iterable[tuple[Any, T]], kind: type[MonadPlus]) -> Any:
    """cond() generalized over a failure-capable kind.

    Returns kind.unit(value) for the first true predicate and kind.zero()
    when nothing matches. This is the safe variant of cond().
    """
    for predicate, value in branches:
        if predicate:
            return kind.unit(value)
    return kind.zero()


def select(
    predicate: Callable[[T], Any],
    then_fn: Callable[[T], R],
    else_fn: Callable[[T], R],
) -> Callable[[T], R]:
    """Compose a predicate and two functions into a single function.

    then_fn is called when the predicate holds for the argument, else_fn
    otherwise.
    """
    def selected(value: T) -> R:
        if predicate(value):
            return then_fn(value)
        return else_fn(value)

    return selected


def conditional_compose(flag: Any, transform: T) -> T:
    """Conditional composition.

    Returns transform if flag is true, otherwise the identity of its
    category. Useful for adding a step to a composition chain only when
    a flag is set.
    """
    if flag:
        return transform
    identity = getattr(type(transform), "identity", None)
    if callable(identity):
        return identity()
    return identity_function  # type: ignore[return-value]


def empty_of(value: T) -> T:
    """The empty element of value's monoid."""
    empty = getattr(type(value), "empty", None)
    if callable(empty):
        return empty()
    return type(value)()


def combine_if(flag: Any, value: T) -> T:
    """Conditional monoid operator.

    If flag is false, value is replaced by its empty element. Calls nest to
    gate one value on several conditions::

        combine_if(len(xs) % 2 == 0, combine_if(bool(xs), xs))
    """
    return value if flag else empty_of(value)


bool_ = bool_fold
cond_plus = cond_or_else
compose_if = conditional_compose
