"""Capability protocols the combinators are generic over."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

A = TypeVar("A")


@runtime_checkable
class Monad(Protocol):
    """Sequenced computation.

    bind() runs this computation and feeds its value to a function that
    returns the next computation. unit() wraps a plain value.
    """

    def bind(self, func: Callable[[Any], Any]) -> Any: ...

    @classmethod
    def unit(cls, value: Any) -> Any: ...


@runtime_checkable
class MonadPlus(Monad, Protocol):
    """Sequenced computation with a failure value and alternatives."""

    @classmethod
    def zero(cls) -> Any:
        """The computation that produces no result."""
        ...

    def plus(self, other: Any) -> Any:
        """This computation, or other when this one produces no result."""
        ...


@runtime_checkable
class MonadRec(Monad, Protocol):
    """Sequenced computation that can loop in constant stack space."""

    @classmethod
    def tail_rec(cls, step: Callable[[A], Any], seed: A) -> Any:
        """Run step(seed) repeatedly until it produces Done.

        Each step yields Loop(next_seed) to iterate again or Done(value)
        to finish with value.
        """
        ...


@runtime_checkable
class Category(Protocol):
    """Composable transform with an identity."""

    @classmethod
    def identity(cls) -> Any: ...

    def compose(self, other: Any) -> Any:
        """This transform applied after other."""
        ...


@runtime_checkable
class Monoid(Protocol):
    """Combinable value with an empty element."""

    @classmethod
    def empty(cls) -> Any: ...

    def combine(self, other: Any) -> Any: ...
