"""Option - eager optional value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from condkit.errors import EmptyResultError
from condkit.kernel.result import Done, Loop

V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A")


@dataclass(frozen=True)
class Option(Generic[V]):
    """A value that may be absent.

    Option is evaluated eagerly: by the time an Option exists its value is
    already known. It is the failure-capable context for pure code, e.g. the
    result kind of cond_or_else().
    """

    _value: V | None = None
    _present: bool = False

    @classmethod
    def some(cls, value: V) -> Option[V]:
        return cls(_value=value, _present=True)

    @classmethod
    def nothing(cls) -> Option[Any]:
        return cls()

    @classmethod
    def unit(cls, value: V) -> Option[V]:
        return cls.some(value)

    @classmethod
    def zero(cls) -> Option[Any]:
        return cls.nothing()

    @property
    def is_some(self) -> bool:
        return self._present

    @property
    def is_nothing(self) -> bool:
        return not self._present

    def bind(self, func: Callable[[V], Option[R]]) -> Option[R]:
        if not self._present:
            return self  # type: ignore[return-value]
        return func(self._value)  # type: ignore[arg-type]

    def map(self, func: Callable[[V], R]) -> Option[R]:
        if not self._present:
            return self  # type: ignore[return-value]
        return Option.some(func(self._value))  # type: ignore[arg-type]

    def or_else(self, other: Option[V]) -> Option[V]:
        return self if self._present else other

    plus = or_else

    def unwrap(self) -> V:
        """Return the value.

        Raises:
            EmptyResultError: If there is no value
        """
        if not self._present:
            raise EmptyResultError("Option is empty.")
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: V) -> V:
        return self._value if self._present else default  # type: ignore[return-value]

    def __or__(self, other: Option[bool]) -> Option[bool]:
        from condkit.combinators.lifted import or_m

        return or_m(self, other)  # type: ignore[arg-type]

    def __and__(self, other: Option[bool]) -> Option[bool]:
        from condkit.combinators.lifted import and_m

        return and_m(self, other)  # type: ignore[arg-type]

    def __invert__(self) -> Option[bool]:
        from condkit.combinators.lifted import not_m

        return not_m(self)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        if self._present:
            return f"Option.some({self._value!r})"
        return "Option.nothing()"

    @classmethod
    def tail_rec(cls, step: Callable[[A], Option[Loop[A] | Done[R]]], seed: A) -> Option[R]:
        """Apply step until it produces Done, in constant stack space."""
        current = seed
        while True:
            outcome = step(current)
            if not outcome._present:
                return outcome  # type: ignore[return-value]
            value = outcome._value
            if isinstance(value, Done):
                return cls.some(value.value)
            current = value.state  # type: ignore[union-attr]
