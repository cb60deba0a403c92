"""Transform - composable unary function."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")


def identity_function(value: A) -> A:
    return value


@dataclass(frozen=True)
class Transform(Generic[A]):
    """A unary function that composes with other transforms.

    compose() follows mathematical order (self after other); then() and >>
    follow pipeline order (self, then other).
    """

    fn: Callable[[A], A]

    @classmethod
    def identity(cls) -> Transform[A]:
        return cls(identity_function)

    def compose(self, other: Transform[A]) -> Transform[A]:
        return Transform(lambda value: self.fn(other.fn(value)))

    def then(self, other: Transform[A]) -> Transform[A]:
        return other.compose(self)

    def __rshift__(self, other: Transform[A]) -> Transform[A]:
        return self.then(other)

    def __call__(self, value: A) -> A:
        return self.fn(value)
