"""Action monad - deferred asynchronous computation."""

from __future__ import annotations

import inspect
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from condkit.kernel.result import Control, Done, Loop, Result
from condkit.kernel.trace import Trace

V = TypeVar("V")
R = TypeVar("R")
A = TypeVar("A")


# Extension registry - class-level storage for Action capabilities
_extensions_registry: dict[str, Callable] = {}


@dataclass(frozen=True)
class Action(Generic[V]):
    """A computation that runs only when awaited through run().

    Building an Action never executes anything; combining Actions builds a
    new description. Running re-executes every effect it describes. An empty
    result (the failure value) short-circuits sequencing.

    Capabilities can be registered via register_op() for extensibility.
    """

    _run: Callable[[Trace | None], Awaitable[Result[V]]]
    label: str | None = None

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation capability on the Action class.

        Args:
            name: The operation name (e.g., "when")
            fn: The function to register; it receives the Action first
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    async def run(self, trace: Trace | None = None) -> Result[V]:
        """Run the computation and return its Result.

        Args:
            trace: Optional trace receiving step_begin/step_end events

        Returns:
            Result of the computation

        Exceptions raised by effects propagate after being recorded as
        step_error.
        """
        if trace is None:
            return await self._run(None)

        step_id = trace.record("step_begin", info={"label": self.label} if self.label else None)
        with trace.nested(step_id):
            start_time = time.perf_counter()
            try:
                result = await self._run(trace)
            except Exception as exc:
                trace.record("step_error", info={"error": str(exc)})
                raise
            trace.record(
                "step_end",
                info={"control": result.control.kind},
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )
        return result

    def named(self, label: str) -> Action[V]:
        """The same computation, tagged with label in the trace."""
        return replace(self, label=label)

    async def value(self, trace: Trace | None = None) -> V:
        """Run the computation and return its value.

        Raises:
            EmptyResultError: If the computation produced no result
        """
        result = await self.run(trace)
        return result._require_value()

    def then(self, func: Callable[[V], Action[R]]) -> Action[R]:
        """Sequence a dependent computation.

        Args:
            func: Called with this computation's value; returns the next Action

        Returns:
            New Action; func is never called if this one is empty
        """
        async def new_run(trace: Trace | None) -> Result[R]:
            current = await self.run(trace)
            if current.is_empty:
                return Result(control=current.control)
            return await func(current.value).run(trace)  # type: ignore[arg-type]

        return Action(new_run)

    bind = then

    def map(self, func: Callable[[V], R]) -> Action[R]:
        async def new_run(trace: Trace | None) -> Result[R]:
            current = await self.run(trace)
            if current.is_empty:
                return Result(control=current.control)
            return Result(value=func(current.value))  # type: ignore[arg-type]

        return Action(new_run)

    def or_else(self, other: Action[V]) -> Action[V]:
        """This computation, or other if this one is empty.

        other is run only when needed.
        """
        async def new_run(trace: Trace | None) -> Result[V]:
            current = await self.run(trace)
            if not current.is_empty:
                return current
            return await other.run(trace)

        return Action(new_run)

    plus = or_else

    def __or__(self, other: Action[bool]) -> Action[bool]:
        from condkit.combinators.lifted import or_m

        return or_m(self, other)  # type: ignore[arg-type]

    def __and__(self, other: Action[bool]) -> Action[bool]:
        from condkit.combinators.lifted import and_m

        return and_m(self, other)  # type: ignore[arg-type]

    def __invert__(self) -> Action[bool]:
        from condkit.combinators.lifted import not_m

        return not_m(self)  # type: ignore[arg-type]

    @staticmethod
    def start(value: V) -> Action[V]:
        """Create an Action that produces value."""
        return Action.lift_value(value)

    @staticmethod
    def lift_value(value: V) -> Action[V]:
        """Create an Action that lifts a value into the computation context."""
        async def run_func(_: Trace | None) -> Result[V]:
            return Result(value=value)

        return Action(run_func)

    @classmethod
    def unit(cls, value: V) -> Action[V]:
        return cls.lift_value(value)

    @classmethod
    def zero(cls) -> Action[Any]:
        """Create an Action that produces no result."""
        async def run_func(_: Trace | None) -> Result[Any]:
            return Result(control=Control.Empty())

        return cls(run_func)

    @classmethod
    def effect(cls, fn: Callable[[], V] | Callable[[], Awaitable[V]]) -> Action[V]:
        """Lift a zero-argument callable into an Action.

        fn is called once per run; an awaitable return value is awaited.
        """
        async def run_func(_: Trace | None) -> Result[V]:
            value = fn()
            if inspect.isawaitable(value):
                value = await value
            return Result(value=value)  # type: ignore[arg-type]

        return cls(run_func)

    @classmethod
    def tail_rec(cls, step: Callable[[A], Action[Loop[A] | Done[R]]], seed: A) -> Action[R]:
        """Run step(seed) until it produces Done, in constant stack space.

        An empty step result stops the loop and becomes the loop's result.
        """
        async def run_loop(trace: Trace | None) -> Result[R]:
            current = seed
            iterations = 0
            while True:
                result = await step(current).run(trace)
                iterations += 1
                if result.is_empty or isinstance(result.value, Done):
                    break
                current = result.value.state  # type: ignore[union-attr]

            if trace is not None:
                trace.record("loop_end", info={"iterations": iterations, "control": result.control.kind})
            if result.is_empty:
                return Result(control=result.control)
            return Result(value=result.value.value)  # type: ignore[union-attr]

        return cls(run_loop, label="tail_rec")
