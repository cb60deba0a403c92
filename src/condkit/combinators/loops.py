"""Monadic looping conditionals.

Loops run through the computation kind's tail_rec() when it has one, so
they use constant stack space however many iterations they make. A
predicate that never changes its answer loops forever; nothing here guards
against that.
"""

from __future__ import annotations

import logging
from typing import Any

from condkit.combinators.lifted import kind_of, not_m
from condkit.combinators.recursion import labeled, tail_rec
from condkit.kernel.result import Done, Loop

logger = logging.getLogger(__name__)


def while_m(predicate: Any, body: Any) -> Any:
    """A monadic while loop.

    Runs the predicate, and while it yields True runs body and repeats.
    Yields unit(None).
    """
    kind = kind_of(predicate)

    def step(iterations: int) -> Any:
        def after_check(ok: Any) -> Any:
            if ok:
                return body.bind(lambda _: kind.unit(Loop(iterations + 1)))
            logger.debug("while_m finished after %d iterations", iterations)
            return kind.unit(Done(None))

        return predicate.bind(after_check)

    return labeled(tail_rec(kind, step, 0), "while_m")


def until_m(predicate: Any, body: Any) -> Any:
    """A monadic while loop with a negated conditional."""
    return while_m(not_m(predicate), body)


def do_while_m(predicate: Any, body: Any) -> Any:
    """A monadic do-while loop.

    body runs at least once. After each run the predicate decides whether
    to repeat; the loop yields the value of the last body run.
    """
    kind = kind_of(body)

    def step(iterations: int) -> Any:
        def after_body(value: Any) -> Any:
            def after_check(ok: Any) -> Any:
                if ok:
                    return kind.unit(Loop(iterations + 1))
                logger.debug("do_while_m finished after %d iterations", iterations + 1)
                return kind.unit(Done(value))

            return predicate.bind(after_check)

        return body.bind(after_body)

    return labeled(tail_rec(kind, step, 0), "do_while_m")


def do_until_m(predicate: Any, body: Any) -> Any:
    """A negated do-while loop."""
    return do_while_m(not_m(predicate), body)


while1_m = do_while_m
until1_m = do_until_m
