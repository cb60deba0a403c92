"""Conditional combinators - pure, lifted and looping."""

# Import action_ext to register Action capabilities
from . import action_ext  # noqa: F401
from .lifted import (
    and_m,
    cond_m,
    cond_or_else_m,
    cond_plus_m,
    guard_m,
    if_m,
    not_m,
    or_m,
    unless_m,
    void,
    when_m,
)
from .loops import (
    do_until_m,
    do_while_m,
    until1_m,
    until_m,
    while1_m,
    while_m,
)
from .recursion import tail_rec
from .simple import (
    bool_,
    bool_fold,
    combine_if,
    compose_if,
    cond,
    cond2,
    cond_or_else,
    cond_plus,
    conditional_compose,
    empty_of,
    if_,
    select,
)

__all__ = [
    # Simple conditionals
    "if_",
    "cond2",
    "bool_fold",
    "bool_",
    # Lisp-style conditionals
    "cond",
    "cond_or_else",
    "cond_plus",
    # Higher-order conditionals
    "select",
    "conditional_compose",
    "compose_if",
    # Lifted conditionals
    "if_m",
    "or_m",
    "and_m",
    "not_m",
    "cond_m",
    "cond_or_else_m",
    "cond_plus_m",
    "when_m",
    "unless_m",
    "guard_m",
    "void",
    # Loops
    "while_m",
    "until_m",
    "do_while_m",
    "do_until_m",
    "while1_m",
    "until1_m",
    "tail_rec",
    # Monoids
    "combine_if",
    "empty_of",
]
