import logging

from .combinators import (
    and_m,
    bool_,
    bool_fold,
    combine_if,
    compose_if,
    cond,
    cond2,
    cond_m,
    cond_or_else,
    cond_or_else_m,
    cond_plus,
    cond_plus_m,
    conditional_compose,
    do_until_m,
    do_while_m,
    empty_of,
    guard_m,
    if_,
    if_m,
    not_m,
    or_m,
    select,
    tail_rec,
    unless_m,
    until1_m,
    until_m,
    void,
    when_m,
    while1_m,
    while_m,
)
from .errors import CondError, EmptyResultError, NoMatchingConditionError
from .kernel import (
    Action,
    Category,
    Control,
    Done,
    Loop,
    Monad,
    MonadPlus,
    MonadRec,
    Monoid,
    Option,
    Result,
    Trace,
    Transform,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Computations
    "Action",
    "Option",
    "Transform",
    "Result",
    "Control",
    "Loop",
    "Done",
    "Trace",
    # Capabilities
    "Monad",
    "MonadPlus",
    "MonadRec",
    "Category",
    "Monoid",
    # Errors
    "CondError",
    "NoMatchingConditionError",
    "EmptyResultError",
    # Simple conditionals
    "if_",
    "cond2",
    "bool_fold",
    "bool_",
    "cond",
    "cond_or_else",
    "cond_plus",
    "select",
    "conditional_compose",
    "compose_if",
    "combine_if",
    "empty_of",
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
]
