"""Action extensions for conditional and looping combinators."""

from condkit.combinators.lifted import guard_m, if_m, unless_m, when_m
from condkit.combinators.loops import do_until_m, do_while_m, until_m, while_m
from condkit.kernel.action import Action


def if_then_else(self: Action, then_comp: Action, else_comp: Action) -> Action:
    """Use this Action as the predicate of if_m().

    Example:
        >>> is_ready.if_then_else(Action.start("go"), Action.start("wait"))
    """
    return if_m(self, then_comp, else_comp)


def when(self: Action, action: Action) -> Action:
    return when_m(self, action)


def unless(self: Action, action: Action) -> Action:
    return unless_m(self, action)


def guard(self: Action) -> Action:
    return guard_m(self)


def while_(self: Action, body: Action) -> Action:
    """Loop body while this Action yields True."""
    return while_m(self, body)


def until(self: Action, body: Action) -> Action:
    return until_m(self, body)


def do_while(self: Action, predicate: Action) -> Action:
    """Run this Action at least once, repeating while predicate yields True."""
    return do_while_m(predicate, self)


def do_until(self: Action, predicate: Action) -> Action:
    return do_until_m(predicate, self)


# Register the combinator operations
Action.register_op("if_then_else", if_then_else)
Action.register_op("when", when)
Action.register_op("unless", unless)
Action.register_op("guard", guard)
Action.register_op("while_", while_)
Action.register_op("until", until)
Action.register_op("do_while", do_while)
Action.register_op("do_until", do_until)
