"""Combinator laws and algebra documentation."""

# Combinators satisfy the following algebraic laws:
#
# 1. Double negation: not_m(not_m(c)) == c
#    For every computation yielding a bool
#
# 2. Or short-circuit: or_m(unit(True), x) == unit(True)
#    x is never run
#
# 3. And short-circuit: and_m(unit(False), x) == unit(False)
#    x is never run
#
# 4. Conditional composition: conditional_compose(False, t) == identity
#    and conditional_compose(True, t) == t
#
# 5. Conditional combination: combine_if(False, v) == empty_of(v)
#    and combine_if(True, v) == v
#
# 6. Until is negated while: until_m(p, b) == while_m(not_m(p), b)
#
# 7. First match wins: cond([(True, a), (True, b)]) == a
