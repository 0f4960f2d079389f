"""Natural numbers encoded as Church numerals. Only the encoding lives here: arithmetic is ordinary lambda
calculus (see lang/combinators.py).

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from lcinterp.lang.error import GenericException
from lcinterp.pure.term import Abstraction, Application, Reference, Variable


def cnumber(num):
    """Returns the Church numeral (λf.(λx.f (f ... x))) of num (cnum = Church numeral)."""
    try:
        assert not isinstance(num, (bool, float))
        num = int(num)
        assert num >= 0
    except (AssertionError, TypeError, ValueError):
        raise GenericException("expected natural number, got '{}'", str(num), internal=True)

    f, x = Variable("f"), Variable("x")

    body = Reference(x)
    for _ in range(num):
        body = Application(Reference(f), body)
    return Abstraction(f, Abstraction(x, body))


def number(cnum):
    """Returns the natural number encoded by LambdaTerm cnum. If cnum isn't a Church numeral, returns None."""
    try:
        assert isinstance(cnum, Abstraction)
        first_arg, first_body = cnum.param, cnum.body

        assert isinstance(first_body, Abstraction)
        second_arg, nth_body = first_body.param, first_body.body
    except AssertionError:
        return None

    if first_arg == second_arg:
        return None

    num = 0
    while isinstance(nth_body, Application):
        if nth_body.func != Reference(first_arg):
            return None
        nth_body = nth_body.arg
        num += 1

    return num if nth_body == Reference(second_arg) else None
