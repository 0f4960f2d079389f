"""Well-known closed terms. These are library values for use from Python (and in tests): the input language has
no named definitions.
"""

from lcinterp.lang.numerical import cnumber
from lcinterp.pure.lexical import parse
from lcinterp.pure.term import Abstraction, Application, Reference, Variable


def lam(params, body):
    """Curried abstraction over every character of params."""
    for param in reversed(params):
        body = Abstraction(Variable(param), body)
    return body


def app(*terms):
    """Left-associated application of terms."""
    func, *args = terms
    for arg in args:
        func = Application(func, arg)
    return func


def ref(symbol):
    return Reference(Variable(symbol))


TRUE = lam("xy", ref("x"))
FALSE = lam("xy", ref("y"))

PAIR = lam("nmf", app(ref("f"), ref("n"), ref("m")))
MULT = lam("nmf", app(ref("m"), app(ref("n"), ref("f"))))
PRED = lam("nfx", app(
    ref("n"),
    lam("gh", app(ref("h"), app(ref("g"), ref("f")))),
    lam("u", ref("x")),
    lam("u", ref("u")),
))
ISZERO = lam("n", app(ref("n"), lam("v", FALSE), TRUE))

Y = parse("(\\f.(\\x.f (x x)) (\\x.f (x x)))")
H = lam("fn", app(
    ISZERO, ref("n"),
    cnumber(1),
    app(MULT, ref("n"), app(ref("f"), app(PRED, ref("n")))),
))
FACTORIAL = app(Y, H)
