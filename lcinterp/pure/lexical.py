"""Pure lambda calculus parser: builds a Term tree from a textual expression.

Accepted grammar:

```
<λ-term> ::= <var>                          ; single character, not forbidden and not a digit
           | "(" <var> ")"                  ; same as <var>
           | "(" "λ" <var>+ "." <λ-term> ")"  ; "abstraction", '\' may be used instead of 'λ'
                                            ; - (λx y z.M) and (λxyz.M) both mean (λx.(λy.(λz.M)))
                                            ; - abstraction bodies are greedy: (λx.x y) = (λx.(x y))
           | "(" <λ-term> <λ-term>+ ")"     ; "application"
                                            ; - associating by left: (a b c d) = (((a b) c) d)
```

Top-level input does not need outer parentheses: `a b c` and `\\x.x` are wrapped before parsing.
"""

from lcinterp.lang.error import GenericException
from lcinterp.pure.term import Abstraction, Application, Reference, Variable


LAMBDAS = ("λ", "\\")
FORBIDDEN = ("_", " ", "(", ")", "\\")


class ParseFailure(GenericException):
    """Superclass of all errors raised while parsing."""


class IllegalCharacter(ParseFailure):
    """A variable name is reserved syntax or a digit."""

    def __init__(self, char):
        super().__init__("illegal use of character '{}'", char)
        self.char = char


class MalformedSyntax(ParseFailure):
    """Input matches no grammar rule. Carries no position."""

    def __init__(self):
        super().__init__("no parse")


def preprocess(expr):
    """Collapses runs of whitespace into single spaces and strips surrounding whitespace."""
    return " ".join(expr.split())


def forbidden(char):
    """Whether or not char cannot be used as a variable name."""
    return char in FORBIDDEN or char.isdigit()


def are_parens_balanced(expr):
    """Checks if parentheses are balanced within expr."""
    parens_balance = 0
    for char in expr:
        if parens_balance < 0:
            break
        elif char == "(":
            parens_balance += 1
        elif char == ")":
            parens_balance -= 1
    return parens_balance == 0


def top_level_spaces(expr):
    """Returns indices of the spaces in expr that are not inside parentheses."""
    depth = 0
    spaces = []
    for idx, char in enumerate(expr):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == " " and depth == 0:
            spaces.append(idx)
    return spaces


def closing_paren(expr):
    """Returns index of the parenthesis closing expr[0], or None if it is never closed."""
    depth = 0
    for idx, char in enumerate(expr):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return idx
    return None


def add_parens(expr):
    """Wraps expr in parentheses if it is an abstraction or contains applications, so that it can be parsed as a
    self-contained unit.
    """
    if not expr:
        return expr
    if expr[0] in LAMBDAS or top_level_spaces(expr):
        return f"({expr})"
    return expr


def parse(expr):
    """Converts expr to a LambdaTerm. Raises IllegalCharacter or MalformedSyntax if expr is not a valid λ-term."""
    expr = preprocess(expr)
    if not are_parens_balanced(expr):
        raise MalformedSyntax()
    return _parse(add_parens(expr))


def _parse(expr):
    if len(expr) == 1:
        return _parse_variable(expr)

    if not expr.startswith("(") or closing_paren(expr) != len(expr) - 1:
        raise MalformedSyntax()

    if len(expr) == 3:
        return _parse(expr[1])
    elif expr[1] in LAMBDAS:
        return _parse_abstraction(expr)
    return _parse_application(expr[1:-1])


def _parse_variable(char):
    if forbidden(char):
        raise IllegalCharacter(char)
    return Reference(Variable(char))


def _parse_abstraction(expr):
    """expr is '(λ' <params> '.' <body> ')'. Parameters are single characters, optionally separated by a space."""
    params = []
    idx = 2
    while True:
        if idx >= len(expr) - 1:
            raise MalformedSyntax()

        char = expr[idx]
        if forbidden(char):
            raise IllegalCharacter(char)
        params.append(Variable(char))

        idx += 1
        if expr[idx] == ".":
            break
        elif expr[idx] == " ":
            idx += 1

    body = _parse(add_parens(expr[idx + 1:-1]))
    for param in reversed(params):
        body = Abstraction(param, body)
    return body


def _parse_application(expr):
    """expr is the inside of '(' <λ-term> <λ-term>+ ')'. Top-level terms are applied left to right."""
    spaces = top_level_spaces(expr)
    if not spaces:
        raise MalformedSyntax()

    bounds = [-1] + spaces + [len(expr)]
    terms = [_parse(expr[start + 1:end]) for start, end in zip(bounds, bounds[1:])]
    term = terms[0]
    for arg in terms[1:]:
        term = Application(term, arg)
    return term
