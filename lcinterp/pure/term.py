"""Pure lambda calculus terms.

Formally, pure lambda calculus can be defined as

```
<λ-term> ::= <variable>                 ; "reference"
           | "λ" <variable> "." <λ-term>  ; "abstraction"
           | <λ-term> <λ-term>          ; "application"
```

Terms are immutable trees. Every transformation (substitution, reduction) builds new nodes and reuses the
unchanged sub-trees of its input, so two terms will often share structure.

Variables are identified by a (symbol, generation index) pair. The index only exists to manufacture fresh
names during alpha-renaming: the n-th rename of `x` is displayed as `x_{n-1}`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Variable:
    """Binding identity: two variables are the same iff symbol and index are both equal."""
    symbol: str
    index: int = 0

    def rename(self, *terms):
        """Returns a fresh variable with the same symbol. Its index is one above the largest index used for this
        symbol by self or by any variable in terms, so it cannot clash with any of them.
        """
        index = max([self.index] + [term.max_index(self.symbol) for term in terms])
        return Variable(self.symbol, index + 1)

    def __str__(self):
        if self.index == 0:
            return self.symbol
        return f"{self.symbol}_{self.index - 1}"


class LambdaTerm(ABC):
    """Superclass of Reference, Application and Abstraction. Equality is structural, not alpha-equivalence."""

    @abstractmethod
    def sub(self, var, new_term):
        """Capture-avoiding substitution: returns self with every free occurence of var replaced by new_term.
        new_term is shared, never copied.
        """

    @abstractmethod
    def is_free(self, var):
        """Whether or not var occurs free in self."""

    @abstractmethod
    def max_index(self, symbol):
        """Largest generation index of symbol among all variables (bound, free or binding) in self, -1 if none."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None):
        """Whether or not two terms are equal up to consistent renaming of bound variables. mapping maps the
        binders of self to the binders of other that are in scope.
        """

    @abstractmethod
    def __str__(self):
        ...


@dataclass(frozen=True)
class Reference(LambdaTerm):
    """Use of a variable, free or bound depending on the enclosing abstractions."""
    var: Variable

    def sub(self, var, new_term):
        if self.var == var:
            return new_term
        return self

    def is_free(self, var):
        return self.var == var

    def max_index(self, symbol):
        return self.var.index if self.var.symbol == symbol else -1

    def alpha_equals(self, other, mapping=None):
        if not isinstance(other, Reference):
            return False
        if mapping is None:
            mapping = {}

        if self.var in mapping:
            return mapping[self.var] == other.var
        # free in self, so must be free (and identical) in other
        return self.var == other.var and other.var not in mapping.values()

    def __str__(self):
        return str(self.var)


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of func to arg."""
    func: LambdaTerm
    arg: LambdaTerm

    def sub(self, var, new_term):
        func = self.func.sub(var, new_term)
        arg = self.arg.sub(var, new_term)
        if func is self.func and arg is self.arg:
            return self
        return Application(func, arg)

    def is_free(self, var):
        return self.func.is_free(var) or self.arg.is_free(var)

    def max_index(self, symbol):
        return max(self.func.max_index(symbol), self.arg.max_index(symbol))

    def alpha_equals(self, other, mapping=None):
        if not isinstance(other, Application):
            return False
        if mapping is None:
            mapping = {}
        return self.func.alpha_equals(other.func, mapping) and self.arg.alpha_equals(other.arg, mapping)

    def __str__(self):
        # left-nested applications are flattened: (((f a) b) c) -> (f a b c)
        head, args = self, []
        while isinstance(head, Application):
            args.append(head.arg)
            head = head.func
        return f"({head} {' '.join(str(arg) for arg in reversed(args))})"


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction binding param in body."""
    param: Variable
    body: LambdaTerm

    def sub(self, var, new_term):
        # rename also fires when param == var, even though param then shadows var: the result is still
        # alpha-equivalent to plain shadowing
        if self.param == var or new_term.is_free(self.param):
            fresh = self.param.rename(self.body, new_term, Reference(var))
            renamed = Abstraction(fresh, self.body.sub(self.param, Reference(fresh)))
            return renamed.sub(var, new_term)
        return Abstraction(self.param, self.body.sub(var, new_term))

    def is_free(self, var):
        return self.param != var and self.body.is_free(var)

    def max_index(self, symbol):
        param_index = self.param.index if self.param.symbol == symbol else -1
        return max(param_index, self.body.max_index(symbol))

    def alpha_equals(self, other, mapping=None):
        if not isinstance(other, Abstraction):
            return False
        if mapping is None:
            mapping = {}

        inner = {var: other_var for var, other_var in mapping.items() if other_var != other.param}
        inner[self.param] = other.param
        return self.body.alpha_equals(other.body, inner)

    def __str__(self):
        # nested abstractions share one header: (λx.(λy.b)) -> (λx y.b)
        params = [self.param]
        body = self.body
        while isinstance(body, Abstraction):
            params.append(body.param)
            body = body.body
        return f"(λ{' '.join(str(param) for param in params)}.{body})"
