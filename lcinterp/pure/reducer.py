"""Normal-order (leftmost-outermost) beta reduction.

Reduction of an untyped term is not guaranteed to terminate: `((λx.(x x)) (λx.(x x)))` reduces to itself
forever. NormalOrderReducer therefore takes an optional step budget and raises StepLimitExceeded once more than
max_steps beta contractions would be needed.

Sources: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from lcinterp.lang.error import GenericException
from lcinterp.pure.term import Abstraction, Application, Reference


# what is still to be rebuilt around a reduced subterm
BODY = "body"          # (λw.[])
ARGUMENT = "argument"  # (v [])
INNER = "inner"        # ((v []) a)
HEAD = "head"          # ([] a), retried if [] made progress


class StepLimitExceeded(GenericException):
    """Reduction did not reach a normal form within the step budget."""

    def __init__(self, steps):
        super().__init__("no beta-normal form within {} reduction steps", str(steps))
        self.steps = steps


class NormalOrderReducer:
    """Implements normal-order beta reduction of a term. error_handler, if given, is told about every contraction."""

    def __init__(self, term, max_steps=None, error_handler=None):
        self.term = term
        self.max_steps = max_steps
        self.error_handler = error_handler
        self.steps = 0

    def beta_reduce(self):
        """Returns the normal form of self.term. Raises StepLimitExceeded if the budget runs out first."""
        self.steps = 0
        return self._normalize(self.term)

    def _contract(self, redex):
        """Fires a single redex (λw.body) arg."""
        if self.max_steps is not None and self.steps >= self.max_steps:
            raise StepLimitExceeded(self.max_steps)
        self.steps += 1

        abstraction, arg = redex.func, redex.arg
        contractum = abstraction.body.sub(abstraction.param, arg)
        if self.error_handler is not None:
            self.error_handler.register_step("β", contractum)
        return contractum

    def _normalize(self, term):
        """Returns the normal form of term. Subterms that did not change are returned as the same objects."""
        # pending rebuilds are kept on an explicit stack, so reducing under a binder or in an argument costs no
        # Python stack depth
        stack = []
        while term is not None:
            result = self._descend(term, stack)
            term = None
            while stack and term is None:
                kind, node = stack.pop()
                if kind is BODY:
                    result = node if result is node.body else Abstraction(node.param, result)
                elif kind is ARGUMENT:
                    result = node if result is node.arg else Application(node.func, result)
                elif kind is INNER:
                    # (v h) a: reduce h, a is left untouched
                    inner = node.func
                    result = node if result is inner.arg else Application(Application(inner.func, result), node.arg)
                elif result is node.func:
                    result = node
                else:
                    term = Application(result, node.arg)
        return result

    def _descend(self, term, stack):
        """Follows the case analysis down to a term with no further work, pushing what has to be rebuilt."""
        while True:
            if isinstance(term, Reference):
                return term

            elif isinstance(term, Abstraction):
                stack.append((BODY, term))
                term = term.body
                continue

            func, arg = term.func, term.arg
            if isinstance(func, Abstraction):
                term = self._contract(term)

            elif isinstance(func, Reference):
                # stuck on a variable head: only the argument can make progress
                stack.append((ARGUMENT, term))
                term = arg

            elif isinstance(func.func, Reference):
                stack.append((INNER, term))
                term = func.arg

            else:
                stack.append((HEAD, term))
                term = func


def normalize(term, max_steps=None):
    """Returns the normal form of term. Without max_steps this may never return."""
    return NormalOrderReducer(term, max_steps).beta_reduce()
