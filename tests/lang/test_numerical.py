import unittest

from lcinterp.lang import combinators
from lcinterp.lang.error import GenericException
from lcinterp.lang.numerical import cnumber, number
from lcinterp.pure.lexical import parse
from lcinterp.pure.reducer import normalize


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, 14.2, True, "two"]
        for case in should_fail:
            self.assertRaises(GenericException, cnumber, case)

        should_pass = {0: parse("(\\f x.x)"), 3: parse("(\\f x.f (f (f x)))")}
        for case, result in should_pass.items():
            self.assertEqual(result, cnumber(case), case)

    def test_number(self):
        should_fail = [parse("(\\f x.f f)"), parse("(\\f x.x f x)"), parse("x"), parse("(\\f.f)"), parse("(\\f f.f)"),
                       parse("(\\f x.g x)")]
        for case in should_fail:
            self.assertIsNone(number(case), str(case))

        should_pass = {3: parse("(\\f x.f (f (f x)))"), 0: parse("(\\f x.x)"), 2: parse("(\\s z.s (s z))")}
        for result, case in should_pass.items():
            self.assertEqual(result, number(case), str(case))


class CombinatorsTestCase(unittest.TestCase):

    def test_display(self):
        cases = {
            "(λx y.x)": combinators.TRUE,
            "(λx y.y)": combinators.FALSE,
            "(λn m f.(m (n f)))": combinators.MULT,
            "(λf.((λx.(f (x x))) (λx.(f (x x)))))": combinators.Y,
        }
        for expected, case in cases.items():
            self.assertEqual(expected, str(case), expected)

    def test_arithmetic(self):
        cases = [
            (6, combinators.app(combinators.MULT, cnumber(2), cnumber(3))),
            (0, combinators.app(combinators.MULT, cnumber(0), cnumber(3))),
            (1, combinators.app(combinators.PRED, cnumber(2))),
            (0, combinators.app(combinators.PRED, cnumber(0))),
        ]
        for expected, case in cases:
            self.assertEqual(expected, number(normalize(case, 1000)), str(case))

    def test_iszero(self):
        self.assertEqual(combinators.TRUE, normalize(combinators.app(combinators.ISZERO, cnumber(0))))

        result = normalize(combinators.app(combinators.ISZERO, cnumber(1)))
        self.assertTrue(combinators.FALSE.alpha_equals(result), str(result))

    def test_pair(self):
        pair = combinators.app(combinators.PAIR, combinators.ref("a"), combinators.ref("b"))
        first = normalize(combinators.app(pair, combinators.TRUE))
        second = normalize(combinators.app(pair, combinators.FALSE))

        self.assertEqual(combinators.ref("a"), first)
        self.assertEqual(combinators.ref("b"), second)

    def test_fixed_point(self):
        # Y g = g (Y g), and (λf x.x) throws the unfolding away
        term = combinators.app(combinators.Y, combinators.lam("fx", combinators.ref("x")))
        self.assertEqual(combinators.lam("x", combinators.ref("x")), normalize(term, 100))

    def test_factorial_step(self):
        # with the identity in place of recursion, H n = n * (n - 1) for n > 0
        identity = combinators.lam("m", combinators.ref("m"))
        cases = [(1, 0), (2, 2), (6, 3)]
        for expected, num in cases:
            term = combinators.app(combinators.H, identity, cnumber(num))
            self.assertEqual(expected, number(normalize(term, 10000)), num)

    def test_factorial(self):
        cases = [(1, 0), (1, 1), (2, 2), (6, 3)]
        for expected, num in cases:
            term = combinators.app(combinators.FACTORIAL, cnumber(num))
            self.assertEqual(expected, number(normalize(term, 100000)), num)


if __name__ == '__main__':
    unittest.main()
