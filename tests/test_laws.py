import unittest

from hypothesis import given
from hypothesis.strategies import (
    SearchStrategy,
    builds,
    integers,
    one_of,
    sampled_from,
    text,
)

from eitherpy import Either, Left, Right, left, right

_functions = sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    lambda x: x % 7,
])

_binds = sampled_from([
    lambda x: right(x + 1),
    lambda x: left(f"neg:{x}") if x < 0 else right(x),
    lambda x: left("always"),
])


def eithers() -> SearchStrategy[Either[str, int]]:
    return one_of(builds(Left, text(max_size=10)), builds(Right, integers()))


def identity(x):
    return x


class TestFunctorLaws(unittest.TestCase):
    @given(eithers())
    def test_identity(self, m):
        self.assertEqual(m.map(identity), m)

    @given(eithers(), _functions, _functions)
    def test_composition(self, m, f, g):
        self.assertEqual(m.map(f).map(g), m.map(lambda x: g(f(x))))


class TestMonadLaws(unittest.TestCase):
    @given(integers(), _binds)
    def test_left_identity(self, x, f):
        self.assertEqual(right(x).flat_map(f), f(x))

    @given(eithers())
    def test_right_identity(self, m):
        self.assertEqual(m.flat_map(right), m)

    @given(eithers(), _binds, _binds)
    def test_associativity(self, m, f, g):
        self.assertEqual(
            m.flat_map(f).flat_map(g),
            m.flat_map(lambda x: f(x).flat_map(g)),
        )


class TestApplicativeLaws(unittest.TestCase):
    @given(eithers())
    def test_identity(self, v):
        self.assertEqual(right(identity).apply(v), v)

    @given(integers(), _functions)
    def test_homomorphism(self, x, f):
        self.assertEqual(right(f).apply(right(x)), right(f(x)))

    @given(eithers(), _functions)
    def test_apply_agrees_with_map(self, v, f):
        self.assertEqual(right(f).apply(v), v.map(f))


class TestLeftAbsorption(unittest.TestCase):
    @given(text(max_size=10), eithers())
    def test_left_absorbs_every_combinator(self, e, box):
        calls = []

        def f(x):
            calls.append(x)
            return right(x)

        l = left(e)
        self.assertEqual(l.map(f), Left(e))
        self.assertEqual(l.flat_map(f), Left(e))
        self.assertEqual(l.apply(box), Left(e))
        self.assertEqual(calls, [])
