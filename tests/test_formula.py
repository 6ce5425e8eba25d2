import dataclasses
import sys

import pytest

from proptableau import And, Iff, Implies, Not, Or, Var, evaluate, parse, variables
from proptableau.formula import is_atom, is_literal, size

a, b = Var('a'), Var('b')


class TestDeepTrees:
    DEPTH = 5 * sys.getrecursionlimit()

    def chain(self, bottom):
        f = bottom
        for _ in range(self.DEPTH):
            f = Or(Not(f), b)
        return f

    def test_equal_when_built_separately(self):
        assert self.chain(a) == self.chain(Var('a'))
        assert hash(self.chain(a)) == hash(self.chain(Var('a')))

    def test_unequal_when_only_the_bottom_differs(self):
        assert self.chain(a) != self.chain(b)

    def test_canonical_text(self):
        text = str(self.chain(a))
        assert text == "(-" * self.DEPTH + "a" + "|b)" * self.DEPTH
        assert size(self.chain(a)) == 3 * self.DEPTH + 1
        assert variables(self.chain(a)) == ['a', 'b']


class TestStructure:
    def test_structural_equality(self):
        assert And(Var('a'), Not(Var('b'))) == And(a, Not(b))
        assert hash(And(Var('a'), Not(Var('b')))) == hash(And(a, Not(b)))

    def test_connective_is_part_of_identity(self):
        assert And(a, b) != Or(a, b)
        assert Implies(a, b) != Iff(a, b)
        assert len({And(a, b), Or(a, b), And(a, b)}) == 2

    def test_nodes_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.name = 'b'

    @pytest.mark.parametrize("f, expected", [
        (a, "a"),
        (Not(Not(a)), "--a"),
        (Or(a, Not(b)), "(a|-b)"),
        (Iff(Implies(a, b), b), "((a->b)<->b)"),
    ])
    def test_canonical_text(self, f, expected):
        assert str(f) == expected


class TestHelpers:
    def test_atoms_and_literals(self):
        assert is_atom(a)
        assert not is_atom(Not(a))
        assert is_literal(Not(a))
        assert not is_literal(Not(Not(a)))
        assert not is_literal(And(a, b))

    def test_size_counts_nodes(self):
        assert size(a) == 1
        assert size(parse("(-a^(b|a))")) == 6

    def test_variables_in_order_of_first_appearance(self):
        assert variables(parse("((c->a)^(b|-c))")) == ['c', 'a', 'b']

    @pytest.mark.parametrize("text, assignment, expected", [
        ("(a^b)", {'a': True, 'b': True}, True),
        ("(a^b)", {'a': True, 'b': False}, False),
        ("(a|b)", {'a': False, 'b': False}, False),
        ("(a->b)", {'a': False, 'b': False}, True),
        ("(a->b)", {'a': True, 'b': False}, False),
        ("(a<->b)", {'a': False, 'b': False}, True),
        ("(a<->b)", {'a': True, 'b': False}, False),
        ("-a", {'a': True}, False),
    ])
    def test_evaluate(self, text, assignment, expected):
        assert evaluate(parse(text), assignment) is expected

    def test_evaluate_needs_every_variable(self):
        with pytest.raises(KeyError):
            evaluate(parse("(a^b)"), {'a': True})
