import unittest
from unittest import TestCase

import pytest

from estree_to_code.model import Case, Discriminated, Expression, Identifier, Literal, VariableDeclaration


class TestDiscriminated(TestCase):
    def test_default_is_empty(self):
        value = Discriminated()
        self.assertTrue(value.is_empty)
        self.assertFalse(value.is_first)
        self.assertFalse(value.is_second)
        self.assertIs(value.case, Case.EMPTY)
        self.assertIsNone(value.value)
        self.assertFalse(value)

    def test_first_and_second(self):
        literal = Literal(1)
        identifier = Identifier("a")

        first = Discriminated.first(literal)
        second = Discriminated.second(identifier)

        self.assertTrue(first.is_first)
        self.assertIs(first.first_value, literal)
        self.assertIs(first.value, literal)
        self.assertTrue(second.is_second)
        self.assertIs(second.second_value, identifier)
        self.assertTrue(first)
        self.assertTrue(second)

    def test_wrong_accessor_raises(self):
        first = Discriminated.first(Literal(1))
        with self.assertRaises(ValueError):
            first.second_value
        with self.assertRaises(ValueError):
            Discriminated.empty().first_value

    def test_of_classifies_by_type(self):
        declaration = VariableDeclaration()
        expression = Identifier("i")

        self.assertTrue(Discriminated.of(declaration, VariableDeclaration, Expression).is_first)
        self.assertTrue(Discriminated.of(expression, VariableDeclaration, Expression).is_second)
        self.assertTrue(Discriminated.of(None, VariableDeclaration, Expression).is_empty)

    def test_of_passes_through_discriminated(self):
        value = Discriminated.second(Identifier("a"))
        self.assertIs(Discriminated.of(value, Literal, Identifier), value)

    def test_of_rejects_other_types(self):
        with self.assertRaises(TypeError):
            Discriminated.of("a", Literal, Identifier)

    def test_payload_state_mismatch_rejected(self):
        with self.assertRaises(ValueError):
            Discriminated(Case.EMPTY, Literal(1))
        with self.assertRaises(ValueError):
            Discriminated(Case.FIRST, None)

    def test_immutable(self):
        value = Discriminated.first(Literal(1))
        with self.assertRaises(AttributeError):
            value._case = Case.SECOND

    def test_match(self):
        def describe(value):
            return value.match(lambda a: f"first {a.value}", lambda b: f"second {b.name}", lambda: "empty")

        self.assertEqual(describe(Discriminated.first(Literal(1))), "first 1")
        self.assertEqual(describe(Discriminated.second(Identifier("x"))), "second x")
        self.assertEqual(describe(Discriminated.empty()), "empty")

    def test_equality(self):
        self.assertEqual(Discriminated.first(Literal(1)), Discriminated.first(Literal(1)))
        self.assertNotEqual(Discriminated.first(Literal(1)), Discriminated.first(Literal(2)))
        self.assertEqual(Discriminated.empty(), Discriminated())
        # Same payload in different cases is a different value
        self.assertNotEqual(Discriminated.first(Identifier("a")), Discriminated.second(Identifier("a")))


@pytest.mark.parametrize(
    "value, expected",
    [
        (Discriminated.empty(), "Discriminated.empty()"),
        (Discriminated.first(Literal(1)), "Discriminated.first(Literal(value=1))"),
    ],
)
def test_repr(value, expected):
    assert repr(value) == expected


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Discriminated.first(Literal(1)))


if __name__ == "__main__":
    unittest.main()
