"""Tests for elementwise sequence equality and hashing."""

from collections import UserString, deque

import pytest
from hypothesis import given, strategies as st

from memberwise import EqualitySettings
from memberwise.equality.sequences import HASH_MASK, SequenceEquality, combine

from tests.helpers.models import Address, Tags, Unhashable


@pytest.fixture
def sequences():
    return SequenceEquality(EqualitySettings())


class TestSequenceEqual:
    def test_null_handling(self, sequences):
        assert sequences.equal(None, None)
        assert not sequences.equal(None, [])
        assert not sequences.equal([], None)

    def test_same_elements_same_order(self, sequences):
        a = [Address("Baker Street", "London"), Address("Rue de Rivoli", "Paris")]
        b = [Address("Baker Street", "London"), Address("Rue de Rivoli", "Paris")]
        assert sequences.equal(a, b)

    def test_order_sensitive(self, sequences):
        assert not sequences.equal([1, 2, 3], [3, 2, 1])

    def test_length_mismatch(self, sequences):
        assert not sequences.equal([1, 2], [1, 2, 3])
        assert not sequences.equal(iter([1, 2]), iter([1, 2, 3]))
        assert not sequences.equal(iter([1, 2, 3]), iter([1, 2]))

    def test_unsized_iterables(self, sequences):
        assert sequences.equal((x for x in range(3)), iter([0, 1, 2]))

    def test_nested_sequences(self, sequences):
        assert sequences.equal([[1, 2], [3]], [[1, 2], [3]])
        assert not sequences.equal([[1, 2], [3]], [[2, 1], [3]])

    def test_list_and_tuple_compare_elementwise(self, sequences):
        assert sequences.equal([1, 2], (1, 2))
        assert sequences.hash([1, 2]) == sequences.hash((1, 2))

    def test_null_elements(self, sequences):
        assert sequences.equal([None, 1], [None, 1])
        assert not sequences.equal([None], [0])

    def test_elements_of_different_categories(self, sequences):
        assert not sequences.equal(["ab"], [["a", "b"]])

    def test_strings_are_not_walked(self, sequences):
        assert sequences.equal(["abc"], ["abc"])
        assert not sequences.equal(["abc"], ["acb"])

    def test_user_strings_are_not_walked(self, sequences):
        assert sequences.equal([UserString("a"), "b"], ["a", UserString("b")])
        assert not sequences.equal([UserString("ab")], [UserString("ba")])
        assert sequences.hash([UserString("a")]) == sequences.hash(["a"])


class TestSequenceHash:
    def test_null_is_sentinel_and_differs_from_empty(self, sequences):
        settings = EqualitySettings()
        assert sequences.hash(None) == settings.null_hash
        assert sequences.hash([]) == settings.hash_seed
        assert sequences.hash(None) != sequences.hash([])

    def test_order_changes_hash(self, sequences):
        assert sequences.hash([1, 2]) != sequences.hash([2, 1])

    def test_fold_rule(self, sequences):
        expected = combine(combine(17, hash(1), 31), hash(2), 31)
        assert sequences.hash([1, 2]) == expected

    def test_hash_is_bounded(self, sequences):
        assert 0 <= sequences.hash(range(1000)) <= HASH_MASK

    def test_sequence_of_deques(self, sequences):
        assert sequences.hash([deque([1, 2])]) == sequences.hash([[1, 2]])

    @given(st.lists(st.integers(min_value=-5, max_value=5), max_size=6),
           st.lists(st.integers(min_value=-5, max_value=5), max_size=6))
    def test_equal_implies_same_hash(self, a, b):
        sequences = SequenceEquality(EqualitySettings())
        if sequences.equal(a, b):
            assert sequences.hash(a) == sequences.hash(b)
        assert sequences.equal(a, b) == sequences.equal(b, a)


class TestReferenceOperations:
    def test_null_safe_equal(self, sequences):
        address = Address("Baker Street", "London")
        assert sequences.reference_equal(None, None)
        assert not sequences.reference_equal(address, None)
        assert not sequences.reference_equal(None, address)
        assert sequences.reference_equal(address, Address("Baker Street", "London"))

    def test_null_hash(self, sequences):
        assert sequences.reference_hash(None) == EqualitySettings().null_hash

    def test_sets_hash_by_content(self, sequences):
        assert sequences.reference_hash({1, 2, 3}) == sequences.reference_hash(frozenset({3, 2, 1}))

    def test_mappings_hash_independent_of_order(self, sequences):
        a = {"x": [1], "y": [2]}
        b = {"y": [2], "x": [1]}
        assert a == b
        assert sequences.reference_hash(a) == sequences.reference_hash(b)

    def test_unhashable_object_without_fallback(self, sequences):
        with pytest.raises(TypeError, match="unhashable"):
            sequences.reference_hash(Unhashable([1], "a"))

    def test_tuple_with_unhashable_contents_hashed_as_sequence(self, sequences):
        assert sequences.reference_hash(([1], 2)) == sequences.hash([[1], 2])

    def test_hashable_type_with_unhashable_contents_uses_fallback(self):
        sequences = SequenceEquality(EqualitySettings(), fallback_hash=lambda value: 7)
        assert sequences.reference_hash(Tags([1])) == 7

    def test_unhashable_object_uses_fallback(self):
        sequences = SequenceEquality(EqualitySettings(), fallback_hash=lambda value: 42)
        assert sequences.reference_hash(Unhashable([1], "a")) == 42
