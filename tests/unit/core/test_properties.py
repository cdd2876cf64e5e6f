# tests/unit/core/test_properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typedcollection import IndexNotFoundError, TypedCollection, TypeMismatchError

ints = st.integers()
non_ints = st.one_of(st.text(), st.floats(allow_nan=False), st.booleans(), st.none(), st.lists(st.integers()))


@given(st.lists(ints), ints)
def test_add_valid_value_grows_by_one(initial, value):
    collection = TypedCollection("integer", initial)
    before = collection.count()
    index = collection.add(value)
    assert collection.count() == before + 1
    assert collection.get(index) == value


@given(st.lists(ints), non_ints)
def test_add_invalid_value_leaves_count_unchanged(initial, value):
    collection = TypedCollection("integer", initial)
    with pytest.raises(TypeMismatchError):
        collection.add(value)
    assert collection.count() == len(initial)


@given(st.lists(ints, min_size=1), st.data())
def test_remove_then_lookup_fails(initial, data):
    collection = TypedCollection("integer", initial)
    index = data.draw(st.integers(min_value=0, max_value=len(initial) - 1))
    collection.remove(index)
    assert not collection.exists(index)
    with pytest.raises(IndexNotFoundError):
        collection.get(index)


@given(st.lists(ints))
def test_pop_last_returns_latest(initial):
    collection = TypedCollection("integer", initial)
    popped = collection.pop_last()
    if initial:
        assert popped == initial[-1]
        assert collection.count() == len(initial) - 1
    else:
        assert popped is None
        assert collection.count() == 0


@given(st.lists(ints))
def test_shift_first_dequeues_and_reindexes(initial):
    collection = TypedCollection("integer", initial)
    shifted = collection.shift_first()
    assert shifted == (initial[0] if initial else None)
    assert collection.to_array() == initial[1:]
    assert [index for index, _ in collection] == list(range(len(initial[1:])))


@given(st.lists(ints))
def test_to_array_round_trips_basic_values(initial):
    assert TypedCollection("integer", initial).to_array() == initial


@given(st.lists(st.text(), min_size=1, unique=True), st.data())
def test_change_key_to_itself_keeps_value(initial, data):
    collection = TypedCollection("string", initial)
    index = data.draw(st.integers(min_value=0, max_value=len(initial) - 1))
    collection.change_key(index, index)
    assert collection.get(index) == initial[index]
    assert collection.count() == len(initial)
