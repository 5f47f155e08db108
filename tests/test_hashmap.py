"""Tests for the non-empty dict."""

import pytest
from hypothesis import given, strategies as st

from unempty import NonEmptyDict
from unempty.errors import ConsumedError, SourceEmptyError


class TestNonEmptyDict:
    def test_new(self):
        """Test that a new dict holds the given pair."""
        mapping = NonEmptyDict("a", 1)
        assert mapping["a"] == 1
        assert len(mapping) == 1
        assert mapping.first == ("a", 1)
        assert not mapping.is_empty()
        assert bool(mapping)

    def test_insert_new_key(self):
        """Test that inserting an unseen key grows the dict."""
        mapping = NonEmptyDict("a", 1)
        assert mapping.insert("b", 2) is None
        assert len(mapping) == 2
        assert mapping.to_dict() == {"a": 1, "b": 2}

    def test_insert_first_key_updates_in_place(self):
        """Test that the stored key is never duplicated in the dynamic part."""
        mapping = NonEmptyDict("a", 1)
        assert mapping.insert("a", 5) == 1
        assert len(mapping) == 1
        assert mapping["a"] == 5

    def test_insert_existing_dynamic_key(self):
        """Test that re-inserting a dynamic key returns the old value."""
        mapping = NonEmptyDict("a", 1)
        mapping["b"] = 2
        assert mapping.insert("b", 3) == 2
        assert mapping["b"] == 3

    def test_missing_key(self):
        """Test lookup of an absent key."""
        mapping = NonEmptyDict("a", 1)
        with pytest.raises(KeyError):
            mapping["z"]
        assert mapping.get("z") is None
        assert "z" not in mapping
        assert "a" in mapping

    def test_iteration_starts_with_first(self):
        """Test that iteration yields the stored key first."""
        mapping = NonEmptyDict("a", 1)
        mapping.insert("b", 2)
        mapping.insert("c", 3)
        assert list(mapping) == ["a", "b", "c"]
        assert list(mapping.values()) == [1, 2, 3]
        assert dict(mapping.items()) == {"a": 1, "b": 2, "c": 3}

    def test_equality_with_plain_dict(self):
        """Test Mapping equality against an ordinary dict."""
        mapping = NonEmptyDict("a", 1)
        mapping.insert("b", 2)
        assert mapping == {"b": 2, "a": 1}

    def test_remove_dynamic_key(self):
        """Test removing a key outside the stored entry."""
        mapping = NonEmptyDict.from_dict({"a": 1, "b": 2})
        remaining, value = mapping.remove("b")
        assert remaining is mapping
        assert value == 2
        assert mapping.to_dict() == {"a": 1}

    def test_remove_first_promotes_oldest(self):
        """Test that removing the stored key promotes the oldest dynamic entry."""
        mapping = NonEmptyDict.from_dict({"a": 1, "b": 2, "c": 3})
        remaining, value = mapping.remove("a")
        assert value == 1
        assert remaining is not None
        assert remaining.first == ("b", 2)
        assert remaining.to_dict() == {"b": 2, "c": 3}

    def test_remove_last_consumes(self):
        """Test that removing the only entry consumes the dict."""
        mapping = NonEmptyDict("a", 1)
        remaining, value = mapping.remove("a")
        assert remaining is None
        assert value == 1
        with pytest.raises(ConsumedError):
            mapping["a"]
        assert repr(mapping) == "NonEmptyDict(<consumed>)"

    def test_remove_missing_key(self):
        """Test that removing an absent key raises KeyError."""
        with pytest.raises(KeyError):
            NonEmptyDict("a", 1).remove("z")

    def test_from_empty_fails(self):
        """Test that an empty mapping is rejected."""
        with pytest.raises(SourceEmptyError):
            NonEmptyDict.from_dict({})

    @given(source=st.dictionaries(st.text(), st.integers(), min_size=1))
    def test_dict_round_trip(self, source):
        """For any non-empty dict, converting in and out preserves its contents and order."""
        mapping = NonEmptyDict.try_from(source)
        assert len(mapping) == len(source)
        assert mapping.to_dict() == source
        assert list(mapping) == list(source)


class TestStoredKeyIdentity:
    def test_nan_key_updates_stored_entry(self):
        """Test that re-inserting the stored key by identity never duplicates it."""
        nan = float("nan")
        mapping = NonEmptyDict(nan, 1)
        assert mapping.insert(nan, 2) == 1
        assert len(mapping) == 1
        assert len(mapping.to_dict()) == 1
        assert mapping[nan] == 2
        assert nan in mapping

    def test_remove_nan_key_consumes(self):
        """Test that the stored key is matched by identity on removal."""
        nan = float("nan")
        remaining, value = NonEmptyDict(nan, "v").remove(nan)
        assert remaining is None
        assert value == "v"

    def test_unhashable_key_rejected(self):
        """Test that an unhashable first key fails at construction, as dict does."""
        with pytest.raises(TypeError):
            NonEmptyDict([1], 2)
