import sys

import pytest
from hypothesis import given, strategies as st

from unempty.config import Settings, DEFAULT_SETTINGS
from unempty.capacity import MAX_UINT


class TestSettings:
    def test_default_values(self):
        """Test that Settings reflects the running platform."""
        settings = Settings()
        assert settings.max_alloc_bytes == sys.maxsize
        assert settings.pointer_size in (4, 8)

    def test_max_uint_matches_word_size(self):
        """Test that the unsigned maximum is one word of all ones."""
        assert Settings(pointer_size=8).max_uint == 2 ** 64 - 1
        assert Settings(pointer_size=4).max_uint == 2 ** 32 - 1

    def test_capacity_uses_default_settings(self):
        """Test that the capacity model saturates at the platform maximum."""
        assert MAX_UINT == DEFAULT_SETTINGS.max_uint

    def test_immutable(self):
        """Test that Settings cannot be modified."""
        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.pointer_size = 2  # type: ignore

    @given(pointer_size=st.integers(min_value=1, max_value=16))
    def test_max_uint_is_all_ones(self, pointer_size):
        """For any word size, max_uint + 1 is a power of two of 8 * size bits."""
        settings = Settings(pointer_size=pointer_size)
        assert (settings.max_uint + 1).bit_length() == 8 * pointer_size + 1
