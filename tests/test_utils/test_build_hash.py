"""Unit tests for relparse.utils.build_hash module."""

from __future__ import annotations

import pytest

from relparse.utils.build_hash import is_build_hash


@pytest.mark.unit
class TestIsBuildHash:
    """Tests for is_build_hash."""

    @pytest.mark.parametrize("length", [12, 16, 20, 32, 40, 64])
    def test_hash_lengths(self, length: int) -> None:
        """Test hex strings of every digest length are hashes."""
        assert is_build_hash("a" * length) is True

    @pytest.mark.parametrize("length", [0, 1, 11, 13, 39, 41, 63, 65, 128])
    def test_other_lengths(self, length: int) -> None:
        """Test hex strings of other lengths are not hashes."""
        assert is_build_hash("a" * length) is False

    def test_sha1(self) -> None:
        """Test a real SHA-1 digest."""
        assert is_build_hash("085240e737828d8326719bf97730188e927e49ca") is True

    def test_mixed_case(self) -> None:
        """Test case does not matter."""
        assert is_build_hash("DEADbeefDEADbeef") is True

    def test_all_digits(self) -> None:
        """Test purely numeric strings of digest length are hashes."""
        assert is_build_hash("123456789012") is True

    @pytest.mark.parametrize(
        "value",
        [
            "085240e737828d8326719bf97730188e927e49cg",
            "085240e737828d8326719bf97730188e927e49c ",
            "1.0.0-build.",
            "0x1234567890",
        ],
    )
    def test_non_hex_characters(self, value: str) -> None:
        """Test digest-length strings with non-hex characters."""
        assert is_build_hash(value) is False

    def test_unicode_digits_are_not_hex(self) -> None:
        """Test non-ASCII digits are rejected."""
        assert is_build_hash("٣" * 12) is False
