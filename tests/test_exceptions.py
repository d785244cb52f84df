"""Unit tests for relparse.exceptions module."""

from __future__ import annotations

import pytest

from relparse.exceptions import (
    InvalidRelease,
    InvalidReleaseCode,
    InvalidVersion,
    RelparseError,
)


@pytest.mark.unit
class TestRelparseError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        """Test str() without details is the message."""
        error = RelparseError("Something failed")

        assert str(error) == "Something failed"
        assert error.details == {}

    def test_details_are_rendered(self) -> None:
        """Test details are appended as key=value pairs."""
        error = RelparseError("Something failed", {"a": 1, "b": "x"})

        assert str(error) == "Something failed (a=1, b=x)"

    def test_repr(self) -> None:
        """Test repr() shows message and details."""
        error = RelparseError("Oops", {"a": 1})

        assert repr(error) == "RelparseError(message='Oops', details={'a': 1})"


@pytest.mark.unit
class TestInvalidRelease:
    """Tests for InvalidRelease."""

    @pytest.mark.parametrize("code", list(InvalidReleaseCode))
    def test_code_is_exposed(self, code: InvalidReleaseCode) -> None:
        """Test every classification round-trips through the error."""
        error = InvalidRelease(code)

        assert error.code is code
        assert error.details["code"] == code.value
        assert isinstance(error, RelparseError)

    def test_codes_compare_as_strings(self) -> None:
        """Test classifications can be compared to their names."""
        assert InvalidReleaseCode.TOO_LONG == "TOO_LONG"
        assert InvalidReleaseCode("BAD_CHARACTERS") is InvalidReleaseCode.BAD_CHARACTERS

    def test_str(self) -> None:
        """Test the rendered error includes code and release."""
        error = InvalidRelease(InvalidReleaseCode.BAD_CHARACTERS, release="a/b")

        assert str(error) == (
            "Release name contains invalid characters (code=BAD_CHARACTERS, release=a/b)"
        )

    def test_long_release_is_truncated_in_details(self) -> None:
        """Test long input is shortened for logging but kept on the error."""
        release = "x" * 300
        error = InvalidRelease(InvalidReleaseCode.TOO_LONG, release=release)

        assert error.release == release
        assert error.details["release"] == "x" * 64 + "..."


@pytest.mark.unit
class TestInvalidVersion:
    """Tests for InvalidVersion."""

    def test_attributes(self) -> None:
        """Test the failing version is attached."""
        error = InvalidVersion("nightly")

        assert error.version == "nightly"
        assert str(error) == (
            "Version does not match the version grammar (version=nightly)"
        )
        assert isinstance(error, RelparseError)
