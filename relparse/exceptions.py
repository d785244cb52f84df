"""
Custom exception hierarchy for relparse.

All exceptions inherit from :class:`RelparseError` and carry optional
structured metadata via the ``details`` attribute so that callers can log
rejected input without re-deriving why it was rejected.

A version string that simply does not match the version grammar is *not*
an error: :func:`relparse.parse_release` reports it as an unparsed version.
Only :meth:`relparse.Version.parse` raises :class:`InvalidVersion`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, MutableMapping, Optional

from relparse.constants import MAX_ERROR_DETAIL_LENGTH


class RelparseError(Exception):
    """Base exception for all relparse errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _truncate(text: str, max_length: int = MAX_ERROR_DETAIL_LENGTH) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class InvalidReleaseCode(str, Enum):
    """Reason a release identifier was rejected during validation."""

    TOO_LONG = "TOO_LONG"
    RESTRICTED_NAME = "RESTRICTED_NAME"
    BAD_CHARACTERS = "BAD_CHARACTERS"


_CODE_MESSAGES = {
    InvalidReleaseCode.TOO_LONG: "Release name is too long",
    InvalidReleaseCode.RESTRICTED_NAME: "Release name is restricted",
    InvalidReleaseCode.BAD_CHARACTERS: "Release name contains invalid characters",
}


class InvalidRelease(RelparseError):
    """Raised when a string cannot be used as a release identifier.

    Args:
        code: Classification of the validation failure.
        release: The offending (trimmed) input, truncated in ``details``.
    """

    __slots__ = ("code", "release")

    def __init__(
        self,
        code: InvalidReleaseCode,
        *,
        release: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {"code": code.value}
        if release is not None:
            details["release"] = _truncate(release)

        super().__init__(_CODE_MESSAGES[code], details)

        self.code = code
        self.release = release


class InvalidVersion(RelparseError):
    """Raised by :meth:`relparse.Version.parse` for non-matching input.

    Args:
        version: The string that failed to parse.
    """

    __slots__ = ("version",)

    def __init__(self, version: str) -> None:
        super().__init__(
            "Version does not match the version grammar",
            {"version": _truncate(version)},
        )
        self.version = version
