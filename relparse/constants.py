"""
Centralized constants for relparse.

This module defines immutable values used across relparse, including
release validation limits and build hash heuristics.
All values are intended to be treated as read-only.
"""

from typing import AbstractSet, Final

# ---------------------------------------------------------------------------
# Release validation
# ---------------------------------------------------------------------------

#: Maximum length of a release identifier after trimming whitespace.
MAX_RELEASE_LENGTH: Final[int] = 250

#: Release identifiers that may never be used as-is.
RESTRICTED_NAMES: Final[AbstractSet[str]] = frozenset({".", "..", "latest"})

#: Characters that are never allowed anywhere in a release identifier.
BAD_RELEASE_CHARACTERS: Final[AbstractSet[str]] = frozenset({"/", "\r", "\n"})

#: Characters trimmed from both ends of a release identifier: the Unicode
#: White_Space property. ASCII separators \x1c-\x1f and the byte order
#: mark are not whitespace and are kept.
RELEASE_WHITESPACE: Final[str] = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# ---------------------------------------------------------------------------
# Build hash detection
# ---------------------------------------------------------------------------

#: Lengths of hex digests recognised as build hashes
#: (short VCS hashes, MD5, SHA-1, SHA-256 and friends).
BUILD_HASH_LENGTHS: Final[AbstractSet[int]] = frozenset({12, 16, 20, 32, 40, 64})

#: Number of hash characters shown by :meth:`Release.describe`.
SHORT_HASH_LENGTH: Final[int] = 12

# ---------------------------------------------------------------------------
# Error reporting
# ---------------------------------------------------------------------------

#: Maximum length of user input echoed back in error details.
MAX_ERROR_DETAIL_LENGTH: Final[int] = 64

