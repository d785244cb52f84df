"""
Build hash detection.

A release version is treated as a build hash when it looks like a hex
digest of one of the common lengths, regardless of whether it would also
match the version grammar (``123456789012`` is a hash, not a major version).
"""

from __future__ import annotations

import re

from relparse.constants import BUILD_HASH_LENGTHS

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def is_build_hash(value: str) -> bool:
    """Return True if ``value`` looks like a hex digest.

    Examples:
        >>> is_build_hash("085240e737828d8326719bf97730188e927e49ca")
        True
        >>> is_build_hash("1.0.0")
        False
    """
    if len(value) not in BUILD_HASH_LENGTHS:
        return False
    return _HEX_RE.fullmatch(value) is not None
