"""
Core functionality exports for relparse.

Importing from here keeps user-facing imports clean and stable:

    from relparse.core import parse_release, parse_version
"""

from __future__ import annotations

from relparse.core.parser import (
    parse_release,
    parse_version,
    split_release,
    validate_release,
)

__all__ = [
    "parse_release",
    "parse_version",
    "split_release",
    "validate_release",
]
