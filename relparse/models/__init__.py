"""
Unified data model exports for relparse.

Example:
    >>> from relparse.models import Release, Version
"""

from __future__ import annotations

from relparse.models.version import PreReleaseDelimiter, Version
from relparse.models.release import Release, ReleaseFormat, Unparsed

__all__ = [
    "Release",
    "ReleaseFormat",
    "Unparsed",
    "Version",
    "PreReleaseDelimiter",
]
