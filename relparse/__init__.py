"""
relparse — release identifier parser

relparse classifies the release strings used to tag software artifacts
(``my-app@1.2.3-beta+085240e73782...``) into a package name, the raw
version text and, when the text follows a version grammar, a structured
version with numeric components, pre-release tag, build metadata and a
detected build hash.

Example:
    >>> from relparse import parse_release
    >>> release = parse_release("app@2.0.0-rc.1+abc")
    >>> release.package, release.version_parsed.pre
    ('app', 'rc.1')
    >>> release.describe()
    '2.0.0-rc.1 (abc)'
"""

from __future__ import annotations

from relparse.__version__ import __version__
from relparse.exceptions import (
    InvalidRelease,
    InvalidReleaseCode,
    InvalidVersion,
    RelparseError,
)
from relparse.models import (
    PreReleaseDelimiter,
    Release,
    ReleaseFormat,
    Unparsed,
    Version,
)
from relparse.core import (
    parse_release,
    parse_version,
    split_release,
    validate_release,
)
from relparse.utils.build_hash import is_build_hash

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "relparse Contributors"
__license__ = "Apache-2.0"
__description__ = "Parser and classifier for software release identifiers."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Entry points
    "parse_release",
    "parse_version",
    "split_release",
    "validate_release",
    "is_build_hash",
    # Models
    "Release",
    "ReleaseFormat",
    "Unparsed",
    "Version",
    "PreReleaseDelimiter",
    # Errors
    "RelparseError",
    "InvalidRelease",
    "InvalidReleaseCode",
    "InvalidVersion",
]
