"""
Release data model for relparse.

A :class:`Release` is the classified form of a release identifier such as
``my-app@1.2.3-beta+abcdef``. Its version is either a structured
:class:`~relparse.models.version.Version` or an :class:`Unparsed` wrapper
around text that is a valid identifier but carries no version structure
(free-form labels and build hashes).
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from relparse.constants import SHORT_HASH_LENGTH
from relparse.utils.build_hash import is_build_hash
from relparse.models.version import Version


@dataclass(frozen=True)
class Unparsed:
    """Version text that did not yield a structured version.

    Attributes:
        raw: The version text, verbatim.
    """

    raw: str


class ReleaseFormat(str, Enum):
    """Coarse shape of a release identifier."""

    #: The version parsed into a structured :class:`Version`.
    VERSIONED = "versioned"
    #: Unstructured version text with a package prefix.
    QUALIFIED = "qualified"
    #: Unstructured version text without a package prefix.
    UNQUALIFIED = "unqualified"


@dataclass(frozen=True)
class Release:
    """
    A validated and classified release identifier.

    Build instances with :func:`relparse.parse_release` or
    :meth:`Release.parse`; the constructor performs no validation.

    Attributes:
        raw: The trimmed release identifier.
        package: Package name prefix, including a leading ``@`` scope.
        version_raw: Everything after the package delimiter, or ``raw``.
        version: Structured version or unparsed version text.
    """

    raw: str
    package: Optional[str]
    version_raw: str
    version: Union[Version, Unparsed]

    @classmethod
    def parse(cls, release: str) -> "Release":
        """
        Validate and classify a release identifier.

        Raises:
            InvalidRelease: ``release`` is not a usable release identifier.
        """
        from relparse.core.parser import parse_release

        return parse_release(release)

    @property
    def version_parsed(self) -> Optional[Version]:
        """Return the structured version, or ``None`` if there is none."""
        if isinstance(self.version, Version):
            return self.version
        return None

    @property
    def format(self) -> ReleaseFormat:
        """Classify the release by the shape of its identifier."""
        if isinstance(self.version, Version):
            return ReleaseFormat.VERSIONED
        if self.package is not None:
            return ReleaseFormat.QUALIFIED
        return ReleaseFormat.UNQUALIFIED

    def get_build_hash(self) -> Optional[str]:
        """
        Return the build hash attached to this release, if any.

        Build metadata that is itself a hash (``1.0.0+<sha1>``) wins over
        a version that is entirely a hash (``pkg@<sha1>``).
        """
        version = self.version_parsed
        if (
            version is not None
            and version.build_code is not None
            and is_build_hash(version.build_code)
        ):
            return version.build_code
        if is_build_hash(self.version_raw):
            return self.version_raw
        return None

    def describe(self) -> str:
        """
        Return a short human-readable label for the release.

        Structured versions are described by their text before ``+``
        followed by the shortened build hash or the build metadata in
        parentheses. Bare hashes are shortened; anything else is returned
        verbatim.

        Examples:
            >>> Release.parse("pkg@1.0.0+deadbeefdeadbeefdeadbeefdeadbeef").describe()
            '1.0.0 (deadbeefdead)'
            >>> Release.parse("pkg@nightly").describe()
            'nightly'
        """
        build_hash = self.get_build_hash()
        short_hash = build_hash[:SHORT_HASH_LENGTH] if build_hash else None
        version = self.version_parsed

        if version is not None:
            if short_hash:
                return f"{version.raw_short} ({short_hash})"
            if version.build_code:
                return f"{version.raw_short} ({version.build_code})"
            return version.raw_short
        if short_hash:
            return short_hash
        return self.version_raw

    def to_dict(self) -> Dict[str, Any]:
        """Return the release as plain data, suitable for JSON or YAML."""
        version = self.version_parsed
        return {
            "package": self.package,
            "version_raw": self.version_raw,
            "version_parsed": version.to_dict() if version is not None else None,
            "build_hash": self.get_build_hash(),
            "description": self.describe(),
            "format": self.format.value,
        }

    def __str__(self) -> str:
        return self.raw
