"""
Version data model for relparse.

A :class:`Version` is the structured form of a version string that matched
the permissive release version grammar. It keeps the original text of every
numeric component next to the integer value so that a release can be
described exactly as the user typed it.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    import semver

RawQuad = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]


class PreReleaseDelimiter(str, Enum):
    """How a pre-release tag was introduced.

    ``DASH`` covers ``1.0-beta``; ``LETTER`` covers ``1.0a1`` where the tag
    starts directly with a lowercase letter.
    """

    DASH = "dash"
    LETTER = "letter"


@dataclass(frozen=True)
class Version:
    """
    A parsed release version.

    Attributes:
        raw: The exact substring that was parsed.
        major: Major component.
        minor: Minor component, ``0`` when absent.
        patch: Patch component, ``0`` when absent.
        revision: Fourth numeric component, ``0`` when absent.
        components: Number of numeric components present in ``raw`` (1-4).
        raw_quad: Original text of the four numeric components, ``None``
            for components that were absent.
        raw_short: ``raw`` without the ``+build`` suffix.
        pre: Pre-release tag without a leading ``-``.
        pre_delimiter: How the pre-release tag was introduced.
        build_code: Build metadata following ``+``.
    """

    raw: str
    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    components: int = 1
    raw_quad: RawQuad = (None, None, None, None)
    raw_short: str = ""
    pre: Optional[str] = None
    pre_delimiter: Optional[PreReleaseDelimiter] = None
    build_code: Optional[str] = None

    @classmethod
    def parse(cls, version: str) -> "Version":
        """
        Parse a version string, raising if it does not match the grammar.

        Args:
            version: Version string such as ``1.2.3-rc1+build.5``.

        Returns:
            The parsed version.

        Raises:
            InvalidVersion: ``version`` is not a structured version.
        """
        from relparse.core.parser import parse_version
        from relparse.exceptions import InvalidVersion

        parsed = parse_version(version)
        if parsed is None:
            raise InvalidVersion(version)
        return parsed

    @property
    def triple(self) -> Tuple[int, int, int]:
        """Return ``(major, minor, patch)``."""
        return self.major, self.minor, self.patch

    @property
    def quad(self) -> Tuple[int, int, int, int]:
        """Return ``(major, minor, patch, revision)``."""
        return self.major, self.minor, self.patch, self.revision

    @property
    def normalized_build_code(self) -> Optional[str]:
        """Return the build metadata lowercased, or ``None``."""
        if self.build_code is None:
            return None
        return self.build_code.lower()

    def as_semver(self) -> "semver.Version":
        """
        Convert to a :class:`semver.Version`.

        The revision component has no semver counterpart and is dropped.
        Requires the optional ``semver`` extra.

        Example:
            >>> Version.parse("1.2.3-dev+BUILD-code").as_semver()
            Version(major=1, minor=2, patch=3, prerelease='dev', build='BUILD-code')
        """
        import semver

        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=self.pre,
            build=self.build_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the version as plain data."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "revision": self.revision,
            "pre": self.pre,
            "build_code": self.build_code,
            "normalized_build_code": self.normalized_build_code,
            "components": self.components,
            "raw_quad": list(self.raw_quad),
            "raw_short": self.raw_short,
        }

    def __str__(self) -> str:
        return self.raw
