"""Release identifier parser.

Classifies release identifiers the way artifact tags are written in the
wild, for example:

- Package-qualified semver (``my-app@1.2.3-beta.1+build.5``)
- Scoped package names (``@scope/pkg@2.0.0``)
- Truncated or extended numeric versions (``7``, ``1.0``, ``1.2.3.4``)
- Python style pre-releases introduced by a letter (``1.0a1``, ``2.0rc1``)
- Bare content hashes (``085240e737828d8326719bf97730188e927e49ca``)
- Free-form labels (``nightly``, ``pkg@release-candidate``)

The version grammar is intentionally more permissive than semver: leading
zeros are accepted in every numeric component, a fourth numeric component
is allowed, and a pre-release may start with a bare lowercase letter.

Typical usage::

    from relparse import parse_release

    release = parse_release("my-app@1.2.3+085240e737828d8326719bf97730188e927e49ca")
    release.package          # 'my-app'
    release.version_parsed   # Version(raw='1.2.3+0852...', major=1, ...)
    release.describe()       # '1.2.3 (085240e73782)'

A version string that does not match the grammar is not an error: the
release simply carries :class:`~relparse.models.release.Unparsed` text.
Only identifiers that are unusable as a whole raise
:class:`~relparse.exceptions.InvalidRelease`.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from relparse.models.release import Release, Unparsed
from relparse.models.version import PreReleaseDelimiter, Version
from relparse.utils import get_logger
from relparse.utils.build_hash import is_build_hash
from relparse.exceptions import InvalidRelease, InvalidReleaseCode
from relparse.constants import (
    BAD_RELEASE_CHARACTERS,
    MAX_RELEASE_LENGTH,
    RELEASE_WHITESPACE,
    RESTRICTED_NAMES,
)

logger = get_logger(__name__)

# An optional leading "@" belongs to the scope of the package name; the
# next "@" splits package from version.
_RELEASE_RE = re.compile(r"(@?[^@]+)@(.+)", re.DOTALL)

_VERSION_RE = re.compile(
    r"""
    (?P<major>[0-9]+)
    (?:\.(?P<minor>[0-9]+))?
    (?:\.(?P<patch>[0-9]+))?
    (?:\.(?P<revision>[0-9]+))?
    (?P<pre>
        (?P<pre_delimiter>-|[a-z])
        (?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)?
        (?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*
    )?
    (?:\+(?P<build_code>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?
    """,
    re.VERBOSE,
)

_QUAD_GROUPS = ("major", "minor", "patch", "revision")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_release(release: str) -> str:
    """Trim and validate a release identifier.

    Checks run in order and the first failure wins: length, restricted
    names, then forbidden characters.

    Args:
        release: Raw release identifier.

    Returns:
        The release with surrounding Unicode whitespace removed.

    Raises:
        InvalidRelease: The identifier is too long, restricted, or contains
            ``/``, ``\\r`` or ``\\n``.
    """
    release = release.strip(RELEASE_WHITESPACE)

    if len(release) > MAX_RELEASE_LENGTH:
        code = InvalidReleaseCode.TOO_LONG
    elif release in RESTRICTED_NAMES:
        code = InvalidReleaseCode.RESTRICTED_NAME
    elif any(char in BAD_RELEASE_CHARACTERS for char in release):
        code = InvalidReleaseCode.BAD_CHARACTERS
    else:
        return release

    logger.debug("Rejected release identifier: %s", code.value)
    raise InvalidRelease(code, release=release)


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def split_release(release: str) -> Tuple[Optional[str], str]:
    """Split a release identifier into package name and version text.

    Examples:
        >>> split_release("@scope/pkg@1.0.0")
        ('@scope/pkg', '1.0.0')
        >>> split_release("1.0.0")
        (None, '1.0.0')
        >>> split_release("pkg@")
        (None, 'pkg@')
    """
    match = _RELEASE_RE.fullmatch(release)
    if match is None:
        return None, release
    return match.group(1), match.group(2)


# ---------------------------------------------------------------------------
# Version grammar
# ---------------------------------------------------------------------------


def parse_version(version: str) -> Optional[Version]:
    """Parse version text into a :class:`Version`.

    Returns ``None`` when the text does not match the grammar, is longer
    than any valid release identifier, or when a pre-release introduced by
    a bare letter directly follows a lone major component (``1a1``), which
    is too ambiguous to be trusted.

    Args:
        version: Candidate version text, without a package prefix.

    Returns:
        The parsed version, or ``None``.
    """
    if len(version) > MAX_RELEASE_LENGTH:
        return None

    match = _VERSION_RE.fullmatch(version)
    if match is None:
        return None

    pre_text = match.group("pre")
    delimiter: Optional[PreReleaseDelimiter] = None
    if pre_text is not None:
        if match.group("pre_delimiter") == "-":
            delimiter = PreReleaseDelimiter.DASH
            pre_text = pre_text[1:]
        else:
            delimiter = PreReleaseDelimiter.LETTER

    if delimiter is PreReleaseDelimiter.LETTER and match.group("minor") is None:
        logger.debug("Ambiguous version %r: letter suffix after major", version)
        return None

    raw_quad = tuple(match.group(name) for name in _QUAD_GROUPS)
    major, minor, patch, revision = (int(part or 0) for part in raw_quad)

    build_code = match.group("build_code")
    if build_code is not None:
        raw_short = version[: match.start("build_code") - 1]
    else:
        raw_short = version

    return Version(
        raw=version,
        major=major,
        minor=minor,
        patch=patch,
        revision=revision,
        components=sum(1 for part in raw_quad if part is not None),
        raw_quad=raw_quad,
        raw_short=raw_short,
        pre=pre_text or None,
        pre_delimiter=delimiter,
        build_code=build_code,
    )


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def parse_release(release: str) -> Release:
    """Validate and classify a release identifier.

    Args:
        release: Raw release identifier, e.g. ``"my-app@1.2.3"``.

    Returns:
        The classified :class:`Release`.

    Raises:
        InvalidRelease: The identifier failed validation.
    """
    raw = validate_release(release)
    package, version_raw = split_release(raw)

    version: Optional[Version] = None
    if is_build_hash(version_raw):
        # Hex digests are never coerced into version numbers
        logger.debug("Version %r is a build hash", version_raw)
    else:
        version = parse_version(version_raw)

    return Release(
        raw=raw,
        package=package,
        version_raw=version_raw,
        version=version if version is not None else Unparsed(version_raw),
    )
