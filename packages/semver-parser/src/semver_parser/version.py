# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +0851523

The parser walks the input left to right with the recognizers from
``semver_parser.recognize``. Each step either consumes bytes or aborts the
whole parse with an ``InvalidVersionError`` naming the failed step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .identifier import Identifier, compare_identifier_lists, numeric_identifier
from .metadata import MetadataError, parse_build, parse_prerelease
from .recognize import DOT

logger = logging.getLogger(__name__)

# Unicode White_Space property; str.strip() would also drop U+001C..U+001F
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering all use the full
    ``(major, minor, patch, pre, build)`` tuple, build metadata included.

    Attributes:
        major: Major version number (``0`` in ``"0.1.2"``)
        minor: Minor version number (``1`` in ``"0.1.2"``)
        patch: Patch version number (``2`` in ``"0.1.2"``)
        pre: Pre-release identifiers (``alpha1`` in ``"0.1.2-alpha1"``)
        build: Build identifiers (``build`` and ``0`` in ``"0.1.2+build.0"``)
    """

    major: int
    minor: int
    patch: int
    pre: tuple[Identifier, ...] = ()
    build: tuple[Identifier, ...] = ()

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            version += "-" + ".".join(str(part) for part in self.pre)
        if self.build:
            version += "+" + ".".join(str(part) for part in self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare(self, other: Version) -> int:
        """Compare with another version.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        result = compare_identifier_lists(self.pre, other.pre)
        if result != 0:
            return result
        return compare_identifier_lists(self.build, other.build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def _numeric_field(data: bytes, pos: int, name: str, version_string: str) -> tuple[int, int]:
    """Parse one of major/minor/patch, failing the whole parse if invalid."""
    parsed = numeric_identifier(data, pos)
    if parsed is None:
        raise InvalidVersionError(version_string, f"Error parsing {name} identifier")
    return parsed


def _dot(data: bytes, pos: int, version_string: str) -> int:
    consumed = DOT.match(data, pos)
    if consumed is None:
        raise InvalidVersionError(version_string, "Expected dot")
    return consumed


def _parse(version_string: str) -> Version:
    data = version_string.strip(WHITESPACE).encode("utf-8", errors="surrogatepass")
    i = 0

    major, length = _numeric_field(data, i, "major", version_string)
    i += length
    i += _dot(data, i, version_string)
    minor, length = _numeric_field(data, i, "minor", version_string)
    i += length
    i += _dot(data, i, version_string)
    patch, length = _numeric_field(data, i, "patch", version_string)
    i += length

    try:
        pre, length = parse_prerelease(data, i)
        i += length
        build, length = parse_build(data, i)
        i += length
    except MetadataError as e:
        raise InvalidVersionError(version_string, e.message) from e

    if i != len(data):
        remainder = data[i:].decode("utf-8", errors="surrogatepass")
        raise InvalidVersionError(
            version_string, f"Extra junk after valid version: {remainder}"
        )

    return Version(major=major, minor=minor, patch=patch, pre=pre, build=build)


def parse(version_string: Any) -> Version:
    """Parse a semantic version string into a Version object.

    Leading and trailing whitespace is ignored.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse("1.2.3")
        Version(major=1, minor=2, patch=3, pre=(), build=())

        >>> str(parse("  1.0.0-alpha.1+build.456  "))
        '1.0.0-alpha.1+build.456'

        >>> parse("0.4.0-beta.1+0851523").build
        (AlphaNumeric(value='0851523'),)
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    try:
        return _parse(version_string)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise


def is_valid_version(version_string: Any) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version("1.0.0-alpha")
        True
    """
    try:
        parse(version_string)
    except InvalidVersionError:
        return False
    return True
