# SPDX-License-Identifier: MIT
"""Version comparison and sort keys.

Versions are ordered by ``(major, minor, patch, pre, build)``, comparing the
identifier sequences element by element:

- Numeric identifiers sort before alphanumeric ones
- A shorter sequence sorts before a longer one it is a prefix of, so
  ``1.0.0`` sorts *before* ``1.0.0-alpha``
- Build metadata takes part in the comparison
"""

from __future__ import annotations

from typing import Union

from .version import Version, parse


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0")
        0
        >>> compare_versions("1.0.0-1", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0+build.2", "1.0.0+build.1")
        1
    """
    v1 = parse(version1) if isinstance(version1, str) else version1
    v2 = parse(version2) if isinstance(version2, str) else version2
    return v1.compare(v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0-alpha", "2.0.0", "1.0.0"], key=version_key)
        ['1.0.0', '1.0.0-alpha', '2.0.0']
    """
    v = parse(version) if isinstance(version, str) else version
    return (v.major, v.minor, v.patch, v.pre, v.build)
