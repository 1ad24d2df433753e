# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and ordering.

This package parses ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` strings into
immutable ``Version`` objects, renders them back to canonical form, and
orders them.

Example:
    >>> from semver_parser import parse, compare_versions, is_valid_version
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre
    (AlphaNumeric(value='alpha'), Numeric(value=1))
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> is_valid_version("1.0")
    False
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .identifier import (
    MAX_NUMERIC_VALUE,
    AlphaNumeric,
    Identifier,
    Numeric,
)
from .version import (
    Version,
    parse,
    is_valid_version,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Data model
    "Version",
    "Identifier",
    "Numeric",
    "AlphaNumeric",
    "MAX_NUMERIC_VALUE",
    # Parsing
    "parse",
    "is_valid_version",
    "InvalidVersionError",
    # Comparison
    "compare_versions",
    "version_key",
]
