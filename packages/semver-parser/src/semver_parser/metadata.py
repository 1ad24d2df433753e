# SPDX-License-Identifier: MIT
"""Parsing of the optional pre-release (``-``) and build (``+``) segments.

Both segments share one grammar: a marker byte followed by one or more
identifiers separated by dots. Only the marker and the error label differ.
"""

from __future__ import annotations

from .identifier import Identifier, identifier
from .recognize import DOT, HYPHEN, PLUS, Literal


class MetadataError(Exception):
    """Raised when a metadata marker is not followed by a valid identifier list."""

    def __init__(self, label: str, position: int):
        self.label = label
        self.position = position
        self.message = f"Error parsing {label} identifier"
        super().__init__(self.message)


def parse_optional_meta(
    data: bytes,
    pos: int,
    marker: Literal,
    label: str,
) -> tuple[tuple[Identifier, ...], int]:
    """Parse an optional marker-prefixed, dot-separated identifier list.

    Args:
        data: Input bytes
        pos: Offset where the segment may start
        marker: Recognizer for the segment marker
        label: Segment name used in error messages

    Returns:
        The identifiers and the number of bytes consumed, marker included.
        ``((), 0)`` when the marker is absent.

    Raises:
        MetadataError: If the marker or a dot is not followed by an identifier
    """
    consumed = marker.match(data, pos)
    if consumed is None:
        return (), 0

    i = pos + consumed
    identifiers: list[Identifier] = []
    while True:
        parsed = identifier(data, i)
        if parsed is None:
            raise MetadataError(label, i)
        value, length = parsed
        identifiers.append(value)
        i += length

        dot = DOT.match(data, i)
        if dot is None:
            break
        i += dot

    return tuple(identifiers), i - pos


def parse_prerelease(data: bytes, pos: int) -> tuple[tuple[Identifier, ...], int]:
    """Parse an optional ``-`` pre-release segment at ``pos``."""
    return parse_optional_meta(data, pos, HYPHEN, "pre-release")


def parse_build(data: bytes, pos: int) -> tuple[tuple[Identifier, ...], int]:
    """Parse an optional ``+`` build segment at ``pos``."""
    return parse_optional_meta(data, pos, PLUS, "build")
