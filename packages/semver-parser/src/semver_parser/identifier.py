# SPDX-License-Identifier: MIT
"""Pre-release and build identifiers.

An identifier is one dot-separated component of a metadata segment. It is
either ``Numeric`` (digits only, no leading zero, fits in 64 bits) or
``AlphaNumeric`` (everything else drawn from ``[0-9A-Za-z-]``).

Digit-only tokens that break the numeric rules are not errors inside a
metadata segment; they fall back to ``AlphaNumeric`` with the original text:

    >>> identifier(b"0851523")
    (AlphaNumeric(value='0851523'), 7)
    >>> identifier(b"42")
    (Numeric(value=42), 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from .recognize import DIGITS, IDENTIFIER_CHARS

# Largest value an unsigned 64-bit identifier can hold
MAX_NUMERIC_VALUE = 2**64 - 1
_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC_VALUE))

_ZERO = ord("0")


class Identifier:
    """Base class for the two identifier variants.

    Ordering is discriminant-first: every ``Numeric`` sorts before every
    ``AlphaNumeric``. Identifiers of the same variant compare by payload.
    """

    __slots__ = ()

    rank: ClassVar[int]
    value: int | str

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare_identifiers(self, other) >= 0


@dataclass(frozen=True, slots=True)
class Numeric(Identifier):
    """An identifier made solely of digits, e.g. ``7`` in ``1.0.0-rc.7``."""

    rank: ClassVar[int] = 0

    value: int


@dataclass(frozen=True, slots=True)
class AlphaNumeric(Identifier):
    """An identifier with letters, hyphens, or non-canonical digits."""

    rank: ClassVar[int] = 1

    value: str


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two identifiers.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b
    """
    if a.rank != b.rank:
        return -1 if a.rank < b.rank else 1
    if a.value != b.value:
        return -1 if a.value < b.value else 1  # type: ignore[operator]
    return 0


def compare_identifier_lists(a: Sequence[Identifier], b: Sequence[Identifier]) -> int:
    """Compare two identifier sequences lexicographically.

    A strict prefix sorts before its extension, so an empty sequence sorts
    before any non-empty one.
    """
    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result != 0:
            return result
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return 0


def numeric_identifier(data: bytes, pos: int = 0) -> Optional[tuple[int, int]]:
    """Recognize a numeric identifier at ``pos``.

    Args:
        data: Input bytes
        pos: Offset to start matching at

    Returns:
        ``(value, consumed)`` for a canonical unsigned 64-bit number, or None
        when there are no digits, the run has a leading zero, or it overflows.

    Examples:
        >>> numeric_identifier(b"10.2")
        (10, 2)
        >>> numeric_identifier(b"01") is None
        True
    """
    length = DIGITS.match(data, pos)
    if length is None:
        return None
    if length > 1 and data[pos] == _ZERO:
        return None
    # Reject long runs before int() so huge inputs never hit the str->int limit
    if length > _MAX_NUMERIC_DIGITS:
        return None
    value = int(data[pos : pos + length])
    if value > MAX_NUMERIC_VALUE:
        return None
    return value, length


def alphanumeric_identifier(data: bytes, pos: int = 0) -> Optional[tuple[str, int]]:
    """Recognize the maximal ``[0-9A-Za-z-]`` run at ``pos``."""
    length = IDENTIFIER_CHARS.match(data, pos)
    if length is None:
        return None
    return data[pos : pos + length].decode("ascii"), length


def identifier(data: bytes, pos: int = 0) -> Optional[tuple[Identifier, int]]:
    """Recognize and classify one metadata identifier at ``pos``.

    The token is bounded by the alphanumeric run. It is ``Numeric`` only when
    the numeric recognizer accepts that whole token; otherwise the token text
    becomes an ``AlphaNumeric``.
    """
    token = alphanumeric_identifier(data, pos)
    if token is None:
        return None
    text, length = token

    number = numeric_identifier(data, pos)
    if number is not None and number[1] == length:
        return Numeric(number[0]), length
    return AlphaNumeric(text), length
