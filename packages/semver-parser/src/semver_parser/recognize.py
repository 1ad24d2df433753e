# SPDX-License-Identifier: MIT
"""Byte-level pattern recognizers used by the version grammar.

A recognizer answers one question: does this pattern match a prefix of
``data[pos:]``, and if so, how many bytes did it consume? A mismatch is an
ordinary outcome and is reported as ``None``, never as an exception.

Example:
    >>> DOT.match(b"1.2.3", 1)
    1
    >>> DIGITS.match(b"123abc")
    3
    >>> DIGITS.match(b"abc") is None
    True
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Protocol


class Recognizer(Protocol):
    """Anything that can match a non-empty prefix of a byte string."""

    def match(self, data: bytes, pos: int = 0) -> Optional[int]:
        """Return the number of bytes consumed at ``pos``, or None."""
        ...


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches exactly one literal byte."""

    byte: int

    @classmethod
    def of(cls, char: str) -> Literal:
        """Build a literal recognizer from a single ASCII character."""
        if len(char) != 1 or not char.isascii():
            raise ValueError(f"Literal must be a single ASCII character, got {char!r}")
        return cls(ord(char))

    def match(self, data: bytes, pos: int = 0) -> Optional[int]:
        if pos < len(data) and data[pos] == self.byte:
            return 1
        return None


@dataclass(frozen=True, slots=True)
class CharClass:
    """Matches one byte drawn from a fixed set."""

    name: str
    members: frozenset[int]

    @classmethod
    def of(cls, name: str, chars: str) -> CharClass:
        """Build a character class from the ASCII characters in ``chars``."""
        return cls(name, frozenset(chars.encode("ascii")))

    def match(self, data: bytes, pos: int = 0) -> Optional[int]:
        if pos < len(data) and data[pos] in self.members:
            return 1
        return None


@dataclass(frozen=True, slots=True)
class OneOrMore:
    """Matches the maximal run of an inner recognizer, at least once."""

    inner: Recognizer

    def match(self, data: bytes, pos: int = 0) -> Optional[int]:
        end = pos
        while (consumed := self.inner.match(data, end)) is not None:
            end += consumed
        if end == pos:
            return None
        return end - pos


# Separators
DOT = Literal.of(".")
HYPHEN = Literal.of("-")
PLUS = Literal.of("+")

# Character classes
DIGIT = CharClass.of("digit", string.digits)
IDENTIFIER_CHAR = CharClass.of("identifier", string.digits + string.ascii_letters + "-")

# Runs
DIGITS = OneOrMore(DIGIT)
IDENTIFIER_CHARS = OneOrMore(IDENTIFIER_CHAR)
