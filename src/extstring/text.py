"""
ExtString - String Wrapper.

``ExtString`` is a ``str`` subclass carrying the string operations as
methods, so they can be chained without touching the built-in type::

    >>> ExtString("12345").pad_left_str(8, "ab").reverse()
    ExtString('54321aba')
"""

from __future__ import annotations

from extstring import operations
from extstring.graphemes import grapheme_count, graphemes


class ExtString(str):
    """A string with extra operations. Text results are ``ExtString`` too."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ExtString({str.__repr__(self)})"

    def reverse(self) -> ExtString:
        """Reverse grapheme clusters."""
        return ExtString(operations.reverse(self))

    def pad_left(self, pad_len: int, fill: str = " ") -> ExtString:
        """Pad on the left with a single character."""
        return ExtString(operations.pad_left(self, pad_len, fill))

    def pad_right(self, pad_len: int, fill: str = " ") -> ExtString:
        """Pad on the right with a single character."""
        return ExtString(operations.pad_right(self, pad_len, fill))

    def pad_left_str(self, pad_len: int, pattern: str) -> ExtString:
        """Pad on the left by cycling a pattern."""
        return ExtString(operations.pad_left_str(self, pad_len, pattern))

    def pad_right_str(self, pad_len: int, pattern: str) -> ExtString:
        """Pad on the right by cycling a pattern."""
        return ExtString(operations.pad_right_str(self, pad_len, pattern))

    def is_numeric(self) -> bool:
        return operations.is_numeric(self)

    def is_alphabetic(self) -> bool:
        return operations.is_alphabetic(self)

    def is_alphanumeric(self) -> bool:
        return operations.is_alphanumeric(self)

    def swap_case(self) -> ExtString:
        """Invert the case of every cased character."""
        return ExtString(operations.swap_case(self))

    def graphemes(self) -> list[str]:
        return graphemes(self)

    def grapheme_count(self) -> int:
        return grapheme_count(self)
