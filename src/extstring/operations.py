"""
ExtString - String Operations.

Reversal, padding, character-class predicates and case swapping for
plain ``str`` values. Every function is pure and returns a new string.

Lengths used for padding count code points (``len(text)``), not grapheme
clusters; only ``reverse`` is grapheme-aware.
"""

from __future__ import annotations

import logging
from itertools import cycle, islice

import regex

from extstring.graphemes import graphemes
from extstring.utils.errors import InvalidFillError

logger = logging.getLogger(__name__)

_NUMERIC = regex.compile(r"\p{N}+")
_ALPHABETIC = regex.compile(r"\p{Alphabetic}+")
_ALPHANUMERIC = regex.compile(r"[\p{Alphabetic}\p{N}]+")


# =============================================================================
# Reversal
# =============================================================================


def reverse(text: str) -> str:
    """
    Reverse the order of user-perceived characters.

    Grapheme clusters are kept whole, so a base letter keeps its combining
    accents and emoji sequences are not torn apart.

    Example:
        >>> reverse("abc")
        'cba'
        >>> reverse("cafe\\u0301")
        'e\\u0301fac'
    """
    return "".join(reversed(graphemes(text)))


# =============================================================================
# Padding
# =============================================================================


def _check_fill_char(fill: str) -> None:
    if not isinstance(fill, str) or len(fill) != 1:
        raise InvalidFillError(
            f"fill must be a single character, got {fill!r}",
            fill=fill,
        )


def _check_fill_pattern(pattern: str) -> None:
    if not isinstance(pattern, str):
        raise InvalidFillError(
            f"fill pattern must be a string, got {type(pattern).__name__}",
            fill=pattern,
        )


def _pattern_run(text: str, pad_len: int, pattern: str) -> str:
    """Build the padding run for text, cycling pattern code point by code point."""
    repeat = pad_len - len(text)
    if repeat <= 0:
        return ""
    if not pattern:
        # cycle("") would yield nothing; nothing to pad with
        logger.debug("empty fill pattern, leaving %r unpadded", text)
        return ""
    return "".join(islice(cycle(pattern), repeat))


def pad_left(text: str, pad_len: int, fill: str = " ") -> str:
    """
    Pad the left side with ``fill`` until the string is ``pad_len`` long.

    If ``pad_len`` is less than or equal to the current length the text is
    returned unchanged.

    Raises:
        InvalidFillError: If ``fill`` is not exactly one character
    """
    _check_fill_char(fill)
    repeat = pad_len - len(text)
    if repeat <= 0:
        return text
    return fill * repeat + text


def pad_right(text: str, pad_len: int, fill: str = " ") -> str:
    """
    Pad the right side with ``fill`` until the string is ``pad_len`` long.

    If ``pad_len`` is less than or equal to the current length the text is
    returned unchanged.

    Raises:
        InvalidFillError: If ``fill`` is not exactly one character
    """
    _check_fill_char(fill)
    repeat = pad_len - len(text)
    if repeat <= 0:
        return text
    return text + fill * repeat


def pad_left_str(text: str, pad_len: int, pattern: str) -> str:
    """
    Pad the left side by repeating ``pattern`` until ``pad_len`` is reached.

    The pattern is cut off wherever the target length falls, so
    ``pad_left_str("12345", 14, "qwerty")`` gives ``"qwertyqwe12345"``.
    An empty pattern leaves the text unchanged.
    """
    _check_fill_pattern(pattern)
    return _pattern_run(text, pad_len, pattern) + text


def pad_right_str(text: str, pad_len: int, pattern: str) -> str:
    """
    Pad the right side by repeating ``pattern`` until ``pad_len`` is reached.

    An empty pattern leaves the text unchanged.
    """
    _check_fill_pattern(pattern)
    return text + _pattern_run(text, pad_len, pattern)


# =============================================================================
# Character-Class Predicates
# =============================================================================

# The empty string is rejected by every predicate: "all characters match"
# must not hold vacuously.


def is_numeric(text: str) -> bool:
    """Check that text is non-empty and every character is numeric (category N)."""
    if not text:
        return False
    return _NUMERIC.fullmatch(text) is not None


def is_alphabetic(text: str) -> bool:
    """Check that text is non-empty and every character is alphabetic."""
    if not text:
        return False
    return _ALPHABETIC.fullmatch(text) is not None


def is_alphanumeric(text: str) -> bool:
    """Check that text is non-empty and every character is alphabetic or numeric."""
    if not text:
        return False
    return _ALPHANUMERIC.fullmatch(text) is not None


# =============================================================================
# Case
# =============================================================================


def _swap_char(char: str) -> str:
    if char.islower():
        return char.upper()
    if char.isupper():
        return char.lower()
    return char


def swap_case(text: str) -> str:
    """
    Invert the case of every cased character.

    Mappings are applied per code point and may expand, e.g. ``"ß"``
    becomes ``"SS"``. Titlecase letters and characters without case are
    copied as they are.
    """
    return "".join(_swap_char(char) for char in text)
