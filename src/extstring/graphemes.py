"""
ExtString - Grapheme Clusters.

A Python ``str`` is a sequence of code points, but readers perceive
extended grapheme clusters: ``"e\\u0301"`` is two code points and one
character. Segmentation follows Unicode UAX #29 as implemented by the
``regex`` package's ``\\X`` pattern.
"""

from __future__ import annotations

import regex

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    """Return the number of user-perceived characters in text."""
    return sum(1 for _ in _GRAPHEME.finditer(text))
