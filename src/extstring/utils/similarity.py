"""
Name similarity helpers for "did you mean?" hints.
"""

from __future__ import annotations

from collections.abc import Iterable


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Counts the insertions, deletions and substitutions of single scalars
    needed to turn ``a`` into ``b``.
    """
    if len(a) < len(b):
        a, b = b, a

    if not b:
        return len(a)

    above = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        row = [i]
        for j, cb in enumerate(b, start=1):
            row.append(
                min(
                    above[j] + 1,
                    row[j - 1] + 1,
                    above[j - 1] + (ca != cb),
                )
            )
        above = row

    return above[-1]


def closest_names(
    name: str,
    candidates: Iterable[str],
    max_distance: int = 2,
    limit: int = 3,
) -> list[str]:
    """
    Pick the candidates closest to ``name``.

    A candidate qualifies when its edit distance is at most
    ``max_distance`` or when ``name`` is a prefix of it. Prefix matches
    rank after exact-distance matches of equal score.

    Args:
        name: The unknown name
        candidates: Known names
        max_distance: Largest edit distance still worth suggesting
        limit: Maximum number of names returned

    Returns:
        Matching names, closest first, ties broken alphabetically
    """
    needle = name.lower()
    if not needle:
        return []

    scored: list[tuple[int, str]] = []
    for candidate in candidates:
        folded = candidate.lower()
        distance = edit_distance(needle, folded)
        if distance <= max_distance:
            scored.append((distance, candidate))
        elif folded.startswith(needle):
            scored.append((max_distance + 1, candidate))

    scored.sort()
    return [candidate for _, candidate in scored[:limit]]
