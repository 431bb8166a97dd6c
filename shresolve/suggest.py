"""Near-miss suggestions for unresolved command names.

Candidates are compared with a bounded Levenshtein distance. When nothing
falls within the threshold, no suggestion is made.
"""

from __future__ import annotations

from collections.abc import Iterable


def _distance_threshold(name: str) -> int:
    """Edit budget for ``name``: 1 up to 3 chars, 2 up to 5, else len/3 + 1."""
    length = len(name)
    if length <= 3:
        return 1
    if length <= 5:
        return 2
    return length // 3 + 1


def levenshtein(a: str, b: str) -> int:
    """Edit distance between ``a`` and ``b``."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]


def nearest(name: str, candidates: Iterable[str]) -> str | None:
    """The closest candidate within the threshold; ties go alphabetically."""
    threshold = _distance_threshold(name)
    best: tuple[int, str] | None = None
    for cand in candidates:
        if cand == name:
            continue
        dist = levenshtein(name, cand)
        if dist > threshold:
            continue
        if best is None or (dist, cand) < best:
            best = (dist, cand)
    return best[1] if best is not None else None