"""
"Did you mean" ranking for unknown unit and substance names.
"""

from typing import Iterable, List, Optional


def name_distance(a: str, b: str) -> int:
    """
    Similarity score between two names (0 = identical).

    The shorter string is slid along the longer one; at each offset the
    positional mismatches are counted. The score is the smallest mismatch
    count plus the difference in length.
    """
    short, long = (a, b) if len(a) <= len(b) else (b, a)
    slack = len(long) - len(short)

    if not short:
        return slack

    best = len(short)
    for offset in range(slack + 1):
        mismatches = sum(1 for i, ch in enumerate(short) if ch != long[offset + i])
        if mismatches < best:
            best = mismatches
            if best == 0:
                break

    return best + slack


def rank_suggestions(name: str, candidates: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Return candidates ordered closest-first. Ties keep their input order."""
    ranked = sorted(candidates, key=lambda candidate: name_distance(name, candidate))
    if limit is not None:
        return ranked[:limit]
    return ranked
