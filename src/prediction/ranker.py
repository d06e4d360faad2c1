"""
Dictionary-assisted ranking of swipe candidates.
Orders known words by edit distance to the decoded candidate.
"""
from typing import Iterable, List, Optional


def levenshtein_distance(s1: str, s2: str) -> int:
    """Classic edit distance: unit-cost insert, delete and substitute."""
    # Two rolling rows of the edit-distance table
    prev = list(range(len(s2) + 1))
    for i in range(1, len(s1) + 1):
        curr = [i] + [0] * len(s2)
        for j in range(1, len(s2) + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,         # deletion
                curr[j - 1] + 1,     # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev = curr

    return prev[-1]


def rank_suggestions(candidate: Optional[str],
                     dictionary: Optional[Iterable[str]],
                     limit: int = 5,
                     prefix_length: int = 2) -> List[str]:
    """
    Rank dictionary words against a decoded candidate.

    Only words sharing the candidate's first `prefix_length` characters are
    considered. That prefilter trades recall for speed: a candidate whose
    first letters were mis-decoded will not find its intended word.

    Args:
        candidate: Decoded word, or None if nothing was decoded
        dictionary: Known words in preference order, or None
        limit: Max entries returned
        prefix_length: Number of leading characters that must match

    Returns:
        Words sorted by edit distance, ties in dictionary order.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if not candidate:
        return []
    if dictionary is None:
        return [candidate]

    prefix = candidate[:prefix_length]
    matches = [word for word in dictionary if word.startswith(prefix)]

    # list.sort is stable, so equal distances keep dictionary order
    matches.sort(key=lambda word: levenshtein_distance(candidate, word))
    return matches[:limit]
