"""Conversion of occurrence counts into rank profiles."""

from typing import Mapping


def create_rank_lookup_map(occurrences: Mapping[str, int]) -> dict[str, int]:
    """
    Rank n-grams by descending count.

    The most frequent token gets rank 1, the next rank 2 and so on, with no
    gaps. Tokens with equal counts are ordered lexicographically so the
    result does not depend on mapping iteration order.

    Args:
        occurrences: Map of n-gram to occurrence count

    Returns:
        Map of n-gram to 1-based rank
    """
    ordered = sorted(occurrences.items(), key=lambda item: (-item[1], item[0]))
    return {token: position for position, (token, _) in enumerate(ordered, start=1)}
