"""Out-of-place distance between rank profiles."""

from typing import Mapping

# only the most frequent tokens of a sample take part in the comparison
MAX_RANK = 300


def get_distance(sample: Mapping[str, int], profile: Mapping[str, int], max_distance: int) -> int:
    """
    Calculate the out-of-place distance of a sample to a language profile.

    Only tokens of ``sample`` ranked 300 or better are considered. A token
    missing from ``profile`` costs ``max_distance``; a present token costs
    the absolute rank difference, capped at ``max_distance``.

    Args:
        sample: Rank map of the text being classified
        profile: Rank map of a known language
        max_distance: Penalty cap, normally the size of ``profile``

    Returns:
        Sum of the per-token penalties
    """
    result = 0
    for token, sample_rank in sample.items():
        if sample_rank > MAX_RANK:
            continue
        profile_rank = profile.get(token)
        if profile_rank is None:
            result += max_distance
        else:
            result += min(abs(profile_rank - sample_rank), max_distance)
    return result


def get_confidence(sample: Mapping[str, int], profile: Mapping[str, int]) -> int:
    """
    Convert the distance between two rank maps into a 0-100 confidence.

    The distance is normalized by the largest value it can take, the
    profile size times the number of compared tokens. The percentage is
    truncated, not rounded. An empty sample or empty profile scores 0.
    """
    profile_size = len(profile)
    input_size = min(len(sample), MAX_RANK)
    max_possible_distance = profile_size * input_size
    if max_possible_distance == 0:
        return 0

    distance = get_distance(sample, profile, profile_size)
    relative_distance = 1 - distance / max_possible_distance
    return int(relative_distance * 100)
