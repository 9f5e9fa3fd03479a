"""Character n-gram occurrence profiling.

Words are maximal runs of letters in the case-folded text. Each word is
padded with one ``_`` on both sides, so ``"cat"`` becomes ``"_cat_"`` and
the n-grams ``"_c"`` and ``"t_"`` mark the word boundaries. Training and
detection must share this convention.
"""

import re
from typing import Iterator

PADDING = "_"

# the depth of n-gram tokens used for detection. with depth=1 only single letters are produced
NGRAM_DEPTH = 4

# default depth of the training command line tool
TRAINING_DEPTH = 3

_WORD_PATTERN = re.compile(r"[^\W\d_]+")


def split_words(text: str) -> list[str]:
    """Return the case-folded letter runs of ``text``."""
    return _WORD_PATTERN.findall(text.casefold())


def iter_ngrams(word: str, depth: int) -> Iterator[str]:
    """Yield every n-gram of length 1..depth of the padded word."""
    padded = f"{PADDING}{word}{PADDING}"
    for n in range(1, depth + 1):
        for start in range(len(padded) - n + 1):
            yield padded[start:start + n]


def update_occurrence_map(occurrences: dict[str, int], text: str, depth: int) -> None:
    """Add the n-grams of ``text`` to an existing occurrence map.

    Used to build a single profile from many documents.

    Args:
        occurrences: Map of n-gram to count, updated in place
        text: Text to analyze
        depth: Maximum n-gram length

    Raises:
        ValueError: If depth is smaller than 1
    """
    if depth < 1:
        raise ValueError(f"n-gram depth must be at least 1, got {depth}")

    for word in split_words(text):
        for gram in iter_ngrams(word, depth):
            occurrences[gram] = occurrences.get(gram, 0) + 1


def create_occurrence_map(text: str, depth: int) -> dict[str, int]:
    """Count the n-grams of length 1..depth in ``text``."""
    occurrences: dict[str, int] = {}
    update_occurrence_map(occurrences, text, depth)
    return occurrences
