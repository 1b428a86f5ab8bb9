"""N-gram feature extraction built on the sliding window iterator."""

from collections import Counter
from typing import Dict, Set

import numpy as np

from .source import TextSequence
from .utils import render
from .windowing import SubstrIter


def ngram_counts(text: str, size: int = 3) -> Counter:
    """Count every character n-gram in the text.

    Args:
        text: Input text
        size: N-gram width in characters

    Returns:
        Counter mapping rendered n-grams to occurrence counts
    """
    return Counter(render(window) for window in SubstrIter(text, size=size))


def ngram_frequencies(text: str, size: int = 3) -> Dict[str, float]:
    """Relative frequency of each n-gram; empty when the text is too short."""
    counts = ngram_counts(text, size)
    total = sum(counts.values())
    return {gram: count / total for gram, count in counts.items()} if total > 0 else {}


def unique_ngrams(text: str, size: int = 3) -> Set[str]:
    """Distinct n-grams of the text, for index keys and search tokens."""
    return set(ngram_counts(text, size))


def jaccard_similarity(first: str, second: str, size: int = 3) -> float:
    """Jaccard similarity between the n-gram sets of two texts.

    Args:
        first: First text
        second: Second text
        size: N-gram width in characters

    Returns:
        Similarity between 0 and 1 (1.0 when neither text has any n-gram)
    """
    grams1 = unique_ngrams(first, size)
    grams2 = unique_ngrams(second, size)
    union = grams1 | grams2
    if not union:
        return 1.0
    return len(grams1 & grams2) / len(union)


def codepoint_windows(text: TextSequence, size: int = 3) -> np.ndarray:
    """Stack every window as a row of code points.

    Args:
        text: Input text, encoded bytes, or iterable of characters
        size: Window width in characters

    Returns:
        uint32 array of shape (number of windows, size)
    """
    rows = [[ord(char) for char in window] for window in SubstrIter(text, size=size)]
    return np.array(rows, dtype=np.uint32).reshape(-1, size)
