#!/usr/bin/env python3
"""Example usage of substriter."""

from substriter import SubstrIter, TrigramIter, Window, dumps
from substriter.features import jaccard_similarity, ngram_counts


def main():
    """Run example iteration."""

    # Trigrams over ASCII and non-Latin text
    for text in ["whatever", "今天我吃饭"]:
        grams = ["".join(window) for window in TrigramIter(text)]
        print(f"{text!r}: {grams}")

    # Any fixed width works the same way
    bigrams = list(SubstrIter("whatever", size=2))
    print(f"First bigram: {''.join(bigrams[0])}, last bigram: {''.join(bigrams[-1])}")

    # Windows as values, rendered and serialized as bare fragments
    windows = list(Window.from_windows(TrigramIter("hello world")))
    print(f"Serialized: {dumps(windows)}")
    print(f"Parsed back: {Window.parse(str(windows[0]), 3)!r}")

    # N-gram features for fuzzy matching
    print(f"Most common bigrams in 'banana': {ngram_counts('banana', 2).most_common(2)}")
    print(f"Similarity of 'whatever' and 'however': {jaccard_similarity('whatever', 'however'):.2f}")

    return 0


if __name__ == "__main__":
    exit(main())
