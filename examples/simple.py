from __future__ import annotations

from monoidal import MAX, STRING, SUM, fold, fold_map, mapping, product


def word_stats(text: str) -> tuple[tuple[int, int], dict[str, int]]:
    """Word count, longest word length and per-word counts in one pass."""
    words = text.split()
    stats = product(product(SUM, MAX), mapping(SUM))
    return fold_map(words, lambda w: ((1, len(w)), {w.lower(): 1}), stats)


if __name__ == "__main__":
    print(fold([1, 2, 3, 4], SUM))
    print(fold(["I", "love", "x"], STRING))
    print(fold([(1, "I"), (2, "love"), (3, "x")], product(SUM, STRING)))
    print(mapping(SUM).combine({"a": 1, "b": 2}, {"a": 1, "c": 3}))
    print(word_stats("the quick brown fox jumps over the lazy dog"))
