"""
ranking.py - Top-N Word Selection

Ranks the counted words by frequency, keeps the N most frequent,
and re-orders that selection alphabetically for display.

Key role: Decides which words appear in the cloud and in what order
"""

from collections import namedtuple


WordCount = namedtuple("WordCount", ["word", "count"])


def by_count_descending(item):
    """
    Sort key: highest count first, ties broken alphabetically.
    Runtime Complexity: O(1)
    """
    return (-item[1], item[0])


def by_word(item):
    """
    Sort key: word in ascending lexicographic order.
    Runtime Complexity: O(1)
    """
    return item[0]


def select_top_words(frequencies, n):
    """
    Select the n most frequent words, ordered alphabetically.

    The frequencies mapping is drained: it is empty when this returns,
    and must be rebuilt before it can be used again.

    Runtime Complexity: O(D log D)
    where D is the number of distinct words. All entries are sorted
    by count, then the (at most n) selected entries are sorted by word.

    Args:
        frequencies: Mapping of word -> count (consumed)
        n: Number of words to keep, n >= 0

    Returns:
        List of WordCount, length min(n, D), sorted by word

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Number of words must be non-negative, got {n}")

    ranked = []
    while frequencies:
        word, count = frequencies.popitem()
        ranked.append(WordCount(word, count))
    ranked.sort(key=by_count_descending)

    selection = ranked[:n]
    selection.sort(key=by_word)
    return selection


def count_range(selection):
    """
    Return (smallest, largest) count among the selected words.
    An empty selection yields (0, 0).
    """
    if not selection:
        return 0, 0
    counts = [entry.count for entry in selection]
    return min(counts), max(counts)
