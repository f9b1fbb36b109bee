"""
counter.py - Word Frequency Counter

Aggregates a stream of words into a word -> occurrence count mapping.
"""


def compute_word_frequencies(words):
    """
    Compute word frequencies from an iterable of words.
    Runtime Complexity: O(T) where T is the total number of words.
    Each word is processed once, and dictionary operations are O(1).

    A new mapping is built on every call, so repeated runs never
    accumulate counts from earlier input.
    """
    frequencies = {}
    for word in words:
        if word in frequencies:
            frequencies[word] += 1
        else:
            frequencies[word] = 1
    return frequencies


def total_occurrences(frequencies):
    """Sum of all counts, i.e. the number of words that were counted."""
    return sum(frequencies.values())
