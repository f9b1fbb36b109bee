from tagcloud.counter import compute_word_frequencies, total_occurrences
from tagcloud.tokenizer import SEPARATORS, iter_tokens, tokenize_lines


def test_counts_each_distinct_word():
    words = list(tokenize_lines(["the cat sat on the mat. the cat ran."]))
    assert compute_word_frequencies(words) == {
        "the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1,
    }


def test_order_of_words_does_not_matter():
    words = ["b", "a", "b", "c", "b", "a"]
    assert compute_word_frequencies(words) == compute_word_frequencies(reversed(words))


def test_total_matches_number_of_word_tokens():
    line = "One fish, two fish; red fish -- blue fish!"
    word_tokens = [t for t in iter_tokens(line.lower()) if t[0] not in SEPARATORS]
    frequencies = compute_word_frequencies(tokenize_lines([line]))
    assert total_occurrences(frequencies) == len(word_tokens) == 8


def test_repeated_calls_do_not_accumulate():
    first = compute_word_frequencies(["a", "a"])
    second = compute_word_frequencies(["a", "a"])
    assert first == second == {"a": 2}


def test_empty_input():
    assert compute_word_frequencies([]) == {}
    assert total_occurrences({}) == 0
