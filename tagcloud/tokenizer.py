"""
tokenizer.py - Word / Separator Tokenizer

Splits lines of text into maximal runs of separator or non-separator
characters and yields the word runs, lower-cased.

Key role: First pipeline stage, feeds the frequency counter
"""

# Fixed separator characters (punctuation, digits, quotes, whitespace)
SEPARATOR_STRING = ". ,:;'{][}|/><?!`~1234567890@#$%^&*()-_=+\"\t"

SEPARATORS = frozenset(SEPARATOR_STRING)


def next_word_or_separator(text, position, separators=SEPARATORS):
    """
    Return the maximal run starting at position that is either entirely
    separators or entirely non-separators, depending on text[position].

    Runtime Complexity: O(k) where k is the length of the returned run.

    Args:
        text: Line of text to scan
        position: Start index, 0 <= position < len(text)
        separators: Set of separator characters

    Returns:
        The slice text[position:end] for the run
    """
    assert 0 <= position < len(text), \
        f"Violation of: 0 <= position < |text| (position={position})"

    in_separator = text[position] in separators
    end = position
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


def iter_tokens(line, separators=SEPARATORS):
    """Yield successive tokens of line until it is fully consumed."""
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        yield token
        position += len(token)


def tokenize_lines(lines, separators=SEPARATORS):
    """
    Yield words from an iterable of lines.

    Runtime Complexity: O(n)
    where n is the total number of characters in all lines.
    Each line is lower-cased once, and each character is visited once
    by next_word_or_separator.
    """
    for line in lines:
        line = line.rstrip("\r\n").lower()
        for token in iter_tokens(line, separators):
            # Separator runs only mark boundaries
            if token[0] not in separators:
                yield token
