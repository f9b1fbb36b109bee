"""
source.py - Input and Output Files

Reads the lines a tag cloud is built from and writes the rendered
document back out. Plain text files are read as-is; saved HTML pages
are reduced to their visible text first.
"""

import re
from pathlib import Path

from bs4 import BeautifulSoup


HTML_SUFFIXES = {".html", ".htm"}

# Tags whose contents never render as page text
NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe",
                    "form", "meta", "link", "head"]


def is_html_path(path):
    return Path(path).suffix.lower() in HTML_SUFFIXES


def read_lines(path, encoding="utf-8"):
    """
    Yield the lines of a plain text file.
    File-level exceptions will propagate.
    """
    with open(path, "r", encoding=encoding, errors="ignore") as file:
        for line in file:
            yield line


def extract_visible_lines(content):
    """Return the visible text of an HTML document, one entry per line."""
    soup = BeautifulSoup(content, "lxml")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    text = soup.get_text(separator="\n")
    # Collapse unicode whitespace (e.g. &nbsp;) to plain spaces, one entry per line
    lines = (re.sub(r"\s+", " ", line).strip() for line in text.splitlines())
    return [line for line in lines if line]


def read_html_lines(path, encoding="utf-8"):
    """Yield the visible text lines of a saved HTML page."""
    with open(path, "r", encoding=encoding, errors="ignore") as file:
        content = file.read()
    yield from extract_visible_lines(content)


def write_lines(path, lines, encoding="utf-8"):
    """
    Write lines to path, each terminated by a newline.

    Returns:
        Number of characters written
    """
    text = "".join(f"{line}\n" for line in lines)
    with open(path, "w", encoding=encoding) as file:
        file.write(text)
    return len(text)
