"""
tagcloud/__init__.py - Tag Cloud Pipeline Orchestrator

Coordinates the tag cloud generator by:
- Reading the input document line by line
- Tokenizing and counting words
- Selecting the N most frequent words
- Rendering and writing the HTML document

Key role: High-level coordinator that ties the pipeline stages together
"""

from utils import get_logger
from tagcloud.counter import compute_word_frequencies, total_occurrences
from tagcloud.fonts import MIN_TIER, MAX_TIER
from tagcloud.ranking import select_top_words
from tagcloud.render import DEFAULT_STYLESHEETS, render_document
from tagcloud.source import is_html_path, read_html_lines, read_lines, write_lines
from tagcloud.tokenizer import tokenize_lines


def build_tag_cloud(lines, source_name, n, stylesheets=DEFAULT_STYLESHEETS,
                    min_tier=MIN_TIER, max_tier=MAX_TIER):
    """
    Run the whole pipeline on an iterable of lines.

    Returns:
        The rendered document as a list of lines
    """
    frequencies = compute_word_frequencies(tokenize_lines(lines))
    selection = select_top_words(frequencies, n)
    return render_document(source_name, n, selection, stylesheets,
                           min_tier, max_tier)


class TagCloudGenerator(object):
    """
    Single-pass tag cloud generator.

    Reads one input file to completion, builds the cloud, and writes
    one output file. Every stage runs sequentially.
    """

    def __init__(self, config, reader=None, writer=write_lines):
        """
        Initialize the generator.

        Args:
            config: Configuration object (fonts, stylesheets, encoding, log_dir)
            reader: Callable (path, encoding) -> lines; chosen per file if None
            writer: Callable (path, lines, encoding) -> characters written
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD", log_dir=config.log_dir)
        self.reader = reader
        self.writer = writer

    def _reader_for(self, input_path, html):
        if self.reader is not None:
            return self.reader
        if html is None:
            html = is_html_path(input_path)
        return read_html_lines if html else read_lines

    def generate(self, input_path, output_path, n, html=None):
        """
        Build the tag cloud for input_path and write it to output_path.

        Args:
            input_path: File to read; also shown in the document title
            output_path: File to write the HTML document to
            n: Number of words to show
            html: Treat the input as an HTML page; guessed from the suffix if None

        Returns:
            The selected WordCount entries, alphabetically ordered
        """
        reader = self._reader_for(input_path, html)
        lines = list(reader(input_path, self.config.encoding))
        self.logger.info(f"Read {len(lines)} lines from {input_path}.")

        frequencies = compute_word_frequencies(tokenize_lines(lines))
        self.logger.info(
            f"Counted {total_occurrences(frequencies)} words, "
            f"{len(frequencies)} distinct.")

        selection = select_top_words(frequencies, n)
        self.logger.info(f"Selected {len(selection)} of the top {n} words.")
        for entry in selection:
            self.logger.debug(f"{entry.word}\t{entry.count}")

        document = render_document(
            str(input_path), n, selection, self.config.stylesheets,
            self.config.min_font, self.config.max_font)
        written = self.writer(output_path, document, self.config.encoding)
        self.logger.info(f"Wrote {written} characters to {output_path}.")
        return selection
