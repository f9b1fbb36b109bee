"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, prompting for any missing arguments,
and running the generator.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input a.txt --output a.html --count 50
    python launch.py --input page.html --html         # Count visible page text
    python launch.py --input page.html --no-html      # Count the raw markup as text
    python launch.py --config_file path               # Use custom config file
"""

from configparser import ConfigParser
from argparse import ArgumentParser, ArgumentTypeError

from utils.config import Config
from tagcloud import TagCloudGenerator


INVALID_COUNT_MESSAGE = "That is not a valid input, please input a valid number: "


def parse_count(text):
    """Return text as a non-negative integer, or None if it is not one."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def count_argument(text):
    value = parse_count(text)
    if value is None:
        raise ArgumentTypeError(f"invalid word count: {text!r}")
    return value


def prompt_count(read=input, write=print):
    """Ask for the number of words until a non-negative integer is given."""
    value = parse_count(read("Number of words: "))
    while value is None:
        write(INVALID_COUNT_MESSAGE)
        value = parse_count(read(""))
    return value


def main(config_file, input_path=None, output_path=None, count=None, html=None,
         read=input, write=print):
    """
    Generate a tag cloud, prompting for whatever was not supplied.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path: Text or HTML file to read
        output_path: HTML file to write
        count: Number of words to show
        html: Force HTML (True) or plain text (False) input; guessed if None

    Returns:
        The selected WordCount entries
    """
    # Load configuration
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)

    if input_path is None:
        input_path = read("Enter location and name of input file: ")
    if output_path is None:
        output_path = read("Enter name of output file: ")
    if count is None:
        count = prompt_count(read, write)

    generator = TagCloudGenerator(config)
    selection = generator.generate(input_path, output_path, count, html=html)
    write("All done")
    return selection


def cli(argv=None):
    parser = ArgumentParser(description="Generate an HTML tag cloud of the most frequent words in a file")
    parser.add_argument("--input", type=str, default=None,
                        help="Text (or HTML) file to read")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write")
    parser.add_argument("--count", type=count_argument, default=None,
                        help="Number of words to show")
    parser.add_argument("--html", action="store_true", default=None,
                        help="Treat the input as an HTML page (default: guess from suffix)")
    parser.add_argument("--no-html", dest="html", action="store_false", default=None,
                        help="Treat the input as plain text, even with an .html suffix")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args(argv)
    main(args.config_file, args.input, args.output, args.count, args.html)


if __name__ == "__main__":
    cli()
