"""
config.py - Tag Cloud Configuration

Wraps a ConfigParser into plain attributes. Missing sections or keys
fall back to the defaults below, so an absent config.ini still works.
"""

# Font tiers map to CSS classes f<MIN_TIER> .. f<MAX_TIER>
MIN_TIER = 11
MAX_TIER = 48

DEFAULT_STYLESHEETS = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)


class Config(object):
    """
    Settings consumed by the tag cloud pipeline.

    Attributes:
        min_font: Smallest font tier
        max_font: Largest font tier
        stylesheets: Tuple of stylesheet hrefs linked from the document
        encoding: Text encoding of input and output files
        log_dir: Directory for log files
    """

    def __init__(self, config):
        self.min_font = config.getint("TAG CLOUD", "MINFONT", fallback=MIN_TIER)
        self.max_font = config.getint("TAG CLOUD", "MAXFONT", fallback=MAX_TIER)
        if self.min_font > self.max_font:
            raise ValueError(
                f"MINFONT {self.min_font} exceeds MAXFONT {self.max_font}")

        stylesheets = config.get("TAG CLOUD", "STYLESHEETS", fallback=None)
        if stylesheets is None:
            self.stylesheets = DEFAULT_STYLESHEETS
        else:
            self.stylesheets = tuple(
                href.strip() for href in stylesheets.split(",") if href.strip())

        self.encoding = config.get("LOCAL PROPERTIES", "ENCODING", fallback="utf-8").strip()
        self.log_dir = config.get("LOCAL PROPERTIES", "LOGDIR", fallback="Logs").strip()
