"""
render.py - HTML Tag Cloud Renderer

Produces the lines of the HTML document:
- Header with title and stylesheet links
- One span per selected word (font tier class + count tooltip)
- Footer closing the document

Word text is emitted as-is. The tokenizer already strips the characters
that would break the markup (<, >, &, quotes), so no escaping is done.
"""

from utils.config import DEFAULT_STYLESHEETS, MIN_TIER, MAX_TIER
from tagcloud.fonts import font_tier, font_class
from tagcloud.ranking import count_range


def render_header(source_name, n, stylesheets=DEFAULT_STYLESHEETS):
    title = f"Top {n} words in {source_name}"
    lines = [
        "<html>",
        "   <head>",
        f"      <title>{title}</title>",
    ]
    for href in stylesheets:
        lines.append(f"      <link href=\"{href}\" rel=\"stylesheet\" type=\"text/css\">")
    lines += [
        "   </head>",
        "   <body>",
        f"      <h2>{title}</h2>",
        "      <hr>",
        "      <div class=\"cdiv\">",
        "         <p class=\"cbox\">",
    ]
    return lines


def render_word(entry, tier):
    return (f"            <span style=\"cursor:default\" class=\"{font_class(tier)}\" "
            f"title=\"count: {entry.count}\">{entry.word}</span>")


def render_footer():
    return [
        "         </p>",
        "      </div>",
        "   </body>",
        "</html>",
    ]


def render_document(source_name, n, selection, stylesheets=DEFAULT_STYLESHEETS,
                    min_tier=MIN_TIER, max_tier=MAX_TIER):
    """
    Render a complete tag cloud document.

    Args:
        source_name: Input name shown in the title, used verbatim
        n: Requested number of words, shown in the title
        selection: WordCount entries, already in display order
        stylesheets: hrefs of the stylesheets defining the f<tier> classes
        min_tier: Smallest font tier
        max_tier: Largest font tier

    Returns:
        List of lines (without line terminators)
    """
    smallest, largest = count_range(selection)
    lines = render_header(source_name, n, stylesheets)
    for entry in selection:
        tier = font_tier(entry.count, smallest, largest, min_tier, max_tier)
        lines.append(render_word(entry, tier))
    lines += render_footer()
    return lines
