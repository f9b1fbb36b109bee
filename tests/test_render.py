from bs4 import BeautifulSoup

from tagcloud.ranking import WordCount
from tagcloud.render import DEFAULT_STYLESHEETS, render_document, render_footer, render_word


def parse(lines):
    return BeautifulSoup("\n".join(lines), "lxml")


def test_header_title_and_stylesheets():
    soup = parse(render_document("notes.txt", 5, []))
    assert soup.title.string == "Top 5 words in notes.txt"
    assert soup.h2.string == "Top 5 words in notes.txt"
    assert [link["href"] for link in soup.find_all("link")] == list(DEFAULT_STYLESHEETS)


def test_one_span_per_word_in_selection_order():
    selection = [WordCount("cat", 2), WordCount("the", 3)]
    spans = parse(render_document("in.txt", 2, selection)).find_all("span")
    assert [span.string for span in spans] == ["cat", "the"]
    assert [span["title"] for span in spans] == ["count: 2", "count: 3"]
    assert [span["class"] for span in spans] == [["f11"], ["f48"]]


def test_uniform_counts_share_a_tier():
    selection = [WordCount(word, 1) for word in "abcd"]
    spans = parse(render_document("in.txt", 4, selection)).find_all("span")
    assert len({span["class"][0] for span in spans}) == 1


def test_empty_selection_is_still_a_document():
    lines = render_document("in.txt", 0, [])
    assert lines[0] == "<html>"
    assert lines[-4:] == render_footer()
    assert parse(lines).find("p", class_="cbox").find_all("span") == []


def test_render_word_markup():
    assert render_word(WordCount("mat", 7), 30) == (
        "            <span style=\"cursor:default\" class=\"f30\" title=\"count: 7\">mat</span>")


def test_custom_stylesheets_and_tiers():
    selection = [WordCount("a", 1), WordCount("b", 2)]
    soup = parse(render_document("x", 2, selection, stylesheets=("cloud.css",),
                                 min_tier=1, max_tier=3))
    assert [link["href"] for link in soup.find_all("link")] == ["cloud.css"]
    assert [span["class"][0] for span in soup.find_all("span")] == ["f1", "f3"]
