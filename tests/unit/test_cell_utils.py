"""Unit tests for cell helpers and the BeautifulSoup node wrapper."""

import pytest

from standings_dat.infrastructure.parsers import parse_document
from standings_dat.infrastructure.parsers.cell_utils import (
    first_numeric_token,
    is_secondary_header,
    is_solved,
    normalize_text,
)


def _node(html: str, selector: str):
    node = parse_document(html).select_first(selector)
    assert node is not None
    return node


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 tries", 3),
        ("  12\n min", 12),
        ("0", 0),
        ("--", None),
        ("", None),
        ("   ", None),
        ("-4 tries", None),
        ("tries 3", None),
        ("2+ tries", None),
    ],
)
def test_first_numeric_token(text, expected):
    node = _node(f"<span>{text}</span>", "span")
    assert first_numeric_token(node) == expected


def test_first_numeric_token_reads_nested_text():
    node = _node("<div><b>7</b> <i>tries</i></div>", "div")
    assert first_numeric_token(node) == 7


@pytest.mark.parametrize(
    "classes, expected",
    [
        ("solved", True),
        ("first", True),
        ("standings-table-result-cell first", True),
        ("SOLVED", True),
        ("attempted", False),
        ("solved-not", False),
        ("", False),
    ],
)
def test_is_solved(classes, expected):
    node = _node(f'<table><tr><td class="{classes}">x</td></tr></table>', "td")
    assert is_solved(node) is expected


def test_is_solved_without_class_attribute():
    node = _node("<table><tr><td>x</td></tr></table>", "td")
    assert not is_solved(node)


def test_is_secondary_header():
    header_row = _node('<table><tr class="table2-header"><td></td></tr></table>', "tr")
    assert is_secondary_header(header_row)
    assert not is_secondary_header(_node("<table><tr><td></td></tr></table>", "tr"))


def test_normalize_text_collapses_whitespace():
    node = _node("<div>\n  Team \n\t <b>Alpha</b>  </div>", "div")
    assert normalize_text(node) == "Team Alpha"


class TestSoupNode:
    """Test the HtmlNode implementation."""

    @pytest.fixture
    def document(self):
        return parse_document(
            "<ul class='items'><li class='a'>one</li><li>two</li><li class='a'>three</li></ul>"
        )

    def test_select_all_in_document_order(self, document):
        assert [node.text() for node in document.select_all("li")] == ["one", "two", "three"]

    def test_select_all_no_match(self, document):
        assert document.select_all("table") == []

    def test_select_first(self, document):
        node = document.select_first("li.a")
        assert node is not None
        assert node.text() == "one"

    def test_select_first_no_match(self, document):
        assert document.select_first("td") is None

    def test_select_within_node(self, document):
        items = document.select_first("ul")
        assert len(items.select_all(".a")) == 2

    def test_text_concatenates_descendants(self, document):
        assert document.select_first("ul").text() == "onetwothree"
