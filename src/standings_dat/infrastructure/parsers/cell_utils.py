"""Helpers for reading standings table cells."""

from typing import Optional

from .interfaces import HtmlNode

SECONDARY_HEADER_CLASS = "table2-header"
SOLVED_CLASSES = ("solved", "first")


def first_numeric_token(node: HtmlNode) -> Optional[int]:
    """
    Parse the first whitespace-delimited token of the node text.

    Returns None when there is no token or it is not a non-negative integer,
    e.g. "3 tries" -> 3, "--" -> None.
    """
    tokens = node.text().split()
    if not tokens or not tokens[0].isdecimal():
        return None
    return int(tokens[0])


def normalize_text(node: HtmlNode) -> str:
    """Node text with whitespace runs collapsed to single spaces."""
    return " ".join(node.text().split())


def is_secondary_header(node: HtmlNode) -> bool:
    return node.has_class(SECONDARY_HEADER_CLASS)


def is_solved(node: HtmlNode) -> bool:
    # "first" marks the first team to solve the problem
    return any(node.has_class(cls) for cls in SOLVED_CLASSES)
