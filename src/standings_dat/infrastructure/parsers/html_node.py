"""BeautifulSoup implementation of the HtmlNode interface."""

from typing import Optional

from bs4 import BeautifulSoup, Tag


class SoupNode:
    """HtmlNode backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def select_all(self, selector: str) -> list["SoupNode"]:
        return [SoupNode(tag) for tag in self.tag.select(selector)]

    def select_first(self, selector: str) -> Optional["SoupNode"]:
        tag = self.tag.select_one(selector)
        return SoupNode(tag) if tag is not None else None

    def text(self) -> str:
        return self.tag.get_text()

    def has_class(self, class_name: str) -> bool:
        classes = self.tag.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        wanted = class_name.lower()
        return any(cls.lower() == wanted for cls in classes)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag.name}>)"


def parse_document(html: str, parser: str = "lxml") -> SoupNode:
    """Parse an HTML document and return its root node."""
    return SoupNode(BeautifulSoup(html, parser))
