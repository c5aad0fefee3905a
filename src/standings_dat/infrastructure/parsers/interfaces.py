"""Protocol interfaces for parsers."""

from typing import Optional, Protocol

from standings_dat.domain.models import Contest


class HtmlNode(Protocol):
    """Query surface the standings parser needs from an HTML element."""

    def select_all(self, selector: str) -> list["HtmlNode"]:
        """Return all descendants matching a CSS selector, in document order."""
        ...

    def select_first(self, selector: str) -> Optional["HtmlNode"]:
        """Return the first descendant matching a CSS selector, if any."""
        ...

    def text(self) -> str:
        """Concatenated text of the node and its descendants."""
        ...

    def has_class(self, class_name: str) -> bool:
        """Check CSS class membership (ASCII case-insensitive)."""
        ...


class StandingsParserProtocol(Protocol):
    """Protocol for turning a standings page into a contest."""

    def parse(self, html: str) -> Contest:
        """Parse standings HTML."""
        ...


class DatEncoderProtocol(Protocol):
    """Protocol for writing .dat interchange text."""

    def encode(self, contest: Contest) -> str:
        """Serialize a contest."""
        ...


class DatDecoderProtocol(Protocol):
    """Protocol for reading .dat interchange text."""

    def decode(self, data: str) -> Contest:
        """Deserialize a contest."""
        ...
