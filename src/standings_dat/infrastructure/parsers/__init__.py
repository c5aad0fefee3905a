"""Parsers for extracting contests from standings pages."""

from .html_node import SoupNode, parse_document
from .interfaces import (
    DatDecoderProtocol,
    DatEncoderProtocol,
    HtmlNode,
    StandingsParserProtocol,
)
from .run_synthesizer import synthesize_cell_runs, synthesize_runs
from .standings_page_parser import StandingsPageParser

__all__ = [
    "DatDecoderProtocol",
    "DatEncoderProtocol",
    "HtmlNode",
    "SoupNode",
    "StandingsPageParser",
    "StandingsParserProtocol",
    "parse_document",
    "synthesize_cell_runs",
    "synthesize_runs",
]
