"""Shared fixtures for standings-dat tests."""

from pathlib import Path

import pytest

RESOURCES = Path(__file__).parent / "resources"

LEADING_CELLS = 6


def _cell(attempts=None, time=None, classes="standings-table-result-cell"):
    parts = []
    if attempts is not None:
        parts.append(f'<span class="standings-table-result-cell-text">{attempts}</span>')
    if time is not None:
        parts.append(f'<span class="standings-table-result-cell-time">{time}</span>')
    return f'<td class="{classes}">{"".join(parts)}</td>'


def _row(name, cells):
    leading = [
        "<td>1</td>",
        f"<td><div>{name}</div></td>",
        "<td></td>",
        "<td></td>",
        "<td>0</td>",
        "<td>0</td>",
    ]
    return "<tr>" + "".join(leading + list(cells)) + "</tr>"


def _page(problems, rows, extra_rows=""):
    headers = "".join(f"<th>{name}</th>" for name in problems)
    return (
        "<html><body>"
        '<table class="standings-table">'
        f"<thead><tr><th>Rank</th><th></th><th>Team</th>{headers}</tr></thead>"
        f"<tbody>{''.join(rows)}{extra_rows}</tbody>"
        "</table></body></html>"
    )


@pytest.fixture
def read_resource():
    """Read a file from tests/resources."""

    def _read(name: str) -> str:
        return (RESOURCES / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def standings_html():
    """Builders for small standings pages: (cell, row, page)."""
    return _cell, _row, _page


@pytest.fixture
def scenario_html(standings_html):
    """Two teams, one problem: solved on the 2nd try at minute 10 / one rejected try."""
    cell, row, page = standings_html
    return page(
        ["Hello"],
        [
            row("First Team", [cell(attempts=2, time=10, classes="solved")]),
            row("Second Team", [cell(attempts=1)]),
        ],
    )
