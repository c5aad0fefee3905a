"""Parser for extracting a contest from a Kattis-style standings page."""

from loguru import logger

from standings_dat.domain.exceptions import (
    ExtractionError,
    MissingBodySection,
    MissingHeaderRow,
    MissingTable,
)
from standings_dat.domain.models import Contest, Contestant, Run

from .cell_utils import is_secondary_header, normalize_text
from .html_node import parse_document
from .interfaces import HtmlNode, StandingsParserProtocol
from .run_synthesizer import synthesize_cell_runs

TABLE_SELECTOR = "table.standings-table"

# rank, flag, name columns before the problem headers
HEADER_SKIP_COLUMNS = 3
# rank, flag, name, blank, solved, penalty cells before the problem cells
ROW_SKIP_COLUMNS = 6
NAME_COLUMN = 1


class StandingsPageParser(StandingsParserProtocol):
    """Builds a Contest from standings HTML."""

    def __init__(self, html_parser: str = "lxml"):
        """
        Initialize parser.

        Args:
            html_parser: BeautifulSoup tree builder name
        """
        self.html_parser = html_parser

    def parse(self, html: str) -> Contest:
        """
        Parse standings HTML into a contest.

        Solved/penalty columns on the page are ignored; they can be
        recomputed from the synthesized runs.

        Raises:
            MissingTable, MissingHeaderRow, MissingBodySection: page structure is wrong
            MalformedCell: a solved cell has no solve time
        """
        try:
            document = parse_document(html, self.html_parser)
            table = document.select_first(TABLE_SELECTOR)
            if table is None:
                raise MissingTable(TABLE_SELECTOR)

            problem_names = self._get_problem_names(table)
            logger.debug(f"Found {len(problem_names)} problems: {problem_names}")

            contestants: list[Contestant] = []
            runs: list[Run] = []
            for row in self._get_standings_rows(table, ROW_SKIP_COLUMNS + len(problem_names)):
                cells = row.select_all("td")
                if any(is_secondary_header(cell) for cell in cells):
                    continue

                # ids are local to this call: "0", "1", ...
                contestant = Contestant(
                    id=str(len(contestants)),
                    name=self._get_name(cells[NAME_COLUMN]),
                )
                contestants.append(contestant)
                runs.extend(
                    self._parse_runs_for_contestant(cells, contestant.id, len(problem_names))
                )

            contest = Contest(contestants=contestants, runs=runs, problem_names=problem_names)
            contest.sort_runs()

            logger.info(
                f"Parsed standings: {len(contestants)} contestants, "
                f"{len(problem_names)} problems, {len(runs)} runs"
            )
            return contest

        except ExtractionError as e:
            logger.error(f"Failed to parse standings page: {e}")
            raise

    def _get_problem_names(self, table: HtmlNode) -> list[str]:
        """Problem names from the header row, after the leading columns."""
        head = table.select_first("thead")
        row = head.select_first("tr") if head is not None else None
        if row is None:
            raise MissingHeaderRow()

        headers = row.select_all("th")[HEADER_SKIP_COLUMNS:]
        return [normalize_text(header) for header in headers]

    def _get_standings_rows(self, table: HtmlNode, expect_columns: int) -> list[HtmlNode]:
        """Body rows that look like contestant rows."""
        body = table.select_first("tbody")
        if body is None:
            raise MissingBodySection()

        rows = []
        for row in body.select_all("tr"):
            if is_secondary_header(row):
                continue
            if len(row.select_all("td")) < expect_columns:
                logger.debug(f"Skipping short row (expected at least {expect_columns} cells)")
                continue
            rows.append(row)
        return rows

    def _get_name(self, cell: HtmlNode) -> str:
        name_div = cell.select_first("div")
        # Fall back to the cell itself when the name is not wrapped
        return normalize_text(name_div or cell)

    def _parse_runs_for_contestant(
        self, cells: list[HtmlNode], contestant_id: str, problem_count: int
    ) -> list[Run]:
        runs = []
        problem_cells = cells[ROW_SKIP_COLUMNS : ROW_SKIP_COLUMNS + problem_count]
        for problem_id, cell in enumerate(problem_cells):
            runs.extend(synthesize_cell_runs(cell, contestant_id, problem_id))
        return runs
