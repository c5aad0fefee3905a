"""Reconstruct individual runs from an aggregated standings cell."""

from typing import Optional

from loguru import logger

from standings_dat.domain.exceptions import MalformedCell
from standings_dat.domain.models import Run, Verdict

from .cell_utils import first_numeric_token, is_solved
from .interfaces import HtmlNode

ATTEMPTS_SELECTOR = ".standings-table-result-cell-text"
TIME_SELECTOR = ".standings-table-result-cell-time"

# Nominal time of an unsolved cell (contest length placeholder)
UNSOLVED_MINUTES = 300
# Rejected attempts are placed this many minutes before the nominal time
REJECTED_OFFSET_MINUTES = 5


def synthesize_runs(
    contestant_id: str,
    problem_id: int,
    attempts: int,
    solved: bool,
    solve_minutes: Optional[int] = None,
) -> list[Run]:
    """
    Build the runs behind one cell.

    The page only keeps aggregates, so timestamps are imputed: the last
    attempt lands on the nominal time (the solve time, or UNSOLVED_MINUTES
    for unsolved cells) and is accepted only if the cell is solved. Every
    earlier attempt is rejected REJECTED_OFFSET_MINUTES before the nominal
    time, the same offset for all of them.

    Args:
        contestant_id: Owner of the runs
        problem_id: Zero-based problem index
        attempts: Number of submissions shown in the cell
        solved: Whether the cell is marked solved
        solve_minutes: Solve time in minutes, required when solved

    Returns:
        Exactly `attempts` runs with attempt numbers 0..attempts-1
    """
    if solved and solve_minutes is None:
        raise MalformedCell(contestant_id, problem_id)

    nominal = solve_minutes if solved else UNSOLVED_MINUTES
    rejected_minutes = max(nominal - REJECTED_OFFSET_MINUTES, 0)

    runs = []
    for attempt in range(attempts):
        last = attempt == attempts - 1
        verdict = Verdict.ACCEPTED if solved and last else Verdict.REJECTED
        minutes = nominal if last else rejected_minutes
        runs.append(
            Run(
                contestant_id=contestant_id,
                problem_id=problem_id,
                verdict=verdict,
                time=minutes * 60,
                attempt=attempt,
            )
        )
    return runs


def synthesize_cell_runs(cell: HtmlNode, contestant_id: str, problem_id: int) -> list[Run]:
    """Read attempts, solved marker and solve time from a cell and build its runs."""
    solved = is_solved(cell)
    attempts = _get_attempts(cell)

    solve_minutes = None
    if solved:
        solve_minutes = _get_solve_minutes(cell)
        if attempts == 0:
            logger.warning(
                f"Solved cell with zero attempts (contestant {contestant_id}, problem {problem_id})"
            )

    return synthesize_runs(contestant_id, problem_id, attempts, solved, solve_minutes)


def _get_attempts(cell: HtmlNode) -> int:
    """Attempts count of a cell; missing or unparsable counts as 0."""
    span = cell.select_first(ATTEMPTS_SELECTOR)
    if span is None:
        return 0
    attempts = first_numeric_token(span)
    return attempts if attempts is not None else 0


def _get_solve_minutes(cell: HtmlNode) -> Optional[int]:
    span = cell.select_first(TIME_SELECTOR)
    if span is None:
        return None
    return first_numeric_token(span)
