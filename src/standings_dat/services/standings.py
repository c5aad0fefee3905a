"""Standings computation from a contest's runs."""

from dataclasses import dataclass, field

from loguru import logger

from standings_dat.domain.models import Contest, StandingsRow, Verdict

PENALTY_PER_REJECTION = 20 * 60  # seconds


@dataclass
class _ProblemState:
    rejected: int = 0
    solved: bool = False


@dataclass
class _TeamState:
    name: str
    solved: int = 0
    penalty: int = 0
    problems: dict[int, _ProblemState] = field(default_factory=dict)


def compute_standings(contest: Contest) -> list[StandingsRow]:
    """
    Compute ranked standings rows.

    The first accepted run on a problem scores it, adding its time plus
    PENALTY_PER_REJECTION for every rejected run before it. Runs after that
    are ignored. Compilation errors cost nothing.

    Returns:
        Rows ordered by more solved, then lower penalty, then name
    """
    teams = {
        contestant.id: _TeamState(name=contestant.name) for contestant in contest.contestants
    }

    for run in contest.runs:
        team = teams.get(run.contestant_id)
        if team is None:
            logger.warning(f"Run references unknown contestant {run.contestant_id!r}, skipping")
            continue

        state = team.problems.setdefault(run.problem_id, _ProblemState())
        if state.solved:
            continue
        if run.verdict is Verdict.REJECTED:
            state.rejected += 1
        elif run.verdict is Verdict.ACCEPTED:
            state.solved = True
            team.solved += 1
            team.penalty += run.time + PENALTY_PER_REJECTION * state.rejected

    rows = [
        StandingsRow(name=team.name, solved=team.solved, penalty=team.penalty)
        for team in teams.values()
    ]
    return sorted(rows, key=lambda row: row.rank_key)
