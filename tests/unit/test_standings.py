"""Unit tests for standings computation."""

from standings_dat.domain.models import Contest, Contestant, Run, StandingsRow, Verdict
from standings_dat.services.standings import PENALTY_PER_REJECTION, compute_standings


def _run(contestant_id, problem_id, verdict, minutes, attempt=0):
    return Run(
        contestant_id=contestant_id,
        problem_id=problem_id,
        verdict=verdict,
        time=minutes * 60,
        attempt=attempt,
    )


def test_penalty_counts_rejections_before_accept():
    contest = Contest(
        contestants=[Contestant(id="a", name="Alpha")],
        runs=[
            _run("a", 0, Verdict.REJECTED, 5),
            _run("a", 0, Verdict.REJECTED, 7, 1),
            _run("a", 0, Verdict.ACCEPTED, 10, 2),
        ],
        problem_names=["P"],
    )

    assert compute_standings(contest) == [
        StandingsRow(name="Alpha", solved=1, penalty=600 + 2 * PENALTY_PER_REJECTION)
    ]


def test_runs_after_accept_are_ignored():
    contest = Contest(
        contestants=[Contestant(id="a", name="Alpha")],
        runs=[
            _run("a", 0, Verdict.ACCEPTED, 10),
            _run("a", 0, Verdict.REJECTED, 20, 1),
            _run("a", 0, Verdict.ACCEPTED, 30, 2),
        ],
        problem_names=["P"],
    )

    assert compute_standings(contest) == [StandingsRow(name="Alpha", solved=1, penalty=600)]


def test_compilation_error_is_free():
    contest = Contest(
        contestants=[Contestant(id="a", name="Alpha")],
        runs=[
            _run("a", 0, Verdict.COMPILATION_ERROR, 1),
            _run("a", 0, Verdict.ACCEPTED, 2, 1),
        ],
        problem_names=["P"],
    )

    assert compute_standings(contest)[0].penalty == 120


def test_unsolved_rejections_cost_nothing():
    contest = Contest(
        contestants=[Contestant(id="a", name="Alpha")],
        runs=[_run("a", 0, Verdict.REJECTED, 1), _run("a", 1, Verdict.ACCEPTED, 2)],
        problem_names=["P", "Q"],
    )

    assert compute_standings(contest) == [StandingsRow(name="Alpha", solved=1, penalty=120)]


def test_ranking_order():
    contest = Contest(
        contestants=[
            Contestant(id="1", name="Zeta"),
            Contestant(id="2", name="Beta"),
            Contestant(id="3", name="Alpha"),
            Contestant(id="4", name="Idle"),
        ],
        runs=[
            _run("1", 0, Verdict.ACCEPTED, 50),
            _run("2", 0, Verdict.ACCEPTED, 30),
            _run("3", 0, Verdict.ACCEPTED, 30),
            _run("1", 1, Verdict.ACCEPTED, 90),
        ],
        problem_names=["P", "Q"],
    )

    assert [row.name for row in compute_standings(contest)] == ["Zeta", "Alpha", "Beta", "Idle"]


def test_unknown_contestant_is_skipped():
    contest = Contest(
        contestants=[Contestant(id="a", name="Alpha")],
        runs=[_run("ghost", 0, Verdict.ACCEPTED, 1)],
        problem_names=["P"],
    )

    assert compute_standings(contest) == [StandingsRow(name="Alpha", solved=0, penalty=0)]
