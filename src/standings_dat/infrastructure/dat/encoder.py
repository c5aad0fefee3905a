"""Writer for the TestSys .dat interchange format."""

from loguru import logger

from standings_dat.domain.models import Contest, Contestant, Run, problem_letter

from .records import (
    PROBLEM_FLAG,
    PROBLEM_TAG,
    PROBLEM_WEIGHT,
    PROBLEMS_COUNT_TAG,
    SUBMISSION_TAG,
    SUBMISSIONS_COUNT_TAG,
    TEAM_FLAGS,
    TEAM_TAG,
    TEAMS_COUNT_TAG,
)

MAX_LETTER_PROBLEMS = 26


class DatEncoder:
    """Serializes a Contest into .dat text."""

    def encode(self, contest: Contest) -> str:
        """
        Serialize a contest.

        Teams are renumbered 0, 1, ... in contestant order; contestant ids
        themselves are not written.
        """
        if len(contest.problem_names) > MAX_LETTER_PROBLEMS:
            logger.warning(
                f"{len(contest.problem_names)} problems do not fit into letters A-Z, "
                "labels past Z are not letters"
            )

        lines = [
            f"{PROBLEMS_COUNT_TAG} {len(contest.problem_names)}",
            f"{TEAMS_COUNT_TAG} {len(contest.contestants)}",
            f"{SUBMISSIONS_COUNT_TAG} {len(contest.runs)}",
        ]
        lines.extend(self._write_problems(contest.problem_names))

        team_ids = self._assign_team_ids(contest.contestants)
        lines.extend(self._write_teams(contest.contestants, team_ids))
        lines.extend(self._write_runs(contest.runs, team_ids))

        logger.debug(
            f"Encoded {len(contest.problem_names)} problems, "
            f"{len(contest.contestants)} teams, {len(contest.runs)} submissions"
        )
        return "".join(f"{line}\n" for line in lines)

    def _assign_team_ids(self, contestants: list[Contestant]) -> dict[str, int]:
        return {contestant.id: team_id for team_id, contestant in enumerate(contestants)}

    def _write_problems(self, problem_names: list[str]) -> list[str]:
        return [
            f"{PROBLEM_TAG} {problem_letter(problem_id)},{name},{PROBLEM_WEIGHT},{PROBLEM_FLAG}"
            for problem_id, name in enumerate(problem_names)
        ]

    def _write_teams(self, contestants: list[Contestant], team_ids: dict[str, int]) -> list[str]:
        return [
            f"{TEAM_TAG} {team_ids[contestant.id]},{TEAM_FLAGS},{contestant.name}"
            for contestant in contestants
        ]

    def _write_runs(self, runs: list[Run], team_ids: dict[str, int]) -> list[str]:
        return [
            f"{SUBMISSION_TAG} {team_ids[run.contestant_id]},{problem_letter(run.problem_id)},"
            f"{run.attempt + 1},{run.time},{run.verdict.code}"
            for run in runs
        ]


def write_dat(contest: Contest) -> str:
    """Serialize a contest with the default encoder."""
    return DatEncoder().encode(contest)
