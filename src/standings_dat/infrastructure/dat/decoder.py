"""Reader for the TestSys .dat interchange format."""

from loguru import logger

from standings_dat.domain.exceptions import DatFormatError, MalformedField, UnknownProblemLabel
from standings_dat.domain.models import Contest, Contestant, Run, Verdict

from .records import (
    PROBLEM_FIELDS,
    PROBLEM_TAG,
    SUBMISSION_FIELDS,
    SUBMISSION_TAG,
    TEAM_FIELDS,
    TEAM_TAG,
    split_record,
)


class DatDecoder:
    """Parses .dat text back into a Contest."""

    def decode(self, data: str) -> Contest:
        """
        Parse .dat text.

        Only @p, @t and @s records are read; count lines such as @teams and
        any other tags are ignored. Team ids are kept as written in the file,
        problems get ids in letter order.

        Raises:
            MalformedField: record with too few or unparsable fields
            UnknownProblemLabel: submission for a letter with no @p record
        """
        try:
            records = list(self._iter_records(data))

            contestants = self._read_teams(records)
            problems = self._read_problems(records)

            letters = sorted(problems)
            problem_names = [problems[letter] for letter in letters]
            problem_ids = {letter: problem_id for problem_id, letter in enumerate(letters)}

            runs = self._read_submissions(records, problem_ids)

            contest = Contest(contestants=contestants, runs=runs, problem_names=problem_names)
            contest.sort_runs()

            logger.info(
                f"Decoded .dat: {len(contestants)} teams, "
                f"{len(problem_names)} problems, {len(runs)} submissions"
            )
            return contest

        except DatFormatError as e:
            logger.error(f"Failed to decode .dat data: {e}")
            raise

    def _iter_records(self, data: str):
        """Yield (line number, tag, body, line) for non-empty lines."""
        for line_number, line in enumerate(data.splitlines(), start=1):
            tag, body = split_record(line)
            if tag:
                yield line_number, tag, body, line

    def _read_teams(self, records) -> list[Contestant]:
        contestants = []
        for line_number, tag, body, line in records:
            if tag != TEAM_TAG:
                continue
            fields = self._read_fields(body, TEAM_FIELDS, TEAM_FIELDS, line, line_number)
            contestants.append(Contestant(id=fields[0], name=fields[3]))
        return contestants

    def _read_problems(self, records) -> dict[str, str]:
        problems = {}
        for line_number, tag, body, line in records:
            if tag != PROBLEM_TAG:
                continue
            fields = self._read_fields(body, PROBLEM_FIELDS, 2, line, line_number)
            problems[fields[0]] = fields[1]
        return problems

    def _read_submissions(self, records, problem_ids: dict[str, int]) -> list[Run]:
        runs = []
        for line_number, tag, body, line in records:
            if tag != SUBMISSION_TAG:
                continue
            fields = self._read_fields(
                body, SUBMISSION_FIELDS, SUBMISSION_FIELDS, line, line_number
            )

            label = fields[1]
            if label not in problem_ids:
                raise UnknownProblemLabel(label, line_number)

            attempt = self._read_int(fields[2], "attempt", line, line_number)
            if attempt < 1:
                raise MalformedField(line, line_number, "attempt must be 1-based")

            runs.append(
                Run(
                    contestant_id=fields[0],
                    problem_id=problem_ids[label],
                    verdict=self._read_verdict(fields[4]),
                    time=self._read_int(fields[3], "time", line, line_number),
                    attempt=attempt - 1,
                )
            )
        return runs

    @staticmethod
    def _read_fields(
        body: str, max_fields: int, required: int, line: str, line_number: int
    ) -> list[str]:
        """Split on commas into at most max_fields parts; the last part keeps its commas."""
        fields = body.split(",", max_fields - 1)
        if len(fields) < required:
            raise MalformedField(
                line, line_number, f"expected {required} fields, got {len(fields)}"
            )
        return fields

    @staticmethod
    def _read_verdict(value: str) -> Verdict:
        # TestSys may append the failed test number: "WA,5"
        return Verdict.from_code(value.split(",", 1)[0].strip())

    @staticmethod
    def _read_int(value: str, field_name: str, line: str, line_number: int) -> int:
        value = value.strip()
        if not value.isdecimal():
            raise MalformedField(line, line_number, f"{field_name} is not a number: {value!r}")
        return int(value)


def read_dat(data: str) -> Contest:
    """Parse .dat text with the default decoder."""
    return DatDecoder().decode(data)
