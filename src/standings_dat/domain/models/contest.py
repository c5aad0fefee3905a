"""Contest model shared by the extractor and the .dat codec."""

from dataclasses import dataclass, field
from enum import Enum


class Verdict(Enum):
    """Outcome of a single run."""

    ACCEPTED = "OK"
    REJECTED = "RJ"
    COMPILATION_ERROR = "CE"

    @property
    def code(self) -> str:
        """Two-letter .dat code."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Verdict":
        """Map a .dat code to a verdict; unknown codes count as rejected."""
        try:
            return cls(code)
        except ValueError:
            return cls.REJECTED


@dataclass(frozen=True)
class Contestant:
    """A team or participant row in the standings."""

    id: str
    name: str


@dataclass(frozen=True)
class Run:
    """One submission of a contestant on a problem."""

    contestant_id: str
    problem_id: int
    verdict: Verdict
    time: int  # seconds since contest start
    attempt: int  # zero-based per (contestant, problem)


def problem_letter(problem_id: int) -> str:
    """Letter label of a zero-based problem index (0 -> A)."""
    return chr(ord("A") + problem_id)


@dataclass
class Contest:
    """Contestants, problems and time-ordered runs of one contest."""

    contestants: list[Contestant] = field(default_factory=list)
    runs: list[Run] = field(default_factory=list)
    problem_names: list[str] = field(default_factory=list)

    def contestant_by_id(self) -> dict[str, Contestant]:
        """Lookup table from contestant id to contestant."""
        return {contestant.id: contestant for contestant in self.contestants}

    def sort_runs(self) -> None:
        """Stable sort of runs by submission time."""
        self.runs.sort(key=lambda run: run.time)
