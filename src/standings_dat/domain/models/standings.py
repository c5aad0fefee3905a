"""Derived standings values."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StandingsRow:
    """Computed result of one contestant."""

    name: str
    solved: int
    penalty: int  # seconds

    @property
    def rank_key(self) -> tuple[int, int, str]:
        """More solved first, then lower penalty, then name."""
        return (-self.solved, self.penalty, self.name)
