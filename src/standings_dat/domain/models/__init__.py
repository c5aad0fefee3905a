from .contest import Contest, Contestant, Run, Verdict, problem_letter
from .standings import StandingsRow

__all__ = [
    "Contest",
    "Contestant",
    "Run",
    "StandingsRow",
    "Verdict",
    "problem_letter",
]
