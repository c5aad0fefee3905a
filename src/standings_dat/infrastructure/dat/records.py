"""Record tags and fixed fields of the .dat format."""

PROBLEMS_COUNT_TAG = "@problems"
TEAMS_COUNT_TAG = "@teams"
SUBMISSIONS_COUNT_TAG = "@submissions"

PROBLEM_TAG = "@p"
TEAM_TAG = "@t"
SUBMISSION_TAG = "@s"

# @p <letter>,<name>,<weight>,<flag>
PROBLEM_FIELDS = 4
PROBLEM_WEIGHT = 20
PROBLEM_FLAG = 0

# @t <id>,<flag>,<flag>,<name>
TEAM_FIELDS = 4
TEAM_FLAGS = "0,1"

# @s <team>,<letter>,<attempt>,<time>,<verdict>
SUBMISSION_FIELDS = 5


def split_record(line: str) -> tuple[str, str]:
    """Split a line into its tag and the rest after the first whitespace."""
    parts = line.split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]
