"""Domain exceptions for standings extraction and the .dat codec."""


class StandingsDatError(ValueError):
    """Base error for standings-dat."""

    pass


class ExtractionError(StandingsDatError):
    """Standings page does not have the expected structure."""

    pass


class MissingTable(ExtractionError):
    """No standings table found in the document."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Standings table not found (selector: {selector!r})")


class MissingHeaderRow(ExtractionError):
    """Standings table has no header row."""

    def __init__(self):
        super().__init__("Standings table has no header row")


class MissingBodySection(ExtractionError):
    """Standings table has no body section."""

    def __init__(self):
        super().__init__("Standings table has no body section")


class MalformedCell(ExtractionError):
    """Solved cell without a parsable solve time."""

    def __init__(self, contestant_id: str, problem_id: int):
        self.contestant_id = contestant_id
        self.problem_id = problem_id
        super().__init__(
            f"Solved cell has no parsable solve time "
            f"(contestant {contestant_id}, problem {problem_id})"
        )


class DatFormatError(StandingsDatError):
    """Invalid .dat interchange data."""

    pass


class UnknownProblemLabel(DatFormatError):
    """Submission references a problem letter missing from the problem table."""

    def __init__(self, label: str, line_number: int):
        self.label = label
        self.line_number = line_number
        super().__init__(f"Unknown problem label {label!r} on line {line_number}")


class MalformedField(DatFormatError):
    """Record has too few fields or a field that cannot be parsed."""

    def __init__(self, line: str, line_number: int, reason: str):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed record on line {line_number} ({reason}): {line!r}")


class RoundTripMismatch(StandingsDatError):
    """Standings differ after encoding and decoding a contest."""

    def __init__(self, before: list, after: list):
        self.before = before
        self.after = after
        super().__init__(
            f"Standings changed after .dat round trip: {len(before)} rows before, "
            f"{len(after)} rows after"
        )
