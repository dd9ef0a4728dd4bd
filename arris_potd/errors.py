"""Exception hierarchy for password generation."""


class PotdError(ValueError):
    """Base exception for all generation errors.

    ``value`` holds the offending input so callers can report it.
    """

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)


class InvalidSeed(PotdError):
    """Seed length outside 4-8 or seed contains non-printable characters."""


class InvalidDate(PotdError):
    """Malformed date string or a date that does not exist."""


class InvalidDateRange(PotdError):
    """Range start falls after range end."""

    def __init__(self, message: str, start=None, end=None):
        self.start = start
        self.end = end
        super().__init__(message, value=(start, end))
