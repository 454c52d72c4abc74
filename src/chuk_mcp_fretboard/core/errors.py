"""
Error taxonomy for the music theory engine.

Every error is also a ValueError, so callers that only care about bad input
can catch that. The ``code`` is what the MCP tools report back to clients.
"""


class MusicTheoryError(ValueError):
    """Base exception for all music theory errors."""

    def __init__(self, message: str, code: str = "MUSIC_THEORY_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnrecognizedPitchClassError(MusicTheoryError):
    """A note name that is not one of the sharp or flat spellings."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="UNRECOGNIZED_PITCH_CLASS")


class UnknownScaleTypeError(MusicTheoryError):
    """Scale type with no interval pattern."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="UNKNOWN_SCALE_TYPE")


class UnknownChordQualityError(MusicTheoryError):
    """Chord quality with no offset list."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="UNKNOWN_CHORD_QUALITY")


class InvalidInversionError(MusicTheoryError):
    """Triad inversion outside root/first/second."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_INVERSION")


class InvalidScaleDegreeError(MusicTheoryError):
    """Scale degree below 1."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_SCALE_DEGREE")


class IntervalSearchError(MusicTheoryError):
    """The stepwise interval search did not reach its target."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INTERVAL_SEARCH_FAILED")
