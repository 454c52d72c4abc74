"""
Constants and enums for the fretboard system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Semitones per octave
OCTAVE = 12

# Fret count used when a tuning is given as a bare note list
DEFAULT_FRET_COUNT = 12

# Highest fret count a tool call or tuning file may ask for
MAX_FRET_COUNT = 48

# Upper bound (in semitones) for the stepwise interval search - three octaves
MAX_INTERVAL_SEARCH = 36

# Error note sentinel, rendered as "ERR-1"
ERROR_NOTE_NAME = "ERR"
ERROR_NOTE_OCTAVE = -1


class Accidental(str, Enum):
    """Accidental conventions for spelling pitch classes."""

    SHARP = "#"
    FLAT = "b"


# Transports supported by the server entry point
Transport = Literal["stdio", "http"]


class ErrorMessages:
    """Standardized error messages."""

    UNRECOGNIZED_PITCH_CLASS = "Unrecognized pitch class: '{name}'."
    INVALID_NOTE = "Invalid note: '{note}'. Expected format like 'C4', 'F#3' or 'Bb2'."
    UNKNOWN_SCALE_TYPE = "Unknown scale type: '{scale_type}'. Expected one of: {choices}."
    UNKNOWN_CHORD_QUALITY = "Unknown chord quality: '{quality}'. Expected one of: {choices}."
    INVALID_INVERSION = "Invalid inversion: {inversion}. Expected 0, 1 or 2."
    INVALID_SCALE_DEGREE = "Invalid scale degree: {degree}. Degrees start at 1."
    INTERVAL_SEARCH_FAILED = "No interval from {start} to {end} within {max_steps} semitones."
    INVALID_FRET_COUNT = "Invalid fret count: {frets}. Must be a non-negative integer."
    FRET_COUNT_TOO_LARGE = "Fret count {frets} exceeds the maximum of {max_frets}."
    EMPTY_TUNING = "A tuning needs at least one open string."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
