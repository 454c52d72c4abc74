"""
Pitch primitives - PitchClass, Interval and the chromatic spellings.

PitchClass is the single internal representation of the 12 chromatic
pitches (octave-independent, C = 0). Sharp and flat names are only a
spelling concern, resolved with ``PitchClass.spell``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from chuk_mcp_fretboard.constants import OCTAVE, Accidental, ErrorMessages

from .errors import UnrecognizedPitchClassError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# The chromatic rings as conventionally listed, starting from A.
# Index i names the same pitch in both tuples.
CHROMATIC_SHARPS: tuple[str, ...] = tuple(_SHARP_NAMES[9:] + _SHARP_NAMES[:9])
CHROMATIC_FLATS: tuple[str, ...] = tuple(_FLAT_NAMES[9:] + _FLAT_NAMES[:9])

# All 17 distinct spellings (naturals are shared by both conventions)
VALID_NAMES: frozenset[str] = frozenset(_SHARP_NAMES) | frozenset(_FLAT_NAMES)

class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Numbering starts at C because that is where octave numbers change:
    a transposition that carries the value past B wraps into the next octave.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % OCTAVE)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from an exact spelling like 'C', 'C#', 'Db'.

        Raises:
            UnrecognizedPitchClassError: If the name is not a sharp or flat spelling
        """
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        raise UnrecognizedPitchClassError(
            ErrorMessages.UNRECOGNIZED_PITCH_CLASS.format(name=name)
        )


def is_valid_name(name: str) -> bool:
    """Check whether a name is one of the sharp or flat spellings."""
    return name in VALID_NAMES


def accidental_of(name: str) -> Accidental | None:
    """Return the accidental a spelling carries, or None for naturals."""
    if len(name) > 1:
        if name[1] == Accidental.SHARP.value:
            return Accidental.SHARP
        if name[1] == Accidental.FLAT.value:
            return Accidental.FLAT
    return None


class Interval:
    """
    Distance between pitches in semitones.

    Scale patterns are stepwise interval sequences and chord qualities are
    interval offsets from the root. Usable wherever a semitone count is.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __int__(self) -> int:
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


# Initialize class constants after class is defined
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FIFTH = Interval(7)
