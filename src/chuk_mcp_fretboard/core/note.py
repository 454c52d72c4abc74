"""
Note - a spelled pitch class in a specific octave.

Octave numbers follow scientific pitch notation: they change between B and C,
so B3 is one semitone below C4.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from chuk_mcp_fretboard.constants import (
    ERROR_NOTE_NAME,
    ERROR_NOTE_OCTAVE,
    OCTAVE,
    Accidental,
    ErrorMessages,
)

from .errors import UnrecognizedPitchClassError
from .pitch import PitchClass, accidental_of, is_valid_name

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g])([#b]?)(-?\d+)\s*$")


@dataclass(frozen=True)
class Note:
    """
    A named pitch in an octave, e.g. C#4 or Bb2.

    scale_degree is 1-based and 0 when unassigned. It is only filled in
    when a note is matched against a scale (see ScaleMap).

    Immutable and hashable.
    """

    name: str
    octave: int
    scale_degree: int = 0

    def __post_init__(self) -> None:
        if self.is_error:
            return
        if not is_valid_name(self.name):
            raise UnrecognizedPitchClassError(
                ErrorMessages.UNRECOGNIZED_PITCH_CLASS.format(name=self.name)
            )

    @classmethod
    def error(cls) -> Note:
        """The error note sentinel, for callers that render a fallback."""
        return cls(ERROR_NOTE_NAME, ERROR_NOTE_OCTAVE)

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C4', 'f#3' or 'Bb-1'.

        Raises:
            UnrecognizedPitchClassError: If the text is not a note
        """
        match = _NOTE_PATTERN.match(text)
        if match is None:
            raise UnrecognizedPitchClassError(ErrorMessages.INVALID_NOTE.format(note=text))
        letter, accidental, octave = match.groups()
        return cls(letter.upper() + accidental, int(octave))

    @property
    def is_error(self) -> bool:
        return self.name == ERROR_NOTE_NAME and self.octave == ERROR_NOTE_OCTAVE

    @property
    def pitch_class(self) -> PitchClass:
        """The octave-independent pitch class (raises for the error note)."""
        return PitchClass.parse(self.name)

    @property
    def accidental(self) -> Accidental | None:
        return accidental_of(self.name)

    @property
    def is_sharp(self) -> bool:
        return self.accidental is Accidental.SHARP

    @property
    def is_flat(self) -> bool:
        return self.accidental is Accidental.FLAT

    @property
    def is_natural(self) -> bool:
        return self.accidental is None and not self.is_error

    @property
    def absolute(self) -> int:
        """Semitones above C0."""
        return self.octave * OCTAVE + self.pitch_class.value

    @property
    def midi_number(self) -> int:
        """MIDI note number. C4 = 60."""
        return self.pitch_class.to_midi(self.octave)

    def with_degree(self, degree: int) -> Note:
        """Copy of this note stamped with a scale degree."""
        return replace(self, scale_degree=degree)

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly representation."""
        return {
            "note": str(self),
            "name": self.name,
            "octave": self.octave,
            "scale_degree": self.scale_degree,
        }

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"
