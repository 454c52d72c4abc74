"""
Scale primitives - ScaleType and Scale.

Scales are stepwise interval patterns walked from a root note.
Scale degrees are 1-based positions within the resulting tones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_fretboard.constants import ErrorMessages

from .calculator import MusicCalculator
from .errors import UnknownScaleTypeError
from .note import Note
from .pitch import Interval


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative) and stop
    at the seventh degree, so a pattern of six steps yields seven tones.
    A major scale is: W W H W W W (2 2 1 2 2 2 semitones)

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Supported scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    MINOR: ClassVar[ScaleType]

    @property
    def steps(self) -> list[int]:
        """The pattern as plain semitone counts."""
        return [interval.semitones for interval in self.intervals]

    @classmethod
    def available(cls) -> dict[str, ScaleType]:
        """All supported scale types by name."""
        return {"major": cls.MAJOR, "minor": cls.MINOR}

    @classmethod
    def parse(cls, name: str | ScaleType) -> ScaleType:
        """
        Resolve a scale type from its name ('major', 'minor').

        Raises:
            UnknownScaleTypeError: If there is no such scale type
        """
        if isinstance(name, ScaleType):
            return name

        scale_types = cls.available()
        key = name.strip().lower()
        if key not in scale_types:
            raise UnknownScaleTypeError(
                ErrorMessages.UNKNOWN_SCALE_TYPE.format(
                    scale_type=name, choices=", ".join(scale_types)
                )
            )
        return scale_types[key]

    def __str__(self) -> str:
        return self.name or f"ScaleType({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper()}"
        return f"ScaleType({self.intervals!r})"


# Define scale types using interval shorthand
_M2 = Interval.MAJOR_SECOND  # whole step
_m2 = Interval.MINOR_SECOND  # half step

ScaleType.MAJOR = ScaleType((_M2, _M2, _m2, _M2, _M2, _M2), "major")
ScaleType.MINOR = ScaleType((_M2, _m2, _M2, _M2, _m2, _M2), "minor")


@dataclass(frozen=True)
class Scale:
    """
    The concrete tones of a scale from a root note.

    Tones are always spelled with flats (C minor is C D Eb F G Ab Bb).
    """

    scale_type: ScaleType
    tones: tuple[Note, ...]

    @classmethod
    def build(cls, root: Note, scale_type: str | ScaleType) -> Scale:
        """
        Walk a scale type's interval pattern up from a root note.

        Args:
            root: The first tone
            scale_type: A ScaleType or its name

        Returns:
            Scale with len(pattern) + 1 tones

        Raises:
            UnknownScaleTypeError: If the scale type name is unknown
            UnrecognizedPitchClassError: If the root is not a valid note
        """
        resolved = ScaleType.parse(scale_type)

        tones = [root]
        tone = root
        for interval in resolved.intervals:
            tone = MusicCalculator.transpose(tone, interval, use_flats=True)
            tones.append(tone)

        return cls(resolved, tuple(tones))

    @property
    def root(self) -> Note:
        return self.tones[0]

    @property
    def tone_names(self) -> list[str]:
        """Tone names without octaves, in scale order."""
        return [tone.name for tone in self.tones]

    def degree_of(self, name: str) -> int | None:
        """
        Get the 1-based scale degree of a note name.

        Matches the spelling exactly (Eb is found in C minor, D# is not).
        Returns None if the name is not in the scale.
        """
        for i, tone in enumerate(self.tones):
            if tone.name == name:
                return i + 1
        return None

    def __len__(self) -> int:
        return len(self.tones)

    def __str__(self) -> str:
        return "".join(f"{tone}, " for tone in self.tones)
