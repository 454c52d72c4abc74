"""
Chord primitives - ChordQuality, Inversion, Chord, ChordProgression.

Chords are triads: a root plus interval offsets from that root.
Progressions pick their triads out of a scale by degree.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import ClassVar

from chuk_mcp_fretboard.constants import ErrorMessages

from .calculator import MusicCalculator
from .errors import InvalidInversionError, InvalidScaleDegreeError, UnknownChordQualityError
from .note import Note
from .pitch import Interval
from .scale import Scale


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its offsets from the root.

    Offsets are measured from the root, not stacked.
    A major triad is root + M3 + P5 (4 and 7 semitones).

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Supported chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]

    @classmethod
    def available(cls) -> dict[str, ChordQuality]:
        """All supported chord qualities by name."""
        return {"major": cls.MAJOR, "minor": cls.MINOR}

    @classmethod
    def parse(cls, name: str | ChordQuality) -> ChordQuality:
        """
        Resolve a chord quality from its name ('major', 'minor').

        Raises:
            UnknownChordQualityError: If there is no such quality
        """
        if isinstance(name, ChordQuality):
            return name

        qualities = cls.available()
        key = name.strip().lower()
        if key not in qualities:
            raise UnknownChordQualityError(
                ErrorMessages.UNKNOWN_CHORD_QUALITY.format(
                    quality=name, choices=", ".join(qualities)
                )
            )
        return qualities[key]

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper()}"
        return f"ChordQuality({self.intervals!r})"


ChordQuality.MAJOR = ChordQuality((Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH), "major")
ChordQuality.MINOR = ChordQuality((Interval.MINOR_THIRD, Interval.PERFECT_FIFTH), "minor")


class Inversion(IntEnum):
    """Which chord tone is in the bass."""

    ROOT = 0
    FIRST = 1  # third in the bass
    SECOND = 2  # fifth in the bass

    @classmethod
    def parse(cls, value: int | Inversion) -> Inversion:
        """
        Validate an inversion number.

        Raises:
            InvalidInversionError: If the value is not 0, 1 or 2
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidInversionError(
                ErrorMessages.INVALID_INVERSION.format(inversion=value)
            ) from None


@dataclass(frozen=True)
class Chord:
    """
    A voiced triad: exactly three notes, lowest first.

    In root position the notes are (root, third, fifth).
    """

    notes: tuple[Note, ...]

    def __post_init__(self) -> None:
        if len(self.notes) != 3:
            raise ValueError(f"A triad needs exactly 3 notes, got {len(self.notes)}")

    @classmethod
    def build(
        cls,
        root: Note,
        quality: str | ChordQuality = "major",
        inversion: int | Inversion = Inversion.ROOT,
    ) -> Chord:
        """
        Build a triad on a root note.

        The third and fifth keep the root's accidental style: a sharp root
        gives sharp chord tones, anything else gives flats.

        Args:
            root: Root note
            quality: ChordQuality or its name
            inversion: 0 (root position), 1 (first) or 2 (second)

        Returns:
            The voiced chord

        Raises:
            UnknownChordQualityError: If the quality name is unknown
            InvalidInversionError: If the inversion is not 0, 1 or 2
            UnrecognizedPitchClassError: If the root is not a valid note
        """
        resolved = ChordQuality.parse(quality)
        position = Inversion.parse(inversion)
        use_flats = not root.is_sharp

        third, fifth = (
            MusicCalculator.transpose(root, interval, use_flats) for interval in resolved.intervals
        )

        if position == Inversion.FIRST:
            return cls((_octave_down(third), _octave_down(fifth), root))
        if position == Inversion.SECOND:
            return cls((_octave_down(fifth), root, third))
        return cls((root, third, fifth))

    @property
    def bass(self) -> Note:
        return self.notes[0]

    def __str__(self) -> str:
        return "".join(f"{note}, " for note in self.notes)


def _octave_down(note: Note) -> Note:
    return replace(note, octave=note.octave - 1)


@dataclass(frozen=True)
class ChordProgression:
    """A sequence of triads taken from a scale."""

    chords: tuple[Chord, ...]

    @classmethod
    def from_scale(cls, scale: Scale, degrees: list[int]) -> ChordProgression:
        """
        Build a root-position triad on each requested scale degree.

        Stacks scale tones in thirds (degree n uses tones n, n+2 and n+4,
        wrapping around the scale). Tones are taken as they are, so the
        octaves of wrapped tones are not raised and chord quality follows
        the scale rather than being chosen per degree.

        Args:
            scale: Source scale
            degrees: 1-based scale degrees, e.g. [1, 4, 5]

        Raises:
            InvalidScaleDegreeError: If a degree is below 1
        """
        size = len(scale.tones)
        chords = []
        for degree in degrees:
            if degree < 1:
                raise InvalidScaleDegreeError(
                    ErrorMessages.INVALID_SCALE_DEGREE.format(degree=degree)
                )
            root = scale.tones[(degree - 1) % size]
            third = scale.tones[(degree + 1) % size]
            fifth = scale.tones[(degree + 3) % size]
            chords.append(Chord((root, third, fifth)))
        return cls(tuple(chords))

    def __len__(self) -> int:
        return len(self.chords)

    def __str__(self) -> str:
        return "".join(f"{chord}\n" for chord in self.chords)
