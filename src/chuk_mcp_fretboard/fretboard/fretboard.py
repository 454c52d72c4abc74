"""
Fretboard model - strings of frets generated from a tuning.

Every fret is its open string transposed up by the fret number, spelled
with sharps. The fretboard is generated once and never changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.core import MusicCalculator, Note

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fret:
    """The note sounded at one fret position."""

    fret_number: int
    note: Note

    def __post_init__(self) -> None:
        if self.fret_number < 0:
            raise ValueError(f"Fret number must be non-negative, got {self.fret_number}")

    def to_dict(self) -> dict[str, object]:
        return {"fret": self.fret_number, **self.note.to_dict()}

    def __str__(self) -> str:
        return f"fret number: {self.fret_number}\n note: {self.note}\n"


@dataclass(frozen=True)
class InstrumentString:
    """An open string and its frets, 0 (open) through the last fret."""

    open_note: Note
    frets: tuple[Fret, ...]

    @classmethod
    def build(cls, open_note: Note, fret_count: int) -> InstrumentString:
        """
        Generate frets 0..fret_count for an open note.

        Raises:
            ValueError: If fret_count is negative
            UnrecognizedPitchClassError: If the open note is not valid
        """
        _check_fret_count(fret_count)
        frets = tuple(
            Fret(number, MusicCalculator.transpose(open_note, number, use_flats=False))
            for number in range(fret_count + 1)
        )
        return cls(open_note, frets)

    @property
    def name(self) -> str:
        """The open note name, e.g. 'E'."""
        return self.open_note.name

    @property
    def key(self) -> str:
        """Identifies the string on a fretboard, e.g. 'E2'."""
        return str(self.open_note)

    @property
    def fret_count(self) -> int:
        return len(self.frets) - 1

    def __getitem__(self, fret_number: int) -> Fret:
        return self.frets[fret_number]

    def __str__(self) -> str:
        listing = "".join(f"{fret.note}, " for fret in self.frets)
        return f"{self.name} string: {listing}\n"


@dataclass(frozen=True)
class Fretboard:
    """
    All strings of an instrument, in tuning order.

    Build with ``Fretboard.build(tuning, fret_count)`` where the tuning is
    the list of open-string notes.
    """

    strings: tuple[InstrumentString, ...]

    @classmethod
    def build(cls, tuning: Sequence[Note], fret_count: int) -> Fretboard:
        """
        Build one string per open note.

        Args:
            tuning: Open-string notes, usually low to high
            fret_count: Highest fret number on every string

        Raises:
            ValueError: If the tuning is empty or fret_count is negative
        """
        if not tuning:
            raise ValueError(ErrorMessages.EMPTY_TUNING)
        _check_fret_count(fret_count)

        strings = tuple(InstrumentString.build(note, fret_count) for note in tuning)
        logger.debug(
            "Built fretboard with %d strings and %d frets: %s",
            len(strings),
            fret_count,
            ", ".join(string.key for string in strings),
        )
        return cls(strings)

    @property
    def tuning(self) -> list[Note]:
        return [string.open_note for string in self.strings]

    @property
    def fret_count(self) -> int:
        return self.strings[0].fret_count

    def __iter__(self) -> Iterator[InstrumentString]:
        return iter(self.strings)

    def __len__(self) -> int:
        return len(self.strings)

    def __str__(self) -> str:
        return "".join(f"{string}\n" for string in self.strings)


def _check_fret_count(fret_count: int) -> None:
    if isinstance(fret_count, bool) or not isinstance(fret_count, int) or fret_count < 0:
        raise ValueError(ErrorMessages.INVALID_FRET_COUNT.format(frets=fret_count))
