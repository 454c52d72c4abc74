"""
Tuning models - named open-string tunings for fretted instruments.

Tunings are configuration: they live as YAML files in the built-in library
or in a project's tunings directory.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_fretboard.constants import DEFAULT_FRET_COUNT, MAX_FRET_COUNT
from chuk_mcp_fretboard.core import Note


class Tuning(BaseModel):
    """
    A named tuning: open-string notes plus the instrument's fret count.

    Strings are listed in the order they appear on the fretboard,
    normally lowest pitch first.
    """

    name: str = Field(..., description="Tuning name (e.g., 'guitar-standard')")
    description: str = Field("", description="Human-readable description")
    instrument: str = Field("guitar", description="Instrument family")
    strings: list[str] = Field(
        ..., min_length=1, description="Open-string notes, e.g. ['E2', 'A2']"
    )
    frets: int = Field(
        DEFAULT_FRET_COUNT, ge=0, le=MAX_FRET_COUNT, description="Number of frets per string"
    )

    model_config = {"frozen": True}

    @field_validator("strings")
    @classmethod
    def validate_strings(cls, v: list[str]) -> list[str]:
        """Ensure every open string is a valid note, normalized to 'C#4' form."""
        return [str(Note.parse(note)) for note in v]

    def open_notes(self) -> list[Note]:
        """The open strings as notes."""
        return [Note.parse(note) for note in self.strings]


class TuningMetadata(BaseModel):
    """Lightweight metadata for listing tunings."""

    name: str
    description: str
    instrument: str
    string_count: int
    frets: int

    model_config = {"frozen": True}

    @classmethod
    def from_tuning(cls, tuning: Tuning) -> TuningMetadata:
        """Create metadata from a tuning."""
        return cls(
            name=tuning.name,
            description=tuning.description,
            instrument=tuning.instrument,
            string_count=len(tuning.strings),
            frets=tuning.frets,
        )
