"""
Core music primitives - the transposition engine and what it builds.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Note: A spelled pitch class in an octave
- MusicCalculator: Transposition, respelling and interval measurement
- ScaleType / Scale: Interval patterns and the tones they produce
- ChordQuality / Inversion / Chord: Triads and their voicings
- ChordProgression: Triads picked from a scale by degree
"""

from chuk_mcp_fretboard.core.calculator import MusicCalculator
from chuk_mcp_fretboard.core.chord import Chord, ChordProgression, ChordQuality, Inversion
from chuk_mcp_fretboard.core.errors import (
    IntervalSearchError,
    InvalidInversionError,
    InvalidScaleDegreeError,
    MusicTheoryError,
    UnknownChordQualityError,
    UnknownScaleTypeError,
    UnrecognizedPitchClassError,
)
from chuk_mcp_fretboard.core.note import Note
from chuk_mcp_fretboard.core.pitch import CHROMATIC_FLATS, CHROMATIC_SHARPS, Interval, PitchClass
from chuk_mcp_fretboard.core.scale import Scale, ScaleType

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "CHROMATIC_SHARPS",
    "CHROMATIC_FLATS",
    "Note",
    # Engine
    "MusicCalculator",
    # Scale
    "ScaleType",
    "Scale",
    # Chord
    "ChordQuality",
    "Inversion",
    "Chord",
    "ChordProgression",
    # Errors
    "MusicTheoryError",
    "UnrecognizedPitchClassError",
    "UnknownScaleTypeError",
    "UnknownChordQualityError",
    "InvalidInversionError",
    "InvalidScaleDegreeError",
    "IntervalSearchError",
]
