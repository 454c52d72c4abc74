#!/usr/bin/env python3
"""
Example: Map a scale onto a guitar fretboard.

This walks the whole engine - a scale is built by transposition, the
fretboard is built by transposition, and the scale map filters one by the
other. A chord progression from the same scale is printed at the end.

Usage:
    python examples/guitar_scale_map.py
"""

from chuk_mcp_fretboard.core import Chord, ChordProgression, MusicCalculator, Note, Scale
from chuk_mcp_fretboard.fretboard import Fretboard, ScaleMap
from chuk_mcp_fretboard.tunings import TuningLoader


def main() -> None:
    """Print a C minor scale map for a standard-tuned guitar."""
    tuning = TuningLoader().get_tuning("guitar-standard")
    if tuning is None:
        raise SystemExit("guitar-standard tuning not found in the library")

    fretboard = Fretboard.build(tuning.open_notes(), 12)
    print(f"Fretboard ({tuning.description}, 12 frets):")
    print(fretboard)

    c_minor = Scale.build(Note("C", 4), "minor")
    print(f"C minor: {c_minor}")

    scale_map = ScaleMap.build(fretboard, c_minor)
    print("Scale map (degree in parentheses):")
    print(scale_map.render())

    print("i - iv - v from C minor:")
    print(ChordProgression.from_scale(c_minor, [1, 4, 5]))

    print("C major in each inversion:")
    for inversion in range(3):
        print(f"  {inversion}: {Chord.build(Note('C', 4), 'major', inversion)}")

    low, high = Note("E", 2), Note("E", 4)
    print(f"\n{low} -> {high}: {MusicCalculator.get_interval(low, high)} semitones")


if __name__ == "__main__":
    main()
