"""
Fretboard system - fret positions per string and scale maps over them.
"""

from chuk_mcp_fretboard.fretboard.fretboard import Fret, Fretboard, InstrumentString
from chuk_mcp_fretboard.fretboard.scale_map import ScaleMap

__all__ = [
    "Fret",
    "Fretboard",
    "InstrumentString",
    "ScaleMap",
]
