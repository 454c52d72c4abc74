"""
MCP tool implementations.

Tools are organized by domain:
- theory - Transposition, intervals, scales, chords, progressions
- fretboard - Tunings, fretboards and scale maps
"""

from chuk_mcp_fretboard.tools.fretboard import register_fretboard_tools
from chuk_mcp_fretboard.tools.theory import register_theory_tools

__all__ = [
    "register_fretboard_tools",
    "register_theory_tools",
]
