"""
Pydantic models for the fretboard system.

This module provides:
- Tuning: Named open-string tuning with a fret count
- TuningMetadata: Summary used when listing tunings
"""

from chuk_mcp_fretboard.models.tuning import Tuning, TuningMetadata

__all__ = [
    "Tuning",
    "TuningMetadata",
]
