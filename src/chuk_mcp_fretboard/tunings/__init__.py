"""
Tuning system - named open-string tunings loaded from YAML.

Built-in tunings ship in the library directory; a project can add its
own or override them by name.
"""

from chuk_mcp_fretboard.tunings.loader import TuningLoader

__all__ = [
    "TuningLoader",
]
