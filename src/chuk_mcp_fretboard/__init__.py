"""
CHUK Fretboard - music theory arithmetic for fretted instruments.
"""

__version__ = "0.1.0"
