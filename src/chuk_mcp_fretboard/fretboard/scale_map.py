"""
Scale map - where a scale's tones fall on a fretboard.

For every string, keeps the frets whose note name is one of the scale's
tone names and stamps each kept note with its scale degree. Names are
compared as spelled: the fretboard is spelled with sharps and scales with
flats, so only naturals and coinciding spellings match.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import replace

from chuk_mcp_fretboard.core import Scale

from .fretboard import Fret, Fretboard


class ScaleMap(Mapping[str, tuple[Fret, ...]]):
    """
    Frets in a scale, keyed by string (the open note, e.g. 'E2').

    Read-only mapping. Strings keep their fretboard order. Strings tuned to
    the same note share a key, and their frets are collected under it in
    string order.
    """

    def __init__(self, scale: Scale, rows: list[tuple[str, tuple[Fret, ...]]]):
        self.scale = scale
        self.rows = rows
        self._frets: dict[str, tuple[Fret, ...]] = {}
        for key, frets in rows:
            self._frets[key] = self._frets.get(key, ()) + frets

    @classmethod
    def build(cls, fretboard: Fretboard, scale: Scale) -> ScaleMap:
        """
        Filter a fretboard down to the frets in a scale.

        Args:
            fretboard: The fretboard to search
            scale: The scale whose tones to keep

        Returns:
            ScaleMap with one entry per distinct open string (possibly empty)
        """
        tone_names = set(scale.tone_names)
        rows: list[tuple[str, tuple[Fret, ...]]] = []

        for string in fretboard:
            kept = []
            for fret in string.frets:
                if fret.note.name in tone_names:
                    degree = scale.degree_of(fret.note.name) or 0
                    kept.append(replace(fret, note=fret.note.with_degree(degree)))
            rows.append((string.key, tuple(kept)))

        return cls(scale, rows)

    def fret_numbers(self, key: str) -> list[int]:
        """Fret numbers in the scale under one key."""
        return [fret.fret_number for fret in self._frets[key]]

    def render(self) -> str:
        """Text listing, one line per string: 'E2 string: F2(4) @fret 1, ...'."""
        output = ""
        for key, frets in self.rows:
            output += f"\n{key} string: "
            for fret in frets:
                output += f"{fret.note}({fret.note.scale_degree}) @fret {fret.fret_number}, "
        return output + "\n"

    def __getitem__(self, key: str) -> tuple[Fret, ...]:
        return self._frets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._frets)

    def __len__(self) -> int:
        return len(self._frets)

    def __repr__(self) -> str:
        root = self.scale.root
        return f"ScaleMap({root}, {self.scale.scale_type!r}, strings={list(self._frets)})"
