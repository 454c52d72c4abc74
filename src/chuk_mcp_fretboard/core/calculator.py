"""
Transposition engine - the arithmetic everything else is built on.

Transposes spelled notes by signed intervals, respells them between sharps
and flats, and measures the signed distance between two notes.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from chuk_mcp_fretboard.constants import MAX_INTERVAL_SEARCH, OCTAVE, ErrorMessages

from .errors import IntervalSearchError
from .note import Note
from .pitch import Interval

logger = logging.getLogger(__name__)


class MusicCalculator:
    """
    Pure functions over notes.

    Stateless - all methods are static and never modify their arguments.
    """

    @staticmethod
    def transpose(note: Note, interval: int | Interval, use_flats: bool = False) -> Note:
        """
        Transpose a note by a signed number of semitones.

        The whole octaves are taken with floor division, so the remaining
        step is always an ascending move of 0-11 semitones. If that step
        carries the pitch past B it lands in the next octave (B3 + 1 = C4),
        which is the only octave correction ever applied.

        Args:
            note: The note to transpose
            interval: Semitones (any sign or size) or an Interval
            use_flats: Spell the result with flats instead of sharps

        Returns:
            A new note; the source note is untouched

        Raises:
            UnrecognizedPitchClassError: If the note name is not a valid spelling
        """
        pitch = note.pitch_class
        octave_shift, step = divmod(int(interval), OCTAVE)
        if pitch.value + step >= OCTAVE:
            octave_shift += 1

        return replace(
            note,
            name=pitch.transpose(step).spell(prefer_flats=use_flats),
            octave=note.octave + octave_shift,
        )

    @staticmethod
    def enharmonic_equivalent(note: Note) -> Note:
        """
        Respell a sharp as a flat or a flat as a sharp.

        Naturals are returned unchanged. Octave and scale degree are kept,
        so respelling twice gives back the original note.

        Raises:
            UnrecognizedPitchClassError: If the note name is not a valid spelling
        """
        pitch = note.pitch_class
        if note.is_natural:
            return note
        return replace(note, name=pitch.spell(prefer_flats=note.is_sharp))

    @staticmethod
    def get_interval(note1: Note, note2: Note, max_steps: int = MAX_INTERVAL_SEARCH) -> int:
        """
        Get the signed number of semitones from note1 to note2.

        Walks from note1 one semitone at a time until the spelled note and
        octave match note2, so the result is always consistent with
        ``transpose``. The target is respelled first when its accidental
        differs from the one the walk uses.

        Args:
            note1: Starting note
            note2: Target note
            max_steps: Give up after this many semitones

        Returns:
            Positive when note2 is higher, negative when lower, 0 when equal

        Raises:
            UnrecognizedPitchClassError: If either note name is not valid
            IntervalSearchError: If note2 is not reached within max_steps
        """
        start_pitch = note1.pitch_class
        target_pitch = note2.pitch_class
        use_flats = note1.is_flat or (note1.is_natural and note2.is_flat)

        target = note2
        if (use_flats and target.is_sharp) or (not use_flats and target.is_flat):
            target = MusicCalculator.enharmonic_equivalent(target)

        if note2.octave > note1.octave:
            direction = 1
        elif note2.octave == note1.octave and start_pitch < target_pitch:
            direction = 1
        else:
            direction = -1

        current = note1
        steps = 0
        while (current.name, current.octave) != (target.name, target.octave):
            if abs(steps) >= max_steps:
                raise IntervalSearchError(
                    ErrorMessages.INTERVAL_SEARCH_FAILED.format(
                        start=note1, end=note2, max_steps=max_steps
                    )
                )
            current = MusicCalculator.transpose(current, direction, use_flats)
            steps += direction

        logger.debug("Interval %s -> %s = %d semitones", note1, note2, steps)
        return steps
