"""
Theory tools - MCP tools over the transposition engine.

Tools for transposing and respelling notes, measuring intervals, and
building scales, chords and progressions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.core import (
    Chord,
    ChordProgression,
    MusicCalculator,
    MusicTheoryError,
    Note,
    Scale,
)
from chuk_mcp_fretboard.tools.common import error_response, success_response

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose(note: str, interval: int, use_flats: bool = False) -> str:
        """
        Transpose a note by a number of semitones.

        Args:
            note: Note with octave (e.g., 'C4', 'F#3', 'Bb2')
            interval: Semitones to move, negative to go down
            use_flats: Spell the result with flats instead of sharps

        Returns:
            JSON string with the transposed note

        Example:
            music_transpose(note="B3", interval=1)
        """
        try:
            source = Note.parse(note)
            result = MusicCalculator.transpose(source, interval, use_flats)
            return success_response(
                source=str(source), interval=interval, result=result.to_dict()
            )
        except MusicTheoryError as e:
            logger.exception("Failed to transpose %s", note)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_transpose")
            return error_response(e)

    tools["music_transpose"] = music_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_notes(
        notes: list[str], interval: int, use_flats: bool = False
    ) -> str:
        """
        Transpose a list of notes by the same interval.

        Notes that cannot be parsed are reported as 'ERR-1' in place, so the
        result lines up with the input.

        Args:
            notes: Notes with octaves (e.g., ['E2', 'A2', 'D3'])
            interval: Semitones to move, negative to go down
            use_flats: Spell the results with flats instead of sharps

        Returns:
            JSON string with the transposed notes and any failures

        Example:
            music_transpose_notes(notes=["C4", "E4", "G4"], interval=-12)
        """
        results: list[str] = []
        failures: list[dict[str, str]] = []
        for text in notes:
            try:
                transposed = MusicCalculator.transpose(Note.parse(text), interval, use_flats)
            except MusicTheoryError as e:
                logger.warning("Could not transpose %r: %s", text, e)
                transposed = Note.error()
                failures.append({"note": text, "code": e.code, "message": str(e)})
            except Exception as e:
                logger.exception("Unexpected error transposing %r", text)
                transposed = Note.error()
                failures.append({"note": str(text), "code": "ERROR", "message": str(e)})
            results.append(str(transposed))

        return success_response(interval=interval, results=results, failures=failures)

    tools["music_transpose_notes"] = music_transpose_notes

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_interval(from_note: str, to_note: str) -> str:
        """
        Measure the signed interval between two notes.

        Args:
            from_note: Starting note (e.g., 'C4')
            to_note: Target note (e.g., 'G4')

        Returns:
            JSON string with the distance in semitones (negative when descending)

        Example:
            music_get_interval(from_note="C4", to_note="Eb4")
        """
        try:
            start = Note.parse(from_note)
            end = Note.parse(to_note)
            semitones = MusicCalculator.get_interval(start, end)
            return success_response(from_note=str(start), to_note=str(end), semitones=semitones)
        except MusicTheoryError as e:
            logger.exception("Failed to measure interval %s -> %s", from_note, to_note)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_get_interval")
            return error_response(e)

    tools["music_get_interval"] = music_get_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_enharmonic(note: str) -> str:
        """
        Respell a note with the other accidental (C#4 <-> Db4).

        Natural notes are returned unchanged.

        Args:
            note: Note with octave

        Returns:
            JSON string with the respelled note

        Example:
            music_enharmonic(note="A#4")
        """
        try:
            source = Note.parse(note)
            result = MusicCalculator.enharmonic_equivalent(source)
            return success_response(source=str(source), result=result.to_dict())
        except MusicTheoryError as e:
            logger.exception("Failed to respell %s", note)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_enharmonic")
            return error_response(e)

    tools["music_enharmonic"] = music_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_scale(root: str, scale_type: str = "major") -> str:
        """
        Build a scale from a root note.

        Args:
            root: Root note with octave (e.g., 'C4')
            scale_type: 'major' or 'minor'

        Returns:
            JSON string with the scale tones

        Example:
            music_build_scale(root="A3", scale_type="minor")
        """
        try:
            scale = Scale.build(Note.parse(root), scale_type)
            return success_response(
                root=str(scale.root),
                scale_type=scale.scale_type.name,
                tones=[str(tone) for tone in scale.tones],
                text=str(scale),
            )
        except MusicTheoryError as e:
            logger.exception("Failed to build scale on %s", root)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_build_scale")
            return error_response(e)

    tools["music_build_scale"] = music_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_chord(root: str, quality: str = "major", inversion: int = 0) -> str:
        """
        Build a triad on a root note.

        Args:
            root: Root note with octave (e.g., 'C4')
            quality: 'major' or 'minor'
            inversion: 0 (root position), 1 (first) or 2 (second)

        Returns:
            JSON string with the chord notes, lowest first

        Example:
            music_build_chord(root="C4", quality="minor", inversion=1)
        """
        try:
            chord = Chord.build(Note.parse(root), quality, inversion)
            return success_response(
                root=root,
                quality=quality,
                inversion=inversion,
                notes=[str(note) for note in chord.notes],
                text=str(chord),
            )
        except MusicTheoryError as e:
            logger.exception("Failed to build chord on %s", root)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_build_chord")
            return error_response(e)

    tools["music_build_chord"] = music_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_progression(
        root: str, degrees: list[int], scale_type: str = "major"
    ) -> str:
        """
        Build a chord progression from scale degrees.

        Each degree gets the triad stacked from the scale's own tones
        (degree, degree + 2, degree + 4).

        Args:
            root: Scale root with octave (e.g., 'C4')
            degrees: 1-based scale degrees (e.g., [1, 4, 5])
            scale_type: 'major' or 'minor'

        Returns:
            JSON string with one note list per chord

        Example:
            music_build_progression(root="C4", degrees=[1, 4, 5], scale_type="minor")
        """
        try:
            scale = Scale.build(Note.parse(root), scale_type)
            progression = ChordProgression.from_scale(scale, degrees)
            return success_response(
                root=str(scale.root),
                scale_type=scale.scale_type.name,
                degrees=degrees,
                chords=[[str(note) for note in chord.notes] for chord in progression.chords],
                text=str(progression),
            )
        except MusicTheoryError as e:
            logger.exception("Failed to build progression on %s", root)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_build_progression")
            return error_response(e)

    tools["music_build_progression"] = music_build_progression

    return tools
