"""
Fretboard tools - MCP tools for tunings, fretboards and scale maps.

A tuning argument is either the name of a tuning in the library
(e.g. 'guitar-standard') or a comma-separated list of open notes
(e.g. 'E2,A2,D3,G3,B3,E4').
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import DEFAULT_FRET_COUNT, MAX_FRET_COUNT, ErrorMessages
from chuk_mcp_fretboard.core import Note, Scale
from chuk_mcp_fretboard.fretboard import Fretboard, ScaleMap
from chuk_mcp_fretboard.models.tuning import Tuning
from chuk_mcp_fretboard.tools.common import error_response, success_response
from chuk_mcp_fretboard.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_tuning(loader: TuningLoader, tuning: str) -> Tuning:
    """
    Turn a tuning argument into a Tuning.

    Library names win; anything else is parsed as a comma-separated note list.

    Raises:
        ValueError: If the argument is neither
    """
    named = loader.get_tuning(tuning.strip())
    if named is not None:
        return named

    notes = [part.strip() for part in tuning.split(",") if part.strip()]
    if not notes:
        raise ValueError(ErrorMessages.EMPTY_TUNING)
    return Tuning(
        name="custom",
        description="Ad-hoc tuning",
        strings=[str(Note.parse(note)) for note in notes],
        frets=DEFAULT_FRET_COUNT,
    )


def resolve_fret_count(tuning: Tuning, frets: int | None) -> int:
    """
    Pick the fret count for a request: the explicit value, else the tuning's.

    Raises:
        ValueError: If the explicit value is above MAX_FRET_COUNT
    """
    if frets is None:
        return tuning.frets
    if isinstance(frets, int) and frets > MAX_FRET_COUNT:
        raise ValueError(
            ErrorMessages.FRET_COUNT_TOO_LARGE.format(frets=frets, max_frets=MAX_FRET_COUNT)
        )
    return frets


def register_fretboard_tools(mcp: ChukMCPServer, loader: TuningLoader) -> dict[str, Any]:
    """
    Register fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_tunings() -> str:
        """
        List available tunings.

        Returns all tunings from the library and project with
        basic metadata.

        Returns:
            JSON string with list of tuning summaries

        Example:
            music_list_tunings()
        """
        tunings = loader.list_tunings()
        return success_response(tunings=[t.model_dump() for t in tunings])

    tools["music_list_tunings"] = music_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_tuning(name: str) -> str:
        """
        Get the full definition of a tuning.

        Args:
            name: Tuning name (e.g., 'guitar-drop-d')

        Returns:
            JSON string with the tuning's strings and fret count

        Example:
            music_describe_tuning(name="bass-standard")
        """
        tuning = loader.get_tuning(name)
        if tuning is None:
            return error_response(ValueError(ErrorMessages.TUNING_NOT_FOUND.format(name=name)))
        return success_response(tuning=tuning.model_dump())

    tools["music_describe_tuning"] = music_describe_tuning

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_fretboard(tuning: str, frets: int | None = None) -> str:
        """
        List the note at every fret of every string.

        Args:
            tuning: Tuning name or comma-separated open notes
            frets: Highest fret (default: the tuning's fret count)

        Returns:
            JSON string with one note list per string, open string first

        Example:
            music_build_fretboard(tuning="guitar-standard", frets=12)
        """
        try:
            resolved = resolve_tuning(loader, tuning)
            fret_count = resolve_fret_count(resolved, frets)
            fretboard = Fretboard.build(resolved.open_notes(), fret_count)
            return success_response(
                tuning=resolved.name,
                frets=fret_count,
                strings={
                    string.key: [str(fret.note) for fret in string.frets] for string in fretboard
                },
                text=str(fretboard),
            )
        except ValueError as e:
            logger.exception("Failed to build fretboard for %s", tuning)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_build_fretboard")
            return error_response(e)

    tools["music_build_fretboard"] = music_build_fretboard

    @mcp.tool  # type: ignore[arg-type]
    async def music_scale_map(
        tuning: str,
        root: str,
        scale_type: str = "major",
        frets: int | None = None,
    ) -> str:
        """
        Show where a scale's tones fall on a fretboard.

        Matching is by spelled name: the fretboard is spelled with sharps and
        scales with flats, so flat scale tones only match natural frets.

        Args:
            tuning: Tuning name or comma-separated open notes
            root: Scale root with octave (e.g., 'C4')
            scale_type: 'major' or 'minor'
            frets: Highest fret (default: the tuning's fret count)

        Returns:
            JSON string with the matching frets per string and their scale degrees

        Example:
            music_scale_map(tuning="guitar-standard", root="A3", scale_type="minor", frets=12)
        """
        try:
            resolved = resolve_tuning(loader, tuning)
            fret_count = resolve_fret_count(resolved, frets)
            fretboard = Fretboard.build(resolved.open_notes(), fret_count)
            scale = Scale.build(Note.parse(root), scale_type)
            scale_map = ScaleMap.build(fretboard, scale)
            return success_response(
                tuning=resolved.name,
                scale=[str(tone) for tone in scale.tones],
                strings={
                    key: [fret.to_dict() for fret in kept] for key, kept in scale_map.items()
                },
                text=scale_map.render(),
            )
        except ValueError as e:
            logger.exception("Failed to map %s %s onto %s", root, scale_type, tuning)
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error in music_scale_map")
            return error_response(e)

    tools["music_scale_map"] = music_scale_map

    return tools
