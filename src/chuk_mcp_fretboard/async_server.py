#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for music theory on fretted instruments.
Everything is computed from a small transposition engine: notes are moved
by semitones, and scales, chords and fretboards are built from those moves.

The server provides tools for:
- Transposing and respelling notes, measuring intervals
- Building major/minor scales, triads with inversions, and progressions
- Listing instrument tunings and building fretboards from them
- Mapping a scale onto a fretboard
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.tools import register_fretboard_tools, register_theory_tools
from chuk_mcp_fretboard.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNINGS_DIR = BASE_PATH / "tunings"
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

# Create loaders
tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
theory_tools = register_theory_tools(mcp)
fretboard_tools = register_fretboard_tools(mcp, tuning_loader)

# Export tool functions for direct access
music_transpose = theory_tools["music_transpose"]
music_transpose_notes = theory_tools["music_transpose_notes"]
music_get_interval = theory_tools["music_get_interval"]
music_enharmonic = theory_tools["music_enharmonic"]
music_build_scale = theory_tools["music_build_scale"]
music_build_chord = theory_tools["music_build_chord"]
music_build_progression = theory_tools["music_build_progression"]

music_list_tunings = fretboard_tools["music_list_tunings"]
music_describe_tuning = fretboard_tools["music_describe_tuning"]
music_build_fretboard = fretboard_tools["music_build_fretboard"]
music_scale_map = fretboard_tools["music_scale_map"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Tunings library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings dir: {TUNINGS_DIR}")
