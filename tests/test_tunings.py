"""
Tests for the tuning system.

Tests cover:
- Tuning, TuningMetadata (models/tuning.py)
- TuningLoader (tunings/loader.py)
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_fretboard.constants import MAX_FRET_COUNT
from chuk_mcp_fretboard.core import Note
from chuk_mcp_fretboard.models import Tuning, TuningMetadata
from chuk_mcp_fretboard.tunings import TuningLoader


class TestTuningModel:
    """Tests for the Tuning model."""

    def test_normalizes_strings(self) -> None:
        """Open strings are normalized to canonical note names."""
        tuning = Tuning(name="test", strings=["e2", "a2", "d#3"], frets=5)
        assert tuning.strings == ["E2", "A2", "D#3"]
        assert tuning.open_notes() == [Note("E", 2), Note("A", 2), Note("D#", 3)]

    def test_default_frets(self) -> None:
        assert Tuning(name="test", strings=["E2"]).frets == 12

    def test_rejects_bad_note(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=["E2", "H2"])

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=[])

    def test_rejects_negative_frets(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=["E2"], frets=-1)

    def test_rejects_too_many_frets(self) -> None:
        with pytest.raises(ValidationError):
            Tuning(name="test", strings=["E2"], frets=MAX_FRET_COUNT + 1)

    def test_metadata(self) -> None:
        tuning = Tuning(name="test", instrument="bass", strings=["E1", "A1"], frets=20)
        meta = TuningMetadata.from_tuning(tuning)
        assert meta.string_count == 2
        assert meta.instrument == "bass"
        assert meta.frets == 20


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_list_library(self, tunings_library_path: Path) -> None:
        loader = TuningLoader(library_path=tunings_library_path)
        names = [t.name for t in loader.list_tunings()]
        assert names == ["bass-standard", "guitar-drop-d", "guitar-standard", "ukulele-standard"]

    def test_get_tuning(self, tunings_library_path: Path) -> None:
        loader = TuningLoader(library_path=tunings_library_path)
        tuning = loader.get_tuning("guitar-standard")
        assert tuning is not None
        assert tuning.strings == ["E2", "A2", "D3", "G3", "B3", "E4"]
        assert tuning.frets == 24

    def test_default_library_path(self) -> None:
        """Without arguments the packaged library is used."""
        loader = TuningLoader()
        assert loader.get_tuning("bass-standard") is not None

    def test_missing_tuning(self, tunings_library_path: Path) -> None:
        loader = TuningLoader(library_path=tunings_library_path)
        assert loader.get_tuning("banjo-open-g") is None

    def test_project_overrides_library(self, tunings_library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "guitar-standard.yaml").write_text(
            "name: guitar-standard\nstrings: [E2, A2, D3, G3, B3, E4]\nfrets: 21\n"
        )
        loader = TuningLoader(library_path=tunings_library_path, project_path=temp_dir)

        tuning = loader.get_tuning("guitar-standard")
        assert tuning is not None
        assert tuning.frets == 21
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["guitar-standard"].frets == 21

    def test_name_defaults_to_file_stem(self, temp_dir: Path) -> None:
        (temp_dir / "baritone.yaml").write_text("strings: [B1, E2, A2, D3, F#3, B3]\n")
        loader = TuningLoader(library_path=temp_dir)
        tuning = loader.get_tuning("baritone")
        assert tuning is not None
        assert tuning.name == "baritone"

    def test_invalid_files_skipped(self, temp_dir: Path) -> None:
        """Files that fail validation are skipped, not raised."""
        (temp_dir / "broken.yaml").write_text("name: broken\nstrings: [E2, H2]\n")
        (temp_dir / "garbage.yaml").write_text("- just\n- a list\n")
        (temp_dir / "unparseable.yaml").write_text("name: [unclosed\n")
        loader = TuningLoader(library_path=temp_dir)

        assert loader.list_tunings() == []
        assert loader.get_tuning("broken") is None

    def test_copy_to_project(self, tunings_library_path: Path, temp_dir: Path) -> None:
        project = temp_dir / "tunings"
        loader = TuningLoader(library_path=tunings_library_path, project_path=project)

        dest = loader.copy_to_project("ukulele-standard")
        assert dest == project / "ukulele-standard.yaml"
        assert dest.exists()

        with pytest.raises(ValueError):
            loader.copy_to_project("ukulele-standard")
        assert loader.copy_to_project("no-such-tuning") is None

    def test_copy_without_project(self, tunings_library_path: Path) -> None:
        loader = TuningLoader(library_path=tunings_library_path)
        with pytest.raises(ValueError):
            loader.copy_to_project("guitar-standard")

    def test_cache(self, tunings_library_path: Path) -> None:
        loader = TuningLoader(library_path=tunings_library_path)
        first = loader.get_tuning("guitar-drop-d")
        assert loader.get_tuning("guitar-drop-d") is first
        loader.clear_cache()
        assert loader.get_tuning("guitar-drop-d") == first
