"""
Tuning loader - discovers and loads instrument tunings.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_fretboard.models.tuning import Tuning, TuningMetadata

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Tuning] = {}

    def list_tunings(self) -> list[TuningMetadata]:
        """
        List all available tunings.

        Returns tunings from both library and project, with project
        tunings taking precedence.
        """
        tunings: dict[str, TuningMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = TuningMetadata.from_tuning(tuning)

        return sorted(tunings.values(), key=lambda t: t.name)

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a tuning by name.

        Project tunings take precedence over library tunings.

        Args:
            name: Tuning name

        Returns:
            Tuning if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            tuning_file = directory / f"{name}.yaml"
            if tuning_file.exists():
                tuning = self._load_tuning_file(tuning_file)
                if tuning:
                    self._cache[name] = tuning
                    return tuning

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Tuning already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_tuning_file(self, path: Path) -> Tuning | None:
        """Load a tuning from a YAML file, skipping files that don't validate."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable tuning file %s: %s", path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Skipping tuning file %s: expected a mapping", path)
            return None

        data.setdefault("name", path.stem)
        try:
            return Tuning.model_validate(data)
        except ValidationError as e:
            logger.warning("Skipping invalid tuning file %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()
