"""
Export loading and caching.

This module handles reading and writing the tracker's JSON account exports.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR, DEFAULT_EXPORT_NAME

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches account export files.

    CACHING: parsed JSON is kept per resolved path until save_export
    replaces it, so repeated loads in one run read the file once.

    EXPORT FORMAT:
        {
            "user": {"name": "...", "email": "...", "gpaScale": "4.0"},
            "courses": [
                {"name": "Calculus I", "credits": 4, "gpaScale": "4.0",
                 "semester": "Fall", "year": 2024, "assignments": [...], ...},
                ...
            ]
        }

    Usage:
        loader = DataLoader()
        export = loader.load_export()                  # default example export
        export = loader.load_export("my_export.json")  # relative to data dir
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self._exports_cache = {}  # Keyed by resolved path

    def resolve_path(self, path=None) -> Path:
        """
        Resolve an export path.

        None means the default example export. A relative path that does not
        exist from the working directory is looked up in the data directory.
        """
        if path is None:
            return (self.data_dir / DEFAULT_EXPORT_NAME).resolve()
        candidate = Path(path)
        if not candidate.is_absolute() and not candidate.exists():
            candidate = self.data_dir / candidate
        return candidate.resolve()

    def load_export(self, path=None) -> dict:
        """
        Load an account export.

        Raises:
            FileNotFoundError: if the export does not exist
            json.JSONDecodeError: if the file is not valid JSON
        """
        filepath = self.resolve_path(path)
        if filepath not in self._exports_cache:
            if not filepath.exists():
                raise FileNotFoundError(f"No export file found at: {filepath}")
            with open(filepath, "r", encoding="utf-8") as f:
                self._exports_cache[filepath] = json.load(f)
            logger.debug("Loaded export %s", filepath)
        return self._exports_cache[filepath]

    def save_export(self, export_data: dict, path=None) -> Path:
        """Write an export back to disk and refresh the cache."""
        filepath = self.resolve_path(path)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(export_data, f, ensure_ascii=False, indent=2)
        self._exports_cache[filepath] = export_data
        logger.debug("Saved export %s", filepath)
        return filepath

    def list_available_exports(self) -> list:
        """Names of the export files in the data directory."""
        return sorted(f.name for f in self.data_dir.glob("*.json"))
