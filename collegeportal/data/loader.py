"""
Data loading and caching.

This module handles loading grade sheets and announcement exports from
JSON files, with caching to prevent repeated file I/O.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..config import DATA_DIR

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the JSON files the portal works from.

    FILE SHAPES:
    - Grade sheet: a list of subject records, or {"subjects": [...]}
      {"_id": "...", "subject_name": "...", "subject_code": "...",
       "credits": 3, "grade": "A+"}
    - Announcements: a list of announcement records, or
      {"announcements": [...]}, each with at least a "hashtag"

    Relative paths are resolved against data_dir; absolute paths are used
    as they are.

    Usage:
        loader = DataLoader()
        subjects = loader.load_grade_sheet("semester_5.json")
        announcements = loader.load_announcements("announcements.json")
    """

    def __init__(self, data_dir: Union[str, Path] = DATA_DIR):
        self.data_dir = Path(data_dir)
        self._cache = {}  # Keyed by resolved path

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.data_dir / path

    def load_json(self, path: Union[str, Path]):
        """
        Load a JSON file once and serve later calls from the cache.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        filepath = self.resolve(path)
        if filepath not in self._cache:
            if not filepath.exists():
                raise FileNotFoundError(f"Data file not found: {filepath}")
            logger.debug("Loading %s", filepath)
            with open(filepath, "r", encoding="utf-8") as f:
                self._cache[filepath] = json.load(f)
        return self._cache[filepath]

    def load_grade_sheet(self, path: Union[str, Path]) -> list:
        """Raw subject records from a grade sheet file."""
        return self._records(self.load_json(path), "subjects")

    def load_announcements(self, path: Union[str, Path]) -> list:
        """Raw announcement records from an export file."""
        return self._records(self.load_json(path), "announcements")

    def list_grade_sheets(self) -> list:
        """JSON files in the data directory, sorted by name."""
        if not self.data_dir.is_dir():
            return []
        return sorted(f.name for f in self.data_dir.glob("*.json"))

    def clear_cache(self):
        self._cache.clear()

    @staticmethod
    def _records(data, key: str) -> list:
        # Accept both a bare list and a wrapper object
        if isinstance(data, dict):
            data = data.get(key, [])
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of {key}, got {type(data).__name__}")
        return list(data)
