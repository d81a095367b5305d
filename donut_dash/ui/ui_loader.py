"""
ui_loader.py
------------
Loads HUD layout configurations from YAML files.
"""

from pathlib import Path
from typing import Dict, Any

import yaml

from donut_dash.core.debug.debug_logger import DebugLogger


REQUIRED_SECTIONS = ("font", "colors", "score", "health", "boss_bar", "screens")


class UILoader:
    """Loads and validates layout files, caching parsed results."""

    def __init__(self, base_path=None):
        """
        Args:
            base_path: Directory holding layout files (packaged config/ui if None)
        """
        self.cache: Dict[str, Dict[str, Any]] = {}
        self.base_path = Path(base_path) if base_path else Path(__file__).resolve().parent.parent / "config" / "ui"

    def load(self, filename: str) -> Dict[str, Any]:
        """
        Load a layout file relative to base_path.

        Raises:
            FileNotFoundError: File does not exist
            ValueError: File is not a mapping or lacks a required section
        """
        if filename in self.cache:
            return self.cache[filename]

        full_path = self.base_path / filename
        if not full_path.exists():
            raise FileNotFoundError(f"ui config not found: {full_path}")

        with open(full_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        self._validate(config, full_path)
        self.cache[filename] = config
        DebugLogger.system(f"Loaded UI layout {filename}", category="ui")
        return config

    @staticmethod
    def _validate(config, path):
        if not isinstance(config, dict):
            raise ValueError(f"ui config must be a mapping: {path}")

        missing = [name for name in REQUIRED_SECTIONS if name not in config]
        if missing:
            raise ValueError(f"ui config {path} missing sections: {', '.join(missing)}")
