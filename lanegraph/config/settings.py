"""
Settings management for lanegraph
"""

import copy
import json
from pathlib import Path
from typing import Any

from lanegraph.constants import DEFAULT_PAGE_SIZE, DEFAULT_PALETTE, SETTINGS_DIR, SETTINGS_FILE


class Settings:
    """Manages graph settings"""

    DEFAULT_SETTINGS: dict[str, Any] = {
        "graph": {
            "page_size": DEFAULT_PAGE_SIZE,  # Commits laid out per history page
            "include_remote_branches": True,
            "include_tags": True,
            "palette": list(DEFAULT_PALETTE),  # Lane colors, indexed by column
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / SETTINGS_DIR / SETTINGS_FILE

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"Settings file {self.config_path} must contain a JSON object")
            # Merge with defaults to handle new settings
            self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_settings(base[key], value)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'graph.page_size')"""
        value: Any = self.settings

        for part in path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_page_size(self) -> int:
        """Get the number of commits loaded per history page."""
        page_size: int = int(self.get("graph.page_size", DEFAULT_PAGE_SIZE))
        return max(1, page_size)  # At least 1

    def get_include_remote_branches(self) -> bool:
        return bool(self.get("graph.include_remote_branches", True))

    def get_include_tags(self) -> bool:
        return bool(self.get("graph.include_tags", True))

    def get_palette(self) -> list[str]:
        """Get lane colors as hex strings, falling back to the default palette."""
        palette = self.get("graph.palette")
        if not isinstance(palette, list) or not palette:
            return list(DEFAULT_PALETTE)
        return [str(color) for color in palette]
