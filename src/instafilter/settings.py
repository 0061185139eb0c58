"""Persistent user preferences stored as a small JSON document."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .errors import SettingsInvalidError
from .utils.jsonio import read_json, write_json

LOGGER = logging.getLogger(__name__)

HOME_ENV_VAR = "INSTAFILTER_HOME"
SETTINGS_FILENAME = "settings.json"

DEFAULT_SETTINGS: dict[str, Any] = {
    "editor": {
        "filter": "CISepiaTone",
        "intensity": 0.5,
        "radius": 0.5,
    },
    "library": {
        "root": None,
    },
    "picker": {
        "last_directory": None,
    },
}


def default_home() -> Path:
    """Return the directory holding settings and the default photo library."""

    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".instafilter"


class Settings:
    """Dotted-key access to the persisted preferences.

    ``get("editor.radius")`` walks nested dictionaries; ``set`` writes the
    whole document back to disk immediately so a crash never loses more than
    the change in flight.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path if path is not None else default_home() / SETTINGS_FILENAME
        self._data: dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Merge the stored document over the defaults."""

        if not self._path.exists():
            return
        try:
            stored = read_json(self._path)
        except SettingsInvalidError as exc:
            LOGGER.warning("Ignoring unreadable settings: %s", exc)
            return
        _merge(self._data, stored)

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return default if node is None else node

    def set(self, key: str, value: Any) -> None:
        parts = key.split(".")
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
        self.save()

    def save(self) -> bool:
        """Write the preferences to disk; ``False`` if the file cannot be written.

        The in-memory values are kept either way.
        """

        try:
            write_json(self._path, self._data)
        except OSError as exc:
            LOGGER.warning("Could not save settings to %s: %s", self._path, exc)
            return False
        return True

    def library_root(self) -> Path:
        """Return the configured photo library directory."""

        stored = self.get("library.root")
        if stored:
            return Path(stored).expanduser()
        return self._path.parent / "Photos"


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


__all__ = ["DEFAULT_SETTINGS", "HOME_ENV_VAR", "Settings", "default_home"]
