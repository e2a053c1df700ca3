"""Persistent storage of mechanism home positions."""

from __future__ import annotations

import abc
from pathlib import Path

DEFAULT_ROOT_DIR = Path("/home/lvuser")


class HomingStorageError(Exception):
    """Raised when a home position cannot be saved to or loaded from storage."""


class HomingStorage(abc.ABC):
    """Saves and loads a home position to and from persistent storage."""

    @abc.abstractmethod
    def save(self, home_position: float) -> None:
        """Store a home position, raising HomingStorageError on failure."""

    @abc.abstractmethod
    def load(self) -> float | None:
        """Return the stored home position, or None if none was stored."""


class FSHomingStorage(HomingStorage):
    """Keeps a single home position in a text file below a root directory."""

    def __init__(self, home_file_path: str | Path, root_dir: str | Path = DEFAULT_ROOT_DIR) -> None:
        self._home_file_path = Path(home_file_path)
        self._root_dir = Path(root_dir)

    def file_path(self) -> Path:
        """Absolute path of the storage file, created empty if it does not exist yet."""
        config_file = self._root_dir / self._home_file_path
        try:
            if not config_file.exists():
                config_file.parent.mkdir(parents=True, exist_ok=True)
                config_file.touch()
        except OSError as exc:
            raise HomingStorageError(f"could not create config file {config_file}") from exc
        return config_file

    def save(self, home_position: float) -> None:
        """Write the home position, using six significant digits."""
        path = self.file_path()
        try:
            path.write_text(f"{float(home_position):g}")
        except OSError as exc:
            raise HomingStorageError(f"could not write to config file {path}") from exc

    def load(self) -> float | None:
        """Read the home position; None when the file holds nothing."""
        path = self.file_path()
        try:
            text = path.read_text()
        except OSError as exc:
            raise HomingStorageError(f"could not read from config file {path}") from exc
        tokens = text.split()
        if not tokens:
            return None
        try:
            return float(tokens[0])
        except ValueError as exc:
            raise HomingStorageError(f"config file {path} does not hold a number") from exc