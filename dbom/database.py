"""A directory of collections with one collection in use at a time."""

from __future__ import annotations

import logging
from pathlib import Path

from dbom.collection import Collection

logger = logging.getLogger(__name__)


def create_data_directory(path: str | Path = "data") -> Path:
    """Create the data directory if nothing exists at that path; return it."""
    directory = Path(path)
    if not directory.exists():
        directory.mkdir()
    return directory


class Database:
    """Collections stored as ``*.json`` files in one directory."""

    def __init__(self, data_dir: str | Path = "data") -> None:
        self.data_dir = Path(data_dir)
        self._current: Collection | None = None

    def use_collection(self, name: str) -> Collection:
        """Open (or start) the named collection and make it current."""
        self._current = Collection(name, self.data_dir)
        return self._current

    def list_collections(self) -> list[str]:
        """Return the names of all collections in the data directory."""
        return sorted(
            entry.name[: -len(".json")]
            for entry in self.data_dir.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        )

    def delete_collection(self, name: str) -> bool:
        """Delete the collection's file; report whether anything was removed."""
        path = self.data_dir / f"{name}.json"
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.warning("could not delete collection %s: %s", name, exc)
            return False
        return True

    def current(self) -> Collection | None:
        """Return the collection in use, or None before one is chosen."""
        return self._current