"""Non-recursive listing of files matching a glob pattern."""

import fnmatch
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class FileLister(ABC):
    """Interface for finding candidate files in one directory."""

    @abstractmethod
    def list_matching_files(self, directory: Path, pattern: str) -> Sequence[Path]:
        """Return the files in ``directory`` whose names match ``pattern``."""
        ...


class ScandirFileLister(FileLister):
    """Lists files with ``os.scandir``, sorted by name.

    A missing directory yields nothing. An unreadable directory, or an entry
    whose type can't be determined, is logged and skipped so that one bad
    entry doesn't stop the scan.
    """

    def list_matching_files(self, directory: Path, pattern: str) -> list[Path]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except FileNotFoundError:
            logger.debug("Session directory does not exist: %s", directory)
            return []
        except OSError as exc:
            logger.warning("Error when listing %s: %s", directory, exc)
            return []

        matches: list[Path] = []
        for entry in entries:
            if not fnmatch.fnmatchcase(entry.name, pattern):
                continue
            try:
                is_file = entry.is_file()
            except OSError as exc:
                logger.warning("Error when globbing %s: %s", entry.path, exc)
                continue
            if is_file:
                matches.append(Path(entry.path))
        return matches


class InMemoryFileLister(FileLister):
    """Serves pre-computed listings keyed by directory."""

    def __init__(self, listings: Mapping[Path | str, Sequence[Path | str]]) -> None:
        self._listings = {
            Path(directory): [Path(p) for p in paths]
            for directory, paths in listings.items()
        }

    def list_matching_files(self, directory: Path, pattern: str) -> list[Path]:
        return [
            path
            for path in self._listings.get(Path(directory), [])
            if fnmatch.fnmatchcase(path.name, pattern)
        ]
