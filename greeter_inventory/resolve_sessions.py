"""Session Resolver: launchable X11/Wayland sessions keyed by display name."""

import logging
from collections.abc import Iterable
from pathlib import Path

from greeter_inventory.file_lister import FileLister, ScandirFileLister
from greeter_inventory.parse_session_file import parse_session_file
from greeter_inventory.read_text_file import read_text_file

logger = logging.getLogger(__name__)

SESSION_FILE_PATTERN = "*.desktop"


def resolve_sessions(
    search_dirs: Iterable[Path | str],
    lister: FileLister | None = None,
    pattern: str = SESSION_FILE_PATTERN,
) -> dict[str, list[str]]:
    """Map each session's display name to its command.

    Directories are scanned in the given order and later entries overwrite
    earlier ones with the same name. Reading a matched file may raise
    ``OSError``; content problems only skip that file.
    """
    file_lister = lister if lister is not None else ScandirFileLister()
    sessions: dict[str, list[str]] = {}

    for directory in search_dirs:
        for path in file_lister.list_matching_files(Path(directory), pattern):
            logger.info("Now scanning session file: %s", path)
            descriptor = parse_session_file(path, read_text_file(path))
            if descriptor is None:
                continue
            sessions[descriptor.display_name] = list(descriptor.command)

    logger.debug("Resolved %d sessions", len(sessions))
    return sessions
