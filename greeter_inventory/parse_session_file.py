"""Turn one session descriptor file into a SessionDescriptor."""

import logging
from pathlib import Path

from greeter_inventory.desktop_entry import find_entry_value, split_command
from greeter_inventory.directive_result import DirectiveStatus
from greeter_inventory.session_descriptor import SessionDescriptor

logger = logging.getLogger(__name__)


def parse_session_file(path: Path, text: str) -> SessionDescriptor | None:
    """Extract the session command and name, or None if the file is unusable.

    A session without a runnable command is useless, so a missing, empty or
    unsplittable ``Exec`` skips the file. A missing ``Name`` falls back to the
    file stem.
    """
    exec_result = find_entry_value(text, "Exec")
    if exec_result.status is DirectiveStatus.ABSENT:
        logger.warning("No command found for session: %s", path)
        return None
    if exec_result.status is DirectiveStatus.INVALID:
        logger.warning("Empty command found for session: %s", path)
        return None

    command = split_command(str(exec_result.value))
    if command is None:
        logger.warning(
            "Couldn't split command of '%s' into arguments: %s",
            path,
            exec_result.value,
        )
        return None

    name_result = find_entry_value(text, "Name")
    if name_result.is_found:
        name = str(name_result.value)
        logger.debug("Found name '%s' for session: %s", name, path)
    else:
        logger.debug("No name found for session: %s", path)
        name = path.stem
        if not name:
            # No stem means no file name at all; nothing to label it with
            logger.warning("No file stem found for session: %s", path)
            return None

    return SessionDescriptor(display_name=name, command=tuple(command))
