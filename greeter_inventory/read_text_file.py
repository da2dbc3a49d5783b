"""Strict UTF-8 reading of small system files."""

from pathlib import Path

from greeter_inventory.errors import UndecodableFileError


def read_text_file(path: Path) -> str:
    """Read ``path`` as UTF-8.

    ``OSError`` from the read propagates unchanged; undecodable bytes raise
    :class:`UndecodableFileError`.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UndecodableFileError(path, str(exc)) from exc
