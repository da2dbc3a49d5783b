from dataclasses import dataclass


@dataclass(frozen=True)
class SessionDescriptor:
    """A launchable graphical session: its label and argv-style command."""

    display_name: str
    command: tuple[str, ...]
