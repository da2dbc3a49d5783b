"""Exception hierarchy for inventory resolution."""

from pathlib import Path


class InventoryError(Exception):
    """Base class for unrecoverable inventory failures."""


class CorruptPolicyError(InventoryError):
    """The login policy file contradicts itself."""


class UndecodableFileError(InventoryError):
    """A system file could not be decoded as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the offending path alongside the decoder's complaint."""
        super().__init__(f"File '{path}' is not UTF-8: {reason}")
        self.path = path


class ConfigError(InventoryError):
    """The configuration file has an unusable shape."""
