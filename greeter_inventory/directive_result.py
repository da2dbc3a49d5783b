"""Tri-state result for directive lookups in system text files."""

from dataclasses import dataclass
from enum import Enum


class DirectiveStatus(Enum):
    """Outcome of searching a text for one directive."""

    FOUND = "found"
    INVALID = "invalid"
    ABSENT = "absent"


@dataclass(frozen=True)
class DirectiveResult:
    """A directive's parsed value, or why there is none.

    ``raw`` keeps the text as it appeared in the file, so callers can report
    an invalid value verbatim.
    """

    status: DirectiveStatus
    value: object = None
    raw: str = ""

    @classmethod
    def found(cls, value: object, raw: str) -> "DirectiveResult":
        return cls(DirectiveStatus.FOUND, value, raw)

    @classmethod
    def invalid(cls, raw: str) -> "DirectiveResult":
        return cls(DirectiveStatus.INVALID, None, raw)

    @classmethod
    def absent(cls) -> "DirectiveResult":
        return cls(DirectiveStatus.ABSENT)

    @property
    def is_found(self) -> bool:
        return self.status is DirectiveStatus.FOUND
