from dataclasses import dataclass


@dataclass(frozen=True)
class AccountRecord:
    """One entry of the system account database."""

    name: str
    uid: int
    gecos: str | None = None  # None when the database has no full-name field
