"""Access to the platform account database.

The resolver only needs to enumerate accounts, so the dependency is kept
behind a one-method interface that tests can replace with an in-memory list.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from greeter_inventory.account_record import AccountRecord


class AccountSource(ABC):
    """Anything that can list system accounts."""

    @abstractmethod
    def enumerate_accounts(self) -> Sequence[AccountRecord]:
        """Return every account, in the database's iteration order."""
        ...


class PasswdAccountSource(AccountSource):
    """Reads accounts through the POSIX ``pwd`` module (``/etc/passwd``, NSS)."""

    def enumerate_accounts(self) -> list[AccountRecord]:
        import pwd

        return [
            AccountRecord(name=entry.pw_name, uid=entry.pw_uid, gecos=entry.pw_gecos)
            for entry in pwd.getpwall()
        ]


class StaticAccountSource(AccountSource):
    """Serves a fixed list of accounts."""

    def __init__(self, accounts: Iterable[AccountRecord]) -> None:
        self._accounts = list(accounts)

    def enumerate_accounts(self) -> list[AccountRecord]:
        return list(self._accounts)
