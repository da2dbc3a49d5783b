"""User Resolver: regular accounts keyed by their display name."""

import logging
from pathlib import Path

from greeter_inventory.account_source import AccountSource, PasswdAccountSource
from greeter_inventory.display_name_for import display_name_for
from greeter_inventory.parse_login_defs import parse_uid_range
from greeter_inventory.read_text_file import read_text_file

logger = logging.getLogger(__name__)


def resolve_users(
    policy_file_path: Path | str, accounts: AccountSource | None = None
) -> dict[str, str]:
    """Map each regular user's display name to their system username.

    Regular users are accounts whose UID lies within the UID_MIN/UID_MAX
    range of the policy file. An unreadable policy file raises ``OSError``.
    """
    policy_path = Path(policy_file_path)
    # UID_MIN/MAX bound the UIDs given by `useradd`, so they separate people
    # from service accounts such as root or git.
    uid_range = parse_uid_range(read_text_file(policy_path), policy_path)

    source = accounts if accounts is not None else PasswdAccountSource()
    users: dict[str, str] = {}
    for account in source.enumerate_accounts():
        if account.uid not in uid_range:
            continue
        users[display_name_for(account)] = account.name

    logger.debug("Resolved %d regular users", len(users))
    return users
