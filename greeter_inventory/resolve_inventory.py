"""Orchestration: resolve users and sessions into one SystemInventory."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from greeter_inventory.account_source import AccountSource
from greeter_inventory.file_lister import FileLister
from greeter_inventory.resolve_sessions import SESSION_FILE_PATTERN, resolve_sessions
from greeter_inventory.resolve_users import resolve_users
from greeter_inventory.split_search_path import split_search_path
from greeter_inventory.system_inventory import SystemInventory

logger = logging.getLogger(__name__)


def resolve_inventory(
    config: dict[str, Any],
    accounts: AccountSource | None = None,
    lister: FileLister | None = None,
    *,
    concurrent: bool = False,
) -> SystemInventory:
    """Run both resolvers against the configured paths.

    The two scans share no state, so with ``concurrent=True`` they run as two
    thread-pool tasks joined before the inventory is built. Fatal errors from
    either scan propagate to the caller.
    """
    login_defs = Path(config["paths"]["login_defs"])
    session_dirs = split_search_path(config["paths"]["session_dirs"])
    pattern = config.get("sessions", {}).get("pattern") or SESSION_FILE_PATTERN
    logger.debug(
        "Resolving inventory from %s and %s",
        login_defs,
        ":".join(str(d) for d in session_dirs),
    )

    if concurrent:
        with ThreadPoolExecutor(max_workers=2) as executor:
            users_future = executor.submit(resolve_users, login_defs, accounts)
            sessions_future = executor.submit(
                resolve_sessions, session_dirs, lister, pattern
            )
            users = users_future.result()
            sessions = sessions_future.result()
    else:
        users = resolve_users(login_defs, accounts)
        sessions = resolve_sessions(session_dirs, lister, pattern)

    logger.info("Found %d users and %d sessions", len(users), len(sessions))
    return SystemInventory(users=users, sessions=sessions)
