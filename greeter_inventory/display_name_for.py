import logging

from greeter_inventory.account_record import AccountRecord

logger = logging.getLogger(__name__)


def display_name_for(account: AccountRecord) -> str:
    """Return the label shown for an account: its full name, else its login name.

    The GECOS field is comma separated and only its first item is the full
    name, so ``"Bob Smith,,,"`` yields ``"Bob Smith"``.
    """
    if account.gecos is None:
        logger.debug(
            "Found user '%s' with UID '%s' and missing full name",
            account.name,
            account.uid,
        )
        return account.name

    full_name = account.gecos.split(",", 1)[0].strip()
    if not full_name:
        logger.debug(
            "Found user '%s' with UID '%s' and empty full name",
            account.name,
            account.uid,
        )
        return account.name

    logger.debug(
        "Found user '%s' with UID '%s' and full name: %s",
        account.name,
        account.uid,
        full_name,
    )
    return full_name
