"""Parsers for the UID directives of the login policy file (login.defs)."""

import logging
import re
from pathlib import Path

from greeter_inventory.directive_result import DirectiveResult, DirectiveStatus
from greeter_inventory.errors import CorruptPolicyError
from greeter_inventory.uid_range import (
    DEFAULT_UID_MAX,
    DEFAULT_UID_MIN,
    MAX_UID,
    UidRange,
)

logger = logging.getLogger(__name__)

# "KEYWORD <digits>" at the start of a line; comment lines and non-numeric
# values never match.
_DIRECTIVE_TEMPLATE = r"^[ \t]*{keyword}[ \t]+([0-9]+)(?!\S)"


def find_uid_directive(text: str, keyword: str) -> DirectiveResult:
    """Look up the first ``keyword <integer>`` directive in ``text``.

    Lines whose value isn't a run of digits don't count as the directive.
    A digit string too large for a UID is reported as invalid.
    """
    pattern = re.compile(
        _DIRECTIVE_TEMPLATE.format(keyword=re.escape(keyword)), re.MULTILINE
    )
    match = pattern.search(text)
    if match is None:
        return DirectiveResult.absent()

    raw = match.group(1)
    value = int(raw)
    if value > MAX_UID:
        return DirectiveResult.invalid(raw)
    return DirectiveResult.found(value, raw)


def _uid_bound(text: str, keyword: str, default: int, source: Path | str) -> int:
    result = find_uid_directive(text, keyword)
    if result.status is DirectiveStatus.INVALID:
        msg = f"{keyword} in '{source}' is not a valid UID: {result.raw}"
        raise CorruptPolicyError(msg)
    if result.status is DirectiveStatus.ABSENT:
        logger.warning("Failed to find %s in login file: %s", keyword, source)
        return default
    return int(result.value)  # type: ignore[arg-type]


def parse_uid_range(text: str, source: Path | str = "<text>") -> UidRange:
    """Build the regular-user UID range declared by a login.defs text.

    Missing or non-numeric bounds fall back to the compiled-in defaults with
    a warning. A numeric bound that overflows a UID, or a range whose minimum
    exceeds its maximum, raises :class:`CorruptPolicyError`.
    """
    min_uid = _uid_bound(text, "UID_MIN", DEFAULT_UID_MIN, source)
    max_uid = _uid_bound(text, "UID_MAX", DEFAULT_UID_MAX, source)
    logger.debug("UID_MIN: %s, UID_MAX: %s", min_uid, max_uid)

    try:
        return UidRange(min_uid, max_uid)
    except ValueError as exc:
        msg = f"Inconsistent UID range in '{source}': {exc}"
        raise CorruptPolicyError(msg) from exc
