"""Key lookups in session descriptor (.desktop) files."""

import re
import shlex

from greeter_inventory.directive_result import DirectiveResult

DESKTOP_ENTRY_GROUP = "Desktop Entry"
GROUP_HEADER_RE = re.compile(r"^\s*\[(?P<group>[^\]]*)\]\s*$")
KEY_VALUE_RE = re.compile(r"^\s*(?P<key>[A-Za-z0-9-]+)\s*=(?P<value>.*)$")


def find_entry_value(text: str, key: str) -> DirectiveResult:
    """Find the first ``key=value`` line of the main ``[Desktop Entry]`` group.

    Lines before any group header are accepted too. Comments, other groups
    (``[Desktop Action ...]``) and localised keys such as ``Name[de]`` are
    ignored. An empty value is reported as invalid.
    """
    group: str | None = None
    for line in text.splitlines():
        if line.lstrip().startswith("#"):
            continue
        header = GROUP_HEADER_RE.match(line)
        if header:
            group = header.group("group")
            continue
        if group not in (None, DESKTOP_ENTRY_GROUP):
            continue
        kv = KEY_VALUE_RE.match(line)
        if not kv or kv.group("key") != key:
            continue
        value = kv.group("value").strip()
        if not value:
            return DirectiveResult.invalid(value)
        return DirectiveResult.found(value, kv.group("value"))
    return DirectiveResult.absent()


def split_command(command_line: str) -> list[str] | None:
    """Split an ``Exec`` value into argv tokens, or None if it can't be split."""
    try:
        tokens = shlex.split(command_line)
    except ValueError:
        return None
    if not tokens or not tokens[0]:
        return None
    return tokens
