"""Print the users and sessions a login greeter would offer.

Usage:
    greeter-inventory [--config PATH] [--format yaml|json] [--concurrent] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

import yaml

from greeter_inventory.errors import InventoryError
from greeter_inventory.load_config import DEFAULT_CONFIG_PATH, load_config
from greeter_inventory.resolve_inventory import resolve_inventory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from greeter_inventory.system_inventory import SystemInventory

logger = logging.getLogger(__name__)


def _configure_logging(*, verbose: bool, log_file: str | None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def render_inventory(inventory: SystemInventory, fmt: str) -> str:
    """Serialize the inventory as YAML or JSON text."""
    data = inventory.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="List regular users and X11/Wayland sessions for a greeter.",
    )
    ap.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to YAML configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument(
        "--login-defs",
        help="Login policy file with UID_MIN/UID_MAX (overrides config)",
    )
    ap.add_argument(
        "--session-dirs",
        help="Colon-separated session directories (overrides config)",
    )
    ap.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )
    ap.add_argument(
        "--concurrent",
        action="store_true",
        help="Resolve users and sessions in parallel",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    ap.add_argument(
        "--log-file",
        help="Write log messages to this file instead of stderr",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Resolve the inventory and print it."""
    args = build_parser().parse_args(argv)
    _configure_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        config = load_config(args.config)
        if args.login_defs:
            config["paths"]["login_defs"] = args.login_defs
        if args.session_dirs:
            config["paths"]["session_dirs"] = args.session_dirs
        inventory = resolve_inventory(config, concurrent=args.concurrent)
    except (OSError, InventoryError) as exc:
        logger.error("Failed to resolve system inventory: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render_inventory(inventory, args.format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
