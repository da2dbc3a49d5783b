"""Entry point for printing the greeter's user and session inventory."""

from greeter_inventory.inventory_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
