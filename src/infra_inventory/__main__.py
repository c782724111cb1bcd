#!/usr/bin/env python3
"""Entry point for `python -m infra_inventory`."""

from infra_inventory.cli.webui import main as webui_main


def main() -> None:
    webui_main()


if __name__ == "__main__":
    main()
