"""Command-line entry point for ECS Voyager."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from ecsvoyager.constants.values import APP_TITLE, APP_VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecs-voyager",
        description=f"{APP_TITLE} - terminal dashboard for ECS clusters, services and tasks",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: ~/.ecs-voyager/config.yaml)",
    )
    parser.add_argument(
        "--inventory",
        type=Path,
        default=None,
        help="Inventory YAML served by the fixture provider",
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Disable restart, stop and service edits",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logs to this file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # The terminal belongs to the TUI, so logs only go to a file
    if args.log_file is not None:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("ecsvoyager").addHandler(logging.NullHandler())

    from ecsvoyager.app import VoyagerApp

    VoyagerApp(
        config_path=args.config,
        inventory_path=args.inventory,
        read_only=args.read_only,
    ).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
