"""CLI entrypoint for Filebind."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from filebind import __version__
from filebind.cli.handlers import handle_load, handle_set
from filebind.constants.branding import CLI_DESCRIPTION
from filebind.constants.config import CONFIG_FILENAME


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Binding declaration file (default: ./{CONFIG_FILENAME})",
    )
    parser.add_argument(
        "-V",
        "--variable",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Seed a string variable before bindings are processed (repeat for multiple values)",
    )
    parser.add_argument(
        "-d",
        "--context-dir",
        type=Path,
        default=None,
        help="Root for relative binding paths (overrides context_dir from the config file)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each binding, hydration and write")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="filebind",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Process bindings and print bound variables as JSON")
    _add_common_arguments(load)

    set_ = subparsers.add_parser("set", help="Assign a variable and persist it if bound")
    _add_common_arguments(set_)
    set_.add_argument("name", help="Variable name")
    set_.add_argument("value", help="String value to assign")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "load":
        return handle_load(args)
    if args.command == "set":
        return handle_set(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
