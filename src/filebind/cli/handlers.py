"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from filebind.config import load_config
from filebind.exceptions import ConfigError, RunnerError
from filebind.model import SourceInfo
from filebind.runner import ContextDir, RunSession, StringValue


def parse_variable_args(raw_items: list[str]) -> dict[str, str]:
    """Parse repeated ``NAME=VALUE`` options; the last occurrence wins."""
    parsed: dict[str, str] = {}
    for item in raw_items:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ConfigError(f"--variable expects NAME=VALUE, got {item!r}")
        parsed[name.strip()] = value
    return parsed


def build_session(args: argparse.Namespace) -> RunSession:
    """Load the declaration file, seed variables and process bindings."""
    config = load_config(args.config)
    cli_variables = parse_variable_args(args.variable)

    context_root = args.context_dir if args.context_dir is not None else config.context_dir
    session = RunSession(context_dir=ContextDir(Path.cwd(), context_root))
    for name, value in config.variables.items():
        session.variables.insert(name, value)
    for name, text in cli_variables.items():
        session.variables.insert(name, StringValue(text))

    session.load(config.bindings)
    return session


def handle_load(args: argparse.Namespace) -> int:
    """Process bindings and print every bound variable as JSON."""
    try:
        session = build_session(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RunnerError as exc:
        print(f"error: {exc.describe()}", file=sys.stderr)
        return 1

    print(json.dumps(session.snapshot(), indent=2, sort_keys=True))
    return 0


def handle_set(args: argparse.Namespace) -> int:
    """Assign ``args.value`` to ``args.name`` and persist it if bound."""
    try:
        session = build_session(args)
        written = session.assign(args.name, StringValue(args.value), SourceInfo())
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RunnerError as exc:
        print(f"error: {exc.describe()}", file=sys.stderr)
        return 1

    if written:
        print(f"bound {args.name} -> {session.bindings.resolve(args.name)}")
    else:
        print(f"{args.name} is not bound")
    return 0
