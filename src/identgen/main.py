"""Command line entry point for the identgen cursor."""

import argparse
import sys
from collections.abc import Sequence

from identgen.config import Config
from identgen.core.core import Core
from identgen.errors import UserError
from identgen.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="identgen", description="Walk identifiers over a symbol table")
    parser.add_argument("--state", dest="state_path", help="Path of the JSON state file")
    parser.add_argument("--table", help="Table name (lower, upper) or literal symbols for a fresh state")
    parser.add_argument("--debug", action="store_true", default=None, help="Verbose console logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("next", help="Print the next identifier")
    commands.add_parser("prev", help="Print the previous identifier")
    advance = commands.add_parser("advance", help="Move by a signed offset and print the identifier")
    advance.add_argument("offset", type=int)
    take = commands.add_parser("take", help="Print the next COUNT identifiers, one per line")
    take.add_argument("count", type=int)
    commands.add_parser("show", help="Print the current identifier")
    commands.add_parser("clear", help="Reset to the empty identifier")
    set_table = commands.add_parser("set-table", help="Replace the table, keeping the identifier")
    set_table.add_argument("table_value", metavar="TABLE")
    return parser


def run(core: Core, args: argparse.Namespace) -> list[str]:
    """Execute a parsed command and return the lines to print."""
    service = core.ident
    match args.command:
        case "next":
            return [service.advance(1)]
        case "prev":
            return [service.advance(-1)]
        case "advance":
            return [service.advance(args.offset)]
        case "take":
            return service.take(args.count)
        case "show":
            return [service.current()]
        case "clear":
            service.clear()
            return []
        case "set-table":
            return ["".join(service.set_table(args.table_value))]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {key: getattr(args, key) for key in ("state_path", "table", "debug") if getattr(args, key) is not None}
    config = Config().model_copy(update=overrides)
    setup_logging(config.debug)

    try:
        lines = run(Core(config), args)
    except UserError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
