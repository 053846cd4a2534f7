"""
ExtString Command-Line Interface.

Runs the string operations from a shell.

Usage:
    extstring reverse "noël"
    extstring pad-left 42 6 -f 0          # 000042
    extstring pad-right-str abc 8 "-="    # abc-=-=-
    extstring is-numeric 123456           # exit status 0 (true) or 1 (false)
    extstring swap-case "One Two Three"
    extstring graphemes "é" --count
    extstring apply pad_left_str 12345 14 qwerty
    extstring list

A TEXT of "-" reads standard input, which is also the way to pass text
starting with a dash: ``echo -123 | extstring is-numeric -``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Optional

from extstring import __version__
from extstring.graphemes import grapheme_count, graphemes
from extstring.registry import OPERATIONS, Operation, get_operation
from extstring.utils.errors import ExtStringError

logger = logging.getLogger("extstring.cli")

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_ERROR = 2

LOG_LEVELS = ("debug", "info", "warning", "error")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("extstring").setLevel(level)


def _read_text(value: str) -> str:
    """Return the TEXT argument, reading stdin for "-"."""
    if value != "-":
        return value
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data


def _command_name(op: Operation) -> str:
    return op.name.replace("_", "-")


# =============================================================================
# Argument Parser
# =============================================================================


def _add_operation_parser(subparsers: Any, op: Operation) -> None:
    """Build a subcommand from a registered operation's argument list."""
    sub = subparsers.add_parser(_command_name(op), help=op.summary, description=op.summary)
    sub.add_argument("text", help='Input text ("-" reads stdin)')

    required = len(op.arg_names) - op.optional_args
    for index, (arg_name, arg_type) in enumerate(zip(op.arg_names, op.arg_types)):
        if index < required:
            sub.add_argument(arg_name, type=arg_type, help=f"The {arg_name}")
        else:
            sub.add_argument(
                f"-{arg_name[0]}",
                f"--{arg_name}",
                type=arg_type,
                default=None,
                help=f"The {arg_name} (optional)",
            )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="extstring",
        description="ExtString - extra operations for strings",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=os.environ.get("EXTSTRING_LOG_LEVEL", "warning").lower(),
        help="Logging verbosity (default: $EXTSTRING_LOG_LEVEL or warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for op in OPERATIONS.values():
        if op.kind != "info":
            _add_operation_parser(subparsers, op)

    # Graphemes command
    graphemes_parser = subparsers.add_parser(
        "graphemes",
        help="Print grapheme clusters, one per line",
    )
    graphemes_parser.add_argument("text", help='Input text ("-" reads stdin)')
    graphemes_parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help="Print only the number of clusters",
    )

    # Apply command (dispatch by name)
    apply_parser = subparsers.add_parser(
        "apply",
        help="Run an operation given by name",
    )
    apply_parser.add_argument("name", help="Operation name, e.g. pad_left_str")
    apply_parser.add_argument("text", help='Input text ("-" reads stdin)')
    apply_parser.add_argument("args", nargs="*", help="Further operation arguments")

    # List command
    subparsers.add_parser(
        "list",
        aliases=["ls"],
        help="List available operations",
    )

    return parser


# =============================================================================
# Commands
# =============================================================================


def _emit(op: Operation, result: Any) -> int:
    """Print an operation result and map it to an exit status."""
    if op.kind == "predicate":
        print("true" if result else "false")
        return EXIT_OK if result else EXIT_FALSE

    if isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)
    return EXIT_OK


def cmd_operation(args: argparse.Namespace) -> int:
    """Handle a subcommand generated from the registry."""
    op = get_operation(args.command)
    call_args = []
    for arg_name in op.arg_names:
        value = getattr(args, arg_name)
        if value is None:
            break
        call_args.append(value)

    logger.debug("running %s with %r", op.name, call_args)
    return _emit(op, op(_read_text(args.text), *call_args))


def cmd_graphemes(args: argparse.Namespace) -> int:
    """Handle the graphemes command."""
    text = _read_text(args.text)
    if args.count:
        print(grapheme_count(text))
    else:
        for cluster in graphemes(text):
            print(cluster)
    return EXIT_OK


def cmd_apply(args: argparse.Namespace) -> int:
    """Handle the apply command - dispatch by operation name."""
    op = get_operation(args.name)
    call_args = op.convert_args(args.args)
    logger.debug("applying %s with %r", op.name, call_args)
    return _emit(op, op(_read_text(args.text), *call_args))


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the list command."""
    print(f"{Colors.BOLD}Operations{Colors.RESET}")
    for op in OPERATIONS.values():
        print(
            f"  {Colors.CYAN}{op.name:<16}{Colors.RESET} "
            f"{op.signature:<22} {Colors.GRAY}{op.summary}{Colors.RESET}"
        )
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    command_handlers = {
        _command_name(op): cmd_operation for op in OPERATIONS.values() if op.kind != "info"
    }
    command_handlers.update(
        {
            "graphemes": cmd_graphemes,
            "apply": cmd_apply,
            "list": cmd_list,
            "ls": cmd_list,
        }
    )

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_ERROR

    try:
        return handler(args)
    except ExtStringError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
