"""CLI for htoprc-cli - parse, normalize and score htop configuration files."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from tabulate import tabulate

from .codec import ParseResult, SerializeOptions, parse_htoprc, serialize_htoprc
from .config import OptionMetadata
from .config.options import OPTION_TYPES
from .exceptions import HtoprcError

__all__ = ["setup_logging", "default_htoprc_path", "main"]

logger = logging.getLogger(__name__)

# htop itself honours this variable before looking in the config directory
ENV_HTOPRC = "HTOPRC"
ENV_XDG_CONFIG_HOME = "XDG_CONFIG_HOME"

_INPUT_HELP = (
    "htoprc file ('-' for stdin, default: $HTOPRC, then "
    "$XDG_CONFIG_HOME/htop/htoprc or ~/.config/htop/htoprc)"
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI output.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def default_htoprc_path() -> Path:
    """Location of the current user's htoprc, looked up the way htop does.

    htop uses the XDG layout on every platform (macOS included):
    $HTOPRC, then $XDG_CONFIG_HOME/htop/htoprc, then ~/.config/htop/htoprc.
    The htop 2.x file ~/.htoprc is used only when the XDG file is missing.
    """
    env_path = os.getenv(ENV_HTOPRC)
    if env_path:
        return Path(env_path).expanduser()

    config_home = os.getenv(ENV_XDG_CONFIG_HOME)
    base = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    path = base / "htop" / "htoprc"
    if not path.exists():
        legacy = Path.home() / ".htoprc"
        if legacy.exists():
            return legacy
    return path


def _resolve_input(args: argparse.Namespace) -> str:
    if args.input_file is None:
        args.input_file = str(default_htoprc_path())
        logger.debug("No input file given, using %s", args.input_file)
    return args.input_file


def _read_input(path: str) -> str:
    """Read an htoprc file ("-" = stdin)."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _load(args: argparse.Namespace) -> ParseResult:
    path = _resolve_input(args)
    text = _read_input(path)
    logger.debug("Read %d bytes from %s", len(text), path)
    return parse_htoprc(text)


# =============================================================================
# Subcommand: parse
# =============================================================================

def cmd_parse(args: argparse.Namespace) -> int:
    """Parse a file and show a summary."""
    try:
        result = _load(args)
    except OSError as e:
        print(f"Error: Could not read {args.input_file}: {e}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    config = result.config
    version = result.version
    if config.htop_version:
        version = f"{version} (htop {config.htop_version})"

    print("htoprc summary:")
    print(f"  Version: {version}")
    print(f"  Score: {result.score}")
    print(f"  Color scheme: {config.color_scheme}")
    print(f"  Header layout: {config.header_layout}")
    print(f"  Left meters: {' '.join(m.type for m in config.left_meters) or 'none'}")
    print(f"  Right meters: {' '.join(m.type for m in config.right_meters) or 'none'}")
    if config.screens:
        print(f"  Screens: {', '.join(screen.name for screen in config.screens)}")
    else:
        print("  Screens: none")
    print(f"  Unknown options: {len(config.unknown_options)}")
    print(f"  Warnings: {len(result.warnings)}")
    for warning in result.warnings:
        print(f"    line {warning.line}: {warning.message} [{warning.type.value}]")

    return 0


# =============================================================================
# Subcommand: format
# =============================================================================

def cmd_format(args: argparse.Namespace) -> int:
    """Parse a file and write it back in canonical order."""
    try:
        result = _load(args)
        options = SerializeOptions(
            include_version=not args.no_version,
            only_non_defaults=args.only_non_defaults,
            include_unknown=not args.no_unknown,
        )
        text = serialize_htoprc(result.config, options)
    except OSError as e:
        print(f"Error: Could not read {args.input_file}: {e}", file=sys.stderr)
        return 1
    except HtoprcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.output:
        print(text)
        return 0

    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n" if text else "")
    except OSError as e:
        print(f"Error: Could not write {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"Output written to: {args.output}", file=sys.stderr)
    return 0


# =============================================================================
# Subcommand: score
# =============================================================================

def cmd_score(args: argparse.Namespace) -> int:
    """Show the customization score of a file."""
    try:
        result = _load(args)
    except OSError as e:
        print(f"Error: Could not read {args.input_file}: {e}", file=sys.stderr)
        return 1

    print(f"Score: {result.score}")
    print(f"Version: {result.version}")
    return 0


# =============================================================================
# Subcommand: options
# =============================================================================

def cmd_options(args: argparse.Namespace) -> int:
    """List known htoprc options."""
    options = OptionMetadata.get_all()
    if args.type:
        names = set(OptionMetadata.get_options_by_type(args.type))
        options = {name: info for name, info in options.items() if name in names}

    if not options:
        print("No options found.")
        return 0

    headers = ["Option", "Type", "Values", "Description"]
    rows = [
        [name, info.value_type, ",".join(info.values) or "-", info.description]
        for name, info in options.items()
    ]
    print(tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True))
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="htoprc-cli",
        description="Parse, normalize and score htop configuration files.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a file and show a summary")
    parse_parser.add_argument("input_file", nargs="?", help=_INPUT_HELP)
    parse_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output the full parse result as JSON",
    )
    parse_parser.set_defaults(func=cmd_parse)

    # format command
    format_parser = subparsers.add_parser("format", help="Rewrite a file in canonical order")
    format_parser.add_argument("input_file", nargs="?", help=_INPUT_HELP)
    format_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    format_parser.add_argument(
        "--only-non-defaults",
        action="store_true",
        help="Only write options that differ from htop's defaults",
    )
    format_parser.add_argument(
        "--no-unknown",
        action="store_true",
        help="Drop options this tool does not understand",
    )
    format_parser.add_argument(
        "--no-version",
        action="store_true",
        help="Omit the htop_version line",
    )
    format_parser.set_defaults(func=cmd_format)

    # score command
    score_parser = subparsers.add_parser("score", help="Show the customization score")
    score_parser.add_argument("input_file", nargs="?", help=_INPUT_HELP)
    score_parser.set_defaults(func=cmd_score)

    # options command
    options_parser = subparsers.add_parser("options", help="List known htoprc options")
    options_parser.add_argument(
        "--type",
        choices=OPTION_TYPES,
        help="Only list options of this value type",
    )
    options_parser.set_defaults(func=cmd_options)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    # Execute the command
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
