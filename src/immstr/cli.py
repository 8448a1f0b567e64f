"""
immstr Command-Line Interface.

Applies a single ImmutableString operation to a value and prints the result.

Usage:
    immstr length "hello"
    immstr upper "hello"
    immstr trim "  hello  " --side left
    immstr pad 7 5 --with 0
    immstr substring "hello" 1 3
    immstr index-of "banana" an --last
    immstr replace "a-b-c" - + --count
    immstr replace "a1b22" "/\\d+/" "#" --regex --limit 1
    immstr split "a,b,,c" "/,/" --json
    immstr match "key=value" "/(\\w+)=(\\w+)/"
    immstr compare Hello hello -i
"""

import argparse
import json
import logging
import re
import sys
from typing import Optional

from immstr import __version__
from immstr.chars import DEFAULT_TRIM_MASK
from immstr.string import ImmutableString
from immstr.utils.errors import ImmutableStringError

logger = logging.getLogger(__name__)


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    import os

    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="immstr",
        description="immstr - apply immutable string operations from the shell",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Single-value commands
    for name, help_text in (
        ("length", "Print the length of a value"),
        ("upper", "Convert ASCII letters to uppercase"),
        ("lower", "Convert ASCII letters to lowercase"),
        ("reverse", "Reverse a value"),
    ):
        command_parser = subparsers.add_parser(name, help=help_text)
        command_parser.add_argument("value", help="Input text")

    # Trim command
    trim_parser = subparsers.add_parser("trim", help="Strip characters from the ends")
    trim_parser.add_argument("value", help="Input text")
    trim_parser.add_argument(
        "--mask",
        default=DEFAULT_TRIM_MASK,
        help="Characters to strip; 'a..z' names a range (default: whitespace and NUL)",
    )
    trim_parser.add_argument(
        "--side",
        choices=["both", "left", "right"],
        default="both",
        help="Which end(s) to strip (default: both)",
    )

    # Pad command
    pad_parser = subparsers.add_parser("pad", help="Pad a value to a length")
    pad_parser.add_argument("value", help="Input text")
    pad_parser.add_argument("length", type=int, help="Target length")
    pad_parser.add_argument(
        "--with",
        dest="pad",
        default=" ",
        help="Padding text, repeated as needed (default: space)",
    )
    pad_parser.add_argument(
        "--side",
        choices=["left", "right"],
        default="left",
        help="Side to pad (default: left)",
    )

    # Substring command
    substring_parser = subparsers.add_parser("substring", help="Extract a substring")
    substring_parser.add_argument("value", help="Input text")
    substring_parser.add_argument("begin", type=int, help="Start index (inclusive)")
    substring_parser.add_argument(
        "end",
        type=int,
        nargs="?",
        default=None,
        help="End index (exclusive, default: length)",
    )

    # Index-of command
    index_parser = subparsers.add_parser("index-of", help="Find a substring")
    index_parser.add_argument("value", help="Input text")
    index_parser.add_argument("needle", help="Text to search for")
    index_parser.add_argument(
        "--from",
        dest="from_index",
        type=int,
        default=0,
        help="Index to start searching from (default: 0)",
    )
    index_parser.add_argument(
        "--last",
        action="store_true",
        help="Report the last occurrence at or after --from",
    )
    index_parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Ignore ASCII case",
    )

    # Replace command
    replace_parser = subparsers.add_parser("replace", help="Replace occurrences")
    replace_parser.add_argument("value", help="Input text")
    replace_parser.add_argument("old", help="Text (or pattern with --regex) to replace")
    replace_parser.add_argument("new", help="Replacement text")
    replace_parser.add_argument(
        "--regex",
        action="store_true",
        help="Treat OLD as a regular expression",
    )
    replace_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum replacements (requires --regex)",
    )
    replace_parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Ignore ASCII case",
    )
    replace_parser.add_argument(
        "--count",
        action="store_true",
        help="Print the number of replacements to stderr",
    )

    # Split command
    split_parser = subparsers.add_parser("split", help="Split around a pattern")
    split_parser.add_argument("value", help="Input text")
    split_parser.add_argument("pattern", help="Delimiting regular expression")
    split_parser.add_argument(
        "--limit",
        type=int,
        default=-1,
        help="Maximum number of fragments (default: no limit)",
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Output fragments as a JSON list",
    )

    # Match command
    match_parser = subparsers.add_parser("match", help="Match a pattern and print groups")
    match_parser.add_argument("value", help="Input text")
    match_parser.add_argument("pattern", help="Regular expression")
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Output groups as a JSON list",
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare two values")
    compare_parser.add_argument("left", help="First value")
    compare_parser.add_argument("right", help="Second value")
    compare_parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Ignore ASCII case",
    )

    return parser


def _print_error(error: Exception) -> None:
    print(f"{Colors.RED}error:{Colors.RESET} {error}", file=sys.stderr)


def cmd_length(args: argparse.Namespace) -> int:
    print(ImmutableString(args.value).length)
    return 0


def cmd_upper(args: argparse.Namespace) -> int:
    print(ImmutableString(args.value).to_upper_case())
    return 0


def cmd_lower(args: argparse.Namespace) -> int:
    print(ImmutableString(args.value).to_lower_case())
    return 0


def cmd_reverse(args: argparse.Namespace) -> int:
    print(ImmutableString(args.value).reverse())
    return 0


def cmd_trim(args: argparse.Namespace) -> int:
    s = ImmutableString(args.value)
    if args.side == "left":
        result = s.trim_left(args.mask)
    elif args.side == "right":
        result = s.trim_right(args.mask)
    else:
        result = s.trim(args.mask)
    print(result)
    return 0


def cmd_pad(args: argparse.Namespace) -> int:
    s = ImmutableString(args.value)
    if args.side == "right":
        print(s.pad_right(args.length, args.pad))
    else:
        print(s.pad_left(args.length, args.pad))
    return 0


def cmd_substring(args: argparse.Namespace) -> int:
    print(ImmutableString(args.value).substring(args.begin, args.end))
    return 0


def cmd_index_of(args: argparse.Namespace) -> int:
    s = ImmutableString(args.value)
    if args.last:
        index = s.last_index_of(args.needle, args.from_index, args.ignore_case)
    else:
        index = s.index_of(args.needle, args.from_index, args.ignore_case)
    print(index)
    return 0


def cmd_replace(args: argparse.Namespace) -> int:
    s = ImmutableString(args.value)

    if args.limit is not None and not args.regex:
        raise ValueError("--limit requires --regex")

    if args.regex:
        pattern = args.old
        if args.ignore_case:
            pattern = ImmutableString.regex_engine.compile(args.old, re.IGNORECASE | re.ASCII)
        result = s.replace_all_with_count(pattern, args.new, args.limit)
    elif args.ignore_case:
        result = s.replace_ignore_case_with_count(args.old, args.new)
    else:
        result = s.replace_with_count(args.old, args.new)

    logger.info("Replaced %d occurrence(s)", result.count)
    print(result.value)
    if args.count:
        print(f"{Colors.GRAY}{result.count} replacement(s){Colors.RESET}", file=sys.stderr)
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    fragments = [str(part) for part in ImmutableString(args.value).split(args.pattern, args.limit)]
    if args.json:
        print(json.dumps(fragments))
    else:
        for fragment in fragments:
            print(fragment)
    return 0


def cmd_match(args: argparse.Namespace) -> int:
    groups = [str(group) for group in ImmutableString(args.value).match_groups(args.pattern)]
    if not groups:
        logger.info("No match for %r", args.pattern)
        return 1
    if args.json:
        print(json.dumps(groups))
    else:
        for group in groups:
            print(group)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    print(ImmutableString(args.left).compare_to(args.right, args.ignore_case))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging level
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "length": cmd_length,
        "upper": cmd_upper,
        "lower": cmd_lower,
        "reverse": cmd_reverse,
        "trim": cmd_trim,
        "pad": cmd_pad,
        "substring": cmd_substring,
        "index-of": cmd_index_of,
        "replace": cmd_replace,
        "split": cmd_split,
        "match": cmd_match,
        "compare": cmd_compare,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    logger.debug("Running command %s", args.command)

    try:
        return handler(args)
    except (ImmutableStringError, ValueError) as e:
        _print_error(e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
