"""
Command-line interface for the ARRIS password-of-the-day generator.

Provides argument parsing, output formatting and the main execution flow.
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

from arris_potd.config import DEFAULT_SEED, OUTPUT_FORMATS, PROGRESS_THRESHOLD
from arris_potd.encode import parse_date, seed_to_des
from arris_potd.errors import PotdError
from arris_potd.generator import generate, iter_range
from arris_potd.logging_setup import _setup_logging

log = logging.getLogger("arris-potd")


def current_date() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="arris-potd",
        description="ARRIS/Commscope password-of-the-day generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Today's password, default seed
  %(prog)s -d 2023-01-01 -s admin           # Password for one date
  %(prog)s -r 2023-01-01 2023-01-31 -f json -o january.json
  %(prog)s -D -s admin                      # Show the DES key for a seed

The default seed can also be set with the ARRIS_POTD_SEED env var.
        """,
    )
    parser.add_argument(
        "-s", "--seed", default=DEFAULT_SEED,
        help="String of 4-8 characters, used in password generation to mutate output",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-d", "--date",
        help="Generate a password for the given date (YYYY-MM-DD, default: today)",
    )
    mode.add_argument(
        "-r", "--range", nargs=2, metavar=("START", "END"),
        help="Generate a list of passwords given start and end dates",
    )
    mode.add_argument(
        "-D", "--des", action="store_true",
        help="Output DES representation of seed",
    )
    parser.add_argument(
        "-f", "--format", choices=OUTPUT_FORMATS, default="text",
        help="Password output format, either text or json (default: text)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Password or list will be written to given filename",
    )
    parser.add_argument(
        "--force", action="store_true", default=False,
        help="Overwrite the output file if it already exists",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print output to console even when writing to file",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log errors (suppresses the file-written notice)",
    )
    return parser.parse_args(argv)


def render(results: dict[str, str], fmt: str, single: bool = False) -> str:
    """
    Format ``{date: password}`` results.

    ``text`` gives the bare password for a single date and one
    ``DATE PASSWORD`` line per day for a range; ``json`` gives an indented
    object with the dates in chronological order.
    """
    if fmt == "json":
        return json.dumps(results, indent=2)
    if single:
        return next(iter(results.values()))
    return "\n".join(f"{d} {pw}" for d, pw in results.items())


def write_output(path: Path, text: str, force: bool = False) -> None:
    """Write *text* to *path*, refusing to clobber an existing file unless *force*."""
    mode = "w" if force else "x"
    with open(path, mode, encoding="utf-8") as f:
        f.write(text + "\n")
    log.info("Wrote %s", path)


def _collect_range(args: argparse.Namespace) -> dict[str, str]:
    start, end = args.range
    days = iter_range(start, end, args.seed)
    if args.output and _TQDM_AVAILABLE and len(days) >= PROGRESS_THRESHOLD:
        return dict(_tqdm(days, total=len(days), unit="day", desc="Generating", file=sys.stderr))
    return dict(days)


def run(args: argparse.Namespace) -> str:
    """Produce the output text for the parsed arguments."""
    if args.des:
        return seed_to_des(args.seed)
    if args.range:
        return render(_collect_range(args), args.format)

    date_str = args.date or current_date()
    password = generate(date_str, args.seed)
    return render({parse_date(date_str).isoformat(): password}, args.format, single=True)


def main(argv=None) -> int:
    """
    Main entry point for the generator CLI.

    Returns the process exit status: 0 on success, 1 on invalid input or an
    output file that cannot be written.
    """
    args = parse_args(argv)

    _setup_logging(debug=args.debug, quiet=args.quiet)

    try:
        output = run(args)
    except PotdError as exc:
        log.error("%s", exc)
        return 1

    if args.output:
        try:
            write_output(Path(args.output), output, force=args.force)
        except FileExistsError:
            log.error("Output file '%s' already exists (use --force to overwrite)", args.output)
            return 1
        except OSError as exc:
            log.error("Unable to write '%s': %s", args.output, exc)
            return 1
        if not args.verbose:
            return 0

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
