"""Calendar date parsing and date-to-plaintext packing."""

import logging
import re
from datetime import date

from arris_potd.config import DATE_FORMAT, MAX_YEAR, MIN_YEAR
from arris_potd.errors import InvalidDate

log = logging.getLogger("arris-potd")

# YYYY-MM-DD, or the compact YYYYMMDD form the modems print
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})|(\d{4})(\d{2})(\d{2})", re.ASCII)


def parse_date(text: str, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> date:
    """
    Parse *text* into a real calendar date.

    Accepts ``YYYY-MM-DD`` and ``YYYYMMDD``, or a ``date`` object, which
    skips parsing but not the year check.  Impossible dates such as
    ``2023-02-30`` are rejected, never clamped, and the year must fall inside
    ``[min_year, max_year]``.
    """
    if isinstance(text, date):
        parsed = text
    else:
        if not isinstance(text, str):
            raise InvalidDate(f"Date must be a string, got {type(text).__name__}", text)
        match = _DATE_RE.fullmatch(text.strip())
        if not match:
            raise InvalidDate(f"Invalid date {text!r}: expected YYYY-MM-DD", text)
        year, month, day = (int(g) for g in match.groups() if g is not None)
        try:
            parsed = date(year, month, day)
        except ValueError as exc:
            raise InvalidDate(f"Invalid date {text!r}: {exc}", text) from exc

    if not min_year <= parsed.year <= max_year:
        raise InvalidDate(
            f"Invalid date {text!s}: year must be between {min_year} and {max_year}",
            text,
        )
    return parsed


def format_date(d: date) -> str:
    """Canonical ``YYYY-MM-DD`` form used as the key of range results."""
    return d.strftime(DATE_FORMAT)


def encode_date(d: date) -> bytes:
    """
    Pack *d* into the 8-byte plaintext block.

    The block is the ASCII digits of ``MMDDYYYY`` (2023-01-01 ->
    ``b"01012023"``), one digit per byte, so distinct dates always give
    distinct blocks.
    """
    block = f"{d.month:02d}{d.day:02d}{d.year:04d}".encode("ascii")
    log.debug("Date %s -> block %s", d.isoformat(), block.hex())
    return block
