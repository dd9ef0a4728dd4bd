"""
Password-of-the-day generation for one date or a range of dates.

Both entry points validate all of their input before any DES work is done:
the seed first, then the date(s).  Invalid input raises one of the
:mod:`arris_potd.errors` exceptions and nothing is produced.
"""

import logging
from datetime import date, timedelta
from typing import Iterator

from arris_potd.cipher import encrypt_block
from arris_potd.config import DEFAULT_SEED
from arris_potd.encode import (
    derive_key,
    encode_date,
    encode_password,
    format_date,
    parse_date,
)
from arris_potd.errors import InvalidDateRange

log = logging.getLogger("arris-potd")


def _password_for(key: bytes, d: date) -> str:
    return encode_password(encrypt_block(key, encode_date(d)))


def generate(date_str: str, seed: str = DEFAULT_SEED) -> str:
    """Return the password of the day for *date_str* under *seed*."""
    key = derive_key(seed)
    d = parse_date(date_str)
    password = _password_for(key, d)
    log.debug("%s -> %s", format_date(d), password)
    return password


class PasswordRange:
    """
    A validated, inclusive range of days under one derived key.

    ``len()`` is the number of days; iterating yields
    ``(YYYY-MM-DD, password)`` pairs in chronological order.
    """

    def __init__(self, key: bytes, first: date, last: date):
        self.key = key
        self.first = first
        self.last = last

    def __len__(self) -> int:
        return (self.last - self.first).days + 1

    def __iter__(self) -> Iterator[tuple[str, str]]:
        d = self.first
        while d <= self.last:
            yield format_date(d), _password_for(self.key, d)
            d += timedelta(days=1)


def iter_range(start: str, end: str, seed: str = DEFAULT_SEED) -> PasswordRange:
    """
    Validate *start*..*end* and return the days as a :class:`PasswordRange`.

    Validation happens eagerly when this is called, not on first iteration,
    so a bad seed or range fails before the caller starts consuming.
    """
    key = derive_key(seed)
    first = parse_date(start)
    last = parse_date(end)
    if first > last:
        raise InvalidDateRange(
            f"Invalid date range: start {format_date(first)} is after end {format_date(last)}",
            start,
            end,
        )
    days = PasswordRange(key, first, last)
    log.debug("Generating %d passwords from %s to %s",
              len(days), format_date(first), format_date(last))
    return days


def generate_range(start: str, end: str, seed: str = DEFAULT_SEED) -> dict[str, str]:
    """
    Return an ordered ``{YYYY-MM-DD: password}`` mapping for *start*..*end*.

    Both ends are inclusive and keys are in chronological order.  The result
    is built completely or an exception is raised; there are no partial
    results.
    """
    return dict(iter_range(start, end, seed))
