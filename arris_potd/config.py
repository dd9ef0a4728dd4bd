"""Configuration constants for the ARRIS password-of-the-day generator."""

import logging
import os
import string

log = logging.getLogger("arris-potd")


def _env_int(name: str, default: int) -> int:
    """Integer from the environment; malformed values fall back to *default*."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


# Seed used when none is given; can also be supplied via ARRIS_POTD_SEED
DEFAULT_SEED = os.environ.get("ARRIS_POTD_SEED", "MPSJKMDH")

MIN_SEED_LENGTH = 4
MAX_SEED_LENGTH = 8

# DES works on 64-bit keys and blocks
KEY_LENGTH = 8
BLOCK_SIZE = 8

# Supported span of years.  The plaintext packing holds any four-digit year,
# the span only limits what callers may ask for.
MIN_YEAR = _env_int("ARRIS_POTD_MIN_YEAR", 1970)
MAX_YEAR = _env_int("ARRIS_POTD_MAX_YEAR", 2099)

DATE_FORMAT = "%Y-%m-%d"

# Digits and letters minus the look-alikes 0/O and 1/l/I.
# Part of the output contract: changing it changes every password.
_AMBIGUOUS = frozenset("0O1lI")
PASSWORD_ALPHABET = "".join(
    c for c in string.digits + string.ascii_uppercase + string.ascii_lowercase
    if c not in _AMBIGUOUS
)
PASSWORD_LENGTH = BLOCK_SIZE

OUTPUT_FORMATS = ("text", "json")

# Ranges at least this long get a progress bar when written to a file
PROGRESS_THRESHOLD = 366
