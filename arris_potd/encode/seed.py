"""Seed validation and seed-to-key derivation."""

import logging
from itertools import cycle, islice

from arris_potd.config import KEY_LENGTH, MAX_SEED_LENGTH, MIN_SEED_LENGTH
from arris_potd.errors import InvalidSeed

log = logging.getLogger("arris-potd")


def validate_seed(seed: str) -> bytes:
    """
    Check that *seed* is 4-8 printable ASCII characters and return its bytes.

    Longer seeds are rejected rather than truncated, so two seeds that share
    their first eight characters never silently produce the same key.
    """
    if not isinstance(seed, str):
        raise InvalidSeed(f"Seed must be a string, got {type(seed).__name__}", seed)
    if not MIN_SEED_LENGTH <= len(seed) <= MAX_SEED_LENGTH:
        raise InvalidSeed(
            f"Seed must be {MIN_SEED_LENGTH}-{MAX_SEED_LENGTH} characters long, "
            f"got {len(seed)}: {seed!r}",
            seed,
        )
    bad = [c for c in seed if not " " <= c <= "~"]
    if bad:
        raise InvalidSeed(
            f"Seed may only contain printable ASCII characters, got {bad[0]!r} in {seed!r}",
            seed,
        )
    return seed.encode("ascii")


def derive_key(seed: str) -> bytes:
    """
    Expand *seed* into the 8-byte DES key.

    Short seeds are repeated from the start until eight bytes are filled
    (``"admin"`` -> ``b"adminadm"``), so every seed character reaches the key.
    """
    raw = validate_seed(seed)
    key = bytes(islice(cycle(raw), KEY_LENGTH))
    log.debug("Seed %r -> key %s", seed, key.hex())
    return key


def seed_to_des(seed: str) -> str:
    """Hex rendering of the derived key, e.g. ``61 64 6D 69 6E 61 64 6D``."""
    return " ".join(f"{b:02X}" for b in derive_key(seed))
