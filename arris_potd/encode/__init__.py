"""Encoders between user input, DES blocks and the printable password."""

from .seed import validate_seed, derive_key, seed_to_des
from .date import parse_date, format_date, encode_date
from .password import encode_password

__all__ = [
    "validate_seed",
    "derive_key",
    "seed_to_des",
    "parse_date",
    "format_date",
    "encode_date",
    "encode_password",
]
