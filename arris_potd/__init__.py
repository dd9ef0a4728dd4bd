"""
arris_potd
==========
Python package for generating the ARRIS/Commscope cable-modem
"password of the day" from a shared seed and a calendar date.

Package structure
-----------------
arris_potd/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m arris_potd``
├── config.py         – configuration constants (default seed, alphabet, ...)
├── errors.py         – InvalidSeed / InvalidDate / InvalidDateRange
├── logging_setup.py  – colored console logging
├── generator.py      – generate / generate_range / iter_range
├── cli.py            – argparse CLI
├── cipher/           – sub-package: single-block DES
│   ├── des.py        – key schedule, Feistel rounds, encrypt_block
│   └── tables.py     – FIPS 46-3 permutation and S-box tables
└── encode/           – sub-package: input and output encoders
    ├── seed.py       – seed validation, seed -> DES key
    ├── date.py       – date parsing, date -> plaintext block
    └── password.py   – cipher block -> printable password

Quick start
-----------
    from arris_potd import generate, generate_range

    generate("2023-01-01", "admin")                       # 'YmmynQSi'
    generate_range("2023-01-01", "2023-01-03", "admin")   # {date: password}
"""

__version__ = "1.0.0"

from .errors    import PotdError, InvalidSeed, InvalidDate, InvalidDateRange
from .generator import generate, generate_range, iter_range
from .encode    import derive_key, seed_to_des, parse_date, encode_date, encode_password
from .cipher    import encrypt_block

__all__ = [
    "__version__",
    "PotdError",
    "InvalidSeed",
    "InvalidDate",
    "InvalidDateRange",
    "generate",
    "generate_range",
    "iter_range",
    "derive_key",
    "seed_to_des",
    "parse_date",
    "encode_date",
    "encode_password",
    "encrypt_block",
]
