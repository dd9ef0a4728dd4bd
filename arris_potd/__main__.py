"""
Main entry point for the arris_potd package.

Allows running the generator as: python -m arris_potd
"""

import sys

from arris_potd.cli import main

if __name__ == "__main__":
    sys.exit(main())
