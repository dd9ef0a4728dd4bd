"""
arris_potd.cipher
=================
Single-block DES used to turn the date block into the password bytes.

Public API
----------
    from arris_potd.cipher import encrypt_block, key_schedule
"""

from .des import encrypt_block, key_schedule

__all__ = ["encrypt_block", "key_schedule"]
