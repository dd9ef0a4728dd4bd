"""
Pure-Python single-block DES.

The modem firmware checks the password of the day against plain DES output,
so the cipher has to match FIPS 46-3 bit for bit.  Blocks and keys are
handled as big-endian integers; bit 1 of every table is the most significant
bit of its input.

Only encryption of one 8-byte block is provided: there is no chaining, no IV
and no padding.
"""

from .tables import E, FP, IP, P, PC1, PC2, SBOXES, SHIFTS

BLOCK_SIZE = 8
_MASK28 = (1 << 28) - 1
_MASK32 = (1 << 32) - 1


def _permute(value: int, table: tuple, width: int) -> int:
    """Pick bits of *value* (``width`` bits wide) in the order given by *table*."""
    out = 0
    for pos in table:
        out = (out << 1) | ((value >> (width - pos)) & 1)
    return out


def _rotl28(half: int, shift: int) -> int:
    return ((half << shift) | (half >> (28 - shift))) & _MASK28


def _check_block(data: bytes, what: str) -> int:
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"DES {what} must be {BLOCK_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def key_schedule(key: bytes) -> list[int]:
    """
    Expand an 8-byte key into the sixteen 48-bit round subkeys.

    PC-1 discards the parity bit of every key byte and splits the remaining
    56 bits into the 28-bit halves C and D.  Before each round both halves
    are rotated left by the amount in SHIFTS and PC-2 selects 48 of the 56
    bits as that round's subkey.
    """
    cd = _permute(_check_block(key, "key"), PC1, 64)
    c, d = cd >> 28, cd & _MASK28

    subkeys = []
    for shift in SHIFTS:
        c = _rotl28(c, shift)
        d = _rotl28(d, shift)
        subkeys.append(_permute((c << 28) | d, PC2, 56))
    return subkeys


def _feistel(right: int, subkey: int) -> int:
    """Round function f(R, K): expand, mix in the subkey, substitute, permute."""
    x = _permute(right, E, 32) ^ subkey

    out = 0
    for i, box in enumerate(SBOXES):
        chunk = (x >> (42 - 6 * i)) & 0x3F
        row = ((chunk >> 4) & 0x2) | (chunk & 0x1)
        col = (chunk >> 1) & 0xF
        out = (out << 4) | box[row][col]
    return _permute(out, P, 32)


def encrypt_block(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt one 8-byte *plaintext* block under the 8-byte *key*."""
    block = _permute(_check_block(plaintext, "block"), IP, 64)
    left, right = block >> 32, block & _MASK32

    for subkey in key_schedule(key):
        left, right = right, left ^ _feistel(right, subkey)

    # No swap after round 16
    preoutput = (right << 32) | left
    return _permute(preoutput, FP, 64).to_bytes(BLOCK_SIZE, "big")
