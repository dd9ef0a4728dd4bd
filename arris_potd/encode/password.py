"""Cipher-block to printable password encoding."""

from arris_potd.config import BLOCK_SIZE, PASSWORD_ALPHABET


def encode_password(cipher: bytes) -> str:
    """
    Map each ciphertext byte, in order, to ``PASSWORD_ALPHABET[byte % 57]``.

    The alphabet leaves out 0/O and 1/l/I so the result can be read off a
    screen and typed on a modem console without guessing.
    """
    if len(cipher) != BLOCK_SIZE:
        raise ValueError(f"Cipher block must be {BLOCK_SIZE} bytes, got {len(cipher)}")
    n = len(PASSWORD_ALPHABET)
    return "".join(PASSWORD_ALPHABET[b % n] for b in cipher)
