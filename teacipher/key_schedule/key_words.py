"""
Key Word Conversion

This module turns a 16-byte key into the four 32-bit words used by the
round engine, and back. Each word is read from exactly 4 bytes in an
explicit byte order, so the result never depends on the host machine.
"""

import secrets
from typing import List, Sequence

from ..errors import InvalidKeyLength

KEY_SIZE = 16  # 128 bits
WORD_SIZE = 4
BYTE_ORDERS = ('little', 'big')


def check_byteorder(byteorder: str) -> str:
    """
    Validate a byte order name.

    Raises:
        ValueError: If byteorder is not 'little' or 'big'
    """
    if byteorder not in BYTE_ORDERS:
        raise ValueError(f"Byte order must be 'little' or 'big', got {byteorder!r}")
    return byteorder


def key_to_words(key: bytes, byteorder: str = 'little') -> List[int]:
    """
    Split a 128-bit key into four 32-bit words.

    Args:
        key: The key as a bytes-like object of exactly 16 bytes
        byteorder: Byte order of each word, 'little' (default) or 'big'

    Returns:
        List of four 32-bit unsigned integers

    Raises:
        InvalidKeyLength: If the key is not exactly 16 bytes
    """
    check_byteorder(byteorder)
    key = memoryview(key).cast('B')
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"Key must be exactly {KEY_SIZE} bytes, got {len(key)}")

    return [int.from_bytes(key[i:i + WORD_SIZE], byteorder=byteorder)
            for i in range(0, KEY_SIZE, WORD_SIZE)]


def words_to_key(words: Sequence[int], byteorder: str = 'little') -> bytes:
    """
    Join four 32-bit words back into a 16-byte key.

    Args:
        words: Four 32-bit unsigned integers
        byteorder: Byte order of each word, 'little' (default) or 'big'

    Returns:
        The key as 16 bytes

    Raises:
        InvalidKeyLength: If there are not exactly four words
    """
    check_byteorder(byteorder)
    if len(words) != KEY_SIZE // WORD_SIZE:
        raise InvalidKeyLength(f"Key must be exactly {KEY_SIZE // WORD_SIZE} words, got {len(words)}")
    return b''.join(word.to_bytes(WORD_SIZE, byteorder=byteorder) for word in words)


def generate_key() -> bytes:
    """
    Generate a cryptographically secure random 128-bit key.

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(KEY_SIZE)
