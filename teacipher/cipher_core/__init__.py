"""
Cipher Core Package

This package implements the round engine of the cipher: the TEA and XTEA
schedules that encipher and decipher a single 64-bit block.
"""

from .round_engine import (
    DELTA,
    DEFAULT_ROUNDS,
    Variant,
    encipher_block,
    decipher_block,
    encipher,
    decipher,
)

__all__ = [
    'DELTA', 'DEFAULT_ROUNDS', 'Variant',
    'encipher_block', 'decipher_block', 'encipher', 'decipher',
]
