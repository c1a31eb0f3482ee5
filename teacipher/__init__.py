"""
TEACipher - TEA/XTEA Block Cipher Library

This library implements the TEA and XTEA 64-bit block ciphers with a
128-bit key, applied block by block to byte buffers.

Key Features:
- TEA and XTEA round schedules, selected per cipher instance
- Configurable round count (default: 32)
- In-place encryption of block-aligned buffers
- Explicit, host-independent byte order (little-endian by default)
- Arguments validated before any data is modified

The cipher provides no padding, chaining or authentication.
"""

from .cipher_core import DELTA, DEFAULT_ROUNDS, Variant, encipher_block, decipher_block
from .ecb_mode import TEACipher, encrypt, decrypt, BLOCK_SIZE
from .errors import TEACipherError, InvalidLength, InvalidKeyLength, InvalidRoundCount
from .key_schedule import key_to_words, generate_key

__version__ = '0.1.0'
__author__ = 'TEACipher Team'

__all__ = [
    'DELTA', 'DEFAULT_ROUNDS', 'BLOCK_SIZE', 'Variant',
    'encipher_block', 'decipher_block',
    'TEACipher', 'encrypt', 'decrypt',
    'key_to_words', 'generate_key',
    'TEACipherError', 'InvalidLength', 'InvalidKeyLength', 'InvalidRoundCount',
]
