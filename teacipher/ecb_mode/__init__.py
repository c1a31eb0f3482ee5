"""
ECB Mode Package

This package applies the round engine block by block to byte buffers,
with no chaining between blocks.
"""

from .buffer_cipher import TEACipher, encrypt, decrypt, BLOCK_SIZE, CIPHER_DEFAULT_PARAMS

__all__ = ['TEACipher', 'encrypt', 'decrypt', 'BLOCK_SIZE', 'CIPHER_DEFAULT_PARAMS']
