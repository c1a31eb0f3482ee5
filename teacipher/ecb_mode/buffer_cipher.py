"""
Buffer Cipher (ECB-style)

This module applies the round engine across a byte buffer, 8 bytes at a
time. Every block is transformed independently: there is no chaining, no
IV and no padding, so equal plaintext blocks give equal ciphertext blocks.

The buffer is viewed as a numpy array of 32-bit words in the cipher's byte
order and all blocks are processed together, one round at a time. Results
are written back into the caller's buffer.

This mode provides confidentiality of block-aligned data only. It does not
detect tampering, a wrong key or a wrong round count; layer authentication
on top if you need it.
"""

import logging
import os
from typing import Optional, Union

import numpy as np

from ..cipher_core.round_engine import (
    DEFAULT_ROUNDS,
    Variant,
    check_rounds,
    decipher_words,
    encipher_words,
)
from ..errors import InvalidLength
from ..key_schedule.key_words import check_byteorder, generate_key, key_to_words

logger = logging.getLogger(__name__)

BLOCK_SIZE = 8  # 64 bits

# Defaults used by TEACipher and TEACipher.from_env
CIPHER_DEFAULT_PARAMS = {
    'variant': 'xtea',
    'rounds': DEFAULT_ROUNDS,
    'byteorder': 'little',
}


class TEACipher:
    """
    TEA/XTEA block cipher applied block by block to byte buffers.

    The variant and byte order are fixed when the cipher is created. The key
    and round count are passed to every call and never stored.
    """

    def __init__(self,
                 variant: Union[Variant, str] = Variant.XTEA,
                 byteorder: str = CIPHER_DEFAULT_PARAMS['byteorder']):
        """
        Initialize the cipher.

        Args:
            variant: Round schedule, Variant.XTEA (default) or Variant.TEA.
                The names 'xtea' and 'tea' are accepted too.
            byteorder: How 4 bytes map to a 32-bit word, 'little' (default)
                or 'big'. Applies to both the data and the key.
        """
        if not isinstance(variant, Variant):
            variant = Variant.from_name(variant)
        self.variant = variant
        self.byteorder = check_byteorder(byteorder)
        self._dtype = np.dtype('<u4' if byteorder == 'little' else '>u4')

    @classmethod
    def from_env(cls) -> 'TEACipher':
        """
        Create a cipher configured from the environment.

        Reads TEACIPHER_VARIANT ('tea' or 'xtea') and TEACIPHER_BYTEORDER
        ('little' or 'big'). Unset variables fall back to CIPHER_DEFAULT_PARAMS.
        """
        variant = os.environ.get('TEACIPHER_VARIANT', CIPHER_DEFAULT_PARAMS['variant'])
        byteorder = os.environ.get('TEACIPHER_BYTEORDER', CIPHER_DEFAULT_PARAMS['byteorder'])
        return cls(variant=variant, byteorder=byteorder.strip().lower())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant={self.variant}, byteorder={self.byteorder!r})"

    def _word_view(self, buffer) -> Optional[np.ndarray]:
        """
        View a writable buffer as an (n_blocks, 2) array of words.

        Returns None for an empty buffer.

        Raises:
            TypeError: If the buffer is read-only or not contiguous
            InvalidLength: If the length is not a multiple of BLOCK_SIZE
        """
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("Buffer must be writable (use encrypt_bytes for immutable data)")
        view = view.cast('B')

        if len(view) % BLOCK_SIZE != 0:
            raise InvalidLength(
                f"Buffer length must be a multiple of {BLOCK_SIZE} bytes, got {len(view)}")
        if len(view) == 0:
            return None

        return np.frombuffer(view, dtype=self._dtype).reshape(-1, 2)

    def _apply(self, buffer, key: bytes, rounds: int, decrypt: bool) -> None:
        # Validate everything before a single block is touched
        key_words = key_to_words(key, self.byteorder)
        check_rounds(rounds)
        words = self._word_view(buffer)

        operation = 'Decrypting' if decrypt else 'Encrypting'
        n_blocks = 0 if words is None else len(words)
        logger.debug("%s %d block(s) with %s, %d rounds",
                     operation, n_blocks, self.variant.name, rounds)
        if words is None:
            return

        v0 = words[:, 0].astype(np.uint32)
        v1 = words[:, 1].astype(np.uint32)

        transform = decipher_words if decrypt else encipher_words
        v0, v1 = transform(v0, v1, key_words, rounds, self.variant)

        words[:, 0] = v0
        words[:, 1] = v1

    def encrypt(self, buffer, key: bytes, rounds: int = DEFAULT_ROUNDS) -> None:
        """
        Encrypt a buffer in place.

        Args:
            buffer: Writable bytes-like object (bytearray, memoryview, ...)
                whose length is a multiple of 8
            key: The 16-byte key
            rounds: Number of rounds (default: 32)

        Raises:
            InvalidLength: If the buffer length is not a multiple of 8
            InvalidKeyLength: If the key is not 16 bytes
            InvalidRoundCount: If rounds is not a positive integer
            TypeError: If the buffer is read-only
        """
        self._apply(buffer, key, rounds, decrypt=False)

    def decrypt(self, buffer, key: bytes, rounds: int = DEFAULT_ROUNDS) -> None:
        """
        Decrypt a buffer in place.

        The key and round count must be the ones used to encrypt. A mismatch
        is not detected and leaves garbage in the buffer.

        Args:
            buffer: Writable bytes-like object whose length is a multiple of 8
            key: The 16-byte key used to encrypt
            rounds: Number of rounds used to encrypt (default: 32)

        Raises:
            InvalidLength: If the buffer length is not a multiple of 8
            InvalidKeyLength: If the key is not 16 bytes
            InvalidRoundCount: If rounds is not a positive integer
            TypeError: If the buffer is read-only
        """
        self._apply(buffer, key, rounds, decrypt=True)

    def encrypt_bytes(self, data: bytes, key: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
        """Encrypt a copy of data and return it as bytes."""
        buffer = bytearray(data)
        self.encrypt(buffer, key, rounds)
        return bytes(buffer)

    def decrypt_bytes(self, data: bytes, key: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
        """Decrypt a copy of data and return it as bytes."""
        buffer = bytearray(data)
        self.decrypt(buffer, key, rounds)
        return bytes(buffer)

    def encrypt_block(self, block: bytes, key: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
        """
        Encrypt exactly one 8-byte block.

        Raises:
            InvalidLength: If the block is not 8 bytes
        """
        if len(block) != BLOCK_SIZE:
            raise InvalidLength(f"Block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
        return self.encrypt_bytes(block, key, rounds)

    def decrypt_block(self, block: bytes, key: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
        """
        Decrypt exactly one 8-byte block.

        Raises:
            InvalidLength: If the block is not 8 bytes
        """
        if len(block) != BLOCK_SIZE:
            raise InvalidLength(f"Block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
        return self.decrypt_bytes(block, key, rounds)


def encrypt(buffer, key: bytes,
            rounds: int = DEFAULT_ROUNDS,
            variant: Union[Variant, str] = Variant.XTEA,
            byteorder: str = CIPHER_DEFAULT_PARAMS['byteorder']) -> None:
    """
    Convenience function to encrypt a buffer in place.

    Args:
        buffer: Writable bytes-like object whose length is a multiple of 8
        key: The 16-byte key
        rounds: Number of rounds (default: 32)
        variant: Round schedule (default: XTEA)
        byteorder: Word byte order (default: 'little')
    """
    TEACipher(variant, byteorder).encrypt(buffer, key, rounds)


def decrypt(buffer, key: bytes,
            rounds: int = DEFAULT_ROUNDS,
            variant: Union[Variant, str] = Variant.XTEA,
            byteorder: str = CIPHER_DEFAULT_PARAMS['byteorder']) -> None:
    """
    Convenience function to decrypt a buffer in place.

    Args:
        buffer: Writable bytes-like object whose length is a multiple of 8
        key: The 16-byte key used to encrypt
        rounds: Number of rounds used to encrypt (default: 32)
        variant: Round schedule used to encrypt (default: XTEA)
        byteorder: Word byte order used to encrypt (default: 'little')
    """
    TEACipher(variant, byteorder).decrypt(buffer, key, rounds)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    key = generate_key()
    message = bytearray(b"Sixteen byte msgand 8 more")
    message.extend(bytes(-len(message) % BLOCK_SIZE))
    original = bytes(message)

    for variant in Variant:
        cipher = TEACipher(variant)
        cipher.encrypt(message, key)
        print(f"{variant.name} ciphertext: {message.hex()}")
        cipher.decrypt(message, key)
        assert message == original

    try:
        encrypt(bytearray(7), key)
        print("ERROR: Misaligned buffer not rejected!")
    except InvalidLength as e:
        print(f"Correctly rejected misaligned buffer: {e}")

    print("Buffer cipher demo completed successfully!")
