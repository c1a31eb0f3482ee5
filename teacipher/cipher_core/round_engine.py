"""
Round Engine Implementation

This module implements the TEA and XTEA round schedules that encipher and
decipher a single 64-bit block (two 32-bit words) under a 128-bit key
(four 32-bit words).

The schedules are written over "words": each operand is either a Python int
or a numpy uint32 array. All arithmetic is reduced modulo 2**32, so the same
code transforms one block held as two ints, or every block of a buffer held
as two uint32 columns. Control flow depends only on the round count, never
on key or data bits.
"""

import enum
from typing import Callable, Dict, List, MutableSequence, Sequence, Tuple

from ..errors import InvalidKeyLength, InvalidLength, InvalidRoundCount

# Magic constant mixed into the running sum each round (golden ratio derived)
DELTA = 0x9E3779B9
MASK = 0xFFFFFFFF

DEFAULT_ROUNDS = 32
KEY_WORDS = 4
BLOCK_WORDS = 2


class Variant(enum.Enum):
    """Round schedule used by a cipher instance."""

    TEA = 'tea'
    XTEA = 'xtea'

    @classmethod
    def from_name(cls, name: str) -> 'Variant':
        """
        Look up a variant by name.

        Args:
            name: 'tea' or 'xtea', case-insensitive

        Returns:
            The matching Variant

        Raises:
            ValueError: If the name is not a known variant
        """
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown cipher variant {name!r}, expected 'tea' or 'xtea'")


def _xtea_encipher(v0, v1, key: Sequence[int], rounds: int):
    total = 0
    for _ in range(rounds):
        v0 = (v0 + ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ ((total + key[total & 3]) & MASK))) & MASK
        total = (total + DELTA) & MASK
        v1 = (v1 + ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ ((total + key[(total >> 11) & 3]) & MASK))) & MASK
    return v0, v1


def _xtea_decipher(v0, v1, key: Sequence[int], rounds: int):
    total = (DELTA * rounds) & MASK
    for _ in range(rounds):
        v1 = (v1 - ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ ((total + key[(total >> 11) & 3]) & MASK))) & MASK
        total = (total - DELTA) & MASK
        v0 = (v0 - ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ ((total + key[total & 3]) & MASK))) & MASK
    return v0, v1


def _tea_encipher(v0, v1, key: Sequence[int], rounds: int):
    k0, k1, k2, k3 = key
    total = 0
    for _ in range(rounds):
        total = (total + DELTA) & MASK
        v0 = (v0 + (((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1))) & MASK
        v1 = (v1 + (((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3))) & MASK
    return v0, v1


def _tea_decipher(v0, v1, key: Sequence[int], rounds: int):
    k0, k1, k2, k3 = key
    total = (DELTA * rounds) & MASK
    for _ in range(rounds):
        v1 = (v1 - (((v0 << 4) + k2) ^ (v0 + total) ^ ((v0 >> 5) + k3))) & MASK
        v0 = (v0 - (((v1 << 4) + k0) ^ (v1 + total) ^ ((v1 >> 5) + k1))) & MASK
        total = (total - DELTA) & MASK
    return v0, v1


_SCHEDULES: Dict[Variant, Tuple[Callable, Callable]] = {
    Variant.TEA: (_tea_encipher, _tea_decipher),
    Variant.XTEA: (_xtea_encipher, _xtea_decipher),
}


def check_rounds(rounds: int) -> int:
    """
    Validate a round count.

    Args:
        rounds: Number of rounds

    Returns:
        The round count

    Raises:
        InvalidRoundCount: If rounds is not a positive integer
    """
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
        raise InvalidRoundCount(f"Round count must be a positive integer, got {rounds!r}")
    return rounds


def check_key_words(key: Sequence[int]) -> Tuple[int, ...]:
    """
    Validate a key given as 32-bit words.

    Args:
        key: Four 32-bit unsigned words

    Returns:
        The key as a tuple of Python ints

    Raises:
        InvalidKeyLength: If the key does not have exactly four words
        ValueError: If a word is outside [0, 2**32)
    """
    if len(key) != KEY_WORDS:
        raise InvalidKeyLength(f"Key must be exactly {KEY_WORDS} words, got {len(key)}")
    words = tuple(int(word) for word in key)
    for word in words:
        if not 0 <= word <= MASK:
            raise ValueError(f"Key word {word:#x} does not fit in 32 bits")
    return words


def _check_block(block: Sequence[int]) -> None:
    if len(block) != BLOCK_WORDS:
        raise InvalidLength(f"Block must be exactly {BLOCK_WORDS} words, got {len(block)}")
    for word in block:
        if not 0 <= int(word) <= MASK:
            raise ValueError(f"Block word {int(word):#x} does not fit in 32 bits")


def encipher_words(v0, v1, key: Sequence[int], rounds: int = DEFAULT_ROUNDS,
                   variant: Variant = Variant.XTEA):
    """
    Encipher a pair of words without validating them.

    The words may be Python ints or numpy uint32 arrays of equal shape.
    The key must already be four Python ints.

    Returns:
        Tuple of the two enciphered words
    """
    return _SCHEDULES[variant][0](v0, v1, key, rounds)


def decipher_words(v0, v1, key: Sequence[int], rounds: int = DEFAULT_ROUNDS,
                   variant: Variant = Variant.XTEA):
    """
    Decipher a pair of words without validating them.

    Counterpart of encipher_words.

    Returns:
        Tuple of the two deciphered words
    """
    return _SCHEDULES[variant][1](v0, v1, key, rounds)


def encipher_block(block: MutableSequence[int], key: Sequence[int],
                   rounds: int = DEFAULT_ROUNDS,
                   variant: Variant = Variant.XTEA) -> None:
    """
    Encipher one 64-bit block in place.

    Args:
        block: Two 32-bit words, overwritten with the ciphertext
        key: Four 32-bit words, left untouched
        rounds: Number of rounds (default: 32)
        variant: Round schedule (default: XTEA)

    Raises:
        InvalidLength: If the block does not have exactly two words
        InvalidKeyLength: If the key does not have exactly four words
        InvalidRoundCount: If rounds is not a positive integer
    """
    _check_block(block)
    key = check_key_words(key)
    check_rounds(rounds)
    block[0], block[1] = encipher_words(int(block[0]), int(block[1]), key, rounds, variant)


def decipher_block(block: MutableSequence[int], key: Sequence[int],
                   rounds: int = DEFAULT_ROUNDS,
                   variant: Variant = Variant.XTEA) -> None:
    """
    Decipher one 64-bit block in place.

    The key, round count and variant must match the ones used to encipher.
    A mismatch is not detected: the block is silently turned into garbage.

    Args:
        block: Two 32-bit words, overwritten with the plaintext
        key: Four 32-bit words, left untouched
        rounds: Number of rounds used to encipher (default: 32)
        variant: Round schedule used to encipher (default: XTEA)

    Raises:
        InvalidLength: If the block does not have exactly two words
        InvalidKeyLength: If the key does not have exactly four words
        InvalidRoundCount: If rounds is not a positive integer
    """
    _check_block(block)
    key = check_key_words(key)
    check_rounds(rounds)
    block[0], block[1] = decipher_words(int(block[0]), int(block[1]), key, rounds, variant)


def encipher(block: Sequence[int], key: Sequence[int],
             rounds: int = DEFAULT_ROUNDS,
             variant: Variant = Variant.XTEA) -> List[int]:
    """Return an enciphered copy of a two-word block."""
    result = list(block)
    encipher_block(result, key, rounds, variant)
    return result


def decipher(block: Sequence[int], key: Sequence[int],
             rounds: int = DEFAULT_ROUNDS,
             variant: Variant = Variant.XTEA) -> List[int]:
    """Return a deciphered copy of a two-word block."""
    result = list(block)
    decipher_block(result, key, rounds, variant)
    return result
