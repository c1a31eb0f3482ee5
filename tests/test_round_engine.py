"""Tests for the TEA/XTEA round engine."""

import pytest

from teacipher.cipher_core.round_engine import (
    DELTA,
    Variant,
    check_key_words,
    decipher,
    decipher_block,
    encipher,
    encipher_block,
)
from teacipher.errors import InvalidKeyLength, InvalidLength, InvalidRoundCount
from teacipher.key_schedule import key_to_words

from conftest import bit_difference


def _be_words(data: bytes) -> list:
    return [int.from_bytes(data[i:i + 4], "big") for i in range(0, len(data), 4)]


def _be_bytes(words) -> bytes:
    return b"".join(w.to_bytes(4, "big") for w in words)


# Big-endian vectors, 32 rounds
XTEA_VECTORS = [
    (bytes(range(16)), "4142434445464748", "497df3d072612cb5"),
    (bytes(16), "4142434445464748", "a0390589f8b8efa5"),
    (b"0123456789012345", b"ABCDEFGH".hex(), "b67c01662ff6964a"),
]


def test_delta_constant():
    assert DELTA == 0x9E3779B9


def test_tea_zero_vector():
    """TEA with an all-zero key and block gives the classic reference output."""
    block = [0, 0]
    encipher_block(block, [0, 0, 0, 0], 32, Variant.TEA)
    assert block == [0x41EA3A0A, 0x94BAA940]

    decipher_block(block, [0, 0, 0, 0], 32, Variant.TEA)
    assert block == [0, 0]


@pytest.mark.parametrize("key,plain,cipher", XTEA_VECTORS)
def test_xtea_known_vectors(key, plain, cipher):
    words = _be_words(key)
    block = _be_words(bytes.fromhex(plain))

    encipher_block(block, words)
    assert _be_bytes(block).hex() == cipher

    decipher_block(block, words)
    assert _be_bytes(block).hex() == plain


def test_xtea_is_default_variant():
    key = [1, 2, 3, 4]
    assert encipher([5, 6], key) == encipher([5, 6], key, 32, Variant.XTEA)


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("rounds", [1, 2, 8, 32, 64])
def test_roundtrip(variant, rounds):
    key = [0xDEADBEEF, 0xCAFEBABE, 0x12345678, 0x87654321]
    block = [0x01020304, 0x05060708]

    encrypted = encipher(block, key, rounds, variant)
    assert encrypted != block
    assert decipher(encrypted, key, rounds, variant) == block


@pytest.mark.parametrize("variant", list(Variant))
def test_extreme_words_roundtrip(variant):
    key = [0xFFFFFFFF] * 4
    block = [0xFFFFFFFF, 0xFFFFFFFF]

    encrypted = encipher(block, key, variant=variant)
    assert all(0 <= w <= 0xFFFFFFFF for w in encrypted)
    assert decipher(encrypted, key, variant=variant) == block


def test_deterministic():
    key = [11, 22, 33, 44]
    assert encipher([7, 9], key) == encipher([7, 9], key)


def test_variants_differ():
    key = key_to_words(bytes(range(16)))
    assert encipher([0, 0], key, variant=Variant.TEA) != encipher([0, 0], key, variant=Variant.XTEA)


def test_wrong_round_count_gives_garbage():
    key = [1, 2, 3, 4]
    encrypted = encipher([10, 20], key, rounds=32)
    assert decipher(encrypted, key, rounds=31) != [10, 20]


def test_block_mutated_in_place_key_untouched():
    key = [1, 2, 3, 4]
    block = [10, 20]
    alias = block

    encipher_block(block, key)
    assert alias is block
    assert block != [10, 20]
    assert key == [1, 2, 3, 4]


@pytest.mark.parametrize("variant", list(Variant))
def test_avalanche_on_block_bit(variant):
    """Flipping one plaintext bit changes about half of the output bits."""
    key = [0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210]
    base = _be_bytes(encipher([0x11111111, 0x22222222], key, variant=variant))

    changed = 0
    for bit in range(64):
        block = [0x11111111, 0x22222222]
        block[bit // 32] ^= 1 << (bit % 32)
        changed += bit_difference(base, _be_bytes(encipher(block, key, variant=variant)))

    assert changed / (64 * 64) > 0.4


@pytest.mark.parametrize("variant", list(Variant))
def test_avalanche_on_key_bit(variant):
    """Flipping one key bit changes about half of the output bits."""
    key = [0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210]
    base = _be_bytes(encipher([0, 0], key, variant=variant))

    changed = 0
    for bit in range(128):
        flipped = list(key)
        flipped[bit // 32] ^= 1 << (bit % 32)
        changed += bit_difference(base, _be_bytes(encipher([0, 0], flipped, variant=variant)))

    assert changed / (128 * 64) > 0.4


def test_rejects_bad_block():
    with pytest.raises(InvalidLength):
        encipher_block([1, 2, 3], [0, 0, 0, 0])
    with pytest.raises(ValueError):
        encipher_block([1, 1 << 32], [0, 0, 0, 0])


def test_rejects_bad_key():
    block = [1, 2]
    with pytest.raises(InvalidKeyLength):
        encipher_block(block, [0, 0, 0])
    with pytest.raises(ValueError):
        check_key_words([0, 0, 0, -1])
    assert block == [1, 2]


@pytest.mark.parametrize("rounds", [0, -1, True, 2.0])
def test_rejects_bad_rounds(rounds):
    block = [1, 2]
    with pytest.raises(InvalidRoundCount):
        decipher_block(block, [0, 0, 0, 0], rounds)
    assert block == [1, 2]


def test_error_classes_are_value_errors():
    assert issubclass(InvalidLength, ValueError)
    assert issubclass(InvalidKeyLength, ValueError)
    assert issubclass(InvalidRoundCount, ValueError)


def test_variant_from_name():
    assert Variant.from_name("TEA") is Variant.TEA
    assert Variant.from_name(" xtea ") is Variant.XTEA
    with pytest.raises(ValueError):
        Variant.from_name("xxtea")
    with pytest.raises(ValueError):
        Variant.from_name(None)
