"""Tests for key byte/word conversion."""

import pytest

from teacipher.errors import InvalidKeyLength
from teacipher.key_schedule import generate_key, key_to_words, words_to_key


def test_key_to_words_little_endian():
    assert key_to_words(bytes(range(16))) == [0x03020100, 0x07060504, 0x0B0A0908, 0x0F0E0D0C]


def test_key_to_words_big_endian():
    assert key_to_words(bytes(range(16)), "big") == [0x00010203, 0x04050607, 0x08090A0B, 0x0C0D0E0F]


@pytest.mark.parametrize("byteorder", ["little", "big"])
def test_words_to_key_inverts(byteorder):
    key = b"0123456789abcdef"
    assert words_to_key(key_to_words(key, byteorder), byteorder) == key


def test_accepts_bytes_like():
    key = bytes(range(16))
    assert key_to_words(bytearray(key)) == key_to_words(key)
    assert key_to_words(memoryview(key)) == key_to_words(key)


@pytest.mark.parametrize("length", [0, 8, 15, 17, 32])
def test_rejects_wrong_key_size(length):
    with pytest.raises(InvalidKeyLength):
        key_to_words(bytes(length))


def test_rejects_wrong_word_count():
    with pytest.raises(InvalidKeyLength):
        words_to_key([1, 2, 3])


def test_rejects_unknown_byteorder():
    with pytest.raises(ValueError):
        key_to_words(bytes(16), "native")


def test_rejects_text_key():
    with pytest.raises(TypeError):
        key_to_words("0123456789abcdef")


def test_generate_key():
    first = generate_key()
    assert isinstance(first, bytes)
    assert len(first) == 16
    assert first != generate_key()
