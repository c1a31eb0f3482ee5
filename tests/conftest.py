"""Shared test fixtures."""

import random

import pytest

# Reference key used across the suite: bytes 00..0f
REFERENCE_KEY = bytes(range(16))


@pytest.fixture
def key():
    """Provide a fixed 16-byte key."""
    return REFERENCE_KEY


@pytest.fixture
def rng():
    """Provide a seeded random generator for deterministic tests."""
    return random.Random(42)


def random_bytes(rng: random.Random, length: int) -> bytes:
    """Draw length random bytes from rng."""
    return bytes(rng.getrandbits(8) for _ in range(length))


def bit_difference(a: bytes, b: bytes) -> int:
    """Count the bits that differ between two equal-length byte strings."""
    return sum(bin(x ^ y).count("1") for x, y in zip(a, b))
