"""
Key Schedule Package

This package converts a 128-bit key between its byte form and the four
32-bit words consumed by the round engine.
"""

from .key_words import key_to_words, words_to_key, generate_key

__all__ = ['key_to_words', 'words_to_key', 'generate_key']
