"""
Cipher Errors

Exceptions raised when arguments do not have the shape the cipher needs.
They all derive from ValueError, so callers catching ValueError keep working.

Note that a wrong key or round count on decryption is never an error: the
cipher has no way to detect it and simply produces the wrong plaintext.
Integrity has to be provided by the caller.
"""


class TEACipherError(ValueError):
    """Base class for all cipher argument errors."""


class InvalidLength(TEACipherError):
    """Buffer length is not a multiple of the block size, or a block has the wrong size."""


class InvalidKeyLength(TEACipherError):
    """Key is not exactly 128 bits (16 bytes or 4 words)."""


class InvalidRoundCount(TEACipherError):
    """Round count is not a positive integer."""
