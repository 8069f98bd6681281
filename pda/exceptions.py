#!/usr/bin/env python3
"""
Exception Module - Custom derivation exceptions
==============================================

This module defines all custom exceptions raised while decoding addresses
and deriving program addresses. Every failure reaches the caller as one of
these types; nothing is retried internally because derivation is
deterministic.

Exception hierarchy:
- PdaError: Base exception for all derivation operations
- AddressError: Base for address wire-format failures
  - InvalidEncodingError: Text is not valid base58
  - InvalidLengthError: Decoded address is not 32 bytes
- TooManySeedsError: Seed count exceeds the slot budget
- SeedTooLongError: A single seed exceeds 32 bytes
- PointOnCurveError: Direct derivation produced an on-curve hash
- NoViableBumpError: No bump seed produced an off-curve hash
"""

from .config import MAX_SEEDS, MAX_SEED_LENGTH


class PdaError(Exception):
    """
    Base exception for derivation operations

    Parent class for every error raised by the address codec and the
    deriver. Boundaries (bridge, HTTP wrapper) catch this type to tell
    caller errors apart from unexpected failures.
    """
    pass


class AddressError(PdaError):
    """
    Raised when an address fails wire-format validation

    Parent of the two ways a textual address can be rejected. Note that
    a well-formed address is not checked for being a deployed program.
    """
    pass


class InvalidEncodingError(AddressError):
    """
    Raised when address text is not valid base58

    Occurs when:
    - The text contains characters outside the base58 alphabet
      (0, O, I, l, punctuation, whitespace)
    - The text is empty or not a string
    """

    def __init__(self, message: str = "invalid base58 encoding"):
        super().__init__(message)


class InvalidLengthError(AddressError):
    """
    Raised when a decoded address is not exactly 32 bytes

    Attributes:
    - length: Number of bytes the text actually decoded to
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"invalid length: {length}")


class TooManySeedsError(PdaError):
    """
    Raised when the seed set does not fit in the seed slots

    Search mode reserves one slot for the bump seed, so ``count`` there
    includes it. Direct mode reports the seed count as given.

    Attributes:
    - count: Number of slots the derivation would have needed
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"max seeds exceeded: {count} (max: {MAX_SEEDS})")


class SeedTooLongError(PdaError):
    """
    Raised when a single seed is longer than 32 bytes

    Attributes:
    - length: Length of the first offending seed
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"seed too long: {length} bytes (max: {MAX_SEED_LENGTH})")


class PointOnCurveError(PdaError):
    """
    Raised when direct derivation lands on the ed25519 curve

    The caller picked seeds (bump included) whose hash is a valid public
    key. Such an address could have a private key, so it is refused. The
    fix is to use the bump returned by a search, not to retry.
    """

    def __init__(self, message: str = "hash landed on curve"):
        super().__init__(message)


class NoViableBumpError(PdaError):
    """
    Raised when all 256 bump seeds hash onto the curve

    Roughly half of all hashes are valid points, so this is practically
    impossible. Seeing it points at a broken curve check rather than bad
    input; treat it as fatal.
    """

    def __init__(self, message: str = "no viable bump found"):
        super().__init__(message)
