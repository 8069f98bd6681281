#!/usr/bin/env python3
"""
Curve Module - ed25519 point membership check
============================================

A program derived address must not be a valid ed25519 public key,
otherwise someone could hold its private key. This module answers the
single question the deriver needs: do these 32 bytes decompress to a
point on the curve?

Decoding rules (same as the Solana runtime and filippo.io/edwards25519):
- Bit 255 is the sign of x, bits 0..254 are y, little-endian
- y is reduced modulo p = 2^255 - 19, so non-canonical encodings count
- The point exists iff (y^2 - 1) / (d*y^2 + 1) is a square mod p
- x = 0 with the sign bit set is accepted

Point decompression is delegated to the ecdsa library's Edwards curve
implementation.
"""

from ecdsa.curves import Ed25519
from ecdsa.ellipticcurve import PointEdwards
from ecdsa.errors import MalformedPointError

from .config import ADDRESS_LENGTH
from .exceptions import InvalidLengthError


def is_on_curve(digest: bytes) -> bool:
    """
    Check whether 32 bytes decode to a point on edwards25519

    Args:
    - digest: Compressed point candidate (normally a SHA256 digest)

    Returns:
    - True if point decompression succeeds, False otherwise

    Raises:
    - InvalidLengthError: If digest is not 32 bytes long
    """
    if len(digest) != ADDRESS_LENGTH:
        raise InvalidLengthError(len(digest))
    try:
        PointEdwards.from_bytes(Ed25519.curve, bytes(digest))
    except MalformedPointError:
        return False
    return True
