#!/usr/bin/env python3
"""
Address Module - Encodes and decodes 32-byte addresses
=====================================================

This module converts between the raw 32-byte form of an address and the
base58 text form users and networks exchange:
- Base58 encoding of raw address bytes
- Validated decoding of base58 text back to exactly 32 bytes
- An immutable Address value type built on top of the two

Key concepts:
- Base58: Bitcoin alphabet, no 0/O/I/l, leading zero bytes become '1'
- Canonical form: the encoder's output is the only text for a given value
- Length: anything that does not decode to exactly 32 bytes is rejected

Nothing here checks that an address belongs to a deployed program; only
the wire format is validated.
"""

from dataclasses import dataclass
from typing import Union

import base58

from .config import ADDRESS_LENGTH
from .exceptions import InvalidEncodingError, InvalidLengthError

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode())


def encode_address(raw: bytes) -> str:
    """
    Encode 32 raw address bytes as base58 text

    Args:
    - raw: Exactly 32 bytes

    Returns:
    - Canonical base58 string

    Raises:
    - InvalidLengthError: If raw is not 32 bytes long
    """
    raw = bytes(raw)
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidLengthError(len(raw))
    return base58.b58encode(raw).decode()


def decode_address(address: str) -> bytes:
    """
    Decode base58 address text to its 32 raw bytes

    Process:
    1. Reject non-string and empty input
    2. Reject characters outside the base58 alphabet
    3. Base58 decode
    4. Require exactly 32 decoded bytes

    Args:
    - address: Base58-encoded address string

    Returns:
    - 32 address bytes

    Raises:
    - InvalidEncodingError: If the text is not valid base58
    - InvalidLengthError: If the text decodes to anything but 32 bytes
    """
    if not isinstance(address, str) or not address:
        raise InvalidEncodingError()
    # b58decode tolerates surrounding whitespace, the wire format does not
    if not _ALPHABET.issuperset(address):
        raise InvalidEncodingError()
    try:
        raw = base58.b58decode(address)
    except ValueError as e:
        raise InvalidEncodingError() from e
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidLengthError(len(raw))
    return raw


def validate_address(address: str) -> bool:
    """
    Check that text is a well-formed 32-byte base58 address

    Args:
    - address: Address string to validate

    Returns:
    - True if the address decodes to exactly 32 bytes, False otherwise
    """
    try:
        decode_address(address)
    except (InvalidEncodingError, InvalidLengthError):
        return False
    return True


@dataclass(frozen=True)
class Address:
    """
    Address - Immutable 32-byte address value

    Only ever holds exactly 32 bytes. Build one from text with
    ``from_string`` (validated parse of user or network input) or from a
    computed digest with ``from_bytes``. ``str()`` gives the base58 text,
    ``bytes()`` the raw bytes. Equality and hashing are by value.
    """
    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) != ADDRESS_LENGTH:
            raise InvalidLengthError(len(self.raw))

    @classmethod
    def from_string(cls, address: str) -> 'Address':
        """Parse and validate base58 address text"""
        return cls(decode_address(address))

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'Address':
        return cls(bytes(raw))

    def to_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return encode_address(self.raw)

    def __repr__(self) -> str:
        return f"Address('{self}')"


AddressLike = Union[Address, str]


def to_address_bytes(address: AddressLike) -> bytes:
    """
    Get the raw bytes of an Address or of base58 address text

    Raises:
    - InvalidEncodingError / InvalidLengthError for bad text
    """
    if isinstance(address, Address):
        return address.raw
    return decode_address(address)
