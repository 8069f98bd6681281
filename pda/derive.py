#!/usr/bin/env python3
"""
Derivation Module - Program derived address generation
=====================================================

This module turns a program id and a list of seeds into a program derived
address (PDA): an address that is deterministic, owned by the program and
guaranteed to have no private key.

Two modes are provided:
- Search mode (derive_with_search): appends a one-byte bump seed, trying
  255 down to 0, and returns the first address that is off the curve
  together with the bump that produced it
- Direct mode (derive_direct): hashes the seeds exactly as given (bump
  already included by the caller) and fails if the result is on the curve

Derivation process:
1. Validate seed count and seed lengths
2. Decode the program id (base58, 32 bytes)
3. SHA256(seeds || [bump] || program id || "ProgramDerivedAddress")
4. Reject digests that decompress to an ed25519 point
5. Encode the accepted digest as an Address

Search order is part of the contract: existing programs store the bump
they were given, so the same inputs must always produce the same bump.

All functions are pure. Nothing is cached and nothing is logged; errors
are raised to the caller as PdaError subclasses.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .address import Address, AddressLike, to_address_bytes
from .config import MAX_BUMP, MAX_SEEDS, MAX_SEED_LENGTH
from .curve import is_on_curve
from .digest import compute_digest
from .exceptions import NoViableBumpError, PointOnCurveError, SeedTooLongError, TooManySeedsError


@dataclass
class DerivationInput:
    """Program id (Address or base58 text) and ordered seeds"""
    program_address: AddressLike
    seeds: Sequence[bytes] = field(default_factory=list)


@dataclass(frozen=True)
class DerivationOutput:
    """Derived address and the bump seed that produced it"""
    address: Address
    bump: int


def _normalize_seeds(seeds: Sequence[bytes]) -> List[bytes]:
    normalized = []
    for seed in seeds:
        if not isinstance(seed, (bytes, bytearray, memoryview)):
            raise TypeError(f"seed must be bytes, not {type(seed).__name__}")
        normalized.append(bytes(seed))
    return normalized


def _check_seeds(seeds: List[bytes], slots: int):
    """
    Validate seed count and length

    Args:
    - seeds: Seeds as given by the caller
    - slots: Slots the derivation needs (seed count, plus one for a bump)

    Raises:
    - TooManySeedsError: If slots exceeds MAX_SEEDS
    - SeedTooLongError: If any seed exceeds MAX_SEED_LENGTH
    """
    if slots > MAX_SEEDS:
        raise TooManySeedsError(slots)
    for seed in seeds:
        if len(seed) > MAX_SEED_LENGTH:
            raise SeedTooLongError(len(seed))


def derive_with_search(derivation: DerivationInput) -> DerivationOutput:
    """
    Find the program derived address and its bump seed

    Tries bump seeds from 255 down to 0 and returns the first one whose
    digest lies off the ed25519 curve, i.e. the largest viable bump.

    Args:
    - derivation: Program id and at most 15 seeds of up to 32 bytes

    Returns:
    - DerivationOutput with the address and bump seed

    Raises:
    - TooManySeedsError: More than 15 seeds (one slot is kept for the bump)
    - SeedTooLongError: A seed is longer than 32 bytes
    - InvalidEncodingError / InvalidLengthError: Bad program id
    - NoViableBumpError: Every bump produced an on-curve digest
    """
    seeds = _normalize_seeds(derivation.seeds)
    _check_seeds(seeds, len(seeds) + 1)
    program_id = to_address_bytes(derivation.program_address)

    for bump in range(MAX_BUMP, -1, -1):
        digest = compute_digest(seeds + [bytes([bump])], program_id)
        if is_on_curve(digest):
            continue
        return DerivationOutput(Address(digest), bump)

    raise NoViableBumpError()


def derive_direct(derivation: DerivationInput) -> Address:
    """
    Create a program derived address from seeds used as-is

    No bump seed is appended; callers that want one pass it as the last
    seed, e.g. ``seeds + [bytes([bump])]`` with a bump from
    derive_with_search.

    Args:
    - derivation: Program id and at most 16 seeds of up to 32 bytes

    Returns:
    - The derived Address

    Raises:
    - TooManySeedsError: More than 16 seeds
    - SeedTooLongError: A seed is longer than 32 bytes
    - InvalidEncodingError / InvalidLengthError: Bad program id
    - PointOnCurveError: The digest is a valid curve point
    """
    seeds = _normalize_seeds(derivation.seeds)
    _check_seeds(seeds, len(seeds))
    program_id = to_address_bytes(derivation.program_address)

    digest = compute_digest(seeds, program_id)
    if is_on_curve(digest):
        raise PointOnCurveError()
    return Address(digest)


def find_program_address(program_id: str, seeds: Sequence[bytes]) -> Tuple[str, int]:
    """String form of derive_with_search: returns (base58 address, bump)"""
    result = derive_with_search(DerivationInput(program_id, seeds))
    return str(result.address), result.bump


def create_program_address(program_id: str, seeds: Sequence[bytes]) -> str:
    """String form of derive_direct"""
    return str(derive_direct(DerivationInput(program_id, seeds)))
