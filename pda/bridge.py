#!/usr/bin/env python3
"""
Bridge Module - Loosely typed entry point for foreign callers
=============================================================

Callers outside Python (the HTTP wrapper, scripts, embedding runtimes)
hand over a base58 program id and a list of seeds where each seed is
either text or raw bytes. This module converts those into a derivation
call and always answers with a plain dict:

    {"address": "<base58>", "bump": 0-255}   on success
    {"error": "<message>"}                   on failure

Text seeds are used as their UTF-8 bytes. Derivation errors never
propagate as exceptions; anything that is not a PdaError does.
"""

from typing import Any, Dict

from .derive import find_program_address
from .exceptions import PdaError


class SeedTypeError(TypeError):
    """Raised when a seed is neither text nor bytes"""
    pass


def parse_seed(value: Any) -> bytes:
    """
    Convert a text or bytes seed to bytes

    Args:
    - value: str (encoded as UTF-8) or bytes/bytearray/memoryview

    Returns:
    - Raw seed bytes

    Raises:
    - SeedTypeError: For any other type, or text that has no UTF-8 form
    """
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError:
            raise SeedTypeError("seed is not valid UTF-8 text")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise SeedTypeError("seed must be str or bytes")


def get_program_derived_address(program_id: Any, seeds: Any) -> Dict[str, Any]:
    """
    Search for the program derived address of text-or-bytes seeds

    Args:
    - program_id: Base58 program id
    - seeds: List or tuple of str/bytes seeds

    Returns:
    - {"address", "bump"} or {"error"}
    """
    if not isinstance(program_id, str) or not isinstance(seeds, (list, tuple)):
        return {"error": "args: (programId, seedsArray)"}

    raw_seeds = []
    for i, seed in enumerate(seeds):
        try:
            raw_seeds.append(parse_seed(seed))
        except SeedTypeError as e:
            return {"error": f"seed {i}: {e}"}

    try:
        address, bump = find_program_address(program_id, raw_seeds)
    except PdaError as e:
        return {"error": str(e)}

    return {"address": address, "bump": bump}
