import hashlib
from typing import Iterable

from .config import PDA_MARKER


def compute_digest(seeds: Iterable[bytes], program_id: bytes, marker: bytes = PDA_MARKER) -> bytes:
    """
    SHA256 over seeds || program id || marker

    Seeds are hashed back to back with no length prefix or separator, so
    the bump seed (when present) must already be the last seed. The
    program id is always 32 bytes, which keeps the boundaries unambiguous.
    """
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(program_id)
    hasher.update(marker)
    return hasher.digest()
