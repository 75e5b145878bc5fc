"""SHA3-512 digests as bit sequences."""

from __future__ import annotations

import hashlib

from curvepass.bits import bits_from_bytes


def sha3_512_bits(master: str | bytes) -> int:
    """Hash ``master`` with SHA3-512 and return the digest as a 512-bit sequence."""
    data = master.encode("utf-8") if isinstance(master, str) else master
    return bits_from_bytes(hashlib.sha3_512(data).digest())