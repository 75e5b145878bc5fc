"""Bit-level helpers.

A bit sequence of width N is held as a non-negative ``int`` whose bit ``i``
is position ``i`` of the sequence.
"""

from __future__ import annotations

import logging
import struct

logger = logging.getLogger(__name__)

HASH_BITS = 512
_CHUNK_BITS = 64
_CHUNKS = HASH_BITS // _CHUNK_BITS
_MASK64 = (1 << 64) - 1
_MANTISSA_MASK = (1 << 52) - 1
_EXPONENT_BIAS = 1023

_REVERSED_BYTE = tuple(int(format(b, "08b")[::-1], 2) for b in range(256))


def bits_from_bytes(data: bytes) -> int:
    """Pack bytes into a 512-bit sequence, most significant bit of each byte first."""
    if len(data) * 8 > HASH_BITS:
        raise ValueError(f"at most {HASH_BITS // 8} bytes fit into {HASH_BITS} bits")
    value = 0
    for index, byte in enumerate(data):
        value |= _REVERSED_BYTE[byte] << (8 * index)
    return value


def bits_to_double(bits: int) -> float:
    """Reinterpret the low 64 bits as an IEEE-754 double."""
    return struct.unpack("<d", struct.pack("<Q", bits & _MASK64))[0]


def bits_to_uniform(value: int) -> float:
    """Map the low 52 bits of ``value`` to a double in [0, 1)."""
    mantissa = value & _MANTISSA_MASK
    return bits_to_double((_EXPONENT_BIAS << 52) | mantissa) - 1.0


def split_to_doubles(bits: int) -> tuple[float, ...]:
    """Split 512 bits into eight 64-bit chunks and map each to [0, 1)."""
    result = []
    for chunk in range(_CHUNKS):
        chunk_bits = (bits >> (chunk * _CHUNK_BITS)) & _MASK64
        number = bits_to_uniform(chunk_bits)
        result.append(number)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "chunk %d bits %s double %.20f",
                chunk,
                format_bits(chunk_bits, _CHUNK_BITS),
                number,
            )
    return tuple(result)


def format_bits(bits: int, width: int) -> str:
    """Show positions 0..width-1 in order, grouped into bytes."""
    digits = "".join(str((bits >> i) & 1) for i in range(width))
    return " ".join(digits[start:start + 8] for start in range(0, width, 8))


def bits_to_string(bits: int, width: int) -> str:
    """Render the sequence highest position first, like a binary numeral."""
    return format(bits & ((1 << width) - 1), f"0{width}b")