"""Derivation of the hexadecimal digit map from a master key."""

from __future__ import annotations

import logging

from curvepass.bits import HASH_BITS, format_bits, split_to_doubles
from curvepass.functions import LinearFunction, TangentialFunction
from curvepass.hashing import sha3_512_bits
from curvepass.intersection import IntersectionFinder
from curvepass.numconv import extract_fraction_digits

logger = logging.getLogger(__name__)

DIGITS_PER_ENTRY = 2
HEX_SYMBOLS = "0123456789ABCDEF"
_POINT_COUNT = 8
_FRACTION_START = 3


def params_from_master(master: str | bytes) -> tuple[float, ...]:
    """Derive eight parameters in [0, 1) from the SHA3-512 hash of ``master``."""
    bits = sha3_512_bits(master)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("master key %r hash bits %s", master, format_bits(bits, HASH_BITS))
    return split_to_doubles(bits)


def row_numbers_for_map(master: str | bytes) -> tuple[int, ...]:
    """Sixteen row numbers taken from the fractions of eight curve crossings."""
    params = params_from_master(master)
    tangential = TangentialFunction(*params[:6])
    linear = LinearFunction(*params[6:])

    points = IntersectionFinder(tangential, linear).intersection_points(_POINT_COUNT)
    rows = tuple(
        extract_fraction_digits(coordinate, _FRACTION_START, DIGITS_PER_ENTRY)
        for point in points
        for coordinate in (point.x, point.y)
    )

    if logger.isEnabledFor(logging.DEBUG):
        for point in points:
            logger.debug("intersection (%.20f; %.20f)", point.x, point.y)
        logger.debug("row numbers %s", rows)
    return rows


def hex_digit_map(master: str | bytes) -> dict[str, int]:
    """Map each hexadecimal digit character to its row number."""
    mapping = dict(zip(HEX_SYMBOLS, row_numbers_for_map(master)))
    logger.debug("hex digit map %s", mapping)
    return mapping