"""Character-class mask derived from 256 bits."""

from __future__ import annotations

import enum
import logging

from curvepass.bits import bits_to_string
from curvepass.numconv import bin_to_tern

logger = logging.getLogger(__name__)

ROW_BITS = 256
MASK_LENGTH = 16
_SEGMENT_BITS = 16
_TERNARY_SEGMENTS = 4
_CHOICE_START = 129


class CharClass(enum.IntEnum):
    """Kind of character at one password position."""

    UPPER = 0
    LOWER = 1
    DIGIT = 2
    SPECIAL = 3


def password_mask(row_bits: int) -> tuple[CharClass, ...]:
    """Build the 16-position character-class mask from a 256-bit sequence.

    The first four 16-bit segments, read as ternary, choose between upper case,
    lower case and "other"; each "other" position is then resolved to a digit or
    a special character by consecutive bits starting at position 129.
    """
    text = bits_to_string(row_bits, ROW_BITS)

    ternary = "".join(
        bin_to_tern(text[start:start + _SEGMENT_BITS])
        for start in range(0, _TERNARY_SEGMENTS * _SEGMENT_BITS, _SEGMENT_BITS)
    )
    if len(ternary) < MASK_LENGTH:
        raise ValueError(
            f"ternary form has {len(ternary)} digits, {MASK_LENGTH} are needed"
        )

    choices = iter(text[_CHOICE_START:_CHOICE_START + MASK_LENGTH])
    mask = []
    for digit in ternary[:MASK_LENGTH]:
        if digit == "2":
            mask.append(CharClass.DIGIT if next(choices) == "1" else CharClass.SPECIAL)
        else:
            mask.append(CharClass(int(digit)))

    logger.debug("mask %s", "".join(str(int(kind)) for kind in mask))
    return tuple(mask)