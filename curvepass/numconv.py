"""Numeric helpers: range mapping, fraction digit extraction and base conversion."""

from __future__ import annotations

import math

_DIGITS = "0123456789ABCDEF"


def map_to_range(
    raw: float,
    low: float,
    high: float,
    can_be_zero: bool = False,
    take_abs: bool = False,
) -> float:
    """Linearly map ``raw`` from [0, 1] onto [low, high].

    Unless ``can_be_zero`` is set, an exact zero result is replaced by the
    smallest positive double. With ``take_abs`` the absolute value is returned.
    """
    result = raw * (high - low) + low
    if not can_be_zero and result == 0.0:
        result = math.nextafter(0.0, 1.0)
    if take_abs:
        result = math.fabs(result)
    return result


def extract_fraction_digits(n: float, start_position: int, length: int) -> int:
    """Return ``length`` digits of the fractional part of ``n`` from ``start_position``."""
    scale = math.pow(10, start_position - 1)
    value = math.fmod(math.fabs(n), math.pow(10, -(start_position - 1))) * scale
    return int(math.floor(value * math.pow(10, length)))


def _check_base(base: int) -> None:
    if not 2 <= base <= 16:
        raise ValueError("Base must be between 2 and 16")


def to_base(value: int, base: int) -> str:
    """Render an integer in the given base (2..16) with upper-case digits."""
    _check_base(base)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    remaining = abs(value)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(_DIGITS[digit])
    return sign + "".join(reversed(digits))


def from_base(text: str, base: int) -> int:
    """Parse ``text`` as an integer in the given base (2..16)."""
    _check_base(base)
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not body:
        raise ValueError("Empty string")
    result = 0
    for char in body:
        digit = _DIGITS.find(char.upper()) if char.isascii() else -1
        if digit < 0:
            raise ValueError(f"Invalid digit: {char!r}")
        if digit >= base:
            raise ValueError(f"Digit out of range: {char!r}")
        result = result * base + digit
    return -result if negative else result


def bin_to_tern(text: str) -> str:
    """Convert a binary string into a ternary string."""
    return to_base(from_base(text, 2), 3)


def bin_to_hex(text: str) -> str:
    """Convert a binary string into a hexadecimal string."""
    return to_base(from_base(text, 2), 16)


def to_hex(value: int) -> str:
    return to_base(value, 16)


def from_hex(text: str) -> int:
    return from_base(text, 16)


def to_bin(value: int) -> str:
    return to_base(value, 2)


def from_bin(text: str) -> int:
    return from_base(text, 2)


def to_dec(value: int) -> str:
    return to_base(value, 10)


def from_dec(text: str) -> int:
    return from_base(text, 10)


def to_tern(value: int) -> str:
    return to_base(value, 3)


def from_tern(text: str) -> int:
    return from_base(text, 3)