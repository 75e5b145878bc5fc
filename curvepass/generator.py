"""Password assembly and the command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence

from curvepass.bits import bits_to_string
from curvepass.hashing import sha3_512_bits
from curvepass.hexmap import hex_digit_map
from curvepass.mask import CharClass, ROW_BITS, password_mask
from curvepass.numconv import bin_to_hex

_RESET = "\033[0m"
_BOLD = "\033[1m"
_FG_CYAN = "\033[36m"

CHARACTER_SETS = {
    CharClass.UPPER: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharClass.LOWER: "abcdefghijklmnopqrstuvwxyz",
    CharClass.DIGIT: "0123456789",
    CharClass.SPECIAL: "-_+=.@#^&*~`",
}

_HEX_LENGTH = 16
_SEGMENT_BITS = 16
_HALF_MASK = (1 << ROW_BITS) - 1


def format_password_box(password: str) -> str:
    """Return the password framed in a bold cyan box."""
    border = "-" * (len(password) + 4)
    return (
        f"{_BOLD}{_FG_CYAN}"
        f"┌{border}┐\n"
        f"│  {password}  │\n"
        f"└{border}┘\n"
        f"{_RESET}"
    )


def apply_password_mask(encoded_password: str, mask: Sequence[int]) -> str:
    """Turn two-digit codes into characters of the classes the mask names.

    Positions whose mask value names no character class are left out.
    """
    characters = []
    for index, kind in enumerate(mask):
        code = int(encoded_password[2 * index:2 * index + 2])
        charset = CHARACTER_SETS.get(kind)
        if charset is not None:
            characters.append(charset[code % len(charset)])
    return "".join(characters)


def generate_password(
    row_bits: int, hex_map: Mapping[str, int], mask: Sequence[int]
) -> str:
    """Build a password from 256 bits, a hex digit map and a character-class mask."""
    text = bits_to_string(row_bits, ROW_BITS)
    hex_string = "".join(
        bin_to_hex(text[start:start + _SEGMENT_BITS])
        for start in range(0, ROW_BITS, _SEGMENT_BITS)
    ).rjust(_HEX_LENGTH, "0")

    encoded = "".join(
        ("0" if value < 10 else "") + str(value)
        for value in (hex_map[symbol] for symbol in hex_string)
    )
    return apply_password_mask(encoded, mask)


def derive_password(master: str | bytes, app_name: str | bytes) -> str:
    """Derive the password for ``app_name`` under ``master``."""
    mapping = hex_digit_map(master)
    app_bits = sha3_512_bits(app_name)
    low = app_bits & _HALF_MASK
    high = app_bits >> ROW_BITS
    return generate_password(high, mapping, password_mask(low))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Derive a deterministic password from a master key and an application name."
    )
    parser.add_argument("master", nargs="?", default="Master", help="master key")
    parser.add_argument("app_name", nargs="?", default="Google", help="application name")
    args = parser.parse_args(argv)

    generated = derive_password(args.master, args.app_name)
    print(f"Master key: {args.master}")
    print(f"App name: {args.app_name}")
    print(format_password_box(generated), end="")
    return 0