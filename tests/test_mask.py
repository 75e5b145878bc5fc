import pytest

from curvepass.mask import CharClass, password_mask
from curvepass.numconv import from_tern

U, L, D, S = CharClass.UPPER, CharClass.LOWER, CharClass.DIGIT, CharClass.SPECIAL
ALL_ONES = (1 << 256) - 1


def _row_bits(ternary_segments, choice_bits):
    head = "".join(format(from_tern(t), "016b") for t in ternary_segments)
    text = head + "0" * 65 + choice_bits
    text += "0" * (256 - len(text))
    return int(text, 2)


def test_mask_values_are_integer_codes():
    row_bits = _row_bits(["2222", "1111", "2121", "12121"], "1010101010101010")
    codes = [int(kind) for kind in password_mask(row_bits)]
    assert codes == [2, 3, 2, 3, 1, 1, 1, 1, 2, 1, 3, 1, 1, 2, 1, 3]


def test_mask_from_constructed_bits():
    row_bits = _row_bits(["2222", "1111", "2121", "12121"], "1010101010101010")
    assert password_mask(row_bits) == (D, S, D, S, L, L, L, L, D, L, S, L, L, D, L, S)


def test_mask_length_and_members():
    mask = password_mask(ALL_ONES)
    assert len(mask) == 16
    assert all(isinstance(kind, CharClass) for kind in mask)


def test_all_choice_bits_set_gives_no_specials():
    assert S not in password_mask(ALL_ONES)


def test_clearing_choice_bits_swaps_digits_for_specials():
    choice_positions = sum(1 << position for position in range(111, 127))
    cleared = ALL_ONES & ~choice_positions
    with_digits = password_mask(ALL_ONES)
    with_specials = password_mask(cleared)
    assert D not in with_specials
    swapped = tuple(S if kind == D else kind for kind in with_digits)
    assert with_specials == swapped


def test_too_few_ternary_digits_raises():
    with pytest.raises(ValueError):
        password_mask(0)