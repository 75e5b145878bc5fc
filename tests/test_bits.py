import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from curvepass import bits


def test_first_byte_msb_goes_to_position_zero():
    assert bits.bits_from_bytes(b"\x80") == 1


def test_first_byte_lsb_goes_to_position_seven():
    assert bits.bits_from_bytes(b"\x01") == 1 << 7


@given(st.binary(min_size=0, max_size=64))
def test_bytes_recoverable_from_bit_string(data):
    value = bits.bits_from_bytes(data)
    ordered = bits.bits_to_string(value, 512)[::-1]
    recovered = bytes(int(ordered[8 * k:8 * k + 8], 2) for k in range(len(data)))
    assert recovered == data
    assert value < 1 << (8 * len(data)) or not data and value == 0


def test_too_many_bytes_rejected():
    with pytest.raises(ValueError):
        bits.bits_from_bytes(bytes(65))


@given(st.floats(allow_nan=False))
def test_bits_to_double_reinterprets(x):
    raw = int.from_bytes(struct.pack("<d", x), "little")
    assert bits.bits_to_double(raw) == x


def test_uniform_of_zero():
    assert bits.bits_to_uniform(0) == 0.0


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_uniform_range_and_exponent_ignored(value):
    result = bits.bits_to_uniform(value)
    assert 0.0 <= result < 1.0
    assert result == bits.bits_to_uniform(value & ((1 << 52) - 1))


def test_uniform_top_mantissa_close_to_one():
    result = bits.bits_to_uniform((1 << 52) - 1)
    assert 0.999 < result < 1.0


def test_split_zero():
    assert bits.split_to_doubles(0) == (0.0,) * 8


@given(st.integers(min_value=0, max_value=2**512 - 1))
def test_split_gives_eight_uniform_values(value):
    result = bits.split_to_doubles(value)
    assert len(result) == 8
    assert all(0.0 <= d < 1.0 for d in result)


@pytest.mark.parametrize("chunk", range(8))
def test_split_chunks_are_independent(chunk):
    value = 0xABCDEF << (64 * chunk)
    result = bits.split_to_doubles(value)
    assert result[chunk] == bits.bits_to_uniform(0xABCDEF)
    assert all(d == 0.0 for i, d in enumerate(result) if i != chunk)


def test_bits_to_string_is_zero_padded():
    assert bits.bits_to_string(5, 4) == "0101"


def test_format_bits_groups_by_byte():
    assert bits.format_bits(0xFF, 16) == "11111111 00000000"


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_format_bits_is_reversed_string(value):
    text = bits.format_bits(value, 64)
    assert text.replace(" ", "") == bits.bits_to_string(value, 64)[::-1]
    assert text.count(" ") == 7