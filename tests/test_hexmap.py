import pytest

from curvepass.bits import split_to_doubles
from curvepass.hashing import sha3_512_bits
from curvepass.hexmap import hex_digit_map, params_from_master, row_numbers_for_map

MASTER = "Master"


def test_params_come_from_hash_chunks():
    assert params_from_master(MASTER) == split_to_doubles(sha3_512_bits(MASTER))


def test_params_are_eight_uniform_values():
    params = params_from_master(MASTER)
    assert len(params) == 8
    assert all(0.0 <= value < 1.0 for value in params)


def test_params_depend_on_master():
    assert params_from_master("alpha") != params_from_master("beta")


def test_params_accept_bytes():
    assert params_from_master(MASTER.encode()) == params_from_master(MASTER)


def test_row_numbers_shape_and_range():
    rows = row_numbers_for_map(MASTER)
    assert len(rows) == 16
    assert all(0 <= value <= 99 for value in rows)


@pytest.mark.parametrize("master", ["alpha", "beta", "Google"])
def test_row_numbers_match_map_for_other_masters(master):
    rows = row_numbers_for_map(master)
    assert len(rows) == 16
    assert tuple(hex_digit_map(master).values()) == rows


def test_hex_map_keys_in_order():
    mapping = hex_digit_map(MASTER)
    assert list(mapping) == list("0123456789ABCDEF")


def test_hex_map_values_follow_row_numbers():
    mapping = hex_digit_map(MASTER)
    assert tuple(mapping.values()) == row_numbers_for_map(MASTER)