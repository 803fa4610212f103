from hypothesis import given
from hypothesis import strategies as st

from rmaim.sharedkey import gen_hash_key


def test_empty_name_is_seed():
    assert gen_hash_key("") == 5381


def test_single_character():
    assert gen_hash_key("a") == 177670


def test_names_differ():
    assert gen_hash_key("camera_0") != gen_hash_key("camera_1")


@given(st.text(max_size=64))
def test_key_is_signed_32_bit_and_stable(name):
    key = gen_hash_key(name)
    assert -(2**31) <= key < 2**31
    assert gen_hash_key(name) == key


@given(st.text(min_size=1, max_size=16))
def test_extending_name_changes_key(name):
    assert gen_hash_key(name + "\x01") != gen_hash_key(name + "\x02")