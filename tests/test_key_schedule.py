import logging

import pytest

from misty1 import InvalidKeySize, expand_key, generate_key
from misty1.key_schedule import fi

RFC_KEY = bytes.fromhex('00112233445566778899aabbccddeeff')


@pytest.mark.parametrize('length', [0, 1, 15, 17, 32])
def test_invalid_key_sizes(length):
    with pytest.raises(InvalidKeySize) as excinfo:
        expand_key(bytes(length))
    assert excinfo.value.length == length
    assert str(excinfo.value) == f"misty1: invalid key size {length}"


def test_invalid_key_size_is_value_error():
    with pytest.raises(ValueError):
        expand_key(b'short')


def test_subkey_count_and_width():
    subkeys = expand_key(RFC_KEY)
    assert isinstance(subkeys, tuple)
    assert len(subkeys) == 32
    assert all(0 <= k <= 0xFFFF for k in subkeys)


def test_first_subkeys_are_key_words():
    subkeys = expand_key(RFC_KEY)
    assert subkeys[:8] == (0x0011, 0x2233, 0x4455, 0x6677,
                           0x8899, 0xaabb, 0xccdd, 0xeeff)


def test_subkey_groups():
    subkeys = expand_key(generate_key())
    for i in range(8):
        assert subkeys[8 + i] == fi(subkeys[i], subkeys[(i + 1) % 8])
        assert subkeys[16 + i] == subkeys[8 + i] & 0x1ff
        assert subkeys[24 + i] == subkeys[8 + i] >> 9


def test_expansion_is_deterministic():
    key = generate_key()
    assert expand_key(key) == expand_key(bytes(bytearray(key)))


def test_generate_key():
    key = generate_key()
    assert isinstance(key, bytes)
    assert len(key) == 16
    assert generate_key() != key


@pytest.mark.parametrize('fkey', [0x0000, 0xFFFF, 0x1234, 0xbeef])
def test_fi_is_bijective(fkey):
    outputs = {fi(x, fkey) for x in range(1 << 16)}
    assert len(outputs) == 1 << 16
    assert max(outputs) <= 0xFFFF


def test_expansion_logs_without_key_material(caplog):
    caplog.set_level(logging.DEBUG, logger='misty1.key_schedule.misty_key_schedule')
    expand_key(RFC_KEY)
    assert "Expanded 16-byte key into 32 subkeys" in caplog.text
    assert RFC_KEY.hex() not in caplog.text
