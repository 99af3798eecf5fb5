import pytest

from sample_hash import ConfigurationError, Digest, compose
from sample_hash.digest import length_bytes

RAW = bytes(range(0xA0, 0xB0))


def test_zero_length_keeps_raw_tail():
    d = compose(RAW, 0)
    assert d == b"\x00" + RAW[1:]
    assert d.size_bytes == 0
    assert d.length == 0


def test_length_is_little_endian_and_minimal():
    d = compose(RAW, 100_500)                 # 0x018894
    assert d[:4] == bytes([3, 0x94, 0x88, 0x01])
    assert d[4:] == RAW[4:]
    assert d.length == 100_500


@pytest.mark.parametrize("n, b", [(0, 0), (1, 1), (255, 1), (256, 2), (65535, 2),
                                  (65536, 3), (2**32, 5), (2**64 - 1, 8)])
def test_length_bytes(n, b):
    assert length_bytes(n) == b
    assert compose(RAW, n).size_bytes == b


def test_max_length():
    d = compose(RAW, 2**64 - 1)
    assert d[:9] == b"\x08" + b"\xff" * 8
    assert d[9:] == RAW[9:]


@pytest.mark.parametrize("n", [-1, 2**64])
def test_length_out_of_range(n):
    with pytest.raises(ConfigurationError):
        compose(RAW, n)


def test_raw_hash_must_be_16_bytes():
    with pytest.raises(ValueError):
        compose(RAW[:15], 1)


def test_digest_is_always_16_bytes():
    for n in (0, 1, 1 << 20, 2**64 - 1):
        assert len(compose(RAW, n)) == 16


def test_hex_round_trip():
    d = compose(RAW, 4096)
    text = str(d)
    assert len(text) == 32
    assert text == text.lower() == d.hex()
    assert Digest.from_hex(text) == d
    assert Digest.from_hex(text.upper()) == d
    assert isinstance(Digest.from_hex(text), Digest)


def test_int_round_trip():
    d = compose(RAW, 131072)
    assert int(d) == int.from_bytes(d, "little")
    assert Digest.from_int(int(d)) == d


@pytest.mark.parametrize("value", [-1, 1 << 128, 1 << 130])
def test_from_int_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Digest.from_int(value)


@pytest.mark.parametrize("bad", ["", "zz" * 16, "00" * 15, "00" * 17])
def test_from_hex_rejects_malformed(bad):
    with pytest.raises(ValueError):
        Digest.from_hex(bad)


def test_invalid_prefix_rejected():
    with pytest.raises(ValueError):
        Digest(b"\x09" + b"\x00" * 15)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
