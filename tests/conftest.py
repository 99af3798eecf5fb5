import hashlib

import pytest

from sample_hash import Hasher


def md5_stream(n: int) -> bytes:
    """n bytes of non-repeating, reproducible content."""
    out = bytearray()
    i = 0
    while len(out) < n:
        out += hashlib.md5(b"A" * (i + 1)).digest()
        i += 1
    return bytes(out[:n])


@pytest.fixture
def hasher():
    return Hasher()


@pytest.fixture
def write_file(tmp_path):
    def _write(data: bytes, name: str = "input.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
