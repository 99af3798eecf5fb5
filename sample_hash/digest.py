# ==================================================
# sample_hash/digest.py
# ==================================================
"""
Final digest layout (16 bytes)::

    [0]        B, number of length bytes (0..8)
    [1 : 1+B]  input length, little-endian, no leading zero byte
    [1+B : 16] raw hash bytes at the same positions
"""
from __future__ import annotations
import binascii

from .const  import DIGEST_SIZE, MAX_INPUT_LENGTH, MAX_LENGTH_BYTES
from .errors import ConfigurationError


class Digest(bytes):
    """Immutable 16-byte fingerprint; ``str()`` gives 32 lowercase hex chars."""

    def __new__(cls, value=b""):
        obj = super().__new__(cls, value)
        if len(obj) != DIGEST_SIZE:
            raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(obj)}")
        if obj[0] > MAX_LENGTH_BYTES:
            raise ValueError(f"invalid length prefix {obj[0]}")
        return obj

    @classmethod
    def from_hex(cls, text: str) -> Digest:
        try:
            raw = binascii.unhexlify(text.strip())
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"not a hex digest: {text!r}") from e
        return cls(raw)

    @classmethod
    def from_int(cls, value: int) -> Digest:
        try:
            raw = value.to_bytes(DIGEST_SIZE, "little")
        except OverflowError as e:
            raise ValueError(f"not a 128-bit digest: {value}") from e
        return cls(raw)

    # ------------------------------------------------------------------
    @property
    def size_bytes(self) -> int:
        return self[0]

    @property
    def length(self) -> int:
        """Input length recovered from the prefix."""
        return int.from_bytes(self[1:1 + self[0]], "little")

    def __int__(self):
        return int.from_bytes(self, "little")

    def __str__(self):
        return self.hex()

    def __repr__(self):
        return f"Digest('{self.hex()}')"


def length_bytes(total_length: int) -> int:
    """Smallest B such that ``total_length`` fits in B bytes (0 for 0)."""
    if total_length < 0 or total_length > MAX_INPUT_LENGTH:
        raise ConfigurationError(
            f"input length {total_length} outside [0, {MAX_INPUT_LENGTH}]")
    return (total_length.bit_length() + 7) // 8


def compose(raw_hash: bytes, total_length: int) -> Digest:
    """Splice ``total_length`` into the head of ``raw_hash``."""
    if len(raw_hash) != DIGEST_SIZE:
        raise ValueError(f"raw hash must be {DIGEST_SIZE} bytes, got {len(raw_hash)}")
    b   = length_bytes(total_length)
    out = bytearray(raw_hash)
    out[0] = b
    out[1:1 + b] = total_length.to_bytes(b, "little")
    return Digest(out)
