# ==================================================
# sample_hash/source.py
# ==================================================
"""Byte sources: the only I/O the hashing pipeline needs."""
from __future__ import annotations
import errno, io, os
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator

from .const    import READ_CHUNK_SIZE
from .errors   import SourceIOError
from .sampling import SampleSpec


class ByteSource(ABC):
    """Supplies exactly ``length`` bytes starting at ``offset``."""

    name: str | None = None

    @property
    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def read_exact(self, offset: int, length: int) -> bytes: ...

    # ------------------------------------------------------------------
    def _check_range(self, offset: int, length: int):
        if offset < 0 or length < 0 or offset + length > self.length:
            raise SourceIOError(
                errno.EINVAL,
                f"range [{offset}, {offset + length}) outside input of {self.length} bytes",
                self.name)


class MemorySource(ByteSource):
    """In-memory bytes-like object, sliced without copying the whole buffer."""

    def __init__(self, data, name: str | None = None):
        view = memoryview(data)
        if not view.c_contiguous:
            # strided views cannot be cast; copy just this buffer
            view = memoryview(view.tobytes())
        self._view = view.cast("B")
        self.name  = name

    @property
    def length(self) -> int:
        return self._view.nbytes

    def read_exact(self, offset: int, length: int) -> bytes:
        self._check_range(offset, length)
        return self._view[offset:offset + length].tobytes()


class FileSource(ByteSource):
    """
    Seekable binary file object.

    The length is taken once, by seeking to the end. The handle is
    borrowed: opening and closing it is up to the caller.
    """

    def __init__(self, fileobj: BinaryIO, name: str | None = None):
        self._f   = fileobj
        self.name = name if name is not None else getattr(fileobj, "name", None)
        try:
            self._length = self._f.seek(0, io.SEEK_END)
        except OSError as e:
            raise SourceIOError(e.errno or errno.EIO,
                                f"cannot determine length: {e}", self.name) from e

    @property
    def length(self) -> int:
        return self._length

    def read_exact(self, offset: int, length: int) -> bytes:
        self._check_range(offset, length)
        buf = bytearray()
        try:
            self._f.seek(offset, io.SEEK_SET)
            while len(buf) < length:
                chunk = self._f.read(length - len(buf))
                if not chunk:
                    break
                buf += chunk
        except OSError as e:
            raise SourceIOError(e.errno or errno.EIO,
                                f"read of {length} bytes at {offset} failed: {e}",
                                self.name) from e
        if len(buf) != length:
            # file shrank after its length was taken
            raise SourceIOError(
                errno.EIO,
                f"short read at {offset}: wanted {length} bytes, got {len(buf)}",
                self.name)
        return bytes(buf)


# ── range iteration ─────────────────────────────────────────
def iter_ranges(source: ByteSource, spec: SampleSpec,
                chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the bytes of every range in ``spec``, in order, in bounded chunks."""
    for offset, length in spec:
        end = offset + length
        while offset < end:
            n = min(chunk_size, end - offset)
            yield source.read_exact(offset, n)
            offset += n


def fspath(path: str | os.PathLike) -> str:
    """Normalise a user supplied path; surrounding whitespace is ignored."""
    if isinstance(path, str):
        return path.strip()
    return os.fspath(path)
