# ==================================================
# sample_hash/hasher.py
# ==================================================
from __future__ import annotations
import errno, logging, os
from typing import BinaryIO

from .config   import SampleConfig
from .const    import SAMPLE_SIZE, SAMPLE_THRESHOLD
from .digest   import Digest, compose
from .errors   import SourceIOError
from .mixing   import mix
from .sampling import covered, select
from .source   import ByteSource, FileSource, MemorySource, fspath, iter_ranges

logger = logging.getLogger(__name__)


class Hasher:
    """
    Sampling content hasher.

    Holds an immutable SampleConfig; ``sum``, ``sum_file`` and
    ``sum_reader`` are pure functions of that config and the input, so
    one instance can be shared freely between threads.
    """

    __slots__ = ("_config",)

    def __init__(self, sample_size: int = SAMPLE_SIZE,
                 threshold: int = SAMPLE_THRESHOLD):
        self._config = SampleConfig(sample_size, threshold)

    @classmethod
    def from_config(cls, config: SampleConfig) -> Hasher:
        return cls(config.sample_size, config.threshold)

    @property
    def config(self) -> SampleConfig:
        return self._config

    def __eq__(self, other):
        if not isinstance(other, Hasher):
            return NotImplemented
        return self._config == other._config

    def __hash__(self):
        return hash(self._config)

    def __repr__(self):
        return (f"Hasher(sample_size={self._config.sample_size}, "
                f"threshold={self._config.threshold})")

    # ── public api ───────────────────────────────────────────
    def sum(self, data) -> Digest:
        """Digest of an in-memory bytes-like object."""
        return self._digest(MemorySource(data))

    def sum_file(self, path: str | os.PathLike) -> Digest:
        """Digest of the file at ``path``; the handle is closed before returning."""
        path = fspath(path)
        try:
            f = open(path, "rb")
        except OSError as e:
            raise SourceIOError(e.errno or errno.EIO,
                                f"cannot open: {e.strerror or e}", path) from e
        logger.debug("Opened %r for hashing", path)
        with f:
            return self._digest(FileSource(f, path))

    def sum_reader(self, fileobj: BinaryIO) -> Digest:
        """Digest of an open, seekable binary file; the caller keeps the handle."""
        return self._digest(FileSource(fileobj))

    # ------------------------------------------------------------------
    def _digest(self, source: ByteSource) -> Digest:
        total = source.length
        spec  = select(total, self._config.sample_size, self._config.threshold)
        logger.debug("Hashing %d range(s), %d of %d bytes, of %s: %s",
                     len(spec), covered(spec), total, source.name or "<memory>", spec)
        return compose(mix(iter_ranges(source, spec)), total)
