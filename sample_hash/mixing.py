# ==================================================
# sample_hash/mixing.py
# ==================================================
from __future__ import annotations
from typing import Iterable

import xxhash                                   # pip install xxhash

from .const import MIX_SEED


def mix(chunks: Iterable[bytes]) -> bytes:
    """
    128-bit raw hash of the concatenation of ``chunks``.

    Chunks are fed verbatim with no separators, so the result depends only
    on the joined byte sequence, never on how it was split. XXH3 is fast
    and stable across platforms; the seed is fixed so raw hashes are
    reproducible between processes and releases.
    """
    h = xxhash.xxh3_128(seed=MIX_SEED)
    for chunk in chunks:
        h.update(chunk)
    return h.digest()                           # canonical, big-endian
