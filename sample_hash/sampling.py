# ==================================================
# sample_hash/sampling.py
# ==================================================
"""Choose which byte ranges of an input get hashed."""
from __future__ import annotations

from .config import check_positive
from .errors import ConfigurationError

SampleSpec = tuple[tuple[int, int], ...]     # ((offset, length), ...)


def select(total_length: int, sample_size: int, threshold: int) -> SampleSpec:
    """
    Return the ordered, non-overlapping ranges to read from an input.

    Inputs no longer than ``threshold`` are covered whole. Larger inputs
    are sampled by up to three ``sample_size`` windows: the head, one
    centred on the midpoint and the tail. Windows that overlap or touch
    are merged, and a union that spans the whole input collapses into
    the single full range.
    """
    check_positive("sample_size", sample_size)
    check_positive("threshold", threshold)
    if total_length < 0:
        raise ConfigurationError(f"input length must be >= 0, got {total_length}")

    if total_length <= threshold:
        return ((0, total_length),)

    starts = (0,
              total_length // 2 - sample_size // 2,
              total_length - sample_size)
    windows = sorted((max(0, s), min(total_length, max(0, s) + sample_size))
                     for s in starts)

    merged: list[list[int]] = []
    for lo, hi in windows:
        if merged and lo <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], hi)
        else:
            merged.append([lo, hi])

    if len(merged) == 1 and merged[0] == [0, total_length]:
        return ((0, total_length),)
    return tuple((lo, hi - lo) for lo, hi in merged)


def covered(spec: SampleSpec) -> int:
    """Total number of bytes a spec reads."""
    return sum(n for _, n in spec)
