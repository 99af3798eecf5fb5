# ==================================================
# sample_hash/config.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass

from .const  import SAMPLE_SIZE, SAMPLE_THRESHOLD
from .errors import ConfigurationError


def check_positive(name: str, value) -> int:
    # bool is an int subclass; True is not a window size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class SampleConfig:
    """Immutable sampling tunables shared by every call of a Hasher."""

    sample_size: int = SAMPLE_SIZE
    threshold:   int = SAMPLE_THRESHOLD

    def __post_init__(self):
        check_positive("sample_size", self.sample_size)
        check_positive("threshold", self.threshold)
