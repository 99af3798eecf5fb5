"""Fast sampled 128-bit fingerprints for large byte buffers and files."""

from .config   import SampleConfig
from .const    import DIGEST_SIZE, MIX_SEED, SAMPLE_SIZE, SAMPLE_THRESHOLD
from .digest   import Digest, compose
from .errors   import ConfigurationError, SampleHashError, SourceIOError
from .hasher   import Hasher
from .mixing   import mix
from .sampling import SampleSpec, select
from .source   import ByteSource, FileSource, MemorySource

__all__ = [
    "Hasher",
    "SampleConfig",
    "Digest",
    # Pipeline stages
    "select",
    "mix",
    "compose",
    "SampleSpec",
    "ByteSource",
    "MemorySource",
    "FileSource",
    # Errors
    "SampleHashError",
    "ConfigurationError",
    "SourceIOError",
    # Defaults
    "SAMPLE_SIZE",
    "SAMPLE_THRESHOLD",
    "DIGEST_SIZE",
    "MIX_SEED",
]
