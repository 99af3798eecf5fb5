"""Exceptions raised by sample_hash."""


class SampleHashError(Exception):
    """Base exception for sample_hash errors."""

    pass


class ConfigurationError(SampleHashError, ValueError):
    """
    Raised when a tunable or an input length is out of range.

    This can happen when:
    - sample_size or threshold is zero, negative or not an int
    - the input is longer than 2**64 - 1 bytes
    """

    pass


class SourceIOError(SampleHashError, OSError):
    """
    Raised when input bytes cannot be read.

    This can happen when:
    - the path does not exist or permission is denied
    - the file length cannot be determined
    - the file was truncated between the length query and a read
    - a requested range lies outside the input

    ``errno``, ``strerror`` and ``filename`` are populated like any
    OSError; the underlying exception, if any, is chained as the cause.
    """

    pass
