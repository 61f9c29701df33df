"""Error taxonomy for sinklog.

Every error raised by the package derives from ``SinklogError`` and carries an
``ErrorKind`` so callers can branch on the kind instead of the class.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failures reported by sinklog."""
    INVALID_CONFIGURATION = "invalid_configuration"
    IO_FAILURE = "io_failure"
    INVALID_INPUT = "invalid_input"


class SinklogError(Exception):
    """Base class for all sinklog errors."""

    kind: ErrorKind


class InvalidConfiguration(SinklogError, ValueError):
    """Raised for empty names, empty paths, absent handlers or bad config."""

    kind = ErrorKind.INVALID_CONFIGURATION


class IOFailure(SinklogError, OSError):
    """Raised when a backing sink cannot be opened or written."""

    kind = ErrorKind.IO_FAILURE


class InvalidInput(SinklogError, ValueError):
    """Raised by the utility helpers for arguments they cannot handle."""

    kind = ErrorKind.INVALID_INPUT
