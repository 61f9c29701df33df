"""Severity scale and the filter policy applied by every handler."""

from enum import IntEnum
from typing import Union

from .errors import InvalidConfiguration


class Severity(IntEnum):
    """Ordered severity levels.

    As a handler verbosity, a level is the minimum severity the handler emits.
    NONE switches a handler off; it is never the severity of a message.
    """
    NONE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        """Uppercase name used in output lines (empty for NONE)."""
        if self is Severity.NONE:
            return ""
        return self.name

    @classmethod
    def parse(cls, value: Union["Severity", int, str]) -> "Severity":
        """Coerce a Severity, an int or a case-insensitive name.

        Raises:
            InvalidConfiguration: If the value names no severity
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().upper()
            if key == "WARN":
                key = "WARNING"
            try:
                return cls[key]
            except KeyError:
                raise InvalidConfiguration(f"Unknown severity: {value!r}") from None

        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidConfiguration(f"Unknown severity: {value!r}") from None

        raise InvalidConfiguration(f"Unknown severity: {value!r}")


def is_loggable(verbosity: Severity, message_severity: Severity) -> bool:
    """Return True if a message passes a handler configured at ``verbosity``."""
    return verbosity != Severity.NONE and verbosity <= message_severity
