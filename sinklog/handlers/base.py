"""Handler contract shared by every delivery strategy."""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from ..errors import InvalidConfiguration
from ..formatters import format_line
from ..severity import Severity, is_loggable
from ..timestamp import timestamp


@dataclass(frozen=True)
class HandlerIdentity:
    """Immutable name and initial verbosity of a handler.

    Args:
        name: Handler name, must be a non-empty string
        verbosity: Initial minimum severity (default: INFO)

    Raises:
        InvalidConfiguration: If the name is empty or the verbosity unknown
    """

    name: str
    verbosity: Severity = field(default=Severity.INFO)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidConfiguration("'name' cannot be an empty string")
        # frozen dataclass: bypass __setattr__ to store the parsed value
        object.__setattr__(self, "verbosity", Severity.parse(self.verbosity))


class LogHandler(ABC):
    """A named sink with its own verbosity and a thread-safe write path.

    Subclasses implement ``_emit`` (write one formatted line to the backing
    resource) and ``_release`` (free that resource). Both are only ever called
    with the handler lock held.
    """

    def __init__(
        self,
        identity: HandlerIdentity,
        clock: Optional[Callable[[], str]] = None,
    ):
        """Initialize handler.

        Args:
            identity: Name and initial verbosity
            clock: Timestamp provider (default: local time, ms precision)
        """
        if not isinstance(identity, HandlerIdentity):
            raise InvalidConfiguration(
                f"Expected HandlerIdentity, got {type(identity).__name__}"
            )
        self._name = identity.name
        self._verbosity = identity.verbosity
        self._clock = clock or timestamp
        self._lock = threading.Lock()
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def verbosity(self) -> Severity:
        return self._verbosity

    @verbosity.setter
    def verbosity(self, level: Union[Severity, int, str]) -> None:
        self.set_verbosity(level)

    def set_verbosity(self, level: Union[Severity, int, str]) -> None:
        """Change the minimum severity this handler emits."""
        self._verbosity = Severity.parse(level)

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, message: str, severity: Union[Severity, int, str]) -> None:
        """Format and append a message if it passes this handler's verbosity.

        Args:
            message: Message text
            severity: Severity of the message (member, int or name)

        Raises:
            InvalidConfiguration: If severity names no level
            IOFailure: If the backing sink rejects the write
        """
        severity = Severity.parse(severity)
        if not is_loggable(self._verbosity, severity):
            return

        with self._lock:
            if self._closed:
                return
            line = format_line(message, severity, self._clock())
            self._emit(line, severity)

    def close(self) -> None:
        """Release the backing resource. Waits for an in-flight write."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._release()

    def __enter__(self) -> "LogHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, verbosity={self._verbosity.name})"

    @abstractmethod
    def _emit(self, line: str, severity: Severity) -> None:
        """Write one line to the backing sink and flush it."""
        pass

    @abstractmethod
    def _release(self) -> None:
        """Free the backing resource."""
        pass
