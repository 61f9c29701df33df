"""Process-wide registry of named log handlers."""

import atexit
import logging
import threading
from typing import Dict, List, Optional, Union

from .errors import InvalidConfiguration
from .handlers.base import LogHandler
from .severity import Severity

logger = logging.getLogger(__name__)


class LoggerRegistry:
    """Owns a set of uniquely named handlers and fans messages out to them.

    Thread-safe: the handler map is guarded by one lock, and each handler
    serializes its own writes. Dispatch iterates a snapshot of the map, so a
    slow sink never blocks add/remove.

    Example:
        registry = LoggerRegistry()
        registry.add("console", ConsoleHandler(HandlerIdentity("console")))
        registry.info("service started")
    """

    def __init__(self):
        self._handlers: Dict[str, LogHandler] = {}
        self._lock = threading.Lock()

    # ========================================================================
    # Handler Lifecycle
    # ========================================================================

    def add(self, name: str, handler: LogHandler) -> None:
        """Register a handler under ``name``, taking ownership of it.

        If the name is already taken the call does nothing and the new
        handler is closed; the existing handler is kept.

        Raises:
            InvalidConfiguration: If name is empty or handler is absent
        """
        if not isinstance(name, str) or not name:
            raise InvalidConfiguration("'name' cannot be empty")
        if handler is None:
            raise InvalidConfiguration("'handler' cannot be None")
        if not isinstance(handler, LogHandler):
            raise InvalidConfiguration(
                f"Expected LogHandler, got {type(handler).__name__}"
            )

        with self._lock:
            existing = self._handlers.get(name)
            if existing is None:
                self._handlers[name] = handler
                return

        if existing is not handler:
            logger.debug(f"Handler '{name}' already registered, discarding new one")
            handler.close()

    def remove(self, name: str) -> None:
        """Unregister and close a handler. No-op if absent."""
        with self._lock:
            handler = self._handlers.pop(name, None)
        if handler is not None:
            handler.close()

    def get_handler(self, name: str) -> Optional[LogHandler]:
        """Look up a handler without taking ownership.

        The reference stays usable only while the handler is registered.
        """
        with self._lock:
            return self._handlers.get(name)

    def set_verbosity(self, name: str, level: Union[Severity, int, str]) -> bool:
        """Change a registered handler's verbosity.

        Returns:
            True if the handler exists, False otherwise
        """
        handler = self.get_handler(name)
        if handler is None:
            return False
        handler.set_verbosity(level)
        return True

    def names(self) -> List[str]:
        with self._lock:
            return list(self._handlers)

    def clear(self) -> None:
        """Unregister and close every handler."""
        with self._lock:
            handlers = list(self._handlers.values())
            self._handlers.clear()
        for handler in handlers:
            handler.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._handlers

    # ========================================================================
    # Logging
    # ========================================================================

    def log(self, message: str, severity: Union[Severity, int, str]) -> None:
        """Deliver a message to every registered handler.

        A failing handler is reported through this module's logger and the
        remaining handlers still receive the message.

        Raises:
            InvalidConfiguration: If severity names no level
        """
        severity = Severity.parse(severity)
        with self._lock:
            handlers = list(self._handlers.items())

        for name, handler in handlers:
            try:
                handler.write(message, severity)
            except Exception as e:
                logger.error(f"Handler '{name}' failed to write: {e}")

    def debug(self, message: str) -> None:
        self.log(message, Severity.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, Severity.INFO)

    def warn(self, message: str) -> None:
        self.log(message, Severity.WARNING)

    def error(self, message: str) -> None:
        self.log(message, Severity.ERROR)

    def fatal(self, message: str) -> None:
        self.log(message, Severity.FATAL)

    def __repr__(self) -> str:
        return f"LoggerRegistry(handlers={self.names()})"


# Global registry instance - lazily initialized
_registry: Optional[LoggerRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> LoggerRegistry:
    """Get the process-wide LoggerRegistry, creating it on first use.

    Returns:
        The global LoggerRegistry instance
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LoggerRegistry()
    return _registry


def set_registry(registry: LoggerRegistry) -> None:
    """Replace the process-wide registry.

    The previous registry is left untouched; callers that no longer need it
    should ``clear()`` it.

    Args:
        registry: LoggerRegistry instance to use as global
    """
    global _registry
    if not isinstance(registry, LoggerRegistry):
        raise InvalidConfiguration(
            f"Expected LoggerRegistry, got {type(registry).__name__}"
        )
    with _registry_lock:
        _registry = registry


def _close_registry() -> None:
    """Close the global registry's handlers at interpreter exit."""
    if _registry is not None:
        _registry.clear()


atexit.register(_close_registry)
