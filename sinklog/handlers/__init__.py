"""Logging handlers package.

Each handler module defines:
- Config class (extends HandlerConfig)
- Handler class (implements LogHandler)
- Factory function (takes config, returns the handler)

The built-in factories are registered by ``sinklog`` on import.
"""

from .base import HandlerIdentity, LogHandler
from .console import ConsoleHandler, ConsoleHandlerConfig, create_console_handler
from .file import FileHandler, FileHandlerConfig, create_file_handler

__all__ = [
    # Contract
    "HandlerIdentity",
    "LogHandler",
    # Console
    "ConsoleHandler",
    "ConsoleHandlerConfig",
    "create_console_handler",
    # File
    "FileHandler",
    "FileHandlerConfig",
    "create_file_handler",
]
