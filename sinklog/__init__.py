"""Thread-safe registry of named, independently leveled log handlers.

Modules:
    severity: Severity scale and the is_loggable filter
    handlers: LogHandler contract, console and file handlers
    registry: LoggerRegistry and the process-wide instance
    config: HandlerConfig and LogConfig models

Example:
    from sinklog import ConsoleHandler, HandlerIdentity, Severity, get_registry

    registry = get_registry()
    registry.add("console", ConsoleHandler(HandlerIdentity("console", Severity.DEBUG)))
    registry.info("Hello world")

    # Or from configuration
    from sinklog import LogConfig, configure

    configure(LogConfig(
        handlers=[
            {"type": "console", "name": "console", "level": "INFO"},
            {"type": "file", "name": "app", "directory": "logs", "filename": "app"},
        ]
    ))
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from pydantic import ValidationError

from .config import HandlerConfig, LogConfig, find_config_file
from .errors import ErrorKind, InvalidConfiguration, InvalidInput, IOFailure, SinklogError
from .formatters import format_line
from .handlers import (
    ConsoleHandler,
    ConsoleHandlerConfig,
    FileHandler,
    FileHandlerConfig,
    HandlerIdentity,
    LogHandler,
    create_console_handler,
    create_file_handler,
)
from .registry import LoggerRegistry, get_registry, set_registry
from .severity import Severity, is_loggable
from .theme import LOGGING_THEME
from .timestamp import timestamp
from .utils import reverse_digits, reverse_text

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


# Handler registry: type -> (ConfigClass, FactoryFunction)
_HANDLER_REGISTRY: Dict[str, Tuple[Type[HandlerConfig], Callable[[HandlerConfig], LogHandler]]] = {}


def register_handler(
    handler_type: str,
    config_class: Type[HandlerConfig],
    factory: Callable[[HandlerConfig], LogHandler],
) -> None:
    """Register a handler type with its config class and factory.

    Args:
        handler_type: The handler type identifier (e.g., "syslog")
        config_class: The config class for this handler (extends HandlerConfig)
        factory: Factory function that takes config and returns a LogHandler
    """
    _HANDLER_REGISTRY[handler_type] = (config_class, factory)


def _parse_handler_config(data: Union[HandlerConfig, Dict[str, Any]]) -> HandlerConfig:
    """Parse raw dict or HandlerConfig into the registered config class."""
    # Already a specific config class instance
    if isinstance(data, HandlerConfig) and type(data) is not HandlerConfig:
        return data

    if isinstance(data, HandlerConfig):
        data = data.model_dump()

    handler_type = data.get("type")
    if handler_type not in _HANDLER_REGISTRY:
        raise InvalidConfiguration(f"Unknown handler type: {handler_type}")

    config_class, _ = _HANDLER_REGISTRY[handler_type]
    try:
        return config_class(**data)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid '{handler_type}' handler config: {e}") from e


def _create_handler_from_config(config: HandlerConfig) -> Optional[LogHandler]:
    """Create a handler from its configuration, or None if disabled."""
    if not config.enabled:
        return None

    if config.type not in _HANDLER_REGISTRY:
        raise InvalidConfiguration(f"Unknown handler type: {config.type}")

    _, factory = _HANDLER_REGISTRY[config.type]
    return factory(config)


def configure(
    config: Union[LogConfig, Dict[str, Any], str, Path, None] = None,
    registry: Optional[LoggerRegistry] = None,
) -> LoggerRegistry:
    """Build the configured handlers and add them to a registry.

    Args:
        config: LogConfig, raw mapping, or path to a YAML file. When omitted,
            the file named by SINKLOG_CONFIG or ./sinklog.yaml is used if present.
        registry: Target registry (default: the process-wide one)

    Returns:
        The registry the handlers were added to

    Raises:
        InvalidConfiguration: If the config or any handler in it is invalid
        IOFailure: If a file handler cannot open its file
    """
    if registry is None:
        registry = get_registry()

    if config is None:
        config_path = find_config_file()
        if config_path is None:
            return registry
        logger.debug(f"Loading logging config from {config_path}")
        config = config_path

    if isinstance(config, (str, Path)):
        config = LogConfig.from_yaml_file(config)
    elif isinstance(config, dict):
        config = LogConfig.from_dict(config)

    # Build everything before registering so a bad entry registers nothing
    handler_configs = [_parse_handler_config(data) for data in config.handlers]
    created = []
    try:
        for handler_config in handler_configs:
            handler = _create_handler_from_config(handler_config)
            if handler is not None:
                created.append((handler_config.name, handler))
    except Exception:
        for _, handler in created:
            handler.close()
        raise

    for name, handler in created:
        registry.add(name, handler)

    return registry


# Register built-in handlers
register_handler("console", ConsoleHandlerConfig, create_console_handler)
register_handler("file", FileHandlerConfig, create_file_handler)


__all__ = [
    # Severity
    "Severity",
    "is_loggable",
    # Handlers
    "HandlerIdentity",
    "LogHandler",
    "ConsoleHandler",
    "FileHandler",
    # Registry
    "LoggerRegistry",
    "get_registry",
    "set_registry",
    # Configuration
    "LogConfig",
    "HandlerConfig",
    "ConsoleHandlerConfig",
    "FileHandlerConfig",
    "configure",
    "register_handler",
    "find_config_file",
    # Errors
    "SinklogError",
    "ErrorKind",
    "InvalidConfiguration",
    "IOFailure",
    "InvalidInput",
    # Formatting
    "format_line",
    "timestamp",
    "LOGGING_THEME",
    # Utilities
    "reverse_digits",
    "reverse_text",
]
