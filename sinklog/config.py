"""Logging configuration models."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# Environment variable pointing at a YAML config file
CONFIG_ENV_VAR = "SINKLOG_CONFIG"
DEFAULT_CONFIG_FILE = "sinklog.yaml"


class HandlerConfig(BaseModel):
    """Base handler configuration.

    New sink types extend this class with their own fields. The 'type' field
    selects the config class and factory registered for it.

    Args:
        type: Handler type identifier (e.g., "console", "file")
        name: Name the handler is registered under
        enabled: Enable this handler (default: True)
        level: Minimum severity for this handler (default: INFO)

    Example:
        class SyslogHandlerConfig(HandlerConfig):
            type: Literal["syslog"] = "syslog"
            address: str
    """

    model_config = ConfigDict(extra="allow")

    type: str
    name: str
    enabled: bool = True
    level: str = "INFO"


class LogConfig(BaseModel):
    """Set of handlers to register.

    Handlers can be given as dicts with a 'type' key (parsed into the
    registered config class) or as HandlerConfig instances.

    Example:
        config = LogConfig(
            handlers=[
                {"type": "console", "name": "console", "level": "INFO"},
                {"type": "file", "name": "app", "directory": "logs", "filename": "app"},
            ]
        )
        registry = configure(config)
    """

    handlers: List[Union[HandlerConfig, Dict[str, Any]]] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Validate a raw mapping.

        Raises:
            InvalidConfiguration: If the mapping does not match the schema
        """
        try:
            return cls(**data)
        except (TypeError, ValidationError) as e:
            raise InvalidConfiguration(f"Invalid logging config: {e}") from e

    @classmethod
    def from_yaml_file(cls, file_path: Union[str, Path], encoding: str = "utf-8") -> "LogConfig":
        """Read a YAML file into a LogConfig.

        Raises:
            InvalidConfiguration: If the file is missing, malformed or invalid
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise InvalidConfiguration(f"Config file not found: {file_path}")

        try:
            with open(file_path, "r", encoding=encoding) as file:
                content = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(f"Error parsing YAML file {file_path}: {e}") from e
        except OSError as e:
            raise InvalidConfiguration(f"Error reading file {file_path}: {e}") from e

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise InvalidConfiguration(f"Expected a mapping in {file_path}")
        return cls.from_dict(content)


def find_config_file() -> Optional[Path]:
    """Locate a config file.

    Looks at:
    1. SINKLOG_CONFIG environment variable
    2. ./sinklog.yaml (current directory)

    Returns:
        Path of the first existing file, or None
    """
    env_config = os.getenv(CONFIG_ENV_VAR)
    if env_config:
        if Path(env_config).exists():
            return Path(env_config)
        logger.warning(f"{CONFIG_ENV_VAR} points to a missing file: {env_config}")

    local = Path(DEFAULT_CONFIG_FILE)
    if local.exists():
        return local

    return None
