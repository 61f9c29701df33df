"""File logging handler."""

from pathlib import Path, PurePath
from typing import Callable, Literal, Optional, Union

from ..config import HandlerConfig
from ..errors import InvalidConfiguration, IOFailure
from ..severity import Severity
from .base import HandlerIdentity, LogHandler

LOG_SUFFIX = ".log"


def _is_empty_directory(directory: Union[str, Path, None]) -> bool:
    """True for None, blank strings and paths with no components.

    Path("") and Path(".") compare equal, so a Path must name at least one
    component; pass the string "." to log into the current directory.
    """
    if directory is None:
        return True
    if isinstance(directory, PurePath):
        return not directory.parts
    return not str(directory).strip()


class FileHandlerConfig(HandlerConfig):
    """File handler configuration.

    Args:
        name: Handler name in the registry
        enabled: Enable this handler (default: True)
        level: Minimum severity for this handler
        directory: Directory holding the log file (created if missing)
        filename: Base filename, ``.log`` is appended
        encoding: File encoding (default: utf-8)
    """

    type: Literal["file"] = "file"
    directory: Union[str, Path]
    filename: str
    encoding: str = "utf-8"


class FileHandler(LogHandler):
    """Appends log lines to ``<directory>/<filename>.log``.

    The file is opened once at construction in append mode, so existing
    content is kept and every line lands at the end. Each line is flushed as
    soon as it is written.

    Raises:
        InvalidConfiguration: If directory, filename or name is empty
        IOFailure: If the directory cannot be created or the file opened
    """

    def __init__(
        self,
        directory: Union[str, Path],
        filename: str,
        identity: HandlerIdentity,
        encoding: str = "utf-8",
        clock: Optional[Callable[[], str]] = None,
    ):
        super().__init__(identity, clock=clock)

        if _is_empty_directory(directory):
            raise InvalidConfiguration("'directory' cannot be empty")
        if not filename:
            raise InvalidConfiguration("'filename' cannot be empty")

        log_dir = Path(directory)
        self._path = log_dir / f"{filename}{LOG_SUFFIX}"

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            self._stream = open(self._path, "a", encoding=encoding)
        except OSError as e:
            raise IOFailure(f"failed to open the log file: '{self._path}': {e}") from e

    @property
    def path(self) -> Path:
        return self._path

    def _emit(self, line: str, severity: Severity) -> None:
        try:
            self._stream.write(line + "\n")
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise IOFailure(f"failed to write to '{self._path}': {e}") from e

    def _release(self) -> None:
        self._stream.close()


def create_file_handler(config: FileHandlerConfig) -> FileHandler:
    """Create file handler from config.

    Args:
        config: File handler configuration

    Returns:
        FileHandler appending to ``<directory>/<filename>.log``
    """
    identity = HandlerIdentity(name=config.name, verbosity=config.level)
    return FileHandler(
        config.directory,
        config.filename,
        identity,
        encoding=config.encoding,
    )
