"""Console logging handler."""

from typing import Callable, Literal, Optional

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from ..config import HandlerConfig
from ..severity import Severity
from ..theme import LOGGING_THEME, severity_style
from .base import HandlerIdentity, LogHandler


def _is_interactive(stream) -> bool:
    """True if the stream is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


class ConsoleHandlerConfig(HandlerConfig):
    """Console handler configuration.

    Args:
        name: Handler name in the registry
        enabled: Enable this handler (default: True)
        level: Minimum severity for this handler
        use_rich: Colour lines by severity on interactive terminals (default: True)
    """

    type: Literal["console"] = "console"
    use_rich: bool = True


class ConsoleHandler(LogHandler):
    """Writes log lines to standard output, flushing after every line.

    When stdout is attached to a terminal the whole line is wrapped in the
    severity's Rich style; the text itself, tab included, is never altered.
    Otherwise (pipes, files, CI even with FORCE_COLOR) the line is written
    verbatim so downstream scrapers see the exact line format.
    """

    def __init__(
        self,
        identity: HandlerIdentity,
        console: Optional[Console] = None,
        use_rich: bool = True,
        clock: Optional[Callable[[], str]] = None,
    ):
        super().__init__(identity, clock=clock)
        # Without an explicit file, Console resolves sys.stdout on every access
        self._console = console or Console(
            theme=LOGGING_THEME,
            highlight=False,
            emoji=False,
            markup=False,
        )
        self._use_rich = use_rich

    @property
    def console(self) -> Console:
        return self._console

    def _emit(self, line: str, severity: Severity) -> None:
        stream = self._console.file
        if self._use_rich and _is_interactive(stream):
            line = self._styled(line, severity)
        stream.write(line + "\n")
        stream.flush()

    def _styled(self, line: str, severity: Severity) -> str:
        """Wrap the line in the severity's ANSI style, leaving its text untouched."""
        color_system = self._console.color_system
        if color_system is None:
            return line
        style = self._console.get_style(severity_style(severity), default=Style.null())
        return style.render(line, color_system=COLOR_SYSTEMS[color_system])

    def _release(self) -> None:
        # stdout is not ours to close
        self._console.file.flush()


def create_console_handler(config: ConsoleHandlerConfig) -> ConsoleHandler:
    """Create console handler from config.

    Args:
        config: Console handler configuration

    Returns:
        ConsoleHandler writing to standard output
    """
    identity = HandlerIdentity(name=config.name, verbosity=config.level)
    return ConsoleHandler(identity, use_rich=config.use_rich)
