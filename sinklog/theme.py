"""Console theme for interactive terminals."""

from rich.theme import Theme

from .severity import Severity


# Only problems stand out; INFO stays neutral
LOGGING_THEME = Theme({
    "sinklog.debug": "#8b949e",                 # Gray
    "sinklog.info": "white",                    # White
    "sinklog.warning": "#d29922",               # Yellow
    "sinklog.error": "#f85149",                 # Red
    "sinklog.fatal": "bold reverse #b81c1c",    # White on dark red
})


def severity_style(severity: Severity) -> str:
    """Theme style name for a message severity."""
    return f"sinklog.{severity.name.lower()}"
