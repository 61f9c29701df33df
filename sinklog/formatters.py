"""Log line formatting."""

from .severity import Severity

# Separator between the level tag and the message
LEVEL_SEPARATOR = "\t: "


def format_line(message: str, severity: Severity, stamp: str) -> str:
    """Build one output line without the trailing newline.

    Example:
        >>> format_line("started", Severity.INFO, "01-02-2024 10:00:00.005")
        '01-02-2024 10:00:00.005 - (INFO)\\t: started'
    """
    return f"{stamp} - ({severity.label}){LEVEL_SEPARATOR}{message}"
