"""Local wall-clock timestamps for log lines."""

from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


def timestamp(now: Optional[datetime] = None) -> str:
    """Return the current local time as ``dd-mm-yyyy HH:MM:SS.mmm``.

    Args:
        now: Time to format instead of the current time

    Returns:
        Timestamp with zero-padded milliseconds
    """
    if now is None:
        now = datetime.now()
    return f"{now.strftime(TIMESTAMP_FORMAT)}.{now.microsecond // 1000:03d}"
