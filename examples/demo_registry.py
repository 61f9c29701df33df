#!/usr/bin/env python3
"""Demo script showing the registry with a console and a file handler.

Run from the repository root; the file handler writes to ./logs/demo.log.
"""

from sinklog import (
    ConsoleHandler,
    FileHandler,
    HandlerIdentity,
    Severity,
    get_registry,
    reverse_digits,
    reverse_text,
)


def demo_logging():
    """Log at every severity, then raise the console threshold by name."""
    registry = get_registry()
    registry.add("console", ConsoleHandler(HandlerIdentity("console", Severity.DEBUG)))
    registry.add("file", FileHandler("logs", "demo", HandlerIdentity("file", Severity.INFO)))

    registry.debug("Console only: file handler is at INFO")
    registry.info(f"Registry configured with handlers {registry.names()}")
    registry.warn("Disk usage at 85%")
    registry.error("Failed to reach upstream service")
    registry.fatal("Unrecoverable state")

    print("\n" + "=" * 60)
    print("Console verbosity raised to ERROR")
    print("=" * 60 + "\n")

    registry.set_verbosity("console", Severity.ERROR)
    registry.info("Only in the file now")
    registry.error("Both handlers see this")


def demo_utils():
    """Print reversed values."""
    for num in (12345, 0, 191):
        print(f"{num} reversed: {reverse_digits(num)}")
    for text in ("bob", "book", "hello world"):
        print(f"{text} reversed: {reverse_text(text)}")


if __name__ == "__main__":
    demo_logging()
    demo_utils()
