"""Small standalone helpers shipped alongside the logging core."""

from .errors import InvalidInput

UINT32_MAX = 2**32 - 1


def reverse_digits(value: int) -> int:
    """Reverse the decimal digits of an unsigned 32-bit integer.

    Example:
        >>> reverse_digits(10)
        1
        >>> reverse_digits(191)
        191

    Raises:
        InvalidInput: If value is not in [0, 2**32 - 1] or the reversed
            value does not fit in 32 bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"Expected an integer, got {type(value).__name__}")
    if value < 0 or value > UINT32_MAX:
        raise InvalidInput(f"Value out of unsigned 32-bit range: {value}")

    reversed_value = 0
    num = value
    while num > 0:
        reversed_value = reversed_value * 10 + num % 10
        num //= 10

    if reversed_value > UINT32_MAX:
        raise InvalidInput("Reversed value cannot be represented as uint32")
    return reversed_value


def reverse_text(text: str) -> str:
    """Reverse a string.

    Raises:
        InvalidInput: If text is empty or only whitespace
    """
    if not text:
        raise InvalidInput("Input string is empty")
    if text.isspace():
        raise InvalidInput("Input string contains only white-space characters")
    return text[::-1]
