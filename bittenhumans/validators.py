"""
Bittenhumans Validators

Boundary checks for values entering the byte size formatters.

These validators check both the type and the content of a value and return it
normalized, so callers can validate and convert in one step.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def validate_byte_count(value, *, name: str = "byte_count") -> int:
    """
    Validate that a value is a non-negative integer count of bytes.

    Accepts Python int and third-party integer scalars that implement __index__
    (NumPy integers and the like); the result is always a plain Python int.

    Args:
        value: The byte count to validate.
        name: Name of the value used in error messages.

    Returns:
        int: The byte count as a plain Python int.

    Raises:
        TypeError: If value is bool, float, str or any other non-integer type.
        ValueError: If value is negative.

    Examples:
        >>> validate_byte_count(1024)
        1024
        >>> validate_byte_count(-1)
        Traceback (most recent call last):
            ...
        ValueError: byte_count must be non-negative, but got <int: -1>
        >>> validate_byte_count(1.5)
        Traceback (most recent call last):
            ...
        TypeError: byte_count must be int, but got <type: float>
    """
    # bool is a subclass of int, reject explicitly
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}")

    try:
        count = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}") from None

    if count < 0:
        raise ValueError(f"{name} must be non-negative, but got {fmt_value(count)}")

    return count
