"""Stateless checks for arguments coming in from outside the package.

Each validator returns the value it checked, so calls can be inlined into
assignments.

:author: Shay Hill
:created: 2025-01-06
"""

from sprite_image.exceptions import ValidationError


def is_int(value: object) -> bool:
    """Return True for ints, but not bools. Pixel coordinates use the same rule."""
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    """Return True for ints and floats, but not bools."""
    return is_int(value) or isinstance(value, float)


def positive_integer(value: int, name: str) -> int:
    """Raise a ValidationError if value is not an integer > 0.

    :param value: the value to check
    :param name: the name of the parameter, reported in the error message
    :return: value
    :raise ValidationError: if value is not an int or is less than 1

    A float with an integer value (2.0) is not an integer here.
    """
    if not is_int(value):
        msg = f"{name} must be a positive integer, got {value!r}"
        raise ValidationError(msg, name)
    if value <= 0:
        msg = f"{name} must be a positive integer, got {value}"
        raise ValidationError(msg, name)
    return value


def in_range(value: float, name: str, low: float, high: float) -> float:
    """Raise a ValidationError if value is not a number in [low, high].

    :param value: the value to check
    :param name: the name of the parameter, reported in the error message
    :param low: minimum allowed value
    :param high: maximum allowed value
    :return: value
    :raise ValidationError: if value is not a number or falls outside the range
    """
    if not _is_number(value):
        msg = f"{name} must be a number, got {value!r}"
        raise ValidationError(msg, name)
    if not low <= value <= high:
        msg = f"{name} must be in [{low}, {high}], got {value}"
        raise ValidationError(msg, name)
    return value


def integer_in_range(value: int, name: str, low: int, high: int) -> int:
    """Raise a ValidationError if value is not an integer in [low, high]."""
    if not is_int(value):
        msg = f"{name} must be an integer, got {value!r}"
        raise ValidationError(msg, name)
    _ = in_range(value, name, low, high)
    return value


def non_negative_number(value: float, name: str) -> float:
    """Raise a ValidationError if value is not a number >= 0."""
    if not _is_number(value) or value < 0:
        msg = f"{name} must be a non-negative number, got {value!r}"
        raise ValidationError(msg, name)
    return value
