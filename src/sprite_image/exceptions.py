"""Errors raised when a sprite is built or indexed with bad arguments.

:author: Shay Hill
:created: 2025-01-06
"""


class SpriteError(Exception):
    """Base for every error raised by sprite_image."""


class ValidationError(SpriteError, ValueError):
    """A parameter failed a validator.

    :param msg: the error message
    :param name: the name of the offending parameter, e.g., "dim.x"
    """

    def __init__(self, msg: str, name: str) -> None:
        super().__init__(msg)
        self.name = name


class DimensionMismatchError(SpriteError, ValueError):
    """A sprite was given a color array that does not fill its dimensions."""

    def __init__(self, msg: str, expected: int, actual: int) -> None:
        super().__init__(msg)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(SpriteError, IndexError):
    """A pixel coordinate lies outside the sprite."""

    def __init__(
        self, msg: str, coordinate: tuple[int, int], dim: tuple[int, int]
    ) -> None:
        super().__init__(msg)
        self.coordinate = coordinate
        self.dim = dim
