"""Collect the arguments for a Sprite one step at a time.

This is the supported way to create a Sprite. Generation strategies decide the
pixels, the pallet, and whether the result is mirrored. The builder only holds
what they decide and passes it to Sprite.

    sprite = SpriteBuilder().dim(8, 8).pallet([RED, BLUE]).build()

:author: Shay Hill
:created: 2025-01-08
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from sprite_image.exceptions import ValidationError
from sprite_image.sprite import Sprite

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sprite_image.color import Color


class SpriteBuilder:
    """Arguments for a Sprite. Every setter returns the builder.

    :param dim: optional (width, height). Can also be set with `dim()`.
    """

    def __init__(self, dim: tuple[int, int] | None = None) -> None:
        self._dim = dim
        self._array: list[Color] | None = None
        self._pallet: list[Color] = []
        self._horizontal_symmetry = False
        self._color_fill: Color | None = None

    def dim(self, width: int, height: int) -> SpriteBuilder:
        self._dim = (width, height)
        return self

    def array(self, colors: Iterable[Color]) -> SpriteBuilder:
        """Set every pixel, row-major. Length must be width * height at build."""
        self._array = list(colors)
        return self

    def pallet(self, colors: Iterable[Color]) -> SpriteBuilder:
        self._pallet = list(colors)
        return self

    def horizontal_symmetry(self, flag: bool = True) -> SpriteBuilder:
        """Record that the pixels were generated mirrored left to right."""
        self._horizontal_symmetry = flag
        return self

    def color_fill(self, color: Color) -> SpriteBuilder:
        """Set the color of every pixel when no array is given."""
        self._color_fill = color
        return self

    def build(self) -> Sprite:
        """Create a Sprite from the collected arguments.

        :return: a new Sprite
        :raise ValidationError: if no dim was given or dim is not positive integers
        :raise DimensionMismatchError: if the array does not fill dim

        Opaque black in the pallet is dropped without comment.
        """
        if self._dim is None:
            msg = "Cannot build a Sprite without dim. Call dim(width, height) first."
            raise ValidationError(msg, "dim")
        if self._array is not None and self._color_fill is not None:
            msg = "Both array and color_fill were given. Ignoring color_fill."
            warnings.warn(msg, stacklevel=2)
        return Sprite(
            self._dim,
            array=self._array,
            pallet=self._pallet,
            horizontal_symmetry=self._horizontal_symmetry,
            color_fill=self._color_fill,
        )
