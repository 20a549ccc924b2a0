"""A fixed-size grid of colors and the metadata it was generated with.

Pixels are stored in a flat list, row-major, so pixel (x, y) is at
`y * width + x`. Every read and write goes through `Sprite._index`.

Colors and lists never leave or enter a Sprite by reference. Setters store a copy of
the color they are given, and every getter returns copies, so nothing a caller does
to a returned value can reach the grid.

:author: Shay Hill
:created: 2025-01-06
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprite_image import svg_display
from sprite_image.color import BLACK, Color
from sprite_image.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ValidationError,
)
from sprite_image.globs import DEFAULT_FILL, DEFAULT_UNIT
from sprite_image.validator import is_int, positive_integer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lxml.etree import _Element as EtreeElement  # type: ignore

    from sprite_image.builder import SpriteBuilder

_RGBA = tuple[int, int, int, float]


def _trim_pallet(pallet: Iterable[Color]) -> list[Color]:
    """Copy a pallet, leaving out opaque black."""
    return [c.copy() for c in pallet if c != BLACK]


class Sprite:
    """A width x height grid of colors.

    Do not call this constructor directly. Use `SpriteBuilder` or
    `Sprite.builder()`.

    :param dim: (width, height), both positive integers
    :param array: optional colors in row-major order. Must have exactly
        width * height items. If None, the sprite is filled with `color_fill`.
    :param pallet: the colors this sprite was generated from. Opaque black is
        dropped. This is a record only and is never checked against the pixels.
    :param horizontal_symmetry: whether the sprite was generated mirrored left to
        right. This is a record only and is never enforced.
    :param color_fill: the color of every pixel when `array` is None. Defaults to
        opaque black.
    :raise ValidationError: if dim is not a pair of positive integers
    :raise DimensionMismatchError: if `array` does not have width * height items
    """

    def __init__(
        self,
        dim: tuple[int, int],
        *,
        array: Iterable[Color] | None = None,
        pallet: Iterable[Color] | None = None,
        horizontal_symmetry: bool = False,
        color_fill: Color | None = None,
    ) -> None:
        if len(dim) != 2:
            msg = f"dim must be a (width, height) pair, got {dim!r}"
            raise ValidationError(msg, "dim")
        width = positive_integer(dim[0], "dim.x")
        height = positive_integer(dim[1], "dim.y")

        if array is None:
            fill = Color(*DEFAULT_FILL) if color_fill is None else color_fill
            colors = [fill.copy() for _ in range(width * height)]
        else:
            colors = [c.copy() for c in array]

        if len(colors) != width * height:
            msg = (
                f"Invalid array dimensions [{width}, {height}]"
                + f" for array of length {len(colors)}."
                + f" Expected length {width * height}."
            )
            raise DimensionMismatchError(msg, width * height, len(colors))

        self._dim = (width, height)
        self._array = colors
        self._pallet = _trim_pallet(pallet or ())
        self._horizontal_symmetry = bool(horizontal_symmetry)

    @staticmethod
    def builder() -> SpriteBuilder:
        """Return a new SpriteBuilder, the supported way to create a Sprite."""
        from sprite_image.builder import SpriteBuilder

        return SpriteBuilder()

    def __repr__(self) -> str:
        width, height = self._dim
        return (
            f"{type(self).__name__}(dim=({width}, {height}),"
            + f" pallet={self._pallet!r},"
            + f" horizontal_symmetry={self._horizontal_symmetry})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return (
            self._dim == other._dim
            and self._array == other._array
            and self._pallet == other._pallet
            and self._horizontal_symmetry == other._horizontal_symmetry
        )

    __hash__ = None  # type: ignore

    # ===============================================================================
    #   Accessors
    # ===============================================================================

    @property
    def dim(self) -> tuple[int, int]:
        """(width, height)"""
        return self._dim[0], self._dim[1]

    @property
    def width(self) -> int:
        return self._dim[0]

    @property
    def height(self) -> int:
        return self._dim[1]

    @property
    def array(self) -> list[Color]:
        """A copy of every pixel in row-major order."""
        return [c.copy() for c in self._array]

    @property
    def pallet(self) -> list[Color]:
        """A copy of the colors this sprite was generated from."""
        return [c.copy() for c in self._pallet]

    @property
    def horizontal_symmetry(self) -> bool:
        return self._horizontal_symmetry

    def copy(self) -> Sprite:
        """Return an independent copy of this sprite."""
        return Sprite(
            self.dim,
            array=self.array,
            pallet=self.pallet,
            horizontal_symmetry=self.horizontal_symmetry,
        )

    # ===============================================================================
    #   Pixel access
    # ===============================================================================

    def _within_bounds(self, x: int, y: int) -> bool:
        """Return True if x and y are ints (not bools) inside the sprite."""
        if not (is_int(x) and is_int(y)):
            return False
        return 0 <= x < self._dim[0] and 0 <= y < self._dim[1]

    def _index(self, x: int, y: int) -> int:
        """Return the position of pixel (x, y) in the flat array.

        :raise IndexOutOfBoundsError: if (x, y) is not a pair of ints inside the
            sprite
        """
        if not self._within_bounds(x, y):
            msg = (
                f"Index out of bounds [{x}, {y}]"
                + f" when actual dimension is [{self._dim[0]}, {self._dim[1]}]"
            )
            raise IndexOutOfBoundsError(msg, (x, y), self.dim)
        return y * self._dim[0] + x

    def pixel_at(self, x: int, y: int) -> Color:
        """Return a copy of the color at (x, y).

        :raise IndexOutOfBoundsError: if (x, y) is not inside the sprite
        """
        return self._array[self._index(x, y)].copy()

    def pixel_at_checked(self, x: int, y: int) -> Color | None:
        """Return a copy of the color at (x, y) or None if (x, y) is outside."""
        if not self._within_bounds(x, y):
            return None
        return self.pixel_at(x, y)

    def set_pixel_at(self, x: int, y: int, color: Color) -> None:
        """Store a copy of color at (x, y).

        :raise IndexOutOfBoundsError: if (x, y) is not inside the sprite
        """
        self._array[self._index(x, y)] = color.copy()

    def set_pixel_at_checked(self, x: int, y: int, color: Color) -> bool:
        """Store a copy of color at (x, y) if (x, y) is inside the sprite.

        :return: True if the pixel was set, False if (x, y) is outside
        """
        if not self._within_bounds(x, y):
            return False
        self.set_pixel_at(x, y, color)
        return True

    # ===============================================================================
    #   Bulk export
    # ===============================================================================

    def array_values(self) -> list[_RGBA]:
        """Return (r, g, b, a) for every pixel in row-major order."""
        return [c.to_array() for c in self._array]

    def matrix(self) -> list[list[_RGBA]]:
        """Return (r, g, b, a) for every pixel, indexed [x][y].

        Note the axis order. matrix()[x] is a column, not a row.
        """
        width, height = self._dim
        return [
            [self.pixel_at(x, y).to_array() for y in range(height)]
            for x in range(width)
        ]

    def data(self) -> list[int]:
        """Return one unsigned 32-bit AARRGGBB integer per pixel, row-major."""
        return [c.to_int() for c in self._array]

    def bytes(self) -> bytes:
        """Return four bytes per pixel, [alpha, red, green, blue], row-major."""
        result = bytearray()
        for color in self._array:
            result.extend(
                (color.alpha_byte, color.red_byte, color.green_byte, color.blue_byte)
            )
        return bytes(result)

    # ===============================================================================
    #   Svg
    # ===============================================================================

    def svg_elem(
        self,
        width: float,
        height: float,
        unit: str = DEFAULT_UNIT,
        parameters: str = "",
    ) -> EtreeElement:
        """Return the svg for svg_exact as an lxml element."""
        return svg_display.new_sprite_svg_elem(self, width, height, unit, parameters)

    def svg_exact(
        self,
        width: float,
        height: float,
        unit: str = DEFAULT_UNIT,
        parameters: str = "",
    ) -> str:
        """Create an svg string with exactly the given width and height.

        :param width: output width in `unit`
        :param height: output height in `unit`
        :param unit: css unit appended to width and height
        :param parameters: additional svg attributes as name="value" pairs
        :return: svg markup with one 1x1 rect per pixel
        """
        svg = self.svg_elem(width, height, unit, parameters)
        return svg_display.write_svg_string(svg)

    def svg_width(
        self, width: float, unit: str = DEFAULT_UNIT, parameters: str = ""
    ) -> str:
        """Create an svg with the closest matching width and automatic height.

        Width is rounded up to a multiple of the sprite width.
        """
        width, height = svg_display.size_from_width(self._dim, width)
        return self.svg_exact(width, height, unit, parameters)

    def svg_height(
        self, height: float, unit: str = DEFAULT_UNIT, parameters: str = ""
    ) -> str:
        """Create an svg with the closest matching height and automatic width.

        Height is rounded up to a multiple of the sprite height.
        """
        width, height = svg_display.size_from_height(self._dim, height)
        return self.svg_exact(width, height, unit, parameters)

    def svg(
        self,
        width: float,
        height: float,
        unit: str = DEFAULT_UNIT,
        parameters: str = "",
    ) -> str:
        """Create an svg with width and height rounded up to multiples of dim.

        Each side is rounded on its own, so the sprite may be stretched.
        """
        width, height = svg_display.size_from_width_and_height(
            self._dim, width, height
        )
        return self.svg_exact(width, height, unit, parameters)

    def svg_scale(
        self, pixel_size: float, unit: str = DEFAULT_UNIT, parameters: str = ""
    ) -> str:
        """Create an svg where each pixel is a pixel_size by pixel_size square."""
        width, height = svg_display.size_from_scale(self._dim, pixel_size)
        return self.svg_exact(width, height, unit, parameters)
