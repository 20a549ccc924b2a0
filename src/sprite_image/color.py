"""An RGBA color value for sprite pixels.

Red, green, and blue are integers in [0, 255]. Alpha is a float in [0, 1], the way
css writes it. Colors are frozen and compare by value, so the module-level BLACK is
a sentinel you can test against with `==`.

:author: Shay Hill
:created: 2025-01-06
"""

from __future__ import annotations

import dataclasses

from basic_colormath import rgb_to_hex
from PIL import ImageColor

from sprite_image.validator import in_range, integer_in_range

_BYTE_MAX = 255


def _format_alpha(alpha: float) -> str:
    """Format alpha for a css string. 1.0 -> "1", 0.5 -> "0.5"."""
    if alpha.is_integer():
        return str(int(alpha))
    return repr(alpha)


@dataclasses.dataclass(frozen=True)
class Color:
    """One RGBA color.

    :param red: red channel [0, 255]
    :param green: green channel [0, 255]
    :param blue: blue channel [0, 255]
    :param alpha: opacity [0, 1]
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate channels and store alpha as a float."""
        for name in ("red", "green", "blue"):
            _ = integer_in_range(getattr(self, name), name, 0, _BYTE_MAX)
        alpha = in_range(self.alpha, "alpha", 0, 1)
        object.__setattr__(self, "alpha", float(alpha))

    @classmethod
    def from_string(cls, text: str) -> Color:
        """Create a color from any css color string Pillow can read.

        :param text: e.g., "#ff0000", "#ff000080", "rgb(255, 0, 0)", "red"
        :return: a new Color
        :raise ValueError: if Pillow does not recognize the string
        """
        channels = ImageColor.getrgb(text)
        if len(channels) == 4:
            red, green, blue, alpha = channels
            return cls(red, green, blue, alpha / _BYTE_MAX)
        red, green, blue = channels[:3]
        return cls(red, green, blue)

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Create a color from a packed 0xAARRGGBB integer."""
        _ = integer_in_range(value, "value", 0, 0xFFFFFFFF)
        alpha, red, green, blue = value.to_bytes(4, "big")
        return cls(red, green, blue, alpha / _BYTE_MAX)

    def copy(self) -> Color:
        """Return an equal, distinct instance."""
        return dataclasses.replace(self)

    def to_array(self) -> tuple[int, int, int, float]:
        """Return (red, green, blue, alpha)."""
        return self.red, self.green, self.blue, self.alpha

    def to_rgba(self) -> str:
        """Return a css color string, e.g., "rgba(255, 0, 0, 1)"."""
        alpha = _format_alpha(self.alpha)
        return f"rgba({self.red}, {self.green}, {self.blue}, {alpha})"

    def to_hex(self) -> str:
        """Return "#rrggbb". Alpha is dropped."""
        return rgb_to_hex((self.red, self.green, self.blue))

    def to_int(self) -> int:
        """Return the color packed into an unsigned 32-bit integer as AARRGGBB."""
        channels = (self.alpha_byte, self.red_byte, self.green_byte, self.blue_byte)
        return int.from_bytes(bytes(channels), "big")

    @property
    def alpha_byte(self) -> int:
        """Alpha scaled to [0, 255]."""
        return round(self.alpha * _BYTE_MAX)

    @property
    def red_byte(self) -> int:
        return self.red

    @property
    def green_byte(self) -> int:
        return self.green

    @property
    def blue_byte(self) -> int:
        return self.blue


BLACK = Color(0, 0, 0, 1)
WHITE = Color(255, 255, 255, 1)
RED = Color(255, 0, 0, 1)
GREEN = Color(0, 255, 0, 1)
BLUE = Color(0, 0, 255, 1)
TRANSPARENT = Color(0, 0, 0, 0)
