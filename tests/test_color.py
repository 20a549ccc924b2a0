"""Test the Color value type.

:author: Shay Hill
:created: 2025-01-09
"""

import pytest

from sprite_image.color import BLACK, BLUE, RED, TRANSPARENT, WHITE, Color
from sprite_image.exceptions import ValidationError


class TestInit:
    def test_alpha_defaults_to_opaque(self):
        """Alpha is 1.0 if not given."""
        assert Color(1, 2, 3).alpha == 1.0

    def test_int_alpha_stored_as_float(self):
        """Black built with alpha=1 equals black built with alpha=1.0."""
        assert Color(0, 0, 0, 1) == Color(0, 0, 0, 1.0) == BLACK
        assert isinstance(Color(0, 0, 0, 1).alpha, float)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
    def test_bad_rgb(self, channels: tuple[float, float, float]):
        """Raise ValidationError for channels outside [0, 255] or not int."""
        with pytest.raises(ValidationError):
            _ = Color(*channels)  # type: ignore

    def test_bad_alpha(self):
        """Raise ValidationError naming alpha."""
        with pytest.raises(ValidationError) as excinfo:
            _ = Color(0, 0, 0, 2)
        assert excinfo.value.name == "alpha"

    def test_frozen(self):
        """Colors cannot be altered in place."""
        color = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            color.red = 4  # type: ignore


class TestCopy:
    def test_copy_is_equal_and_distinct(self):
        """Copy returns a new instance with the same value."""
        color = Color(10, 20, 30, 0.5)
        copied = color.copy()
        assert copied == color
        assert copied is not color


class TestConversions:
    def test_to_array(self):
        assert Color(10, 20, 30, 0.5).to_array() == (10, 20, 30, 0.5)

    def test_to_rgba_opaque(self):
        """Opaque alpha is written as 1."""
        assert RED.to_rgba() == "rgba(255, 0, 0, 1)"

    def test_to_hex(self):
        """Alpha is dropped."""
        assert RED.to_hex().lower() == "#ff0000"
        assert Color(1, 2, 3, 0.5).to_hex().lower() == "#010203"

    def test_to_rgba_translucent(self):
        assert Color(0, 0, 0, 0.5).to_rgba() == "rgba(0, 0, 0, 0.5)"
        assert TRANSPARENT.to_rgba() == "rgba(0, 0, 0, 0)"

    def test_to_int(self):
        """Pack as AARRGGBB."""
        assert BLACK.to_int() == 0xFF000000
        assert RED.to_int() == 0xFFFF0000
        assert BLUE.to_int() == 0xFF0000FF
        assert WHITE.to_int() == 0xFFFFFFFF
        assert TRANSPARENT.to_int() == 0

    def test_from_int(self):
        """Reverse to_int."""
        assert Color.from_int(0xFF00FF00) == Color(0, 255, 0)
        assert Color.from_int(0x80123456).to_int() == 0x80123456

    def test_bytes(self):
        """Alpha scaled to [0, 255]. Other channels as stored."""
        color = Color(10, 20, 30, 0.5)
        assert color.alpha_byte == 128
        assert (color.red_byte, color.green_byte, color.blue_byte) == (10, 20, 30)
        assert BLACK.alpha_byte == 255


class TestFromString:
    @pytest.mark.parametrize("text", ["#ff0000", "red", "rgb(255, 0, 0)"])
    def test_opaque(self, text: str):
        assert Color.from_string(text) == RED

    def test_with_alpha(self):
        """An eight-digit hex carries alpha."""
        color = Color.from_string("#0000ff80")
        assert color.to_array()[:3] == (0, 0, 255)
        assert color.alpha_byte == 128

    def test_unknown(self):
        """Pillow raises ValueError for strings it cannot read."""
        with pytest.raises(ValueError):
            _ = Color.from_string("not a color")
