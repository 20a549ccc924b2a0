"""Test SpriteBuilder.

:author: Shay Hill
:created: 2025-01-10
"""

import warnings

import pytest

from sprite_image.builder import SpriteBuilder
from sprite_image.color import BLACK, BLUE, GREEN, RED, WHITE
from sprite_image.exceptions import DimensionMismatchError, ValidationError
from sprite_image.sprite import Sprite


class TestBuild:
    def test_minimal(self):
        """Only dim is required."""
        sprite = SpriteBuilder().dim(2, 3).build()
        assert sprite.dim == (2, 3)
        assert sprite.array == [BLACK] * 6
        assert sprite.pallet == []
        assert sprite.horizontal_symmetry is False

    def test_dim_in_init(self):
        assert SpriteBuilder((4, 1)).build().dim == (4, 1)

    def test_sprite_builder(self):
        """Sprite.builder() returns a fresh builder."""
        builder = Sprite.builder()
        assert isinstance(builder, SpriteBuilder)
        assert builder.dim(1, 1).build() == Sprite((1, 1))

    def test_all_arguments(self):
        sprite = (
            SpriteBuilder()
            .dim(2, 2)
            .array([RED, GREEN, BLUE, WHITE])
            .pallet([RED, GREEN])
            .horizontal_symmetry()
            .build()
        )
        assert sprite.pixel_at(1, 0) == GREEN
        assert sprite.pallet == [RED, GREEN]
        assert sprite.horizontal_symmetry is True

    def test_color_fill(self):
        sprite = SpriteBuilder((2, 1)).color_fill(BLUE).build()
        assert sprite.array == [BLUE, BLUE]

    def test_no_dim(self):
        """Raise ValidationError naming dim."""
        with pytest.raises(ValidationError) as excinfo:
            _ = SpriteBuilder().build()
        assert excinfo.value.name == "dim"

    def test_bad_dim(self):
        with pytest.raises(ValidationError):
            _ = SpriteBuilder().dim(0, 2).build()

    def test_array_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            _ = SpriteBuilder((2, 2)).array([RED]).build()

    def test_builds_independent_sprites(self):
        """Two builds from one builder do not share pixels."""
        builder = SpriteBuilder((1, 1)).array([RED])
        first, second = builder.build(), builder.build()
        first.set_pixel_at(0, 0, BLUE)
        assert second.pixel_at(0, 0) == RED


class TestWarnings:
    def test_fill_ignored_with_array(self):
        """Warn that color_fill does nothing when an array is given."""
        builder = SpriteBuilder((1, 1)).array([RED]).color_fill(BLUE)
        with pytest.warns(UserWarning, match="color_fill"):
            sprite = builder.build()
        assert sprite.pixel_at(0, 0) == RED

    def test_black_dropped_from_pallet_quietly(self):
        """Dropping black is routine, so it does not warn."""
        builder = SpriteBuilder((1, 1)).pallet([BLACK, RED])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            sprite = builder.build()
        assert sprite.pallet == [RED]

    def test_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            _ = SpriteBuilder((1, 1)).pallet([RED]).build()
