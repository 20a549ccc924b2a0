"""Write a few example sprites to binaries/ to check svg output by eye.

:author: Shay Hill
:created: 2025-01-09
"""

import sys

from svg_ultralight import write_svg

from sprite_image import svg_display
from sprite_image.builder import SpriteBuilder
from sprite_image.color import BLUE, GREEN, RED, TRANSPARENT, WHITE, Color
from sprite_image.globs import BINARIES
from sprite_image.sprite import Sprite

_SAMPLES = BINARIES / "samples"

# 5 x 5 heart, one character per pixel
_HEART = (".R.R.", "RRRRR", "RRRRR", ".RRR.", "..R..")


def _new_heart() -> Sprite:
    """Build a mirrored 5x5 heart from _HEART."""
    colors = {".": TRANSPARENT, "R": RED}
    array = [colors[char] for row in _HEART for char in row]
    builder = SpriteBuilder((5, 5)).array(array).pallet([RED])
    return builder.horizontal_symmetry().build()


def _new_checker() -> Sprite:
    """Build a 4x3 sprite with a checker of two pallet colors."""
    sprite = Sprite.builder().dim(4, 3).pallet([WHITE, BLUE]).build()
    for x in range(4):
        for y in range(3):
            sprite.set_pixel_at(x, y, WHITE if (x + y) % 2 else BLUE)
    return sprite


def write_sample_sprites() -> None:
    """Write each sample sprite at a few sizes."""
    _SAMPLES.mkdir(parents=True, exist_ok=True)
    gradient = SpriteBuilder((3, 1)).array(
        [Color(0, 255, 0, 0.25), Color(0, 255, 0, 0.5), GREEN]
    )
    samples = {
        "heart": _new_heart(),
        "checker": _new_checker(),
        "gradient": gradient.build(),
    }
    xmlns = 'xmlns="http://www.w3.org/2000/svg"'
    for name, sprite in samples.items():
        sizes = {
            f"{name}-scale.svg": svg_display.size_from_scale(sprite.dim, 16),
            f"{name}-width.svg": svg_display.size_from_width(sprite.dim, 100),
            f"{name}-height.svg": svg_display.size_from_height(sprite.dim, 100),
        }
        for filename, (width, height) in sizes.items():
            svg = sprite.svg_elem(width, height, parameters=xmlns)
            _ = write_svg(_SAMPLES / filename, svg)
            _ = sys.stdout.write(f"{filename} written to {_SAMPLES}.\n")


if __name__ == "__main__":
    write_sample_sprites()
