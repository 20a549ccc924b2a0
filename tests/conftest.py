"""Paths and fixtures shared by the tests.

:author: Shay Hill
:created: 2025-01-09
"""

from pathlib import Path

import pytest

from sprite_image.builder import SpriteBuilder
from sprite_image.color import BLUE, GREEN, RED, WHITE
from sprite_image.sprite import Sprite

TEST_OUTPUT = Path(__file__).parent / "output"
TEST_OUTPUT.mkdir(exist_ok=True)


@pytest.fixture
def rgbw() -> Sprite:
    """A 2x2 sprite, row-major [RED, GREEN, BLUE, WHITE]."""
    return SpriteBuilder((2, 2)).array([RED, GREEN, BLUE, WHITE]).build()
