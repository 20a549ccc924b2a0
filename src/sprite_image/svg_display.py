"""Render a sprite as an svg with one 1x1 rect per pixel.

The viewBox is the sprite grid, so every pixel is a unit square and the `width` and
`height` attributes scale the whole thing to the requested output size. Output is
deterministic: pixels are written column by column (every y for x=0, then every y
for x=1, ...), so the same sprite always serializes to the same string.

Sprite.svg, Sprite.svg_width, Sprite.svg_height, and Sprite.svg_scale only decide
the output size. Everything is drawn here.

:author: Shay Hill
:created: 2025-01-07
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree
from lxml.etree import _Element as EtreeElement  # type: ignore
from svg_ultralight import format_number, new_sub_element

from sprite_image.exceptions import ValidationError
from sprite_image.globs import DEFAULT_UNIT
from sprite_image.validator import non_negative_number

if TYPE_CHECKING:
    from sprite_image.sprite import Sprite


# ===================================================================================
#   Output size
# ===================================================================================


def round_up_to_multiple(size: float, step: int) -> float:
    """Round size up to the nearest multiple of step.

    :param size: a requested output width or height
    :param step: a sprite dimension, the number of pixels along the same axis
    :return: the smallest multiple of step >= size

    A size that is already a multiple of step is returned unchanged.
    """
    remainder = size % step
    if remainder == 0:
        return size
    return size + step - remainder


def size_from_width(dim: tuple[int, int], width: float) -> tuple[float, float]:
    """Round width up to a multiple of dim[0] and derive height from the aspect."""
    _ = non_negative_number(width, "width")
    width = round_up_to_multiple(width, dim[0])
    return width, width * dim[1] / dim[0]


def size_from_height(dim: tuple[int, int], height: float) -> tuple[float, float]:
    """Round height up to a multiple of dim[1] and derive width from the aspect."""
    _ = non_negative_number(height, "height")
    height = round_up_to_multiple(height, dim[1])
    return height * dim[0] / dim[1], height


def size_from_width_and_height(
    dim: tuple[int, int], width: float, height: float
) -> tuple[float, float]:
    """Round width and height independently to multiples of dim.

    The aspect ratio of the sprite is not preserved.
    """
    _ = non_negative_number(width, "width")
    _ = non_negative_number(height, "height")
    return round_up_to_multiple(width, dim[0]), round_up_to_multiple(height, dim[1])


def size_from_scale(dim: tuple[int, int], pixel_size: float) -> tuple[float, float]:
    """Return the output size where each pixel is pixel_size by pixel_size."""
    _ = non_negative_number(pixel_size, "pixel_size")
    return dim[0] * pixel_size, dim[1] * pixel_size


# ===================================================================================
#   Free-form svg parameters
# ===================================================================================


def _new_svg_root(parameters: str) -> EtreeElement:
    """Create an empty svg element carrying the attributes in parameters.

    :param parameters: e.g., 'xmlns="http://www.w3.org/2000/svg" class="sprite"'
    :return: an svg element with those attributes and namespace declarations, in
        the order they appear in parameters
    :raise ValidationError: if parameters is not a string of xml attributes

    lxml reads the attributes, so entities and character references in values are
    decoded once, the way any xml reader would decode them.
    """
    if not isinstance(parameters, str):
        msg = f"Expected svg parameters as a string, got {parameters!r}"
        raise ValidationError(msg, "parameters")
    try:
        svg = etree.fromstring(f"<svg {parameters}/>")
    except etree.XMLSyntaxError as e:
        msg = f'Expected svg parameters as name="value" pairs, got {parameters!r}'
        raise ValidationError(msg, "parameters") from e
    if len(svg) or svg.text:
        msg = f"svg parameters may only hold attributes, got {parameters!r}"
        raise ValidationError(msg, "parameters")
    return svg


# ===================================================================================
#   Rendering
# ===================================================================================


def new_sprite_svg_elem(
    sprite: Sprite,
    width: float,
    height: float,
    unit: str = DEFAULT_UNIT,
    parameters: str = "",
) -> EtreeElement:
    """Create an svg element showing every pixel of a sprite.

    :param sprite: the sprite to draw
    :param width: output width in `unit`
    :param height: output height in `unit`
    :param unit: a css unit, e.g., "px", "mm", "%". Can be empty.
    :param parameters: additional svg attributes as a string of name="value"
        pairs. These are written before width, height, and viewBox. An xmlns here
        puts the rects in the same namespace.
    :return: an svg element with a viewBox of the sprite grid and a 1x1 rect for
        every pixel
    """
    _ = non_negative_number(width, "width")
    _ = non_negative_number(height, "height")
    svg = _new_svg_root(parameters)
    dim_x, dim_y = sprite.dim

    svg.set("width", f"{format_number(width)}{unit}")
    svg.set("height", f"{format_number(height)}{unit}")
    svg.set("viewBox", f"0, 0, {dim_x}, {dim_y}")

    namespace = etree.QName(svg).namespace
    rect_tag = "rect" if namespace is None else f"{{{namespace}}}rect"
    for x in range(dim_x):
        for y in range(dim_y):
            rgba = sprite.pixel_at(x, y).to_rgba()
            style = f"fill:{rgba};"
            _ = new_sub_element(
                svg, rect_tag, width=1, height=1, x=x, y=y, style=style
            )
    return svg


def write_svg_string(svg: EtreeElement) -> str:
    """Serialize an svg element to a string without an xml declaration."""
    return etree.tostring(svg, encoding="unicode")
