# Mariner's AI Grid - Wind Barb Icon Export
# SPDX-License-Identifier: Apache-2.0

"""
Rasterizes cached wind barb glyphs into PNG icons for Mapbox symbol layers.

Icons point North with the station at the image centre; rotation to the
wind direction is handled by the map client (icon-rotate around the
centre anchor).

Output: wind-calm.png, wind-nodata.png, wind-0.png ... wind-100.png
"""

from pathlib import Path
from typing import Optional
import logging

from PIL import Image, ImageDraw

from windbarbs.cache import get_symbol_set
from windbarbs.glyph import Glyph
from windbarbs.locator import DEFAULT_NAME
from windbarbs.mirror import mirror

logger = logging.getLogger(__name__)

SIZE = 64  # Icon size in pixels
MARGIN = 4  # Pixels kept clear around the glyph
STAFF_COLOR = (255, 255, 255)  # White for dark map
STAFF_WIDTH = 3
MIN_SIZE = 2 * MARGIN + 1  # Smallest icon with room to draw


def _check_size(size: int) -> None:
    if size < MIN_SIZE:
        raise ValueError(f"Invalid icon size {size} px (minimum {MIN_SIZE} px)")


def _glyph_extent(glyph: Glyph) -> float:
    """Largest distance of any vertex from the station along either axis"""
    minx, miny, maxx, maxy = glyph.bounds
    return max(abs(minx), abs(miny), abs(maxx), abs(maxy))


def render_glyph(
    glyph: Glyph,
    size: int = SIZE,
    color: tuple[int, int, int] = STAFF_COLOR,
    width: int = STAFF_WIDTH,
    scale: Optional[float] = None,
) -> Image.Image:
    """
    Draw a glyph into a transparent RGBA icon.

    Args:
        glyph: Glyph in local units (station at origin, tip up)
        size: Icon width and height in pixels
        color: Stroke and fill color
        width: Stroke width in pixels
        scale: Pixels per glyph unit (default: fit the glyph in the icon)

    Returns:
        RGBA image

    Raises:
        ValueError: If the icon is too small to hold the glyph
    """
    _check_size(size)

    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    cx = cy = size / 2
    if scale is None:
        extent = _glyph_extent(glyph)
        scale = (size / 2 - MARGIN) / extent if extent > 0 else 1.0

    for path in glyph.geoms:
        # Image Y grows downward
        points = [(cx + x * scale, cy - y * scale) for x, y in path.coords]
        if path.is_closed and len(points) == 4:
            # Triangles are pennants
            draw.polygon(points, fill=color)
        else:
            draw.line(points, fill=color, width=width, joint="curve")

    return img


def export_icons(
    output_dir: Path,
    symbol_set: str = DEFAULT_NAME,
    size: int = SIZE,
    southern: bool = False,
) -> list[Path]:
    """
    Write one PNG per cached glyph of a symbol set.

    All icons of a set share one scale, so barbs line up across speeds.

    Args:
        output_dir: Destination directory (created if missing)
        symbol_set: Registered symbol set name
        size: Icon size in pixels
        southern: Mirror glyphs for the southern hemisphere

    Returns:
        Paths of the written files
    """
    _check_size(size)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    glyphs = get_symbol_set(symbol_set).cache.glyphs
    extent = max(_glyph_extent(glyph) for glyph in glyphs.values())
    scale = (size / 2 - MARGIN) / extent

    written = []
    for bucket, glyph in glyphs.items():
        if southern:
            glyph = mirror(glyph)
        path = output_dir / f"wind-{bucket.name}.png"
        render_glyph(glyph, size=size, scale=scale).save(path)
        logger.info(f"Generated: {path.name}")
        written.append(path)

    return written
