# Mariner's AI Grid - Wind Barb Glyph Builder
# SPDX-License-Identifier: Apache-2.0

"""
Builds wind barb glyphs as shapely MultiLineStrings.

Local frame: the station sits at (0, 0) and the shaft points up (+Y) to
the tip at (0, vector_length). The map client rotates the glyph so the
shaft points to where the wind is coming FROM.

Elements hang off the +X side of the shaft, starting at the tip:
- Pennant (50 kt): closed triangle
- Long barb (10 kt): segment of long_barb_length
- Short barb (5 kt): segment of half that length

Closed subpaths (pennants, the calm circle) are rings whose last point
repeats the first.
"""

from typing import Union
import logging

import numpy as np
from shapely import wkt
from shapely.geometry import LineString, MultiLineString

from windbarbs.classifier import (
    CALM,
    NO_DATA,
    BarbDecomposition,
    Bucket,
    BucketKind,
    decompose,
)
from windbarbs.definitions import DEFAULT_WINDBARB_DEFINITION, WindBarbDefinition

logger = logging.getLogger(__name__)

Glyph = MultiLineString
GlyphSubject = Union[BarbDecomposition, Bucket]

# Segments used to approximate the calm circle
CIRCLE_SEGMENTS = 32

Point = tuple[float, float]


def _shaft(definition: WindBarbDefinition) -> list[Point]:
    return [(0.0, 0.0), (0.0, float(definition.vector_length))]


def build_calm(definition: WindBarbDefinition = DEFAULT_WINDBARB_DEFINITION) -> Glyph:
    """Circle of diameter zero_wind_radius centred on the station"""
    radius = definition.zero_wind_radius / 2.0
    theta = np.linspace(0.0, 2.0 * np.pi, CIRCLE_SEGMENTS + 1)
    coords = np.column_stack((radius * np.cos(theta), radius * np.sin(theta)))
    coords[-1] = coords[0]
    return MultiLineString([LineString(coords)])


def build_no_data(definition: WindBarbDefinition = DEFAULT_WINDBARB_DEFINITION) -> Glyph:
    """Shaft crossed out at the tip: the speed is unknown"""
    tip = float(definition.vector_length)
    half = definition.zero_wind_radius / 2.0
    return MultiLineString([
        _shaft(definition),
        [(half, tip + half), (-half, tip - half)],
        [(-half, tip + half), (half, tip - half)],
    ])


def build_barbs(
    decomposition: BarbDecomposition,
    definition: WindBarbDefinition = DEFAULT_WINDBARB_DEFINITION,
) -> Glyph:
    """
    Build a shaft with pennants, long barbs and a short barb.

    Walks down from the tip. Pennants are stacked against each other;
    barbs are anchored `elements_spacing` apart, and one spacing separates
    each group from the next. Anchor positions are whole shaft units, so
    the pennant's half-base steps are truncated (the default pennant takes
    6 units of shaft).

    Args:
        decomposition: Element counts for the family
        definition: Geometry profile

    Returns:
        MultiLineString: shaft first, then elements from the tip down
    """
    spacing = definition.elements_spacing
    half_base = definition.base_pennant_length / 2.0
    quarter_base = definition.base_pennant_length / 4.0
    long_length = float(definition.long_barb_length)
    short_length = float(definition.short_barb_length)

    paths: list[list[Point]] = [_shaft(definition)]
    position = definition.vector_length

    for _ in range(decomposition.pennants):
        top = position
        position = int(position - half_base)
        apex = (long_length, float(position))
        position = int(position - half_base)
        paths.append([(0.0, float(top)), apex, (0.0, float(position)), (0.0, float(top))])

    if decomposition.pennants:
        position -= spacing

    for i in range(decomposition.long_barbs):
        if i:
            position -= spacing
        paths.append([(0.0, float(position)), (long_length, position + half_base)])

    if decomposition.long_barbs:
        position -= spacing

    if decomposition.short_barbs:
        # A lone short barb is set in from the tip so it reads as 5 kt
        if not decomposition.pennants and not decomposition.long_barbs:
            position = definition.vector_length - spacing
        paths.append([(0.0, float(position)), (short_length, position + quarter_base)])

    return MultiLineString(paths)


def build_glyph(
    subject: GlyphSubject,
    definition: WindBarbDefinition = DEFAULT_WINDBARB_DEFINITION,
) -> Glyph:
    """
    Build the glyph for a decomposition or a classified bucket.

    An empty decomposition (the 0 kt family) is drawn as calm.

    Raises:
        ValueError: For the INVALID bucket, which has no glyph
    """
    if isinstance(subject, BarbDecomposition):
        if subject.is_empty:
            return build_calm(definition)
        return build_barbs(subject, definition)

    if subject == CALM:
        return build_calm(definition)
    if subject == NO_DATA:
        return build_no_data(definition)
    if subject.kind is BucketKind.FAMILY:
        return build_glyph(decompose(subject.family), definition)

    raise ValueError(f"No glyph for bucket {subject}")


def to_wkt(glyph: Glyph, precision: int = 6) -> str:
    """Serialize a glyph to WKT, trimming trailing zeros"""
    return wkt.dumps(glyph, trim=True, rounding_precision=precision)
