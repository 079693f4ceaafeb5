#!/usr/bin/env python3
"""
Mariner's AI Grid - Wind Barb Asset Generator
Generates PNG wind barb icons from the windbarbs glyph cache.

Wind barbs point in the direction the wind is coming FROM.
- Short barb = 5 knots
- Long barb = 10 knots
- Pennant (triangle) = 50 knots

Output: PNG files for Mapbox symbol layers, one set per hemisphere.
"""

import logging
from pathlib import Path

from windbarbs.export import export_icons

ASSETS_DIR = Path("../assets/wind-barbs")

logging.basicConfig(level=logging.INFO)


def generate_all_barbs():
    """Generate wind barb icons for calm, no data and 0-100 knots."""
    north = export_icons(ASSETS_DIR)
    south = export_icons(ASSETS_DIR / "southern", southern=True)
    return north + south


if __name__ == "__main__":
    paths = generate_all_barbs()
    print(f"\n{len(paths)} wind barb icons generated in {ASSETS_DIR}")
