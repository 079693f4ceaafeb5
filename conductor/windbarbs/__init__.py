# Mariner's AI Grid - Wind Barb Symbols
# SPDX-License-Identifier: Apache-2.0

"""
Wind barb symbol engine for the marine map layers.

Turns locators such as windbarbs://default(15)[kts] into vector glyphs:

1. Locator parsing: symbol set, speed, unit, query parameters
2. Speed conversion: any velocity unit to knots
3. Classification: 5 knot families, calm, no data
4. Glyph lookup: pre-built shapely geometries, mirrored for the south
"""

from windbarbs.cache import (
    DEFAULT_CACHE,
    GlyphCache,
    SymbolSet,
    get_symbol_set,
    register_symbol_set,
)
from windbarbs.classifier import BarbDecomposition, Bucket, BucketKind, classify, decompose
from windbarbs.definitions import DEFAULT_WINDBARB_DEFINITION, WindBarbDefinition
from windbarbs.errors import (
    InvalidSpeedError,
    LocatorParseError,
    UnknownSymbolSetError,
    UnsupportedUnitError,
    WindBarbError,
)
from windbarbs.factory import ResolvedSymbol, WindBarbsFactory
from windbarbs.glyph import build_glyph
from windbarbs.locator import SymbolLocator, parse_locator
from windbarbs.mirror import mirror
from windbarbs.units import to_knots

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CACHE",
    "GlyphCache",
    "SymbolSet",
    "get_symbol_set",
    "register_symbol_set",
    "BarbDecomposition",
    "Bucket",
    "BucketKind",
    "classify",
    "decompose",
    "DEFAULT_WINDBARB_DEFINITION",
    "WindBarbDefinition",
    "InvalidSpeedError",
    "LocatorParseError",
    "UnknownSymbolSetError",
    "UnsupportedUnitError",
    "WindBarbError",
    "ResolvedSymbol",
    "WindBarbsFactory",
    "build_glyph",
    "SymbolLocator",
    "parse_locator",
    "mirror",
    "to_knots",
]
