# Mariner's AI Grid - Wind Barb Glyph Cache
# SPDX-License-Identifier: Apache-2.0

"""
Pre-built glyphs for every symbol a symbol set can draw.

A symbol set is a named geometry profile plus its glyph cache. The cache
builds every glyph up front (families 0..max_family, calm and no data),
so resolving a locator is a dictionary lookup and the shared glyphs are
never touched again. Readers on any number of render threads need no
locking.

The "default" set is built when this module is imported. Further sets can
be registered at runtime; they are fully built before being published.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
import logging
import threading

from windbarbs.classifier import CALM, NO_DATA, Bucket, classify, decompose
from windbarbs.definitions import DEFAULT_WINDBARB_DEFINITION, WindBarbDefinition
from windbarbs.errors import InvalidSpeedError, UnknownSymbolSetError
from windbarbs.glyph import Glyph, build_calm, build_glyph, build_no_data
from windbarbs.locator import DEFAULT_NAME

logger = logging.getLogger(__name__)


class GlyphCache:
    """
    Read-only bucket -> glyph table for one geometry profile.
    """

    def __init__(self, definition: WindBarbDefinition = DEFAULT_WINDBARB_DEFINITION):
        self.definition = definition

        glyphs: dict[Bucket, Glyph] = {}
        for family in definition.families:
            glyphs[Bucket.of_family(family)] = build_glyph(decompose(family), definition)
        glyphs[CALM] = build_calm(definition)
        glyphs[NO_DATA] = build_no_data(definition)

        self._glyphs: Mapping[Bucket, Glyph] = MappingProxyType(glyphs)
        logger.debug(f"Built {len(glyphs)} wind barb glyphs (max {definition.max_family} kn)")

    @property
    def glyphs(self) -> Mapping[Bucket, Glyph]:
        return self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __contains__(self, bucket: Bucket) -> bool:
        return bucket in self._glyphs

    def classify(self, knots: float) -> Bucket:
        """Classify a speed against this profile's largest family"""
        return classify(knots, self.definition.max_family)

    def lookup(self, bucket: Bucket) -> Glyph:
        """
        Get the shared glyph for a bucket.

        Raises:
            InvalidSpeedError: For INVALID or any bucket without a glyph
        """
        glyph = self._glyphs.get(bucket)
        if glyph is None:
            raise InvalidSpeedError(
                float("nan") if bucket.family is None else float(bucket.family),
                self.definition.max_family,
            )
        return glyph

    def glyph_for_knots(self, knots: float) -> Glyph:
        """Classify and look up in one step"""
        bucket = self.classify(knots)
        if not bucket.is_valid:
            raise InvalidSpeedError(knots, self.definition.max_family)
        return self.lookup(bucket)


@dataclass(frozen=True)
class SymbolSet:
    """A named geometry profile with its pre-built glyphs"""
    name: str
    definition: WindBarbDefinition
    cache: GlyphCache


_symbol_sets: dict[str, SymbolSet] = {}
_registry_lock = threading.Lock()


def register_symbol_set(
    name: str,
    definition: WindBarbDefinition,
    replace: bool = False,
) -> SymbolSet:
    """
    Build and publish a symbol set under `name` (case-insensitive).

    Args:
        name: Set name used in locators, e.g. "custom1"
        definition: Geometry profile
        replace: Allow replacing an existing set (never "default")

    Returns:
        The registered SymbolSet

    Raises:
        ValueError: If the name is empty or already taken
    """
    global _symbol_sets

    key = name.strip().lower()
    if not key:
        raise ValueError("Symbol set name cannot be empty")

    # Build outside the lock; only publication is serialized
    symbol_set = SymbolSet(key, definition, GlyphCache(definition))

    with _registry_lock:
        if key in _symbol_sets and (not replace or key == DEFAULT_NAME):
            raise ValueError(f"Symbol set already registered: {key!r}")
        # Copy-on-write so readers never see a dict being resized
        _symbol_sets = {**_symbol_sets, key: symbol_set}

    logger.info(f"Registered windbarb symbol set {key!r}")
    return symbol_set


def get_symbol_set(name: str) -> SymbolSet:
    """
    Get a registered symbol set (case-insensitive).

    Raises:
        UnknownSymbolSetError: If no set has that name
    """
    symbol_set = _symbol_sets.get(name.strip().lower())
    if symbol_set is None:
        raise UnknownSymbolSetError(name)
    return symbol_set


def symbol_set_names() -> list[str]:
    """Names of all registered symbol sets"""
    return sorted(_symbol_sets)


DEFAULT_SYMBOL_SET = register_symbol_set(DEFAULT_NAME, DEFAULT_WINDBARB_DEFINITION)
DEFAULT_CACHE = DEFAULT_SYMBOL_SET.cache
