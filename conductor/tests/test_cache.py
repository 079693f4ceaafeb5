# Mariner's AI Grid - Glyph Cache Tests
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the pre-built glyph cache and the symbol set registry.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from windbarbs.cache import (
    DEFAULT_CACHE,
    DEFAULT_SYMBOL_SET,
    GlyphCache,
    get_symbol_set,
    register_symbol_set,
    symbol_set_names,
)
from windbarbs.classifier import CALM, INVALID, NO_DATA, Bucket, BucketKind
from windbarbs.definitions import WindBarbDefinition
from windbarbs.errors import InvalidSpeedError, UnknownSymbolSetError
from windbarbs.glyph import build_glyph


class TestGlyphCache:
    """Test the default cache contents"""

    def test_all_buckets_prebuilt(self):
        """21 families (0-100 kt) plus calm and no data"""
        assert len(DEFAULT_CACHE) == 23
        for family in range(0, 101, 5):
            assert Bucket.of_family(family) in DEFAULT_CACHE
        assert CALM in DEFAULT_CACHE
        assert NO_DATA in DEFAULT_CACHE
        assert INVALID not in DEFAULT_CACHE

    def test_lookup_returns_shared_glyph(self):
        first = DEFAULT_CACHE.lookup(Bucket.of_family(25))
        second = DEFAULT_CACHE.lookup(Bucket.of_family(25))

        assert first is second

    def test_cached_glyph_matches_builder(self):
        for bucket, glyph in DEFAULT_CACHE.glyphs.items():
            assert glyph.equals_exact(build_glyph(bucket), 0.0)

    def test_lookup_invalid_raises(self):
        with pytest.raises(InvalidSpeedError):
            DEFAULT_CACHE.lookup(INVALID)

    def test_lookup_family_beyond_max_raises(self):
        with pytest.raises(InvalidSpeedError):
            DEFAULT_CACHE.lookup(Bucket.of_family(105))

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CACHE.glyphs[CALM] = None

    def test_glyph_for_knots(self):
        assert DEFAULT_CACHE.glyph_for_knots(15.0) is DEFAULT_CACHE.lookup(Bucket.of_family(15))
        assert DEFAULT_CACHE.glyph_for_knots(math.nan) is DEFAULT_CACHE.lookup(NO_DATA)

    @pytest.mark.parametrize("knots", [math.inf, -math.inf, 110.0])
    def test_glyph_for_invalid_knots(self, knots):
        with pytest.raises(InvalidSpeedError):
            DEFAULT_CACHE.glyph_for_knots(knots)

    def test_concurrent_reads(self):
        """Many render threads read the same shared glyphs"""
        speeds = [float(k) for k in range(0, 103)] * 20

        with ThreadPoolExecutor(max_workers=8) as pool:
            glyphs = list(pool.map(DEFAULT_CACHE.glyph_for_knots, speeds))

        for knots, glyph in zip(speeds, glyphs):
            assert glyph is DEFAULT_CACHE.lookup(DEFAULT_CACHE.classify(knots))

    def test_custom_max_family(self):
        cache = GlyphCache(WindBarbDefinition(max_family=150))

        assert len(cache) == 33
        assert cache.classify(140.0) == Bucket.of_family(140)
        assert cache.lookup(Bucket.of_family(150)) is not None


class TestSymbolSetRegistry:
    """Test the name -> symbol set registry"""

    def test_default_registered(self):
        assert get_symbol_set("default") is DEFAULT_SYMBOL_SET
        assert get_symbol_set("DEFAULT") is DEFAULT_SYMBOL_SET
        assert "default" in symbol_set_names()

    def test_unknown_set(self):
        with pytest.raises(UnknownSymbolSetError) as excinfo:
            get_symbol_set("pippo")

        assert excinfo.value.name == "pippo"

    def test_register_custom_set(self):
        definition = WindBarbDefinition.from_values(
            vector_length=60,
            long_barb_length=30,
            base_pennant_length=8,
            elements_spacing=6,
            zero_wind_radius=12,
            max_family=150,
        )
        symbol_set = register_symbol_set("Test-Large", definition)

        assert symbol_set.name == "test-large"
        assert get_symbol_set("test-large") is symbol_set
        assert symbol_set.cache.classify(148.0).kind is BucketKind.FAMILY

    def test_duplicate_name_rejected(self):
        register_symbol_set("test-duplicate", WindBarbDefinition())

        with pytest.raises(ValueError, match="already registered"):
            register_symbol_set("test-duplicate", WindBarbDefinition())

    def test_replace_existing(self):
        register_symbol_set("test-replace", WindBarbDefinition())
        replaced = register_symbol_set(
            "test-replace", WindBarbDefinition(vector_length=50), replace=True
        )

        assert get_symbol_set("test-replace") is replaced

    def test_default_cannot_be_replaced(self):
        with pytest.raises(ValueError):
            register_symbol_set("default", WindBarbDefinition(vector_length=50), replace=True)

        assert get_symbol_set("default") is DEFAULT_SYMBOL_SET

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            register_symbol_set("  ", WindBarbDefinition())
