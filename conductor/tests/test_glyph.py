# Mariner's AI Grid - Wind Barb Glyph Tests
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for glyph construction and southern hemisphere mirroring.

Reference shapes use the default profile: shaft from (0, 0) to (0, 40).
"""

import pytest
from shapely import wkt
from shapely.geometry import MultiLineString

from windbarbs.classifier import CALM, INVALID, NO_DATA, Bucket, decompose
from windbarbs.definitions import DEFAULT_WINDBARB_DEFINITION, WindBarbDefinition
from windbarbs.glyph import (
    build_barbs,
    build_calm,
    build_glyph,
    build_no_data,
    to_wkt,
)
from windbarbs.mirror import mirror, wants_mirror


def assert_same_shape(glyph, expected_wkt):
    expected = wkt.loads(expected_wkt)
    assert glyph.equals_exact(expected, 1e-9), f"{to_wkt(glyph)} != {expected_wkt}"


class TestBarbGlyphs:
    """Test shaft, barb and pennant placement"""

    @pytest.mark.parametrize("family,expected", [
        (5, "MULTILINESTRING ((0 -0, 0 40), (0 35, 10 36.25))"),
        (10, "MULTILINESTRING ((0 0, 0 40), (0 40, 20 42.5))"),
        (15, "MULTILINESTRING ((0 -0, 0 40), (0 40, 20 42.5), (0 35, 10 36.25))"),
        (25, "MULTILINESTRING ((0 -0, 0 40), (0 40, 20 42.5), (0 35, 20 37.5), (0 30, 10 31.25))"),
        (50, "MULTILINESTRING ((0 -0, 0 40), (0 40, 20 37, 0 34, 0 40))"),
        (55, "MULTILINESTRING ((0 0, 0 40), (0 40, 20 37, 0 34, 0 40), (0 29, 10 30.25))"),
        (60, "MULTILINESTRING ((0 0, 0 40), (0 40, 20 37, 0 34, 0 40), (0 29, 20 31.5))"),
        (100, "MULTILINESTRING ((0 0, 0 40), (0 40, 20 37, 0 34, 0 40), (0 34, 20 31, 0 28, 0 34))"),
    ])
    def test_reference_shapes(self, family, expected):
        assert_same_shape(build_glyph(Bucket.of_family(family)), expected)

    def test_shaft_comes_first(self):
        glyph = build_barbs(decompose(65))

        shaft = glyph.geoms[0]
        assert list(shaft.coords) == [(0.0, 0.0), (0.0, 40.0)]

    def test_element_count(self):
        """One subpath per element plus the shaft"""
        for family in range(5, 101, 5):
            parts = decompose(family)
            glyph = build_barbs(parts)
            assert len(glyph.geoms) == 1 + parts.pennants + parts.long_barbs + parts.short_barbs

    def test_pennants_are_closed(self):
        glyph = build_barbs(decompose(100))

        for pennant in list(glyph.geoms)[1:]:
            assert pennant.is_closed

    def test_short_barb_is_half_long_barb(self):
        glyph = build_barbs(decompose(15))

        long_barb, short_barb = glyph.geoms[1], glyph.geoms[2]
        assert long_barb.bounds[2] == 20.0
        assert short_barb.bounds[2] == 10.0

    def test_deterministic(self):
        """Two builds of the same input are identical"""
        for family in range(0, 101, 5):
            first = build_glyph(Bucket.of_family(family))
            second = build_glyph(Bucket.of_family(family))
            assert first.equals_exact(second, 0.0)

    def test_custom_profile(self):
        definition = WindBarbDefinition.from_values(
            vector_length=60,
            long_barb_length=30,
            base_pennant_length=8,
            elements_spacing=6,
            zero_wind_radius=12,
        )
        glyph = build_barbs(decompose(15), definition)

        assert_same_shape(glyph, "MULTILINESTRING ((0 0, 0 60), (0 60, 30 64), (0 54, 15 56))")


class TestSentinelGlyphs:
    """Test calm and no-data symbols"""

    def test_calm_is_circle(self):
        glyph = build_glyph(CALM)
        minx, miny, maxx, maxy = glyph.bounds

        assert maxx - minx == pytest.approx(10.0)
        assert maxy - miny == pytest.approx(10.0)
        assert (minx + maxx) / 2 == pytest.approx(0.0, abs=1e-12)
        assert glyph.geoms[0].is_closed

    def test_zero_family_is_calm(self):
        assert build_glyph(Bucket.of_family(0)).equals_exact(build_calm(), 0.0)

    def test_no_data_cross(self):
        assert_same_shape(
            build_glyph(NO_DATA),
            "MULTILINESTRING ((0 -0, 0 40), (5 45, -5 35), (-5 45, 5 35))",
        )

    def test_no_data_differs_from_calm(self):
        no_data = build_no_data()
        calm = build_calm()

        assert not no_data.is_empty
        assert not no_data.equals(calm)
        assert len(no_data.geoms) != len(calm.geoms)

    def test_invalid_has_no_glyph(self):
        with pytest.raises(ValueError, match="No glyph"):
            build_glyph(INVALID)

    def test_glyph_type(self):
        assert isinstance(build_glyph(Bucket.of_family(35)), MultiLineString)


class TestMirror:
    """Test southern hemisphere reflection"""

    def test_mirror_flips_x(self):
        mirrored = mirror(build_glyph(Bucket.of_family(5)))

        assert_same_shape(mirrored, "MULTILINESTRING ((0 0, 0 40), (0 35, -10 36.25))")

    @pytest.mark.parametrize("family", range(0, 101, 5))
    def test_double_mirror_is_identity(self, family):
        glyph = build_glyph(Bucket.of_family(family))

        assert mirror(mirror(glyph)).equals_exact(glyph, 0.0)

    def test_double_mirror_sentinels(self):
        for glyph in (build_calm(), build_no_data()):
            assert mirror(mirror(glyph)).equals_exact(glyph, 0.0)

    def test_mirror_keeps_original(self):
        glyph = build_glyph(Bucket.of_family(25))
        before = to_wkt(glyph)
        mirror(glyph)

        assert to_wkt(glyph) == before

    @pytest.mark.parametrize("params,expected", [
        ({"hemisphere": "s"}, True),
        ({"hemisphere": "S"}, True),
        ({"emisphere": "S"}, True),
        ({"Hemisphere": "s"}, True),
        ({"hemisphere": "n"}, False),
        ({"hemisphere": "south"}, False),
        ({"other": "s"}, False),
        ({}, False),
        (None, False),
    ])
    def test_wants_mirror(self, params, expected):
        assert wants_mirror(params) is expected


class TestToWkt:

    def test_trimmed_output(self):
        text = to_wkt(build_glyph(Bucket.of_family(15)))

        assert text.startswith("MULTILINESTRING")
        assert "42.5" in text
        assert "36.25" in text


class TestWindBarbDefinition:
    """Test geometry profile validation"""

    def test_default_profile(self):
        definition = DEFAULT_WINDBARB_DEFINITION

        assert definition.vector_length == 40
        assert definition.long_barb_length == 20
        assert definition.short_barb_length == 10
        assert definition.max_family == 100
        assert list(definition.families) == list(range(0, 101, 5))

    def test_short_barb_follows_long_barb(self):
        assert WindBarbDefinition(long_barb_length=15).short_barb_length == 7.5

    @pytest.mark.parametrize("kwargs", [
        {"vector_length": 0},
        {"long_barb_length": -1},
        {"elements_spacing": 0},
        {"max_family": 42},
        {"max_family": -5},
    ])
    def test_invalid_profile(self, kwargs):
        with pytest.raises(ValueError, match="Invalid"):
            WindBarbDefinition(**kwargs)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_WINDBARB_DEFINITION.vector_length = 10
