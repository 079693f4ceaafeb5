# Mariner's AI Grid - Wind Barb Geometry Profiles
# SPDX-License-Identifier: Apache-2.0

"""
Geometry profiles for wind barb glyphs.

All lengths are in glyph units: the shaft runs from the station at (0, 0)
to the tip at (0, vector_length). The map client scales the glyph to
pixels, so the numbers only need to be consistent with each other.

Default profile (WMO-style proportions):
- Shaft: 40 units
- Long barb (10 kt): 20 units, short barb (5 kt): half of that
- Pennant (50 kt): triangle on a 5 unit base
- Calm circle: 10 units across
"""

from dataclasses import dataclass, field


DEFAULT_VECTOR_LENGTH = 40
DEFAULT_BARB_LENGTH = 20
DEFAULT_BASE_PENNANT_LENGTH = 5
DEFAULT_ELEMENTS_SPACING = 5
DEFAULT_ZERO_WIND_RADIUS = 10

# Largest family the cache pre-builds (2 pennants)
DEFAULT_MAX_FAMILY = 100

# Below this the wind is reported as calm
CALM_THRESHOLD_KNOTS = 3.0

# Knots represented by each glyph element
PENNANT_KNOTS = 50
LONG_BARB_KNOTS = 10
SHORT_BARB_KNOTS = 5


@dataclass(frozen=True)
class WindBarbDefinition:
    """Structural values for building a wind barb glyph"""

    vector_length: int = DEFAULT_VECTOR_LENGTH     # Main shaft length
    base_pennant_length: int = DEFAULT_BASE_PENNANT_LENGTH  # Pennant triangle base
    elements_spacing: int = DEFAULT_ELEMENTS_SPACING  # Distance between barb anchors
    long_barb_length: int = DEFAULT_BARB_LENGTH    # 10 kt barb
    zero_wind_radius: int = DEFAULT_ZERO_WIND_RADIUS  # Calm circle diameter
    max_family: int = DEFAULT_MAX_FAMILY

    # Always half a long barb
    short_barb_length: float = field(init=False)

    def __post_init__(self):
        """Validate profile values"""
        for name in (
            "vector_length",
            "base_pennant_length",
            "elements_spacing",
            "long_barb_length",
            "zero_wind_radius",
        ):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"Invalid {name}: {value} (must be positive)")

        if self.max_family < 0 or self.max_family % SHORT_BARB_KNOTS:
            raise ValueError(
                f"Invalid max_family: {self.max_family} "
                f"(must be a non-negative multiple of {SHORT_BARB_KNOTS})"
            )

        object.__setattr__(self, "short_barb_length", self.long_barb_length / 2)

    @classmethod
    def from_values(
        cls,
        vector_length: int,
        long_barb_length: int,
        base_pennant_length: int,
        elements_spacing: int,
        zero_wind_radius: int,
        max_family: int = DEFAULT_MAX_FAMILY,
    ) -> "WindBarbDefinition":
        """
        Create a profile from the five classic symbol-set numbers.

        Args:
            vector_length: Length of the main shaft
            long_barb_length: Length of a long barb (short barbs are half)
            base_pennant_length: Base of the pennant triangle
            elements_spacing: Distance between successive barbs
            zero_wind_radius: Diameter of the calm circle
            max_family: Highest family (knots) the symbol set supports
        """
        return cls(
            vector_length=vector_length,
            base_pennant_length=base_pennant_length,
            elements_spacing=elements_spacing,
            long_barb_length=long_barb_length,
            zero_wind_radius=zero_wind_radius,
            max_family=max_family,
        )

    @property
    def families(self) -> range:
        """Every family this profile renders: 0, 5, ..., max_family"""
        return range(0, self.max_family + 1, SHORT_BARB_KNOTS)

    def to_dict(self) -> dict:
        """Serialize to dictionary"""
        return {
            "vector_length": self.vector_length,
            "base_pennant_length": self.base_pennant_length,
            "elements_spacing": self.elements_spacing,
            "long_barb_length": self.long_barb_length,
            "short_barb_length": self.short_barb_length,
            "zero_wind_radius": self.zero_wind_radius,
            "max_family": self.max_family,
        }


DEFAULT_WINDBARB_DEFINITION = WindBarbDefinition()
