# Mariner's AI Grid - Wind Speed Classification
# SPDX-License-Identifier: Apache-2.0

"""
Maps a speed in knots to the wind barb symbol that represents it.

Symbols come in 5 knot families. Each family covers the speeds that round
to it: [3, 8) kt is the 5 kt barb, [8, 13) kt the 10 kt barb, and so on.
Below 3 kt the wind is calm.

Special values:
- NaN: no data (drawn as a crossed shaft)
- +/-inf: invalid, no symbol at all
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from windbarbs.definitions import (
    CALM_THRESHOLD_KNOTS,
    DEFAULT_MAX_FAMILY,
    LONG_BARB_KNOTS,
    PENNANT_KNOTS,
    SHORT_BARB_KNOTS,
)


class BucketKind(Enum):
    """Classification outcomes"""
    CALM = "calm"
    NO_DATA = "nodata"
    FAMILY = "family"
    INVALID = "invalid"


@dataclass(frozen=True)
class Bucket:
    """A classified speed: a sentinel kind, or a family with its knots"""

    kind: BucketKind
    family: Optional[int] = None  # Knots, only for FAMILY

    @classmethod
    def of_family(cls, family: int) -> "Bucket":
        return cls(BucketKind.FAMILY, family)

    @property
    def is_valid(self) -> bool:
        return self.kind is not BucketKind.INVALID

    @property
    def name(self) -> str:
        """Short label used for icon names and tables"""
        if self.kind is BucketKind.FAMILY:
            return str(self.family)
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is BucketKind.FAMILY:
            return f"Family({self.family})"
        return self.kind.name


CALM = Bucket(BucketKind.CALM)
NO_DATA = Bucket(BucketKind.NO_DATA)
INVALID = Bucket(BucketKind.INVALID)


@dataclass(frozen=True)
class BarbDecomposition:
    """Glyph elements for a family: 50 kt pennants, 10 kt and 5 kt barbs"""

    pennants: int
    long_barbs: int
    short_barbs: int

    @property
    def knots(self) -> int:
        return (
            self.pennants * PENNANT_KNOTS
            + self.long_barbs * LONG_BARB_KNOTS
            + self.short_barbs * SHORT_BARB_KNOTS
        )

    @property
    def is_empty(self) -> bool:
        return self.pennants == 0 and self.long_barbs == 0 and self.short_barbs == 0


def classify(knots: float, max_family: int = DEFAULT_MAX_FAMILY) -> Bucket:
    """
    Classify a speed in knots.

    Args:
        knots: Speed in knots
        max_family: Largest family the symbol set can draw

    Returns:
        NO_DATA for NaN, INVALID for infinities or speeds beyond
        `max_family`, CALM below 3 kt, otherwise the speed's family
    """
    if math.isnan(knots):
        return NO_DATA
    if math.isinf(knots):
        return INVALID
    if knots < CALM_THRESHOLD_KNOTS:
        return CALM

    # Snap to the family whose range contains the speed
    family = SHORT_BARB_KNOTS * math.floor(
        (knots - CALM_THRESHOLD_KNOTS) / SHORT_BARB_KNOTS + 1
    )
    if family > max_family:
        return INVALID
    return Bucket.of_family(family)


def decompose(family: int) -> BarbDecomposition:
    """
    Split a family into pennants, long barbs and a short barb (greedy).

    Raises:
        ValueError: If `family` is negative or not a multiple of 5
    """
    if family < 0 or family % SHORT_BARB_KNOTS:
        raise ValueError(f"Invalid family: {family} kn")

    pennants, remaining = divmod(family, PENNANT_KNOTS)
    long_barbs, remaining = divmod(remaining, LONG_BARB_KNOTS)
    short_barbs = remaining // SHORT_BARB_KNOTS

    decomposition = BarbDecomposition(pennants, long_barbs, short_barbs)
    assert decomposition.knots == family, f"Decomposition {decomposition} != {family} kn"
    return decomposition
