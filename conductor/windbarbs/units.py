# Mariner's AI Grid - Speed Conversion
# SPDX-License-Identifier: Apache-2.0

"""
Speed conversion to knots, the unit wind barbs are drawn in.

The common marine/met tokens are handled by a lookup table. Anything else
is parsed with pint and must reduce to a plain velocity scale factor.

Conversion is a single multiplication, so NaN ("no data") and the
infinities pass through untouched and are dealt with by the classifier.
"""

from functools import lru_cache
from typing import Optional, Union
import logging
import math

import numpy as np
import pint

from windbarbs.errors import UnsupportedUnitError

logger = logging.getLogger(__name__)

SECONDS_IN_HOUR = 3600.0
METERS_IN_KILOMETER = 1000.0
METERS_IN_NAUTICAL_MILE = 1852.0

METERS_PER_SECOND_TO_KNOTS = SECONDS_IN_HOUR / METERS_IN_NAUTICAL_MILE
KILOMETERS_PER_HOUR_TO_KNOTS = METERS_IN_KILOMETER / METERS_IN_NAUTICAL_MILE
MILES_PER_HOUR_TO_KNOTS = 0.868976

# Lower-cased token -> multiplier to knots
KNOWN_UNITS: dict[str, float] = {
    "kn": 1.0,
    "kts": 1.0,
    "knots": 1.0,
    "m/s": METERS_PER_SECOND_TO_KNOTS,
    "km/h": KILOMETERS_PER_HOUR_TO_KNOTS,
    "mph": MILES_PER_HOUR_TO_KNOTS,
}

Speed = Union[float, np.ndarray]

_registry: Optional[pint.UnitRegistry] = None


def _unit_registry() -> pint.UnitRegistry:
    """Lazy initialization of the pint registry (slow to build)"""
    global _registry
    if _registry is None:
        _registry = pint.UnitRegistry()
    return _registry


@lru_cache(maxsize=64)
def _resolve_factor(unit: str) -> float:
    """Resolve a unit expression to a knots multiplier through pint"""
    ureg = _unit_registry()
    try:
        quantity = ureg.Quantity(1.0, unit)
        factor = float(quantity.to(ureg.knot).magnitude)
        # Offset units (temperature-like) do not scale linearly
        zero = float(ureg.Quantity(0.0, unit).to(ureg.knot).magnitude)
    except Exception as e:
        logger.debug(f"pint could not convert {unit!r} to knots: {e}")
        raise UnsupportedUnitError(unit, str(e)) from e

    if zero != 0.0 or not math.isfinite(factor) or factor <= 0.0:
        raise UnsupportedUnitError(unit, "not a linear velocity unit")

    return factor


def knots_factor(unit: Optional[str]) -> float:
    """
    Get the multiplier converting a speed in `unit` to knots.

    Args:
        unit: Unit token, e.g. "kts", "m/s", "km/h", "ft/s"

    Returns:
        Positive finite scale factor

    Raises:
        UnsupportedUnitError: If the token is empty or not a velocity unit
    """
    if unit is None or not unit.strip():
        raise UnsupportedUnitError(unit, "no unit given")

    token = unit.strip()
    known = KNOWN_UNITS.get(token.lower())
    if known is not None:
        return known

    # Slower path, results are memoized per token
    return _resolve_factor(token)


def to_knots(speed: Speed, unit: Optional[str]) -> Speed:
    """
    Convert a speed (scalar or array) to knots.

    Args:
        speed: Speed value(s) in `unit`; NaN and +/-inf are allowed
        unit: Unit token

    Returns:
        Speed in knots, float for scalars, float64 array for arrays
    """
    factor = knots_factor(unit)
    if isinstance(speed, np.ndarray):
        return speed.astype(np.float64) * factor
    return float(speed) * factor
