# Mariner's AI Grid - Southern Hemisphere Mirroring
# SPDX-License-Identifier: Apache-2.0

"""
In the southern hemisphere barbs are drawn on the other side of the shaft.
Mirroring flips the glyph across the shaft (the Y axis).

Requested with ?hemisphere=s on the locator. The misspelled "emisphere"
key is still accepted for older styles.
"""

from typing import Mapping, Optional

from shapely import affinity

from windbarbs.glyph import Glyph

HEMISPHERE_KEYS = ("hemisphere", "emisphere")
SOUTHERN = "s"


def mirror(glyph: Glyph) -> Glyph:
    """Reflect a glyph across its shaft"""
    return affinity.scale(glyph, xfact=-1.0, yfact=1.0, origin=(0.0, 0.0))


def wants_mirror(params: Optional[Mapping[str, str]]) -> bool:
    """True if the locator parameters ask for the southern convention"""
    if not params:
        return False
    lowered = {key.lower(): value for key, value in params.items()}
    for key in HEMISPHERE_KEYS:
        value = lowered.get(key)
        if value is not None and value.strip().lower() == SOUTHERN:
            return True
    return False
