# Mariner's AI Grid - Wind Barb Locator Parser
# SPDX-License-Identifier: Apache-2.0

"""
Parser for wind barb symbol locators.

Locators name a symbol and carry the speed to draw:

    windbarbs://default(12.5)[m/s]
    windbarbs://default(NaN)[kts]
    windbarbs://default(25)[kts]?hemisphere=s

Grammar:
    <scheme>://<name>(<speed>)[<unit>] optionally followed by ?k1=v1&k2=v2

The scheme and set name are case-insensitive. The speed is a decimal
literal (optionally signed, with exponent) or one of NaN, Infinity and
-Infinity. Only the syntax is checked here; unit support, speed range
and set name are checked downstream.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
import logging
import re

from windbarbs.errors import LocatorParseError

logger = logging.getLogger(__name__)

SCHEME = "windbarbs"
WINDBARBS_PREFIX = f"{SCHEME}://"
DEFAULT_NAME = "default"

SCHEME_SEPARATOR = "://"
QUERY_SEPARATOR = "?"

# <name>(<speed>)<rest>: name stops at the first "(", speed at the first ")"
SPEED_PATTERN = re.compile(r"(?P<name>[^(]*)\((?P<speed>[^)]+)\)(?P<rest>.*)", re.DOTALL)

# [<unit>] must close the locator (the query is already split off)
UNIT_PATTERN = re.compile(r"\[(?P<unit>[^\]]+)\]")

# Decimal literal or one of the IEEE-754 special values, case-sensitive
SPEED_LITERAL_PATTERN = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|NaN|[+-]?Infinity", re.ASCII
)


@dataclass(frozen=True)
class SymbolLocator:
    """A parsed wind barb locator"""

    symbol_set: str          # Lower-cased set name, e.g. "default"
    speed: float             # Raw speed in `unit`, may be NaN/inf
    unit: str                # Unit token as written, e.g. "m/s"
    params: Mapping[str, str] = field(  # Lower-cased keys, read-only
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    text: str = ""           # Original locator

    def __post_init__(self):
        if not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a query parameter (case-insensitive key)"""
        return self.params.get(key.lower(), default)


def parse_query(query: str) -> dict[str, str]:
    """
    Parse the key=value&key=value suffix of a locator.

    Keys are lower-cased. Pairs without "=" or with an empty key are
    skipped.
    """
    params: dict[str, str] = {}
    for pair in query.split("&"):
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug(f"Skipping pair {pair!r}")
            continue
        params[key.lower()] = value.strip()
    return params


def parse_speed(token: str, text: Optional[str] = None) -> float:
    """Parse the speed group as an IEEE-754 double"""
    token = token.strip()
    if SPEED_LITERAL_PATTERN.fullmatch(token) is None:
        raise LocatorParseError(LocatorParseError.UNPARSABLE_SPEED, text)
    return float(token)


def is_windbarb_locator(text: Optional[str]) -> bool:
    """Cheap check whether a string uses the windbarbs:// scheme"""
    if not text:
        return False
    scheme, sep, _ = text.strip().partition(SCHEME_SEPARATOR)
    return bool(sep) and scheme.lower() == SCHEME


def parse_locator(text: Optional[str]) -> SymbolLocator:
    """
    Parse a wind barb locator.

    Args:
        text: Locator string, e.g. "windbarbs://default(15)[kts]"

    Returns:
        SymbolLocator with the decoded parts

    Raises:
        LocatorParseError: If the locator does not follow the grammar
    """
    if text is None or not text.strip():
        raise LocatorParseError(LocatorParseError.MISSING_SCHEME, text)

    stripped = text.strip()

    # Scheme
    scheme, sep, body = stripped.partition(SCHEME_SEPARATOR)
    if not sep or scheme.lower() != SCHEME:
        raise LocatorParseError(LocatorParseError.MISSING_SCHEME, text)

    # Query suffix
    body, _, query = body.partition(QUERY_SEPARATOR)

    # Set name and speed
    match = SPEED_PATTERN.fullmatch(body)
    if match is None:
        raise LocatorParseError(LocatorParseError.MISSING_PARENTHESES, text)

    name = match.group("name").strip()
    if not name:
        raise LocatorParseError(LocatorParseError.MISSING_SYMBOL_SET, text)

    # Unit
    unit_match = UNIT_PATTERN.fullmatch(match.group("rest").strip())
    if unit_match is None or not unit_match.group("unit").strip():
        raise LocatorParseError(LocatorParseError.MISSING_BRACKETS, text)

    speed = parse_speed(match.group("speed"), text)
    params = parse_query(query) if query else {}

    locator = SymbolLocator(
        symbol_set=name.lower(),
        speed=speed,
        unit=unit_match.group("unit").strip(),
        params=params,
        text=stripped,
    )
    logger.debug(
        f"Parsed locator {stripped!r}: set={locator.symbol_set} "
        f"speed={locator.speed} [{locator.unit}] params={locator.params}"
    )
    return locator
