# Mariner's AI Grid - Wind Barb Errors
# SPDX-License-Identifier: Apache-2.0

"""
Failure kinds raised while resolving a wind barb locator.

Every kind is recoverable: the factory turns them into "no shape" and logs
the offending input, so one bad observation never stops a map render.
"""

from typing import Optional


class WindBarbError(ValueError):
    """Base class for recoverable wind barb failures"""


class LocatorParseError(WindBarbError):
    """The locator does not follow windbarbs://<name>(<speed>)[<unit>]"""

    MISSING_SCHEME = "missing scheme"
    MISSING_SYMBOL_SET = "missing symbol set"
    MISSING_PARENTHESES = "missing parentheses group"
    MISSING_BRACKETS = "missing bracket group"
    UNPARSABLE_SPEED = "unparsable speed"

    def __init__(self, reason: str, text: Optional[str]):
        super().__init__(f"Unable to parse locator ({reason}): {text!r}")
        self.reason = reason
        self.text = text


class UnsupportedUnitError(WindBarbError):
    """The unit token cannot be converted to knots"""

    def __init__(self, unit: Optional[str], detail: str = ""):
        message = f"The supplied unit isn't currently supported: {unit!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.unit = unit


class InvalidSpeedError(WindBarbError):
    """The speed has no symbol (infinite, or beyond the largest family)"""

    def __init__(self, knots: float, max_family: Optional[int] = None):
        message = f"Unable to find windbarb symbol for speed {knots} kn"
        if max_family is not None:
            message = f"{message} (max {max_family} kn)"
        super().__init__(message)
        self.knots = knots


class UnknownSymbolSetError(WindBarbError):
    """No symbol set is registered under the requested name"""

    def __init__(self, name: str):
        super().__init__(f"Unknown windbarb symbol set: {name!r}")
        self.name = name
