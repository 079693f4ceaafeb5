# Mariner's AI Grid - Wind Barb Factory
# SPDX-License-Identifier: Apache-2.0

"""
Resolves wind barb locators to glyphs for the map renderer.

Pipeline:
    parse locator -> convert to knots -> classify -> cache lookup -> mirror

Any failure along the way means "no shape": the renderer gets None and
simply skips the symbol. The reason is logged, never raised, so one bad
observation does not break the rest of the layer.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union
import logging

from windbarbs.cache import get_symbol_set
from windbarbs.classifier import Bucket, BarbDecomposition, BucketKind, decompose
from windbarbs.errors import InvalidSpeedError, LocatorParseError, WindBarbError
from windbarbs.glyph import Glyph
from windbarbs.locator import SymbolLocator, is_windbarb_locator, parse_locator
from windbarbs.mirror import mirror, wants_mirror
from windbarbs.units import to_knots

logger = logging.getLogger(__name__)

# A literal locator, or a function building one from a feature
SymbolExpression = Union[str, Callable[[Any], Optional[str]]]


@dataclass(frozen=True)
class ResolvedSymbol:
    """Everything the pipeline learned about one locator"""

    locator: SymbolLocator
    knots: float
    bucket: Bucket
    glyph: Glyph
    mirrored: bool = False

    @property
    def decomposition(self) -> Optional[BarbDecomposition]:
        if self.bucket.kind is BucketKind.FAMILY:
            return decompose(self.bucket.family)
        return None


class WindBarbsFactory:
    """
    Produces wind barb shapes from locators such as
    windbarbs://default(15)[kts]?hemisphere=s
    """

    def get_shape(
        self,
        symbol: Optional[SymbolExpression],
        feature: Any,
    ) -> Optional[Glyph]:
        """
        Resolve the symbol for a feature.

        Args:
            symbol: Locator string, or a callable evaluated with `feature`
            feature: The feature being rendered (passed to the callable)

        Returns:
            The glyph, or None if the symbol cannot be resolved
        """
        if symbol is None:
            logger.debug("Provided null symbol to the WindBarbs factory")
            return None
        if feature is None:
            logger.debug("Provided null feature to the WindBarbs factory")
            return None

        text = self._evaluate(symbol, feature)
        if not text:
            logger.debug("Unable to evaluate symbol provided to the WindBarbs factory")
            return None

        return self.resolve(text)

    def resolve(self, text: Optional[str]) -> Optional[Glyph]:
        """Resolve a locator string, returning None on any failure"""
        try:
            return self.resolve_symbol(text).glyph
        except LocatorParseError as e:
            if is_windbarb_locator(text):
                logger.info(str(e))
            else:
                # Not ours: another mark factory may handle it
                logger.debug(str(e))
        except WindBarbError as e:
            logger.info(f"{e} (locator {text!r})")
        return None

    def resolve_symbol(self, text: Optional[str]) -> ResolvedSymbol:
        """
        Run the full pipeline for a locator string.

        Raises:
            LocatorParseError: Malformed locator
            UnknownSymbolSetError: Set name not registered
            UnsupportedUnitError: Unit token cannot be converted
            InvalidSpeedError: Infinite speed or beyond the largest family
        """
        locator = parse_locator(text)
        symbol_set = get_symbol_set(locator.symbol_set)

        knots = to_knots(locator.speed, locator.unit)
        bucket = symbol_set.cache.classify(knots)
        if not bucket.is_valid:
            raise InvalidSpeedError(knots, symbol_set.definition.max_family)

        glyph = symbol_set.cache.lookup(bucket)
        mirrored = wants_mirror(locator.params)
        if mirrored:
            glyph = mirror(glyph)

        logger.debug(f"Resolved {locator.text!r} -> {bucket} ({knots:.2f} kn)")
        return ResolvedSymbol(
            locator=locator,
            knots=knots,
            bucket=bucket,
            glyph=glyph,
            mirrored=mirrored,
        )

    @staticmethod
    def _evaluate(symbol: SymbolExpression, feature: Any) -> Optional[str]:
        if isinstance(symbol, str):
            return symbol
        try:
            value = symbol(feature)
        except Exception as e:
            logger.info(f"Symbol expression failed for feature: {e}")
            return None
        return None if value is None else str(value)
