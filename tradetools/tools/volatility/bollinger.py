# tradetools/tools/volatility/bollinger.py
"""Bollinger Bands condition tool.

Compares a ticker price against the upper or lower band, optionally shifted
by a tolerance, e.g. "last price crosses above the upper band + 1%".
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from tradetools.errors import ConfigInvalidError
from tradetools.indicators.bollinger import BBConfig, BollingerBands
from tradetools.market.models import MarketData
from tradetools.models import normalize_str
from tradetools.tools.base import Tool, read_settings
from tradetools.tools.cond import Cond, CondObject
from tradetools.tools.shift import Shift

logger = logging.getLogger(__name__)


class Band(str, Enum):
    """Band compared against the condition object."""

    UPPER = "upper"
    LOWER = "lower"


class BBToolSettings(BBConfig):
    """Bollinger Bands tool properties.

    Attributes:
        band: Band to compare against ("upper" or "lower").
        comparison: Relation between the source value and the shifted band.
        source: Value compared with the band; ticker prices only.
        shift: Shift applied to the band before comparing.
    """

    band: str = ""
    comparison: Cond = Field(default_factory=Cond)
    source: CondObject = Field(default_factory=CondObject)
    shift: Shift = Field(default_factory=Shift)

    @field_validator("band", mode="before")
    @classmethod
    def normalize_band(cls, value):
        return normalize_str(value)


class BollingerBandsTool(Tool):
    """Bollinger Bands condition tool.

    Snapshot data: shiftedBand, objVal, upper, middle, lower.
    """

    def __init__(self, settings: BBToolSettings) -> None:
        """Initialize the tool.

        Raises:
            ConfigInvalidError: If the price, MA type or source object cannot
                be used to build the indicator and resolver.
        """
        super().__init__()
        self._bb = BollingerBands.from_config(settings, 0)

        settings.source.allow_ticker_price()
        settings.source.init(0)

        self._conf = settings
        logger.debug(f"Created Bollinger Bands tool: band={settings.band}, period={settings.period}")

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any] | None) -> "BollingerBandsTool":
        return cls(read_settings(BBToolSettings, properties))

    @property
    def settings(self) -> BBToolSettings:
        return self._conf

    def validate(self) -> None:
        if self._conf.band not in {b.value for b in Band}:
            raise ConfigInvalidError("band type is invalid")

        self._conf.check()
        self._conf.comparison.check()
        self._conf.source.check()
        self._conf.shift.check()

    @property
    def candles_count(self) -> int:
        return max(self._bb.candles_count, self._conf.source.candles_count)

    def _evaluate(self, data: MarketData) -> tuple[dict[str, Decimal], bool]:
        info = self._bb.calc(data.candles)

        if self._conf.band == Band.UPPER:
            band = info.upper
        elif self._conf.band == Band.LOWER:
            band = info.lower
        else:
            raise ConfigInvalidError("band type is invalid")

        val = self._conf.source.value(data)

        shifted_band = self._conf.shift.calc_val(band)
        is_met = self._conf.comparison.match(val, shifted_band)

        return {
            "shiftedBand": shifted_band,
            **self._conf.source.snapshot(val),
            "upper": info.upper,
            "middle": info.middle,
            "lower": info.lower,
        }, is_met
