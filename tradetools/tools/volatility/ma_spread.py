# tradetools/tools/volatility/ma_spread.py
"""MA spread condition tool.

Compares the difference between two moving averages, measured from a
designated base MA, against a spread threshold, e.g. "SMA(10) is more than
2% above EMA(30)".
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from tradetools.errors import ConfigInvalidError
from tradetools.indicators.base import MAConfig, two_ma_validation, validate_ma_type
from tradetools.indicators.factory import new_ma_from_config
from tradetools.market.models import MarketData
from tradetools.models import ConfigBaseModel, normalize_str
from tradetools.tools.base import Tool, read_settings
from tradetools.tools.cond import Cond
from tradetools.tools.diff import Diff

logger = logging.getLogger(__name__)

BASE_MA_INDEXES = (1, 2)


class MAConf(MAConfig):
    """MAConfig together with the MA type."""

    ma_type: str = Field(default="", alias="maType")

    @field_validator("ma_type", mode="before")
    @classmethod
    def normalize_ma_type(cls, value):
        return normalize_str(value)


class MASpreadSettings(ConfigBaseModel):
    """MA spread tool properties.

    Attributes:
        spread: Threshold the spread is compared with.
        base_ma: Which MA (1 or 2) the spread is measured from.
        ma1: First MA.
        ma2: Second MA.
        diff: Spread calculation mode (units or percent).
        comparison: Relation between the spread and the threshold.
    """

    spread: Decimal = Decimal("0")
    base_ma: int = Field(default=0, alias="baseMA")
    ma1: MAConf = Field(default_factory=MAConf)
    ma2: MAConf = Field(default_factory=MAConf)
    diff: Diff = Field(default_factory=Diff)
    comparison: Cond = Field(default_factory=Cond)


class MASpreadTool(Tool):
    """MA spread condition tool.

    Snapshot data: spreadVal, ma1Val, ma2Val.
    """

    def __init__(self, settings: MASpreadSettings) -> None:
        """Initialize the tool.

        Raises:
            InvalidMATypeError: If an MA type is unknown.
            InvalidPriceError: If an MA price is not a candle price field.
        """
        super().__init__()
        self._ma1 = new_ma_from_config(settings.ma1.ma_type, settings.ma1, 0)
        self._ma2 = new_ma_from_config(settings.ma2.ma_type, settings.ma2, 0)
        self._conf = settings
        logger.debug(f"Created MA spread tool: ma1={self._ma1!r}, ma2={self._ma2!r}")

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any] | None) -> "MASpreadTool":
        return cls(read_settings(MASpreadSettings, properties))

    @property
    def settings(self) -> MASpreadSettings:
        return self._conf

    def validate(self) -> None:
        if self._conf.base_ma not in BASE_MA_INDEXES:
            raise ConfigInvalidError("base ma index is invalid")

        validate_ma_type(self._conf.ma1.ma_type)
        validate_ma_type(self._conf.ma2.ma_type)

        self._conf.ma1.check()
        self._conf.ma2.check()

        two_ma_validation(self._conf.ma1.ma_type, self._ma1, self._conf.ma2.ma_type, self._ma2)

        self._conf.diff.check()
        self._conf.comparison.check()

    @property
    def candles_count(self) -> int:
        return max(self._ma1.candles_count, self._ma2.candles_count)

    def _evaluate(self, data: MarketData) -> tuple[dict[str, Decimal], bool]:
        ma1_val = self._ma1.calc(data.candles)
        ma2_val = self._ma2.calc(data.candles)

        if self._conf.base_ma == 1:
            spread = self._conf.diff.diff(ma1_val, ma2_val)
        elif self._conf.base_ma == 2:
            spread = self._conf.diff.diff(ma2_val, ma1_val)
        else:
            raise ConfigInvalidError("base ma index is invalid")

        is_met = self._conf.comparison.match(spread, self._conf.spread)

        return {
            "spreadVal": spread,
            "ma1Val": ma1_val,
            "ma2Val": ma2_val,
        }, is_met
