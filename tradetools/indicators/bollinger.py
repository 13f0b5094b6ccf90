# tradetools/indicators/bollinger.py
"""Bollinger Bands.

Calculation (X is the period):
0. Standard deviation of the X values (population, divided by X)
1. MiddleBand = X period MA (SMA, EMA or WMA)
2. UpperBand = MiddleBand + standard deviation x STDEV multiplier
3. LowerBand = MiddleBand - standard deviation x STDEV multiplier
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field, field_validator

from tradetools.errors import ConfigInvalidError
from tradetools.indicators.base import (
    MovingAverage,
    validate_ma_type,
    validate_period,
    window,
)
from tradetools.indicators.factory import new_ma
from tradetools.indicators.sma import SMA
from tradetools.market.models import Candle, validate_candle_price
from tradetools.math_utils import decimal_sqrt
from tradetools.models import ConfigBaseModel, normalize_str


class BBConfig(ConfigBaseModel):
    """Settings needed to calculate Bollinger Bands.

    Attributes:
        period: How many candles are used for the bands.
        stdev: Multiplier applied to the standard deviation.
        price: Candle price (open, high, low, close) used in calculations.
        ma_type: MA (sma, ema, wma) used as the middle band.
    """

    period: int = 0
    stdev: Decimal = Decimal("0")
    price: str = ""
    ma_type: str = Field(default="", alias="maType")

    @field_validator("price", "ma_type", mode="before")
    @classmethod
    def normalize_fields(cls, value):
        return normalize_str(value)

    def check(self) -> None:
        """Check that the values are valid and usable.

        Raises:
            ConfigInvalidError: If period is out of range or stdev is not positive.
            InvalidPriceError: If price is not a candle price field.
            InvalidMATypeError: If ma_type is unknown.
        """
        validate_period(self.period)

        if self.stdev <= Decimal("0"):
            raise ConfigInvalidError("STDEV must be a positive value")

        validate_candle_price(self.price)
        validate_ma_type(self.ma_type)


@dataclass(frozen=True)
class BBInfo:
    """Result of a Bollinger Bands calculation."""

    upper: Decimal
    middle: Decimal
    lower: Decimal


class BollingerBands:
    """Bollinger Bands engine.

    Owns its middle-band MA and a separate SMA used only to average prices
    for the standard deviation. Both are built with the same period, offset
    and price and never change afterwards.

    Example:
        >>> bb = BollingerBands(3, 0, Decimal("2"), "sma", "low")
        >>> info = bb.calc([Candle(low=Decimal(v)) for v in (1, 2, 3)])
        >>> info.middle
        Decimal('2')
    """

    def __init__(
        self,
        period: int,
        offset: int,
        stdev: Decimal,
        ma_type: str,
        price: str,
        mid_ma: MovingAverage | None = None,
        stdev_sma: MovingAverage | None = None,
    ) -> None:
        """Initialize Bollinger Bands.

        Args:
            period: Number of candles used for the bands.
            offset: Number of newest candles excluded.
            stdev: Standard deviation multiplier.
            ma_type: Middle band MA type.
            price: Candle price field.
            mid_ma: Custom middle band engine, replaces the one built from ma_type.
            stdev_sma: Custom deviation average engine.

        Raises:
            InvalidPriceError: If price is not a candle price field.
            InvalidMATypeError: If ma_type is unknown and mid_ma is not given.
        """
        validate_candle_price(price)

        self._period = period
        self._offset = offset
        self._stdev = stdev
        self._price = price
        self._mid_ma = mid_ma if mid_ma is not None else new_ma(ma_type, price, period, offset)
        self._stdev_sma = stdev_sma if stdev_sma is not None else SMA(period, offset, price)

    @classmethod
    def from_config(cls, conf: BBConfig, offset: int) -> "BollingerBands":
        """Create Bollinger Bands from BBConfig."""
        return cls(conf.period, offset, conf.stdev, conf.ma_type, conf.price)

    @property
    def mid_ma(self) -> MovingAverage:
        return self._mid_ma

    @property
    def candles_count(self) -> int:
        """Middle band requirement."""
        return self._mid_ma.candles_count

    def calc(self, candles: Sequence[Candle] | None) -> BBInfo:
        """Calculate upper, middle and lower bands.

        Raises:
            InsufficientDataError: If candles are missing or too few for the
                middle band or the standard deviation.
        """
        mid = self._mid_ma.calc(candles)
        deviation = self.standard_deviation(candles) * self._stdev

        return BBInfo(
            upper=mid + deviation,
            middle=mid,
            lower=mid - deviation,
        )

    def standard_deviation(self, candles: Sequence[Candle] | None) -> Decimal:
        """Population standard deviation of the period window.

        Steps:
        0. Average price over the window (deviation SMA)
        1. Each value's deviation from the average, squared
        2. Sum of squared deviations divided by period
        3. Square root of the quotient

        Raises:
            InsufficientDataError: If fewer than period + offset candles.
        """
        selected = window(
            candles,
            self._period + self._offset,
            self._offset,
            "BB candles list is too small",
        )

        avg = self._stdev_sma.calc(candles)

        total = sum(((c.price(self._price) - avg) ** 2 for c in selected), Decimal("0"))
        return decimal_sqrt(total / Decimal(self._period))
