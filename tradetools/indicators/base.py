# tradetools/indicators/base.py
"""Base classes and validation for moving-average indicators.

All moving averages share the same windowing rules:
- Candles/values are ordered oldest first; the window is taken from the end
- offset skips the newest bars, so the indicator is evaluated "as of"
  offset bars ago
- The window is values[n - candles_count : n - offset]
- Fewer than candles_count values raises InsufficientDataError
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum

from pydantic import field_validator

from tradetools.errors import (
    ConfigInvalidError,
    InsufficientDataError,
    InvalidMATypeError,
    SamePeriodMAsError,
)
from tradetools.market.models import Candle, validate_candle_price
from tradetools.models import ConfigBaseModel, normalize_str

MIN_PERIOD = 1
MAX_PERIOD = 200


class MAType(str, Enum):
    """Moving-average type names.

    SMA: Simple moving average
    EMA: Exponential moving average
    WMA: Weighted moving average
    """

    SMA = "sma"
    EMA = "ema"
    WMA = "wma"


class MovingAverage(ABC):
    """Base class for moving-average engines.

    Engines are immutable once constructed. Subclasses declare how many
    candles they need and how to reduce a window of prices to one value.

    Attributes:
        period: Number of values the average is taken over.
        offset: Number of newest values excluded before taking the window.
        price: Candle price field used by calc().
    """

    def __init__(self, period: int, offset: int, price: str) -> None:
        """Initialize moving average.

        Raises:
            InvalidPriceError: If price is not a candle price field.
        """
        validate_candle_price(price)
        self._period = period
        self._offset = offset
        self._price = price

    @property
    def period(self) -> int:
        return self._period

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def price(self) -> str:
        return self._price

    @property
    @abstractmethod
    def candles_count(self) -> int:
        """Minimum number of candles/values needed for a calculation."""
        pass

    @abstractmethod
    def calc(self, candles: Sequence[Candle] | None) -> Decimal:
        """Calculate the average from candle prices.

        Raises:
            InsufficientDataError: If fewer than candles_count candles given.
        """
        pass

    @abstractmethod
    def calc_decimal(self, values: Sequence[Decimal] | None) -> Decimal:
        """Calculate the average from raw Decimal values.

        Raises:
            InsufficientDataError: If fewer than candles_count values given.
        """
        pass

    def _prices(self, candles: Sequence[Candle]) -> list[Decimal]:
        return [c.price(self._price) for c in candles]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(period={self._period}, "
            f"offset={self._offset}, price={self._price!r})"
        )


def window(
    values: Sequence | None,
    start: int,
    end: int,
    message: str,
) -> Sequence:
    """Slice values[n - start : n - end] after checking there are enough.

    Args:
        values: Candles or Decimals, oldest first. May be None.
        start: Distance of the window's first element from the end.
        end: Number of newest elements excluded.
        message: Error message used when values are too short.

    Raises:
        InsufficientDataError: If values is None or len(values) < start.
    """
    available = 0 if values is None else len(values)
    if values is None or available < start:
        raise InsufficientDataError(message, required=start, available=available)

    n = len(values)
    return values[n - start : n - end]


class MAConfig(ConfigBaseModel):
    """Settings needed to calculate a specific moving average.

    Attributes:
        period: How many candles/values are averaged.
        price: Candle price (open, high, low, close) used in calculations.
    """

    period: int = 0
    price: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def normalize_price(cls, value):
        return normalize_str(value)

    def check(self) -> None:
        """Check that the values are valid and usable.

        Raises:
            ConfigInvalidError: If period is out of range.
            InvalidPriceError: If price is not a candle price field.
        """
        validate_period(self.period)
        validate_candle_price(self.price)


def validate_period(period: int) -> None:
    """Check that period is between 1 and 200 inclusively.

    Raises:
        ConfigInvalidError: If period is out of range.
    """
    if period < MIN_PERIOD or period > MAX_PERIOD:
        raise ConfigInvalidError(
            f"period must be between {MIN_PERIOD} and {MAX_PERIOD} (inclusively), got {period}"
        )


def validate_ma_type(ma_type: str) -> None:
    """Check that ma_type names a registered moving-average type.

    Raises:
        InvalidMATypeError: If ma_type is unknown.
    """
    if getattr(ma_type, "value", ma_type) not in {t.value for t in MAType}:
        raise InvalidMATypeError(ma_type)


def two_ma_validation(
    type1: str, ma1: MovingAverage, type2: str, ma2: MovingAverage
) -> None:
    """Check that two MAs of the same type require different amounts of candles.

    MAs of different types are exempt even if their counts coincide.

    Raises:
        SamePeriodMAsError: If both types match and candle counts are equal.
    """
    if type1 == type2 and ma1.candles_count == ma2.candles_count:
        raise SamePeriodMAsError(type1, ma1.candles_count)
