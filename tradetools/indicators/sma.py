# tradetools/indicators/sma.py
"""Simple Moving Average.

Formula: SMA = (val[1] + val[2] + ... + val[period]) / period
"""

from collections.abc import Sequence
from decimal import Decimal

from tradetools.indicators.base import MovingAverage, window
from tradetools.market.models import Candle


class SMA(MovingAverage):
    """Simple Moving Average.

    Arithmetic mean of the period values that precede the newest offset
    values. Also used as the EMA seed and as the Bollinger Bands deviation
    average.

    Example:
        >>> sma = SMA(period=3, offset=0, price="close")
        >>> sma.calc_decimal([Decimal("1"), Decimal("2"), Decimal("3")])
        Decimal('2')
    """

    @property
    def candles_count(self) -> int:
        """period + offset."""
        return self._period + self._offset

    def calc(self, candles: Sequence[Candle] | None) -> Decimal:
        selected = window(
            candles, self.candles_count, self._offset, "SMA candles list is too small"
        )
        return self._mean(self._prices(selected))

    def calc_decimal(self, values: Sequence[Decimal] | None) -> Decimal:
        selected = window(
            values, self.candles_count, self._offset, "SMA values list is too small"
        )
        return self._mean(selected)

    def _mean(self, values: Sequence[Decimal]) -> Decimal:
        return sum(values, Decimal("0")) / Decimal(self._period)
