# tradetools/indicators/wma.py
"""Weighted Moving Average.

Formula: WMA = (val[1] x 1 + val[2] x 2 + ... + val[N] x N) / (1 + 2 + ... + N)

Weights grow linearly from the oldest to the newest value in the window.
"""

from collections.abc import Sequence
from decimal import Decimal

from tradetools.indicators.base import MovingAverage, window
from tradetools.market.models import Candle


class WMA(MovingAverage):
    """Weighted Moving Average.

    Example:
        >>> wma = WMA(period=3, offset=0, price="close")
        >>> wma.calc_decimal([Decimal("10"), Decimal("40"), Decimal("30")])
        Decimal('30')  # (10*1 + 40*2 + 30*3) / 6
    """

    @property
    def candles_count(self) -> int:
        """period + offset."""
        return self._period + self._offset

    def calc(self, candles: Sequence[Candle] | None) -> Decimal:
        selected = window(
            candles, self.candles_count, self._offset, "WMA candles list is too small"
        )
        return self._weighted_mean(self._prices(selected))

    def calc_decimal(self, values: Sequence[Decimal] | None) -> Decimal:
        selected = window(
            values, self.candles_count, self._offset, "WMA values list is too small"
        )
        return self._weighted_mean(selected)

    @staticmethod
    def _weighted_mean(values: Sequence[Decimal]) -> Decimal:
        total = Decimal("0")
        weights = Decimal("0")
        for weight, value in enumerate(values, start=1):
            total += value * weight
            weights += weight
        return total / weights
