# tradetools/indicators/ema.py
"""Exponential Moving Average.

Calculation (X is the period):
1. First EMA = SMA of the X values preceding the smoothing window
2. Multiplier k = 2 / (X + 1)
3. EMA = (value - previous EMA) x k + previous EMA
4. Step 3 is repeated for each of the X values in the smoothing window

The seed needs a full extra period of history, so EMA requires
period * 2 + offset candles.
"""

from collections.abc import Sequence
from decimal import Decimal

from tradetools.errors import InsufficientDataError
from tradetools.indicators.base import MovingAverage, window
from tradetools.indicators.sma import SMA
from tradetools.market.models import Candle


class EMA(MovingAverage):
    """Exponential Moving Average seeded by an internally owned SMA.

    Attributes:
        seed: SMA over the period values preceding the smoothing window.

    Example:
        >>> ema = EMA(period=3, offset=1, price="high")
        >>> ema.candles_count
        7
    """

    def __init__(
        self,
        period: int,
        offset: int,
        price: str,
        seed: MovingAverage | None = None,
    ) -> None:
        """Initialize EMA.

        Args:
            period: Smoothing period.
            offset: Number of newest values excluded.
            price: Candle price field.
            seed: Custom seed engine. Defaults to SMA(period, period + offset).

        Raises:
            InvalidPriceError: If price is not a candle price field.
        """
        super().__init__(period, offset, price)
        self._seed = seed if seed is not None else SMA(period, period + offset, price)

    @property
    def seed(self) -> MovingAverage:
        return self._seed

    @property
    def candles_count(self) -> int:
        """Seed requirement: period + (period + offset)."""
        return self._seed.candles_count

    @property
    def multiplier(self) -> Decimal:
        """Smoothing multiplier k = 2 / (period + 1)."""
        return Decimal("2") / (Decimal(self._period) + Decimal("1"))

    def calc(self, candles: Sequence[Candle] | None) -> Decimal:
        try:
            seed = self._seed.calc(candles)
        except InsufficientDataError as e:
            raise InsufficientDataError(
                "EMA candles list is too small",
                required=self.candles_count,
                available=e.available,
            ) from e

        selected = window(
            candles, self._smoothing_start, self._offset, "EMA candles list is too small"
        )
        return self._smooth(seed, self._prices(selected))

    def calc_decimal(self, values: Sequence[Decimal] | None) -> Decimal:
        try:
            seed = self._seed.calc_decimal(values)
        except InsufficientDataError as e:
            raise InsufficientDataError(
                "EMA values list is too small",
                required=self.candles_count,
                available=e.available,
            ) from e

        selected = window(
            values, self._smoothing_start, self._offset, "EMA values list is too small"
        )
        return self._smooth(seed, selected)

    @property
    def _smoothing_start(self) -> int:
        # period + offset for the default seed
        return self.candles_count - self._period

    def _smooth(self, seed: Decimal, values: Sequence[Decimal]) -> Decimal:
        k = self.multiplier
        ema = seed
        for value in values:
            ema = (value - ema) * k + ema
        return ema
