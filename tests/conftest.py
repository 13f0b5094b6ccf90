from collections.abc import Sequence
from decimal import Decimal

import pytest

from tradetools.indicators.base import MovingAverage
from tradetools.market.models import Candle, MarketData, Ticker


class FakeMA(MovingAverage):
    """Moving average returning a fixed value or raising a fixed error."""

    def __init__(
        self,
        value: Decimal = Decimal("0"),
        error: Exception | None = None,
        period: int = 0,
        offset: int = 0,
        price: str = "close",
    ) -> None:
        super().__init__(period, offset, price)
        self._value = value
        self._error = error
        self.calls = 0

    @property
    def candles_count(self) -> int:
        return self._period + self._offset

    def calc(self, candles):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._value

    def calc_decimal(self, values):
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._value


@pytest.fixture
def fake_ma():
    """FakeMA class for injecting into composite indicators."""
    return FakeMA


@pytest.fixture
def make_candles():
    """Build candles with one price field set from a list of numbers."""

    def _make(price: str, values: Sequence) -> list[Candle]:
        return [Candle(**{price: Decimal(str(v))}) for v in values]

    return _make


@pytest.fixture
def make_market_data(make_candles):
    """Build MarketData from close/low prices and a last price."""

    def _make(
        price: str = "close",
        values: Sequence = (),
        last: str = "0",
        **ticker_fields,
    ) -> MarketData:
        ticker = Ticker(last_price=Decimal(last), **ticker_fields)
        return MarketData(ticker=ticker, candles=make_candles(price, values))

    return _make
