"""Market data value objects (candles, ticker, per-tick bundle)."""

from tradetools.market.models import (
    CANDLE_PRICES,
    TICKER_PRICES,
    TICKER_PROPERTIES,
    Candle,
    MarketData,
    PriceField,
    Ticker,
    TickerPrice,
    TickerProperty,
    validate_candle_price,
)

__all__ = [
    "CANDLE_PRICES",
    "TICKER_PRICES",
    "TICKER_PROPERTIES",
    "Candle",
    "MarketData",
    "PriceField",
    "Ticker",
    "TickerPrice",
    "TickerProperty",
    "validate_candle_price",
]
