# tradetools/market/models.py
"""Market data value objects consumed by indicators and tools.

Candles are supplied oldest first; indicators index from the end of the
sequence, so candles[-1] is the newest bar.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from tradetools.errors import InvalidPriceError


class PriceField(str, Enum):
    """Candle price selectors."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"


class TickerPrice(str, Enum):
    """Ticker price selectors."""

    LAST = "last"
    ASK = "ask"
    BID = "bid"


class TickerProperty(str, Enum):
    """Ticker properties that are not prices."""

    DAY_PERCENT = "24hrpercent"
    BASE_VOLUME = "basevolume"
    COUNTER_VOLUME = "countervolume"


CANDLE_PRICES: frozenset[str] = frozenset(p.value for p in PriceField)
TICKER_PRICES: frozenset[str] = frozenset(p.value for p in TickerPrice)
TICKER_PROPERTIES: frozenset[str] = frozenset(p.value for p in TickerProperty)


def validate_candle_price(price: str) -> None:
    """Check that price names one of the candle price fields.

    Raises:
        InvalidPriceError: If price is not open, high, low or close.
    """
    if getattr(price, "value", price) not in CANDLE_PRICES:
        raise InvalidPriceError(price)


@dataclass(frozen=True)
class Candle:
    """One period's open/high/low/close record."""

    open: Decimal = Decimal("0")
    high: Decimal = Decimal("0")
    low: Decimal = Decimal("0")
    close: Decimal = Decimal("0")
    base_volume: Decimal = Decimal("0")
    counter_volume: Decimal = Decimal("0")
    timestamp: datetime | None = None

    def price(self, price: str) -> Decimal:
        """Return the candle price selected by name, or zero if unknown."""
        if price == PriceField.OPEN:
            return self.open
        if price == PriceField.HIGH:
            return self.high
        if price == PriceField.LOW:
            return self.low
        if price == PriceField.CLOSE:
            return self.close
        return Decimal("0")


@dataclass(frozen=True)
class Ticker:
    """Constantly updating ticker data from the exchange."""

    last_price: Decimal = Decimal("0")
    ask_price: Decimal = Decimal("0")
    bid_price: Decimal = Decimal("0")
    base_volume: Decimal = Decimal("0")
    counter_volume: Decimal = Decimal("0")
    day_percent_change: Decimal = Decimal("0")

    def price(self, price: str) -> Decimal:
        """Return last, ask or bid price, or zero if unknown."""
        if price == TickerPrice.LAST:
            return self.last_price
        if price == TickerPrice.ASK:
            return self.ask_price
        if price == TickerPrice.BID:
            return self.bid_price
        return Decimal("0")

    def misc_prop(self, prop: str) -> Decimal:
        """Return a non-price ticker property, or zero if unknown."""
        if prop == TickerProperty.DAY_PERCENT:
            return self.day_percent_change
        if prop == TickerProperty.BASE_VOLUME:
            return self.base_volume
        if prop == TickerProperty.COUNTER_VOLUME:
            return self.counter_volume
        return Decimal("0")


@dataclass
class MarketData:
    """Everything a tool needs for one evaluation tick."""

    ticker: Ticker = field(default_factory=Ticker)
    candles: list[Candle] | None = None
    buy_price: Decimal = Decimal("0")
