"""Moving-average factory.

The registry below is the single source of truth for valid MA type names.
"""

import logging

from tradetools.errors import InvalidMATypeError
from tradetools.indicators.base import MAConfig, MAType, MovingAverage
from tradetools.indicators.ema import EMA
from tradetools.indicators.sma import SMA
from tradetools.indicators.wma import WMA

logger = logging.getLogger(__name__)

MA_REGISTRY: dict[str, type[MovingAverage]] = {
    MAType.SMA.value: SMA,
    MAType.EMA.value: EMA,
    MAType.WMA.value: WMA,
}


def new_ma(ma_type: str, price: str, period: int, offset: int) -> MovingAverage:
    """Create a moving average of the given type.

    Args:
        ma_type: One of "sma", "ema", "wma".
        price: Candle price field.
        period: Averaging period.
        offset: Number of newest candles excluded.

    Returns:
        Constructed moving-average engine.

    Raises:
        InvalidMATypeError: If ma_type is not registered.
        InvalidPriceError: If price is not a candle price field.
    """
    cls = MA_REGISTRY.get(getattr(ma_type, "value", ma_type))
    if cls is None:
        raise InvalidMATypeError(ma_type)

    ma = cls(period, offset, price)
    logger.debug(f"Created MA: {ma!r}")
    return ma


def new_ma_from_config(ma_type: str, conf: MAConfig, offset: int) -> MovingAverage:
    """Create a moving average like new_ma, taking values from MAConfig."""
    return new_ma(ma_type, conf.price, conf.period, offset)
