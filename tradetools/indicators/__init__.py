"""Technical indicators package.

Available Indicators:
- MovingAverage: Abstract base class for moving averages
- SMA: Simple Moving Average
- EMA: Exponential Moving Average (seeded by SMA)
- WMA: Weighted Moving Average
- BollingerBands: Middle band MA with standard deviation bands
"""

from tradetools.indicators.base import (
    MAConfig,
    MAType,
    MovingAverage,
    two_ma_validation,
    validate_ma_type,
    validate_period,
)
from tradetools.indicators.bollinger import BBConfig, BBInfo, BollingerBands
from tradetools.indicators.ema import EMA
from tradetools.indicators.factory import MA_REGISTRY, new_ma, new_ma_from_config
from tradetools.indicators.sma import SMA
from tradetools.indicators.wma import WMA

__all__: list[str] = [
    "MovingAverage",
    "MAConfig",
    "MAType",
    "SMA",
    "EMA",
    "WMA",
    "BBConfig",
    "BBInfo",
    "BollingerBands",
    "MA_REGISTRY",
    "new_ma",
    "new_ma_from_config",
    "two_ma_validation",
    "validate_ma_type",
    "validate_period",
]
