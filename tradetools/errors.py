# tradetools/errors.py
"""Indicator and tool error types."""


class IndicatorError(Exception):
    """Base exception for indicator and tool errors."""
    pass


class ConfigInvalidError(IndicatorError, ValueError):
    """Configuration rejected at construction or validation time."""
    pass


class InvalidMATypeError(ConfigInvalidError):
    """Moving-average type name is not one of the registered types."""

    def __init__(self, ma_type: str = None):
        super().__init__("MA type is invalid")
        self.ma_type = ma_type


class SamePeriodMAsError(ConfigInvalidError):
    """Two MAs of the same type require the same amount of candles."""

    def __init__(self, ma_type: str = None, candles_count: int = None):
        super().__init__("two MAs of the same type cannot be of the same period")
        self.ma_type = ma_type
        self.candles_count = candles_count


class InvalidPriceError(ConfigInvalidError):
    """Candle price selector is not open, high, low or close."""

    def __init__(self, price: str = None):
        super().__init__("candle price is invalid")
        self.price = price


class InsufficientDataError(IndicatorError):
    """Not enough candles or values to perform a calculation."""

    def __init__(self, message: str, required: int = None, available: int = None):
        super().__init__(message)
        self.required = required
        self.available = available


class ComputationError(IndicatorError):
    """Calculation could not produce a usable value."""
    pass
