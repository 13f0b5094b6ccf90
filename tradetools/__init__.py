"""Moving-average and Bollinger Bands indicators composed into trading signal tools."""

__version__ = "0.1.0"
