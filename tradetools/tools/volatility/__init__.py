"""Volatility condition tools (Bollinger Bands, MA spread)."""

from tradetools.tools.volatility.bollinger import Band, BBToolSettings, BollingerBandsTool
from tradetools.tools.volatility.ma_spread import MAConf, MASpreadSettings, MASpreadTool

__all__ = [
    "Band",
    "BBToolSettings",
    "BollingerBandsTool",
    "MAConf",
    "MASpreadSettings",
    "MASpreadTool",
]
