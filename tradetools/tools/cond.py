# tradetools/tools/cond.py
"""Comparison relations and value-source resolution for condition tools.

Classes:
    CondType: Supported comparison relations
    Cond: Configured comparison relation
    CondObject: Resolves a named value (ticker price, candle price, MA) from
        the market data supplied at evaluation time
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import Field, PrivateAttr, ValidationError, field_validator

from tradetools.errors import ComputationError, ConfigInvalidError, InsufficientDataError
from tradetools.indicators.base import MAConfig, MAType
from tradetools.indicators.factory import new_ma_from_config
from tradetools.market.models import (
    CANDLE_PRICES,
    TICKER_PRICES,
    TICKER_PROPERTIES,
    MarketData,
)
from tradetools.models import ConfigBaseModel, normalize_str

logger = logging.getLogger(__name__)

MA_OBJECTS: frozenset[str] = frozenset(t.value for t in MAType)


class CondType(str, Enum):
    """Comparison relations between a value and a target.

    EQUAL: value == target
    ABOVE: value > target
    ABOVE_OR_EQUAL: value >= target
    BELOW: value < target
    BELOW_OR_EQUAL: value <= target
    ABOVE_OR_BELOW: value != target
    """

    EQUAL = "equal"
    ABOVE = "above"
    ABOVE_OR_EQUAL = "aboveorequal"
    BELOW = "below"
    BELOW_OR_EQUAL = "beloworequal"
    ABOVE_OR_BELOW = "aboveorbelow"


class Cond(ConfigBaseModel):
    """Configured comparison relation."""

    cond: str = ""

    @field_validator("cond", mode="before")
    @classmethod
    def normalize_fields(cls, value):
        return normalize_str(value)

    def match(self, value: Decimal, target: Decimal) -> bool:
        """Evaluate the relation; an unknown relation never matches."""
        if self.cond == CondType.EQUAL:
            return value == target
        if self.cond == CondType.ABOVE:
            return value > target
        if self.cond == CondType.ABOVE_OR_EQUAL:
            return value >= target
        if self.cond == CondType.BELOW:
            return value < target
        if self.cond == CondType.BELOW_OR_EQUAL:
            return value <= target
        if self.cond == CondType.ABOVE_OR_BELOW:
            return value < target or value > target
        return False

    def check(self) -> None:
        if self.cond not in {t.value for t in CondType}:
            raise ConfigInvalidError("no possible conditions")


class CondObject(ConfigBaseModel):
    """Value source resolved from market data at evaluation time.

    Which object names are permitted depends on the owning tool, which must
    opt in with the allow_* methods before calling init().

    Attributes:
        obj: Object name, e.g. "last", "close", "sma".
        obj_conf: Extra configuration, an MAConfig mapping for MA objects.
    """

    obj: str = ""
    obj_conf: dict[str, Any] | None = Field(default=None, alias="objConf")

    _ticker_price: bool = PrivateAttr(default=False)
    _ticker_misc_prop: bool = PrivateAttr(default=False)
    _candle_price: bool = PrivateAttr(default=False)
    _ma: bool = PrivateAttr(default=False)

    _get_data: Callable[[MarketData], Decimal] | None = PrivateAttr(default=None)
    _get_candles_count: Callable[[], int] | None = PrivateAttr(default=None)

    @field_validator("obj", mode="before")
    @classmethod
    def normalize_fields(cls, value):
        return normalize_str(value)

    def allow_ticker_price(self) -> None:
        self._ticker_price = True

    def allow_ticker_misc_prop(self) -> None:
        self._ticker_misc_prop = True

    def allow_candle_price(self) -> None:
        self._candle_price = True

    def allow_ma(self) -> None:
        self._ma = True

    def init(self, offset: int) -> None:
        """Bind the resolver for the configured object.

        Args:
            offset: Number of newest candles skipped by candle price and MA
                objects.

        Raises:
            ConfigInvalidError: If offset is negative, the object is unknown
                or not permitted, or an MA object's configuration is invalid.
        """
        if offset < 0:
            raise ConfigInvalidError("offset cannot be negative")

        self.check()
        obj = self.obj

        if obj in TICKER_PRICES:
            self._get_data = lambda d: d.ticker.price(obj)
            self._get_candles_count = lambda: 0
        elif obj in TICKER_PROPERTIES:
            self._get_data = lambda d: d.ticker.misc_prop(obj)
            self._get_candles_count = lambda: 0
        elif obj in CANDLE_PRICES:
            self._get_data = lambda d: _candle_price(d, obj, offset)
            self._get_candles_count = lambda: offset + 1
        else:
            ma = new_ma_from_config(obj, self._ma_config(), offset)
            self._get_data = lambda d: ma.calc(d.candles)
            self._get_candles_count = lambda: ma.candles_count

        logger.debug(f"Initialized condition object {obj!r} with offset {offset}")

    def check(self) -> None:
        """Check the object name against the permitted sources.

        Raises:
            ConfigInvalidError: If the object is unknown or not permitted.
        """
        if self.obj in TICKER_PRICES:
            allowed = self._ticker_price
        elif self.obj in TICKER_PROPERTIES:
            allowed = self._ticker_misc_prop
        elif self.obj in CANDLE_PRICES:
            allowed = self._candle_price
        elif self.obj in MA_OBJECTS:
            allowed = self._ma
        else:
            allowed = False

        if not allowed:
            raise ConfigInvalidError("condition object is invalid")

    def value(self, data: MarketData) -> Decimal:
        """Resolve the object's value from market data.

        Raises:
            ComputationError: If init() was not called or the value is not
                positive.
            InsufficientDataError: If candle data is too short.
        """
        if self._get_data is None:
            raise ComputationError("data retriever not initialized")

        val = self._get_data(data)
        if val <= Decimal("0"):
            raise ComputationError("exchange value is invalid")

        return val

    @property
    def candles_count(self) -> int:
        if self._get_candles_count is None:
            return 0
        return self._get_candles_count()

    def snapshot(self, value: Decimal) -> dict[str, Decimal]:
        """Snapshot entry for the resolved value."""
        return {"objVal": value}

    def _ma_config(self) -> MAConfig:
        try:
            conf = MAConfig.model_validate(self.obj_conf or {})
        except ValidationError as e:
            raise ConfigInvalidError(f"condition object config is invalid: {e}") from e

        conf.check()
        return conf


def _candle_price(data: MarketData, price: str, offset: int) -> Decimal:
    candles = data.candles
    if candles is None or len(candles) - offset <= 0:
        raise InsufficientDataError(
            "candles list size is too small",
            required=offset + 1,
            available=0 if candles is None else len(candles),
        )

    return candles[len(candles) - offset - 1].price(price)
