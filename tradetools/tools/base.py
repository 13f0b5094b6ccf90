# tradetools/tools/base.py
"""Base class for condition tools.

A tool composes one or more indicators with the condition framework into a
single "conditions met" decision, recording a snapshot of every evaluation.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tradetools.errors import ConfigInvalidError
from tradetools.market.models import MarketData
from tradetools.tools.snapshot import Snapshot, SnapshotManager

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Tool(ABC):
    """Abstract base class for condition tools.

    Tools are created once from validated configuration and reused for every
    tick; the only state that changes between evaluations is the snapshot.
    A tool instance must not be evaluated concurrently.
    """

    def __init__(self) -> None:
        self._snapshot = SnapshotManager()

    @classmethod
    @abstractmethod
    def from_properties(cls, properties: Mapping[str, Any] | None) -> "Tool":
        """Build the tool from deserialized properties.

        Raises:
            ConfigInvalidError: If properties cannot be read.
        """
        pass

    @abstractmethod
    def validate(self) -> None:
        """Check every nested configuration.

        Raises:
            ConfigInvalidError: If any value is invalid.
        """
        pass

    @property
    @abstractmethod
    def candles_count(self) -> int:
        """Largest candle requirement among the tool's indicators."""
        pass

    @abstractmethod
    def _evaluate(self, data: MarketData) -> tuple[Mapping[str, Decimal], bool]:
        """Compute snapshot values and whether conditions are met."""
        pass

    def evaluate(self, data: MarketData) -> Snapshot:
        """Evaluate the tool and record its snapshot.

        Returns:
            The snapshot just recorded.

        Raises:
            IndicatorError: Any indicator or resolver error. The snapshot is
                cleared before the error propagates.
        """
        try:
            values, conds_met = self._evaluate(data)
        except Exception as e:
            self._snapshot.clear()
            logger.debug(f"{type(self).__name__} evaluation failed, snapshot cleared: {e}")
            raise

        return self._snapshot.set(values, conds_met)

    def conditions_met(self, data: MarketData) -> bool:
        """Evaluate the tool and return only the decision."""
        return self.evaluate(data).conds_met

    def snapshot(self) -> Snapshot:
        """Last recorded snapshot."""
        return self._snapshot.get()

    def reset(self) -> None:  # noqa: B027
        """Reset evaluation state. Default does nothing."""
        pass


def read_settings(model_cls: type[T], properties: Mapping[str, Any] | None) -> T:
    """Validate deserialized tool properties into a settings model.

    Raises:
        ConfigInvalidError: If model validation fails.
    """
    try:
        return model_cls.model_validate(properties or {})
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(loc) for loc in error["loc"])
            msg = error["msg"]
            error_messages.append(f"{loc}: {msg}")
        raise ConfigInvalidError(f"Validation failed: {'; '.join(error_messages)}") from e
