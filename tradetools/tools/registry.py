"""Tool registry and tool definitions.

Maps a tool type name plus its deserialized properties to a constructed
tool. Parsing the properties from JSON or any other format is left to the
caller.

Example:
    >>> definition = ToolDefinition.from_properties("bb-upper", "bb", {...})
    >>> definition.properties.validate()
    >>> definition.properties.conditions_met(market_data)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from tradetools.errors import ConfigInvalidError
from tradetools.tools.base import Tool
from tradetools.tools.snapshot import FullSnapshot
from tradetools.tools.volatility.bollinger import BollingerBandsTool
from tradetools.tools.volatility.ma_spread import MASpreadTool

logger = logging.getLogger(__name__)

BB_TOOL = "bb"
MA_SPREAD_TOOL = "maspread"

TOOL_REGISTRY: dict[str, type[Tool]] = {
    BB_TOOL: BollingerBandsTool,
    MA_SPREAD_TOOL: MASpreadTool,
}


def build_tool(tool_type: str, properties: Mapping[str, Any] | None) -> Tool:
    """Construct a tool of the given type from its properties.

    Args:
        tool_type: Registered tool type name, case insensitive.
        properties: Deserialized tool properties.

    Returns:
        Constructed (not yet validated) tool.

    Raises:
        ConfigInvalidError: If the type is unknown or properties are invalid.
    """
    cls = TOOL_REGISTRY.get(tool_type.strip().lower())
    if cls is None:
        raise ConfigInvalidError(f"tool type not recognized: {tool_type!r}")

    return cls.from_properties(properties)


class ToolDefinition:
    """A configured tool instance within a strategy.

    Attributes:
        id: Tool identifier, unique within a strategy.
        type: Lower-cased tool type name.
        raw_properties: Properties the tool was built from.
        properties: The constructed tool.
    """

    def __init__(
        self,
        id: str,
        type: str,
        raw_properties: Mapping[str, Any],
        properties: Tool,
        assigned: bool = False,
    ) -> None:
        self.id = id
        self.type = type
        self.raw_properties = raw_properties
        self.properties = properties
        self._assigned = assigned

    @classmethod
    def from_properties(
        cls, id: str, tool_type: str, raw_properties: Mapping[str, Any] | None
    ) -> ToolDefinition:
        """Build a definition and its tool from raw properties.

        Raises:
            ConfigInvalidError: If the type is unknown or properties are invalid.
        """
        tool_type = tool_type.strip().lower()
        raw = copy.deepcopy(dict(raw_properties or {}))
        tool = build_tool(tool_type, raw)
        logger.debug(f"Created tool {id!r} of type {tool_type!r}")
        return cls(id=id, type=tool_type, raw_properties=raw, properties=tool)

    def mark_assigned(self) -> None:
        self._assigned = True

    def is_assigned(self) -> bool:
        return self._assigned

    def clone(self) -> ToolDefinition:
        """Copy of the definition with a freshly built tool and empty snapshot."""
        raw = copy.deepcopy(dict(self.raw_properties))
        tool = build_tool(self.type, raw)
        return ToolDefinition(
            id=self.id,
            type=self.type,
            raw_properties=raw,
            properties=tool,
            assigned=self._assigned,
        )

    def full_snapshot(self) -> FullSnapshot:
        """Tool snapshot together with the type and raw properties."""
        return FullSnapshot(
            type=self.type,
            properties=self.raw_properties,
            snapshot=self.properties.snapshot(),
        )
