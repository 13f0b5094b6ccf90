"""Condition framework and tools.

Comparison, difference, shift and value-source primitives turn indicator
output into a pass/fail signal; tools compose them with indicators and
record a snapshot of every evaluation.
"""

from tradetools.tools.base import Tool
from tradetools.tools.calc import Calc, CalcType
from tradetools.tools.cond import Cond, CondObject, CondType
from tradetools.tools.diff import Diff
from tradetools.tools.registry import TOOL_REGISTRY, ToolDefinition, build_tool
from tradetools.tools.shift import Shift
from tradetools.tools.snapshot import FullSnapshot, Snapshot, SnapshotManager

__all__ = [
    "Tool",
    "Calc",
    "CalcType",
    "Cond",
    "CondObject",
    "CondType",
    "Diff",
    "Shift",
    "Snapshot",
    "SnapshotManager",
    "FullSnapshot",
    "TOOL_REGISTRY",
    "ToolDefinition",
    "build_tool",
]
