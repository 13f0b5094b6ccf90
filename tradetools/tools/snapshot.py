# tradetools/tools/snapshot.py
"""Tool snapshots.

A snapshot records the numeric intermediates of the last evaluation and
whether the tool's conditions were met. Tools keep exactly one snapshot,
overwritten on every evaluation and cleared when evaluation fails.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from threading import Lock
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Snapshot:
    """Last evaluation record of a tool.

    Attributes:
        conds_met: Whether the tool's conditions matched.
        data: Tool specific values, keyed by their serialized names.
            Read-only copy of the values given; None for an empty snapshot.
    """

    conds_met: bool = False
    data: Mapping[str, Decimal] | None = None

    def __post_init__(self) -> None:
        if self.data is not None:
            object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __hash__(self) -> int:
        items = frozenset(self.data.items()) if self.data is not None else None
        return hash((self.conds_met, items))

    def is_empty(self) -> bool:
        return not self.conds_met and self.data is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "condsMet": self.conds_met,
            "data": {k: str(v) for k, v in self.data.items()} if self.data is not None else None,
        }

    def to_json(self) -> str:
        """Serialize Snapshot to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, data: str) -> "Snapshot":
        """Deserialize Snapshot from JSON string."""
        d = json.loads(data)
        raw = d.get("data")
        return cls(
            conds_met=d.get("condsMet", False),
            data={k: Decimal(v) for k, v in raw.items()} if raw is not None else None,
        )


@dataclass(frozen=True)
class FullSnapshot:
    """Snapshot together with the tool type and its raw properties.

    Used when writing evaluation records to an audit log.
    """

    type: str = ""
    properties: Mapping[str, Any] = field(default_factory=dict)
    snapshot: Snapshot = field(default_factory=Snapshot)

    def to_json(self) -> str:
        """Serialize FullSnapshot to JSON string."""
        return json.dumps(
            {
                "type": self.type,
                "properties": self.properties,
                "snapshot": self.snapshot.to_dict(),
            },
            default=str,
        )


class SnapshotManager:
    """Holds a tool's single snapshot.

    Writes and reads are serialized by a lock, so a reader never observes a
    half-written snapshot. Evaluations of one tool must still be sequential.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._snap = Snapshot()

    def set(self, data: Mapping[str, Decimal], conds_met: bool) -> Snapshot:
        snap = Snapshot(conds_met=conds_met, data=data)
        with self._lock:
            self._snap = snap
        return snap

    def get(self) -> Snapshot:
        with self._lock:
            return self._snap

    def clear(self) -> None:
        with self._lock:
            self._snap = Snapshot()
