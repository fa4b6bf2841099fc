from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Iterable, Iterator, Optional

from ..core.enums import SessionType


@dataclass(frozen=True)
class QueuedEntry:
    """A check-in/out captured while the device was offline."""

    session_type: SessionType
    timestamp: datetime
    latitude: float
    longitude: float
    device_info: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["session_type"] = self.session_type.value
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "QueuedEntry":
        return cls(
            session_type=SessionType(data["session_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            device_info=data.get("device_info"),
        )


@dataclass
class OfflineQueue:
    """Pending entries, passed explicitly to whoever syncs them.

    The owner decides where the queue lives (memory, a JSON file, local
    storage); ``to_list``/``from_list`` give it a plain representation.
    """

    _entries: list[QueuedEntry] = field(default_factory=list)

    def enqueue(self, entry: QueuedEntry) -> None:
        self._entries.append(entry)

    def extend(self, entries: Iterable[QueuedEntry]) -> None:
        self._entries.extend(entries)

    def drain(self) -> list[QueuedEntry]:
        entries, self._entries = self._entries, []
        return entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QueuedEntry]:
        return iter(list(self._entries))

    def to_list(self) -> list[dict]:
        return [e.to_dict() for e in self._entries]

    @classmethod
    def from_list(cls, items: Iterable[dict]) -> "OfflineQueue":
        return cls([QueuedEntry.from_dict(item) for item in items])
