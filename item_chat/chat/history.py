"""In-memory message history, one append-only list per room.

Nothing is persisted and nothing is evicted: a room's history lives exactly as
long as the store that holds it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class HistoryStore:
    def __init__(self) -> None:
        self._rooms: dict[str, list[Any]] = {}

    def append(self, room: str, message: Any) -> None:
        """Append `message` as the newest entry of `room`.

        Mapping payloads are stored as a shallow copy so the sender's object can
        not change what later joiners see.
        """

        if isinstance(message, Mapping):
            message = dict(message)
        self._rooms.setdefault(room, []).append(message)

    def get(self, room: str) -> list[Any] | None:
        entries = self._rooms.get(room)
        if entries is None:
            return None
        return list(entries)

    def stats(self) -> dict[str, int]:
        return {
            "rooms": len(self._rooms),
            "messages": sum(len(entries) for entries in self._rooms.values()),
        }

    def __contains__(self, room: object) -> bool:
        return room in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
