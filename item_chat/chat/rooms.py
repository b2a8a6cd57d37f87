"""Room naming and membership.

Every place that turns a client-supplied item identifier into a room name goes
through `room_key`, so `42`, `42.0` and `"42"` always address the same room.
Membership itself lives in the Socket.IO server: `RoomRegistry` only forwards to
its room primitives, and the server drops a connection's rooms on disconnect.
"""

from __future__ import annotations

import json
from typing import Any
from typing import Protocol


class RoomServer(Protocol):
    def on(self, event: str, handler: Any = None, namespace: str | None = None): ...

    async def enter_room(self, sid: str, room: str, namespace: str | None = None): ...

    async def emit(  # noqa: PLR0913
        self,
        event: str,
        data: Any = None,
        to: str | None = None,
        room: str | None = None,
        **kwargs: Any,
    ): ...


def room_key(item_id: Any) -> str:
    """Return the canonical room name for an item identifier.

    The canonical form is the identifier's JSON text with strings left
    unquoted. Integral floats collapse onto the equal integer, since JSON does
    not tell them apart.
    """

    if isinstance(item_id, str):
        return item_id
    if item_id is None or isinstance(item_id, bool):
        return json.dumps(item_id)
    if isinstance(item_id, float) and item_id.is_integer():
        return str(int(item_id))
    if isinstance(item_id, (int, float)):
        return repr(item_id)
    if isinstance(item_id, (list, tuple, dict)):
        try:
            return json.dumps(item_id, sort_keys=True, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(item_id)
    return str(item_id)


class RoomRegistry:
    def __init__(self, server: RoomServer) -> None:
        self._server = server

    async def subscribe(self, sid: str, room: str) -> None:
        # Entering a room the connection is already in is a no-op.
        await self._server.enter_room(sid, room)

    async def publish(self, room: str, event: str, payload: Any) -> None:
        """Emit `event` to every connection in `room`, the sender included."""

        await self._server.emit(event, payload, room=room)

    async def send(self, sid: str, event: str, payload: Any) -> None:
        await self._server.emit(event, payload, to=sid)
