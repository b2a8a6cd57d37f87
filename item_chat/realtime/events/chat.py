from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:  # import for type checking only
    from item_chat.chat.rooms import RoomRegistry

# Inbound (client -> server)
JOIN_ROOM = "joinRoom"
SEND_MESSAGE = "sendMessage"

# Outbound (server -> client)
PREVIOUS_MESSAGES = "previousMessages"
RECEIVE_MESSAGE = "receiveMessage"


async def publish_previous_messages(
    registry: RoomRegistry,
    sid: str,
    messages: list[Any],
) -> None:
    """Replay a room's history to the connection that just joined it."""

    await registry.send(sid, PREVIOUS_MESSAGES, messages)


async def publish_received_message(
    registry: RoomRegistry,
    room: str,
    message: Any,
) -> None:
    await registry.publish(room, RECEIVE_MESSAGE, message)
