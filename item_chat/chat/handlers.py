"""Socket.IO event handlers for item chat rooms.

Protocol:
- `joinRoom` (payload: item id) subscribes the connection to the item's room
  and replays the room's history as `previousMessages`, if there is any.
- `sendMessage` (payload: `{itemId, senderId, text, timestamp}`) stores the
  payload as-is and broadcasts it to the room as `receiveMessage`, sender
  included.

Payloads are relayed untouched; nothing is validated.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from item_chat.chat.history import HistoryStore
from item_chat.chat.rooms import RoomRegistry
from item_chat.chat.rooms import RoomServer
from item_chat.chat.rooms import room_key
from item_chat.realtime.events.chat import JOIN_ROOM
from item_chat.realtime.events.chat import SEND_MESSAGE
from item_chat.realtime.events.chat import publish_previous_messages
from item_chat.realtime.events.chat import publish_received_message

logger = logging.getLogger(__name__)


class ChatEventHandler:
    def __init__(self, server: RoomServer, history: HistoryStore) -> None:
        self.server = server
        self.history = history
        self.rooms = RoomRegistry(server)
        # Handlers yield to the event loop while emitting. Holding one lock
        # across append+broadcast and subscribe+replay keeps every room's
        # broadcasts in history order.
        self._lock = asyncio.Lock()

    def register(self) -> None:
        self.server.on("connect", self.connect)
        self.server.on(JOIN_ROOM, self.join_room)
        self.server.on(SEND_MESSAGE, self.send_message)
        self.server.on("disconnect", self.disconnect)

    async def connect(self, sid: str, environ: dict[str, Any], auth: Any = None):
        logger.info("User connected: %s", sid)

    async def join_room(self, sid: str, item_id: Any = None):
        room = room_key(item_id)
        async with self._lock:
            await self.rooms.subscribe(sid, room)
            logger.info("User %s joined room: %s", sid, room)

            messages = self.history.get(room)
            if messages:
                await publish_previous_messages(self.rooms, sid, messages)

    async def send_message(self, sid: str, data: Any = None):
        logger.info("Message received: %s", data)
        item_id = data.get("itemId") if isinstance(data, Mapping) else None
        room = room_key(item_id)
        async with self._lock:
            self.history.append(room, data)
            await publish_received_message(self.rooms, room, data)

    async def disconnect(self, sid: str, reason: Any = None):
        # Rooms are cleaned up by the Socket.IO server.
        logger.info("User disconnected: %s", sid)
