"""Global Socket.IO server for item chat.

Clients use `socket.io-client` with the default settings:
- URL base: http://<host>:3000
- Socket.IO path: /socket.io/
- No auth; any origin may connect.

The message history is owned by the `chat` app (created once in
`ChatConfig.ready()`) and handed to the event handler here.
"""

from __future__ import annotations

import socketio
from django.apps import apps
from django.conf import settings

from item_chat.chat.handlers import ChatEventHandler
from item_chat.chat.history import HistoryStore


def _cors_allowed_origins() -> str | list[str]:
    origins = list(getattr(settings, "SOCKETIO_CORS_ALLOWED_ORIGINS", ["*"]))
    if not origins or "*" in origins:
        return "*"
    return origins


def create_server(
    history: HistoryStore | None = None,
    *,
    cors_allowed_origins: str | list[str] | None = None,
) -> socketio.AsyncServer:
    """Build an ASGI Socket.IO server with the chat handlers registered.

    Without an explicit `history` the server gets a fresh, empty store.
    """

    server = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=(
            cors_allowed_origins
            if cors_allowed_origins is not None
            else _cors_allowed_origins()
        ),
        logger=False,
        engineio_logger=False,
    )
    if history is None:
        history = HistoryStore()
    ChatEventHandler(server, history).register()
    return server


sio = create_server(apps.get_app_config("chat").history)
