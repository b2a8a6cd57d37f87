import socketio
from django.apps import apps

from item_chat.chat.history import HistoryStore
from item_chat.realtime.socketio import create_server
from item_chat.realtime.socketio import sio


def test_create_server_registers_chat_events():
    server = create_server(HistoryStore())

    assert isinstance(server, socketio.AsyncServer)
    assert {"connect", "joinRoom", "sendMessage", "disconnect"} <= set(
        server.handlers["/"],
    )


def test_handlers_share_the_injected_store():
    history = HistoryStore()
    server = create_server(history)

    handler = server.handlers["/"]["sendMessage"].__self__
    assert handler.history is history


def test_create_server_without_store_starts_empty():
    server = create_server()

    handler = server.handlers["/"]["joinRoom"].__self__
    assert len(handler.history) == 0


def test_module_server_uses_app_store():
    handler = sio.handlers["/"]["joinRoom"].__self__
    assert handler.history is apps.get_app_config("chat").history


def test_cors_defaults_to_any_origin():
    server = create_server(HistoryStore())
    assert server.eio.cors_allowed_origins == "*"


def test_cors_from_settings(settings):
    settings.SOCKETIO_CORS_ALLOWED_ORIGINS = ["https://shop.example.com"]
    server = create_server(HistoryStore())
    assert server.eio.cors_allowed_origins == ["https://shop.example.com"]
