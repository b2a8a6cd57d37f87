import pytest

from item_chat.chat.handlers import ChatEventHandler
from item_chat.chat.history import HistoryStore
from item_chat.chat.tests.fakes import FakeSocketServer


@pytest.fixture
def history() -> HistoryStore:
    return HistoryStore()


@pytest.fixture
def sio_server() -> FakeSocketServer:
    return FakeSocketServer()


@pytest.fixture
def chat_handler(sio_server, history) -> ChatEventHandler:
    handler = ChatEventHandler(sio_server, history)
    handler.register()
    return handler
