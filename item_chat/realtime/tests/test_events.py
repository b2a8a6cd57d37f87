from asgiref.sync import async_to_sync

from item_chat.chat.rooms import RoomRegistry
from item_chat.realtime.events.chat import publish_previous_messages
from item_chat.realtime.events.chat import publish_received_message


def test_previous_messages_target_one_connection(sio_server):
    registry = RoomRegistry(sio_server)
    for sid in ("a", "b"):
        sio_server.rooms[sid].add(sid)
        sio_server.rooms["42"].add(sid)

    async_to_sync(publish_previous_messages)(registry, "a", [{"text": "hi"}])

    assert sio_server.received["a"] == [("previousMessages", [{"text": "hi"}])]
    assert sio_server.received["b"] == []


def test_received_message_targets_the_room(sio_server):
    registry = RoomRegistry(sio_server)
    sio_server.rooms["42"].update({"a", "b"})
    sio_server.rooms["7"].add("c")

    async_to_sync(publish_received_message)(registry, "42", {"text": "hi"})

    assert sio_server.received["a"] == [("receiveMessage", {"text": "hi"})]
    assert sio_server.received["b"] == [("receiveMessage", {"text": "hi"})]
    assert sio_server.received["c"] == []
