"""Item chat rooms.

Clients join a room keyed by an item identifier, receive the room's earlier
messages on join, and exchange new messages with everyone in the room.
"""
