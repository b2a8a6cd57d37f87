"""Realtime infrastructure (Socket.IO).

The Socket.IO server and its connection handlers live here; domain code emits
through the publishers in `item_chat.realtime.events`.
"""
