from app.notifications.realtime import (
    EventBroadcaster,
    broadcaster,
    ADMIN_ROOM,
    volunteer_room,
)

__all__ = ["EventBroadcaster", "broadcaster", "ADMIN_ROOM", "volunteer_room"]
