from collections import defaultdict
from typing import Any, Dict, List, Optional

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder

from app.utils.logger import setup_logger

logger = setup_logger("realtime")

ADMIN_ROOM = "admin"


def volunteer_room(volunteer_id) -> str:
    return f"volunteer-{volunteer_id}"


class EventBroadcaster:
    """
    In-process publish/subscribe over WebSocket connections.

    Every connection receives broadcasts; rooms narrow delivery to the
    connections that joined them.
    """

    def __init__(self) -> None:
        self.connections: List[WebSocket] = []
        self.rooms: Dict[str, List[WebSocket]] = defaultdict(list)

    async def connect(self, websocket: WebSocket) -> None:
        self.connections.append(websocket)
        await websocket.accept()
        logger.info(f"Client connected ({len(self.connections)} open)")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)
        for room, members in list(self.rooms.items()):
            if websocket in members:
                members.remove(websocket)
            if not members:
                del self.rooms[room]
        logger.info(f"Client disconnected ({len(self.connections)} open)")

    def join(self, room: str, websocket: WebSocket) -> None:
        if websocket not in self.rooms[room]:
            self.rooms[room].append(websocket)
        logger.info(f"Client joined room {room}")

    async def publish(
            self,
            event: str,
            data: Any,
            room: Optional[str] = None,
            exclude: Optional[WebSocket] = None
    ) -> int:
        """
        Send an event to a room, or to every connection when room is None.

        Returns:
            Number of connections the event was delivered to
        """
        targets = list(self.rooms.get(room, [])) if room else list(self.connections)
        message = {"event": event, "data": jsonable_encoder(data)}

        delivered = 0
        for websocket in targets:
            if websocket is exclude:
                continue
            try:
                await websocket.send_json(message)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping connection after failed send of {event}: {e}")
                self.disconnect(websocket)

        logger.debug(f"Published {event} to {delivered} client(s)")
        return delivered


broadcaster = EventBroadcaster()
