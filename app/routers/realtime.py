from fastapi import APIRouter, WebSocket, WebSocketDisconnect
import json

from app.notifications import broadcaster, ADMIN_ROOM, volunteer_room
from app.utils.logger import setup_logger

logger = setup_logger("ws")

router = APIRouter()


async def handle_message(websocket: WebSocket, message: dict) -> None:
    event = message.get("event")
    data = message.get("data")

    if event == "join-admin":
        broadcaster.join(ADMIN_ROOM, websocket)
        await websocket.send_json({"event": "joined", "data": {"room": ADMIN_ROOM}})

    elif event == "join-volunteer":
        if data is None:
            logger.warning("join-volunteer without a volunteer id")
            return
        room = volunteer_room(data)
        broadcaster.join(room, websocket)
        await websocket.send_json({"event": "joined", "data": {"room": room}})

    elif event == "emergency-update":
        await broadcaster.publish("new-emergency", data, room=ADMIN_ROOM)

    elif event == "resource-update":
        await broadcaster.publish("resource-updated", data, exclude=websocket)

    else:
        logger.debug(f"Ignoring unknown event {event!r}")


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await broadcaster.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed websocket message")
                continue
            if not isinstance(message, dict):
                continue
            await handle_message(websocket, message)
    except WebSocketDisconnect:
        logger.debug("Client closed websocket")
    finally:
        broadcaster.disconnect(websocket)
