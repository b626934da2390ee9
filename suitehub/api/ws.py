"""
Live view refresh over WebSockets.

Pages subscribe to the view they render ("events", "admin", "home"). After a
mutation the action layer calls revalidate_path() and every browser showing an
affected view is told to reload its data.
"""

import json
import logging
from typing import Dict, List

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from suitehub.utils.time_windows import utc_now

logger = logging.getLogger(__name__)

VIEWS = {"home", "events", "admin"}

def view_for_path(path: str) -> str:
    """Map a page path to its view name ("/" -> "home")"""
    name = path.strip("/").split("/", 1)[0]
    return name or "home"

class ViewRefreshManager:
    """Manages WebSocket connections per rendered view"""

    def __init__(self):
        # view name -> list of websockets
        self.active_connections: Dict[str, List[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, view: str):
        await websocket.accept()
        self.active_connections.setdefault(view, []).append(websocket)
        logger.info(f"WebSocket subscribed to view {view}. Total connections: {len(self.active_connections[view])}")

    def disconnect(self, websocket: WebSocket, view: str):
        if view in self.active_connections:
            try:
                self.active_connections[view].remove(websocket)
                if not self.active_connections[view]:
                    del self.active_connections[view]
            except ValueError:
                # WebSocket was not in the list
                pass

    async def send_personal_message(self, message: dict, websocket: WebSocket):
        try:
            await websocket.send_text(json.dumps(message))
        except Exception as e:
            logger.error(f"Error sending personal message: {e}")

    async def broadcast_to_view(self, view: str, message: dict):
        """Broadcast message to all WebSockets showing a view"""
        if view not in self.active_connections:
            logger.debug(f"No active connections for view {view}")
            return

        # Create list copy to avoid modification during iteration
        connections = self.active_connections[view].copy()

        disconnected = []
        for websocket in connections:
            try:
                await websocket.send_text(json.dumps(message))
            except Exception as e:
                logger.error(f"Error broadcasting to websocket: {e}")
                disconnected.append(websocket)

        for websocket in disconnected:
            self.disconnect(websocket, view)

    async def revalidate_path(self, path: str):
        """Tell browsers rendering `path` that its data changed"""
        view = view_for_path(path)
        await self.broadcast_to_view(view, {
            "type": "revalidate",
            "path": path,
            "timestamp": utc_now().isoformat(),
        })

    def get_connection_count(self, view: str) -> int:
        return len(self.active_connections.get(view, []))

# Global view refresh manager instance
view_refresh_manager = ViewRefreshManager()

async def revalidate_path(*paths: str):
    for path in paths:
        await view_refresh_manager.revalidate_path(path)

# Router for WebSocket endpoints
router = APIRouter()

@router.websocket("/views/{view}")
async def websocket_endpoint(websocket: WebSocket, view: str):
    """WebSocket endpoint pages use to learn when to refresh"""
    if view not in VIEWS:
        await websocket.close(code=4004, reason="Unknown view")
        return

    await view_refresh_manager.connect(websocket, view)

    try:
        await view_refresh_manager.send_personal_message({
            "type": "connection",
            "view": view,
            "connection_count": view_refresh_manager.get_connection_count(view),
        }, websocket)

        # Keep connection alive and answer heartbeats
        while True:
            data = await websocket.receive_text()
            try:
                client_message = json.loads(data)
            except json.JSONDecodeError:
                logger.warning(f"Invalid JSON received from WebSocket: {data}")
                continue

            if not isinstance(client_message, dict):
                logger.warning(f"Ignoring non-object WebSocket message: {data}")
                continue

            if client_message.get("type") == "ping":
                await view_refresh_manager.send_personal_message({
                    "type": "pong",
                    "timestamp": client_message.get("timestamp"),
                }, websocket)

    except WebSocketDisconnect:
        pass
    finally:
        view_refresh_manager.disconnect(websocket, view)
