"""Notification history and live notification socket."""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status

from ..config import get_settings
from ..core.channels import INotificationChannel, user_topic
from ..core.logging import get_logger
from ..core.schemas.notifications import NotificationListResponse
from ..core.services import NotificationService
from ..middleware.auth import get_current_identity, optional_identity
from ..security import Identity
from .dependencies import get_channel, get_notification_service

logger = get_logger("api.notifications")

router = APIRouter(prefix="/notifications", tags=["notifications"])
ws_router = APIRouter(tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    cursor: Optional[int] = Query(None, description="Id of the last notification already seen"),
    limit: Optional[int] = Query(None, description="Page size"),
    identity: Identity = Depends(get_current_identity),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """List the caller's stored notifications, newest first."""
    return await notification_service.list_for_user(identity, cursor=cursor, limit=limit)


async def _forward(websocket: WebSocket, channel: INotificationChannel, topic: str) -> None:
    async for event in channel.listen(topic):
        await websocket.send_json(event)


async def _drain(websocket: WebSocket) -> None:
    # clients never send anything useful; this only notices the disconnect
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@ws_router.websocket("/ws/notifications")
async def notifications_socket(
    websocket: WebSocket,
    token: Optional[str] = Query(None),
    channel: INotificationChannel = Depends(get_channel),
):
    """Push the caller's notifications as they are published."""
    settings = get_settings()
    identity = optional_identity(websocket.cookies.get(settings.cookie_name) or token)
    if identity is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    topic = user_topic(identity.user_id)
    logger.info(f"Live notifications opened for {topic}")

    forward = asyncio.create_task(_forward(websocket, channel, topic))
    drain = asyncio.create_task(_drain(websocket))
    try:
        done, _ = await asyncio.wait({forward, drain}, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            error = task.exception()
            if error and not isinstance(error, WebSocketDisconnect):
                logger.warning(f"Live notifications for {topic} stopped: {error}")
    finally:
        for task in (forward, drain):
            task.cancel()
        await asyncio.gather(forward, drain, return_exceptions=True)
        logger.info(f"Live notifications closed for {topic}")
