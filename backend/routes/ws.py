from fastapi import APIRouter, Depends, WebSocket

from routes.http import get_triage_services
from symptom_triage.core import ScreeningEvent

from .ws_shared import run_websocket_session

router = APIRouter()


async def _send_screening_event(websocket: WebSocket, event: ScreeningEvent) -> None:
    await websocket.send_json(event.payload)


@router.websocket("/ws/screening")
async def screening_websocket(
    websocket: WebSocket,
    owner_id: str | None = None,
    services: dict = Depends(get_triage_services),
) -> None:
    await run_websocket_session(
        websocket=websocket,
        component="websocket_screening",
        controller=services["controller"],
        send_event=_send_screening_event,
        owner_id=owner_id,
    )
