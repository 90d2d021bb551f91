import json
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from symptom_triage.core import ErrorEvent, QuestionEvent, ScreeningEvent, VerdictEvent
from symptom_triage.core.error_mapping import build_error_payload, build_request_error_payload
from symptom_triage.core.errors import InvalidSessionStateError, MalformedAnswerError
from symptom_triage.core.logging_utils import clear_log_context, log_event, set_session_id, set_turn_id
from symptom_triage.engine import Verdict
from symptom_triage.session import Session, SessionController


def _is_websocket_closed_error(err: BaseException) -> bool:
    message = str(err)
    known_markers = (
        "Unexpected ASGI message 'websocket.send'",
        "Unexpected ASGI message 'websocket.close'",
        "disconnect message has been received",
        "WebSocket is not connected",
    )
    return any(marker in message for marker in known_markers)


async def websocket_messages(
    websocket: WebSocket,
    component: str,
) -> AsyncIterator[dict[str, Any] | None]:
    """Yield decoded JSON object messages; None for anything that is not one."""
    try:
        while True:
            message = await websocket.receive()
            if message.get("type") == "websocket.disconnect":
                log_event(
                    component=component,
                    event="ws_disconnected",
                    details={"source": "receive", "reason": "websocket_disconnect"},
                )
                return
            text_data = message.get("text")
            if text_data in {"PING", "PONG"}:
                continue
            if text_data is None:
                yield None
                continue
            try:
                parsed = json.loads(text_data)
            except ValueError:
                yield None
                continue
            yield parsed if isinstance(parsed, dict) else None
    except WebSocketDisconnect:
        log_event(
            component=component,
            event="ws_disconnected",
            details={"source": "receive", "reason": "websocket_disconnect"},
        )
        return
    except RuntimeError as err:
        if "disconnect message has been received" in str(err):
            log_event(
                component=component,
                event="ws_disconnected",
                details={"source": "receive", "reason": "disconnect_message_received"},
            )
            return
        log_event(
            component=component,
            event="ws_receive_failed",
            level="ERROR",
            details={"error": str(err)},
        )
        return


def _question_event(session: Session) -> QuestionEvent:
    question = session.catalog.question_at(session.cursor)
    return QuestionEvent(
        question=question.payload,
        answered=len(session.answers),
        total=len(session.catalog),
    )


async def screening_events(
    controller: SessionController,
    session: Session,
    messages: AsyncIterator[dict[str, Any] | None],
) -> AsyncIterator[ScreeningEvent]:
    """Drive one session from client messages, yielding what to send back."""
    yield _question_event(session)

    async for message in messages:
        if message is None:
            yield ErrorEvent(build_request_error_payload("Messages must be JSON objects."))
            continue

        kind = message.get("type")
        if kind == "answer":
            if "value" not in message:
                yield ErrorEvent(build_request_error_payload("Answer messages require a 'value'."))
                continue
            try:
                result = controller.submit_answer(session, message["value"])
            except (MalformedAnswerError, InvalidSessionStateError) as err:
                yield ErrorEvent(build_error_payload(err))
                continue
            set_turn_id(len(session.answers))
            if isinstance(result, Verdict):
                yield VerdictEvent(verdict=result.payload)
            else:
                yield _question_event(session)
        elif kind == "reset":
            session = controller.reset(session)
            set_turn_id(None)
            yield _question_event(session)
        else:
            yield ErrorEvent(
                build_request_error_payload(
                    "Unsupported message type.",
                    details=f"type={kind!r}",
                )
            )


async def run_websocket_session(
    *,
    websocket: WebSocket,
    component: str,
    controller: SessionController,
    send_event: Callable[[WebSocket, ScreeningEvent], Awaitable[None]],
    owner_id: str | None = None,
) -> None:
    """Run one websocket screening session with shared lifecycle and cleanup."""
    await websocket.accept()
    session = controller.start(owner_id=owner_id)
    set_session_id(session.session_id)
    set_turn_id(None)
    log_event(component=component, event="ws_connected")

    try:
        input_stream = websocket_messages(websocket, component)
        async for event in screening_events(controller, session, input_stream):
            try:
                await send_event(websocket, event)
            except WebSocketDisconnect:
                log_event(
                    component=component,
                    event="ws_disconnected",
                    details={"source": "send", "reason": "websocket_disconnect"},
                )
                break
            except RuntimeError as err:
                if _is_websocket_closed_error(err):
                    log_event(
                        component=component,
                        event="ws_disconnected",
                        details={
                            "source": "send",
                            "reason": "send_on_closed_socket",
                            "error": str(err),
                        },
                    )
                    break
                raise
    except Exception as err:
        log_event(
            component=component,
            event="ws_session_failed",
            level="ERROR",
            details={"error": str(err)},
        )
    finally:
        try:
            await websocket.close()
        except Exception as err:
            # Client already gone; closing again is not an error for the session.
            log_event(
                component=component,
                event="ws_close_skipped",
                level="DEBUG",
                details={"error": str(err)},
            )
        clear_log_context()
