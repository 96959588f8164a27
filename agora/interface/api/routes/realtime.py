"""Chatroom WebSocket endpoint.

Clients connect once and then only listen; every chatroom event is pushed
as one JSON text frame ``{"type": ..., "payload": ...}``.
"""

import logfire
from fastapi import APIRouter, WebSocket, status

from agora.adapter.realtime import ConnectionRegistry
from agora.domain.service import JWTService
from agora.interface.api.auth import extract_token

router = APIRouter(prefix="/chatroom", tags=["chatroom"])


@router.websocket("/ws")
async def chatroom_socket(websocket: WebSocket) -> None:
    """Authenticate, accept, and serve one connection until it closes.

    The token may come from the ``auth_token`` cookie, a bearer header, or
    the ``token`` query parameter (browsers cannot set WebSocket headers).
    """
    container = websocket.app.state.dishka_container
    jwt_service = await container.get(JWTService)
    registry = await container.get(ConnectionRegistry)

    token = websocket.query_params.get("token") or extract_token(
        websocket.cookies.get("auth_token"), websocket.headers.get("authorization")
    )
    user_id = jwt_service.get_user_id_from_token(token)

    try:
        await websocket.accept()
    except Exception as e:
        logfire.error("WebSocket accept failed", error=str(e))
        return

    if user_id is None:
        logfire.warn("WebSocket rejected: unauthenticated")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await registry.serve(user_id, websocket)
