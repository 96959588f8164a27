"""Unit tests for the chatroom WebSocket endpoint."""

import time
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from agora.adapter.realtime import ConnectionRegistry
from agora.domain.model import NewPostEvent
from agora.domain.service import JWTService
from agora.domain.value import UserId
from agora.interface.api.app import create_app
from tests.conftest import make_post
from tests.di import build_test_container


@pytest.fixture
def client():
    app = create_app(build_test_container())
    # Entering the client runs the lifespan, which closes the container on exit
    with TestClient(app) as client:
        yield client


def resolve(client: TestClient, dependency):
    return client.portal.call(client.app.state.dishka_container.get, dependency)


def wait_for_count(client: TestClient, registry: ConnectionRegistry, expected: int):
    """Poll until the registry holds ``expected`` connections."""
    count = None
    for _ in range(100):
        count = client.portal.call(registry.connection_count)
        if count == expected:
            return
        time.sleep(0.01)
    raise AssertionError(f"expected {expected} connections, found {count}")


class TestChatroomSocket:
    """Tests for /chatroom/ws."""

    def test_missing_token_closes_with_policy_violation(self, client):
        """Unauthenticated sockets are closed with 1008 and never registered."""
        registry = resolve(client, ConnectionRegistry)

        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/chatroom/ws") as websocket:
                websocket.receive_text()

        assert exc_info.value.code == 1008
        assert client.portal.call(registry.connection_count) == 0

    def test_invalid_token_closes_with_policy_violation(self, client):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/chatroom/ws?token=garbage") as websocket:
                websocket.receive_text()

        assert exc_info.value.code == 1008

    def test_connection_receives_broadcasts_until_it_leaves(self, client):
        """A valid socket is registered, gets events, and is removed on close."""
        # Arrange
        registry = resolve(client, ConnectionRegistry)
        jwt_service = resolve(client, JWTService)
        user_id = UserId(uuid4())
        token = jwt_service.create_token(user_id, "alice")
        event = NewPostEvent(payload=make_post())

        # Act & Assert
        with client.websocket_connect(f"/chatroom/ws?token={token}") as websocket:
            wait_for_count(client, registry, 1)
            assert client.portal.call(registry.connection_count, user_id) == 1

            delivered = client.portal.call(registry.broadcast, event)
            frame = websocket.receive_json()

            assert delivered == 1
            assert frame["type"] == "new_post"
            assert frame["payload"]["id"] == str(event.payload.id)

        wait_for_count(client, registry, 0)

    def test_bearer_header_is_accepted(self, client):
        registry = resolve(client, ConnectionRegistry)
        token = resolve(client, JWTService).create_token(UserId(uuid4()), "bob")

        with client.websocket_connect(
            "/chatroom/ws", headers={"Authorization": f"Bearer {token}"}
        ):
            wait_for_count(client, registry, 1)
