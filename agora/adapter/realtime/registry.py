"""Connection registry and broadcaster.

Holds every live WebSocket connection, keyed by the authenticated user that
opened it, and pushes each chatroom event to all of them.

Locking discipline: one ``asyncio.Lock`` guards the map. Registration and
removal hold it while mutating; a broadcast holds it only long enough to
snapshot the current connections and then writes outside the lock, so a slow
client can never hold up registration or another broadcast. Every write is
bounded by ``send_timeout``.
"""

import asyncio
from typing import Protocol

import logfire
from starlette.websockets import WebSocketDisconnect

from agora.adapter.error import ConnectionSendError
from agora.domain.model.event import DomainEvent
from agora.domain.service.event_publisher import EventPublisher
from agora.domain.value import UserId


class Connection(Protocol):
    """The part of a duplex connection the registry uses.

    ``starlette.websockets.WebSocket`` satisfies it.
    """

    async def send_text(self, data: str) -> None: ...

    async def receive_text(self) -> str: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


class ConnectionRegistry(EventPublisher):
    """Live connections per user, with best-effort fan-out.

    Delivery is best effort. A write that exceeds ``send_timeout`` is
    cancelled, which can leave a partial frame on that socket; the
    connection stays registered and its read loop is left to notice the
    broken peer. Clients must tolerate a dropped or malformed frame.
    """

    def __init__(self, send_timeout: float) -> None:
        """Initialize an empty registry.

        Args:
            send_timeout: Upper bound in seconds for one write to one connection
        """
        self.send_timeout = send_timeout
        self._connections: dict[UserId, list[Connection]] = {}
        self._lock = asyncio.Lock()

    async def register(self, user_id: UserId, connection: Connection) -> None:
        """Add a connection under ``user_id``.

        Registering the same connection twice stores it twice.
        """
        async with self._lock:
            self._connections.setdefault(user_id, []).append(connection)
            count = len(self._connections[user_id])

        logfire.info(
            "Connection registered", user_id=str(user_id), user_connections=count
        )

    async def unregister(self, user_id: UserId, connection: Connection) -> None:
        """Remove one connection (matched by identity) and close it.

        The user's entry is dropped once its last connection is gone. Unknown
        connections are ignored.
        """
        async with self._lock:
            connections = self._connections.get(user_id)
            if connections is None:
                return

            index = next(
                (i for i, c in enumerate(connections) if c is connection), None
            )
            if index is None:
                return

            del connections[index]
            if not connections:
                del self._connections[user_id]
            remaining = len(connections)

        try:
            await connection.close()
        except Exception as e:
            # Peer already gone; the transport is closed either way
            logfire.debug("Connection close failed", user_id=str(user_id), error=str(e))

        logfire.info(
            "Connection unregistered", user_id=str(user_id), user_connections=remaining
        )

    async def publish(self, event: DomainEvent) -> None:
        """Broadcast an event to every live connection."""
        await self.broadcast(event)

    async def broadcast(self, event: DomainEvent) -> int:
        """Serialize ``event`` once and send it to every live connection.

        A failed or timed-out write is logged and skipped; the connection
        stays registered until its own read loop ends.

        Args:
            event: Event to deliver

        Returns:
            Number of connections the event was delivered to
        """
        frame = event.to_wire()

        async with self._lock:
            targets = [
                (user_id, connection)
                for user_id, connections in self._connections.items()
                for connection in connections
            ]

        with logfire.span(
            "connection_registry.broadcast",
            event_type=event.type.value,
            connections=len(targets),
        ):
            outcomes = await asyncio.gather(
                *(self._send(user_id, connection, frame) for user_id, connection in targets),
                return_exceptions=True,
            )

            delivered = 0
            for outcome in outcomes:
                if isinstance(outcome, ConnectionSendError):
                    logfire.warn(
                        "Broadcast send failed",
                        event_type=event.type.value,
                        user_id=outcome.user_id,
                        reason=outcome.reason,
                    )
                elif isinstance(outcome, BaseException):
                    logfire.error(
                        "Broadcast send crashed",
                        event_type=event.type.value,
                        error=str(outcome),
                    )
                else:
                    delivered += 1

            return delivered

    async def _send(self, user_id: UserId, connection: Connection, frame: str) -> None:
        try:
            await asyncio.wait_for(connection.send_text(frame), timeout=self.send_timeout)
        except asyncio.TimeoutError as e:
            raise ConnectionSendError(str(user_id), "timed out") from e
        except Exception as e:
            raise ConnectionSendError(str(user_id), str(e) or type(e).__name__) from e

    async def read_loop(self, user_id: UserId, connection: Connection) -> None:
        """Consume inbound frames until the peer goes away, then unregister.

        Inbound frames carry no commands; the loop exists to notice
        disconnects.
        """
        try:
            while True:
                await connection.receive_text()
        except WebSocketDisconnect as e:
            logfire.info("Connection closed by peer", user_id=str(user_id), code=e.code)
        except Exception as e:
            logfire.warn("Connection read failed", user_id=str(user_id), error=str(e))
        finally:
            await self.unregister(user_id, connection)

    async def serve(self, user_id: UserId, connection: Connection) -> None:
        """Register an accepted connection and block until it closes."""
        await self.register(user_id, connection)
        await self.read_loop(user_id, connection)

    async def connection_count(self, user_id: UserId | None = None) -> int:
        """Count live connections, overall or for one user."""
        async with self._lock:
            if user_id is not None:
                return len(self._connections.get(user_id, []))
            return sum(len(c) for c in self._connections.values())

    async def close_all(self) -> None:
        """Close every connection; used at shutdown."""
        async with self._lock:
            targets = [
                (user_id, connection)
                for user_id, connections in self._connections.items()
                for connection in connections
            ]
            self._connections.clear()

        for user_id, connection in targets:
            try:
                await connection.close(code=1001)
            except Exception as e:
                logfire.debug(
                    "Connection close failed", user_id=str(user_id), error=str(e)
                )
