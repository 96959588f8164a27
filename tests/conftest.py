"""Test configuration and fixtures."""

import asyncio
from datetime import datetime, timedelta
from uuid import UUID, uuid4

import logfire
from starlette.websockets import WebSocketDisconnect

from agora.adapter.realtime import ConnectionRegistry
from agora.domain.model import Comment, Post, User
from agora.domain.repository import UserRepository
from agora.domain.value import (
    Author,
    CommentId,
    PostId,
    ReferenceKind,
    Role,
    UserId,
)

# Keep test output quiet; nothing is sent anywhere
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_user(name: str = "alice", role: Role = Role.USER, active: bool = True) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), name=name, role=role, active=active)


def make_post(
    author: User | None = None,
    content: str = "Hello, chatroom",
    minutes: int = 0,
) -> Post:
    """Build a post created ``minutes`` after ``BASE_TIME``."""
    author = author or make_user()
    created = BASE_TIME + timedelta(minutes=minutes)
    return Post(
        id=PostId(uuid4()),
        author=Author(id=author.id, name=author.name),
        content=content,
        created_at=created,
        updated_at=created,
    )


def make_comment(
    parent: Post | Comment,
    author: User | None = None,
    content: str = "A comment",
    minutes: int = 0,
) -> Comment:
    """Build a comment on a post, or a reply when ``parent`` is a comment."""
    author = author or make_user(name="bob")
    reference = ReferenceKind.POST if isinstance(parent, Post) else ReferenceKind.COMMENT
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        reference=reference,
        reference_id=UUID(str(parent.id)),
        author=Author(id=author.id, name=author.name),
        content=content,
        created_at=created,
        updated_at=created,
    )


class FakeConnection:
    """In-memory stand-in for a WebSocket connection.

    Records sent frames and closes. ``fail_sends`` makes every write raise;
    ``send_delay`` makes every write sleep first. ``disconnect()`` ends the
    read side the way a peer hang-up does.
    """

    def __init__(self, fail_sends: bool = False, send_delay: float = 0.0) -> None:
        self.sent: list[str] = []
        self.closed = False
        self.close_codes: list[int] = []
        self.fail_sends = fail_sends
        self.send_delay = send_delay
        self._inbound: asyncio.Queue[str | None] = asyncio.Queue()

    async def send_text(self, data: str) -> None:
        if self.send_delay:
            await asyncio.sleep(self.send_delay)
        if self.fail_sends:
            raise RuntimeError("socket closed")
        self.sent.append(data)

    async def receive_text(self) -> str:
        message = await self._inbound.get()
        if message is None:
            raise WebSocketDisconnect(code=1000)
        return message

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        self.closed = True
        self.close_codes.append(code)

    def push(self, message: str) -> None:
        self._inbound.put_nowait(message)

    def disconnect(self) -> None:
        self._inbound.put_nowait(None)


async def listen(container) -> FakeConnection:
    """Register a fake client on the container's registry and return it."""
    registry = await container.get(ConnectionRegistry)
    connection = FakeConnection()
    await registry.register(make_user(name="listener").id, connection)
    return connection


async def seed_user(container, **kwargs) -> User:
    """Store a user in the container's user repository."""
    return await (await container.get(UserRepository)).save(make_user(**kwargs))
