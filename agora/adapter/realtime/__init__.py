"""Realtime fan-out over WebSocket connections."""

from .registry import Connection, ConnectionRegistry

__all__ = ["Connection", "ConnectionRegistry"]
