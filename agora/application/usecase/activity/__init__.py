"""Activity use cases."""

from .recent_activity import (
    GetRecentActivityTotalResponse,
    GetRecentActivityTotalUseCase,
)

__all__ = ["GetRecentActivityTotalResponse", "GetRecentActivityTotalUseCase"]
