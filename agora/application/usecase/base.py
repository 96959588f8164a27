"""Base use case."""

from abc import ABC, abstractmethod
from math import ceil
from typing import Any
from uuid import UUID

from agora.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, field: str) -> UUID:
    """Parse an identifier taken from a request.

    Raises:
        ValidationError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value!r}") from e


def count_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time.

    An unpaginated listing (``limit == 0``) is a single page when non-empty.
    """
    if limit <= 0:
        return 1 if total else 0
    return ceil(total / limit)
