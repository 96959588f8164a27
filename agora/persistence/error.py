"""Translation of driver failures into domain errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from agora.domain.error import StoreError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as ``StoreError``.

    Args:
        operation: Repository operation name, used in the log and message
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Store operation failed", operation=operation, error=str(e))
        raise StoreError(f"{operation} failed") from e
