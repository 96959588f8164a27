"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def ensure_unique_likes(liked_user_ids: list) -> list:
    """Reject a liked-by set that names the same user twice."""
    if len(set(liked_user_ids)) != len(liked_user_ids):
        raise ValueError("A user can like an item at most once")
    return liked_user_ids
