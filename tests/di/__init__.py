"""Test doubles for swappable DI components."""

from tests.di.container import build_test_container
from tests.di.persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
