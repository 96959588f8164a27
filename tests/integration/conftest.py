"""Integration test configuration.

Integration tests need a running, migrated PostgreSQL database named by
``DATABASE__URL``; without it they are skipped.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(skip)
