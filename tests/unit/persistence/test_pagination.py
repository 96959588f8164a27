"""Unit tests for page arithmetic."""

import pytest

from agora.application.usecase.base import count_pages
from agora.persistence.pagination import page_window


class TestPageWindow:
    """Tests for page_window."""

    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (1, 10, (0, 10)),
            (2, 10, (10, 10)),
            (3, 5, (10, 5)),
            (0, 10, (0, 10)),
        ],
    )
    def test_pages_are_one_based(self, page, limit, expected):
        assert page_window(page, limit) == expected

    @pytest.mark.parametrize(("page", "limit"), [(0, 0), (3, 0), (1, -1)])
    def test_non_positive_limit_means_everything(self, page, limit):
        assert page_window(page, limit) is None


class TestCountPages:
    """Tests for count_pages."""

    @pytest.mark.parametrize(
        ("total", "limit", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (5, 0, 1), (0, 0, 0)],
    )
    def test_count_pages(self, total, limit, expected):
        assert count_pages(total, limit) == expected
