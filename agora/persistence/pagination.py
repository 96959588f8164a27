"""Page arithmetic shared by repository implementations."""

from typing import Optional, Tuple


def page_window(page: int, limit: int) -> Optional[Tuple[int, int]]:
    """Translate a 1-based page request into ``(offset, limit)``.

    A non-positive ``limit`` means "everything, unpaginated" and yields None.
    Page numbers below 1 are read as the first page.
    """
    if limit <= 0:
        return None
    return (max(page, 1) - 1) * limit, limit
