"""
thermoreport/analytics/pagination.py
────────────────────────────────────
Splits table rows into printed pages.

An empty listing still yields one (empty) page so the table header and
page furniture are always rendered.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from config.settings import settings

T = TypeVar("T")


def paginate(rows: Sequence[T], page_size: int) -> list[list[T]]:
    if page_size <= 0:
        return [list(rows)]
    pages = [list(rows[i:i + page_size]) for i in range(0, len(rows), page_size)]
    return pages or [[]]


def paginate_with_observation(rows: Sequence[T]) -> list[list[T]]:
    """Tables carrying an observation column (taller rows)."""
    return paginate(rows, settings.ROWS_PER_PAGE_OBSERVATION)


def paginate_default(rows: Sequence[T]) -> list[list[T]]:
    return paginate(rows, settings.ROWS_PER_PAGE)
