# dhakahome/domain/pagination.py
from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def page_count(total: int, limit: int) -> int:
    """ceil(total / limit), never below 1."""
    if total <= 0 or limit <= 0:
        return 1
    return max(1, math.ceil(total / limit))


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), max(pages, 1))


def paginate(rows: Sequence[T], page: int, limit: int) -> tuple[list[T], int, int]:
    """
    Slice `rows` for a 1-based page.

    Returns (items, clamped_page, pages). Slice bounds are clamped to [0, total].
    """
    limit = limit if limit > 0 else 1
    total = len(rows)
    pages = page_count(total, limit)
    page = clamp_page(page, pages)

    start = min((page - 1) * limit, total)
    end = min(start + limit, total)
    return list(rows[start:end]), page, pages
