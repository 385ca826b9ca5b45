from __future__ import annotations

from math import ceil
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")


def total_pages(total_count: int, page_size: int) -> int:
    if page_size < 1 or total_count <= 0:
        return 0
    return ceil(total_count / page_size)


def paginate(ranked: Sequence[T], page: int, page_size: int) -> Tuple[Tuple[T, ...], int, int]:
    """
    Slice a 1-based page out of ``ranked``.

    Returns (page_items, total_count, total_pages). Pages outside
    1..total_pages and non-positive sizes give an empty slice, never an error.
    """
    total = len(ranked)
    if page < 1 or page_size < 1:
        return (), total, total_pages(total, page_size)
    start = (page - 1) * page_size
    end = start + page_size
    return tuple(ranked[start:end]), total, total_pages(total, page_size)
