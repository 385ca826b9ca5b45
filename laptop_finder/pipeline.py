from __future__ import annotations

"""
The search pipeline shared by every caller.

raw query -> normalize -> filter -> score -> rank -> paginate

The HTTP API and the local CLI both go through :func:`search`, so a
preview computed on one side and the authoritative answer from the other
cannot drift apart. The function is pure: it reads the item snapshot it
is given and never mutates it.
"""

from typing import Optional, Sequence, Union

from loguru import logger

from .config import DEFAULT_PAGE_SIZE
from .filtering import filter_items
from .normalize import RawQuery, normalize_query, parse_strategy
from .pagination import paginate
from .pipeline_types import InventoryItem, ResultPage, SortStrategy
from .ranking import rank_items
from .scoring import score_items


def search(
    items: Sequence[InventoryItem],
    raw_query: Optional[RawQuery] = None,
    strategy: Union[SortStrategy, str, None] = SortStrategy.RELEVANCE,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ResultPage:
    """
    Run one query against an item snapshot.

    ``strategy`` may be a SortStrategy or any accepted spelling of one;
    unknown values raise InvalidStrategy before any work is done.
    """
    if not isinstance(strategy, SortStrategy):
        strategy = parse_strategy(strategy)

    criteria = normalize_query(raw_query)
    matched = filter_items(items, criteria)
    ranked = rank_items(score_items(matched, criteria), strategy)
    page_items, total, pages = paginate(ranked, page, page_size)

    logger.debug(
        "search: {} matches, strategy={}, page {}/{}",
        total, strategy.value, page, pages,
    )
    return ResultPage(
        items=page_items,
        total_count=total,
        total_pages=pages,
        page=page,
        page_size=page_size,
    )
