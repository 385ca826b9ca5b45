from __future__ import annotations

from typing import Iterable, List

from .pipeline_types import ScoredItem, SortStrategy

"""
Ordering of scored items for presentation.

Three strategies:

* relevance         -- match score descending, then price ascending
* price-ascending   -- price only
* price-descending  -- price only

All sorts are stable: items that tie on every key keep their input order.
"""


class InvalidStrategy(ValueError):
    """Raised for a sort value that names no known strategy."""

    def __init__(self, value: object) -> None:
        self.value = value
        accepted = ", ".join(s.value for s in SortStrategy)
        super().__init__(f"Unknown sort strategy {value!r}; expected one of: {accepted}")


def rank_items(
    scored: Iterable[ScoredItem],
    strategy: SortStrategy = SortStrategy.RELEVANCE,
) -> List[ScoredItem]:
    """Return a new list ordered by ``strategy``."""
    if not isinstance(strategy, SortStrategy):
        try:
            strategy = SortStrategy(strategy)
        except ValueError:
            raise InvalidStrategy(strategy) from None

    items = list(scored)
    if strategy is SortStrategy.RELEVANCE:
        return sorted(items, key=lambda s: (-s.match_score, s.item.price))
    if strategy is SortStrategy.PRICE_ASCENDING:
        return sorted(items, key=lambda s: s.item.price)
    return sorted(items, key=lambda s: s.item.price, reverse=True)
