from __future__ import annotations

"""
Match scoring: an integer relevance signal plus human-readable reasons for
each item, given the buyer's criteria.

The scorer is independent of filtering and can be run on any item, but its
output is only meaningful for items that passed the filter. Scores may be
negative (an over-budget item with nothing else in its favour scores -1).
"""

import math
from typing import Iterable, List, Tuple

from . import config
from .pipeline_types import FilterCriteria, InventoryItem, ScoredItem


def _max_requested(values: Iterable[float]) -> float:
    """Largest requested value; NaN if any requested value is NaN."""
    values = list(values)
    if any(math.isnan(v) for v in values):
        return math.nan
    return max(values)


def score_item(item: InventoryItem, criteria: FilterCriteria) -> Tuple[int, List[str]]:
    """
    Compute (score, reasons) for one item.

    Rules are applied in a fixed order and summed:
      purposes        +3 per shared tag        "Matches <tags>"
      memory          +2 if >= max requested   "Sufficient RAM"
      storage type    +2 if requested
      storage size    +1 if >= max requested
      brand           +1 if requested          "Preferred brand"
      price           -1 if over budget; "Within budget" if inside the range
    """
    score = 0
    reasons: List[str] = []

    if criteria.purposes:
        matched = [p for p in item.purposes if p in criteria.purposes]
        if matched:
            score += config.PURPOSE_MATCH_POINTS * len(matched)
            reasons.append(f"Matches {', '.join(matched)}")

    if criteria.memory_sizes_gb:
        if item.memory_gb >= _max_requested(criteria.memory_sizes_gb):
            score += config.SUFFICIENT_RAM_POINTS
            reasons.append("Sufficient RAM")

    if criteria.storage_types and item.storage_type in criteria.storage_types:
        score += config.STORAGE_TYPE_POINTS

    if criteria.storage_sizes_gb:
        if item.storage_gb >= _max_requested(criteria.storage_sizes_gb):
            score += config.SUFFICIENT_STORAGE_POINTS

    if criteria.brands and item.brand in criteria.brands:
        score += config.PREFERRED_BRAND_POINTS
        reasons.append("Preferred brand")

    # Independent checks; an item priced below price_min gets neither.
    if item.price > criteria.price_max:
        score -= config.OVER_BUDGET_PENALTY
    if criteria.price_min <= item.price <= criteria.price_max:
        reasons.append("Within budget")

    return score, reasons


def is_best_match(score: int) -> bool:
    return score > config.BEST_MATCH_THRESHOLD


def score_items(
    items: Iterable[InventoryItem],
    criteria: FilterCriteria,
) -> List[ScoredItem]:
    """Attach match signals to every item, preserving input order."""
    scored: List[ScoredItem] = []
    for item in items:
        score, reasons = score_item(item, criteria)
        scored.append(
            ScoredItem(
                item=item,
                match_score=score,
                reasons=tuple(reasons),
                is_best_match=is_best_match(score),
            )
        )
    return scored
