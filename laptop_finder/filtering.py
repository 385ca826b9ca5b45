from __future__ import annotations

"""
Predicate filter: reduce the catalog to the items satisfying every active
criterion.

AND across criteria, OR within a multi-valued criterion. A criterion with
an empty set is unconstrained. Membership checks are exact (a request for
16 GB does not admit a 32 GB machine); the "at least" comparisons live in
the scorer only.
"""

from typing import Iterable, List

from loguru import logger

from .pipeline_types import FilterCriteria, InventoryItem


def matches_search_text(item: InventoryItem, text: str) -> bool:
    """Case-insensitive substring over brand, model, processor and purposes."""
    needle = text.lower()
    if needle in item.brand.lower():
        return True
    if needle in item.model.lower():
        return True
    if needle in item.processor.lower():
        return True
    return any(needle in p.lower() for p in item.purposes)


def matches_criteria(item: InventoryItem, criteria: FilterCriteria) -> bool:
    if criteria.search_text and not matches_search_text(item, criteria.search_text):
        return False

    if criteria.purposes and not any(p in criteria.purposes for p in item.purposes):
        return False

    if criteria.memory_sizes_gb and item.memory_gb not in criteria.memory_sizes_gb:
        return False

    if criteria.storage_types and item.storage_type not in criteria.storage_types:
        return False

    if criteria.storage_sizes_gb and item.storage_gb not in criteria.storage_sizes_gb:
        return False

    if criteria.screen_sizes_inches and item.screen_inches not in criteria.screen_sizes_inches:
        return False

    if criteria.brands and item.brand not in criteria.brands:
        return False

    # NaN bounds make this comparison false, so malformed prices match nothing.
    if not (criteria.price_min <= item.price <= criteria.price_max):
        return False

    return True


def filter_items(
    items: Iterable[InventoryItem],
    criteria: FilterCriteria,
) -> List[InventoryItem]:
    """Return the items passing every predicate, in input order."""
    items = list(items)
    kept = [item for item in items if matches_criteria(item, criteria)]
    logger.debug("Filter kept {} of {} items", len(kept), len(items))
    return kept
