from __future__ import annotations

from typing import Iterable, List

from .config import SIMILAR_LIMIT, SIMILAR_PRICE_WINDOW
from .pipeline_types import InventoryItem


def is_similar(candidate: InventoryItem, target: InventoryItem) -> bool:
    """Shares a purpose, or the brand, or sits within the price window."""
    if any(p in target.purposes for p in candidate.purposes):
        return True
    if candidate.brand == target.brand:
        return True
    return abs(candidate.price - target.price) < SIMILAR_PRICE_WINDOW


def similar_items(
    target: InventoryItem,
    items: Iterable[InventoryItem],
    limit: int = SIMILAR_LIMIT,
) -> List[InventoryItem]:
    """
    Items a buyer looking at ``target`` may also consider, in catalog order.
    The target itself is never included.
    """
    out: List[InventoryItem] = []
    for item in items:
        if len(out) >= limit:
            break
        if item.item_id == target.item_id:
            continue
        if is_similar(item, target):
            out.append(item)
    return out
