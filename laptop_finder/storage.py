from __future__ import annotations

"""
In-memory catalog store.

Owns every mutation of the item list and the inquiry log. Readers get an
immutable snapshot (a tuple of frozen items) so a search running against
one snapshot is unaffected by concurrent admin edits.
"""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from .config import RECENT_INQUIRY_HOURS
from .constants import DEFAULT_AVAILABILITY
from .pipeline_types import CatalogStats, Inquiry, InventoryItem

_TUPLE_FIELDS = ("purposes", "images", "product_ids")


def _freeze(fields: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(fields)
    for name in _TUPLE_FIELDS:
        if name in out and out[name] is not None:
            out[name] = tuple(out[name])
    return out


class CatalogStore:
    def __init__(self, items: Iterable[InventoryItem] = ()) -> None:
        self._lock = threading.Lock()
        self._items: Dict[str, InventoryItem] = {}
        self._inquiries: List[Inquiry] = []
        for item in items:
            self._items[item.item_id] = item

    # ---------------------------
    # Items
    # ---------------------------

    def list(self) -> Tuple[InventoryItem, ...]:
        with self._lock:
            return tuple(self._items.values())

    def by_id(self, item_id: str) -> Optional[InventoryItem]:
        with self._lock:
            return self._items.get(item_id)

    def create(self, fields: Mapping[str, Any]) -> InventoryItem:
        data = _freeze(fields)
        data.setdefault("availability", DEFAULT_AVAILABILITY)
        item = InventoryItem(item_id=str(uuid.uuid4()), **data)
        with self._lock:
            self._items[item.item_id] = item
        logger.info("Created product {} ({} {})", item.item_id, item.brand, item.model)
        return item

    def update(self, item_id: str, changes: Mapping[str, Any]) -> Optional[InventoryItem]:
        """Apply a partial update; returns None if the item does not exist."""
        data = _freeze(changes)
        data.pop("item_id", None)
        with self._lock:
            existing = self._items.get(item_id)
            if existing is None:
                return None
            updated = replace(existing, **data)
            self._items[item_id] = updated
        logger.info("Updated product {}: {}", item_id, sorted(data))
        return updated

    def delete(self, item_id: str) -> bool:
        with self._lock:
            removed = self._items.pop(item_id, None)
        if removed is not None:
            logger.info("Deleted product {}", item_id)
        return removed is not None

    # ---------------------------
    # Inquiries
    # ---------------------------

    def create_inquiry(self, fields: Mapping[str, Any]) -> Inquiry:
        data = _freeze(fields)
        inquiry = Inquiry(
            inquiry_id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc).isoformat(),
            **data,
        )
        with self._lock:
            self._inquiries.append(inquiry)
        logger.info("Recorded inquiry {} for {} products", inquiry.inquiry_id, len(inquiry.product_ids))
        return inquiry

    def list_inquiries(self) -> List[Inquiry]:
        """All inquiries, newest first."""
        with self._lock:
            inquiries = list(self._inquiries)
        return sorted(reversed(inquiries), key=lambda i: i.created_at, reverse=True)

    def count_recent_inquiries(
        self,
        window: timedelta = timedelta(hours=RECENT_INQUIRY_HOURS),
        now: Optional[datetime] = None,
    ) -> int:
        now = now or datetime.now(timezone.utc)
        cutoff = now - window
        with self._lock:
            return sum(1 for i in self._inquiries if datetime.fromisoformat(i.created_at) > cutoff)

    def stats(self) -> CatalogStats:
        with self._lock:
            n_items = len(self._items)
            n_inquiries = len(self._inquiries)
        return CatalogStats(
            total_products=n_items,
            total_inquiries=n_inquiries,
            recent_inquiries=self.count_recent_inquiries(),
        )
