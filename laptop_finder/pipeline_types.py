"""Typed containers shared across pipeline modules."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class InventoryItem:
    """A single laptop listing as held by the catalog store."""

    item_id: str
    brand: str
    model: str
    price: float
    memory_gb: int
    storage_type: str
    storage_gb: int
    processor: str
    purposes: Tuple[str, ...]
    screen_inches: float
    graphics: Optional[str] = None
    images: Tuple[str, ...] = ()
    description: str = ""
    availability: str = "In Stock"


@dataclass(frozen=True)
class FilterCriteria:
    """
    Strict, typed view of a buyer's preferences.

    Empty sets mean "unconstrained" on that axis. Numeric sets may contain NaN
    for malformed input; NaN never matches anything.
    """

    purposes: FrozenSet[str] = frozenset()
    memory_sizes_gb: FrozenSet[float] = frozenset()
    storage_types: FrozenSet[str] = frozenset()
    storage_sizes_gb: FrozenSet[float] = frozenset()
    screen_sizes_inches: FrozenSet[float] = frozenset()
    brands: FrozenSet[str] = frozenset()
    price_min: float = 0.0
    price_max: float = math.inf
    search_text: Optional[str] = None


class SortStrategy(str, Enum):
    RELEVANCE = "relevance"
    PRICE_ASCENDING = "price-ascending"
    PRICE_DESCENDING = "price-descending"


@dataclass(frozen=True)
class ScoredItem:
    """An item plus its per-query relevance signals."""

    item: InventoryItem
    match_score: int
    reasons: Tuple[str, ...] = ()
    is_best_match: bool = False


@dataclass(frozen=True)
class ResultPage:
    items: Tuple[ScoredItem, ...]
    total_count: int
    total_pages: int
    page: int
    page_size: int


@dataclass(frozen=True)
class Inquiry:
    """A buyer's request for a quote on one or more items."""

    inquiry_id: str
    name: str
    phone: str
    email: str
    product_ids: Tuple[str, ...]
    created_at: str
    message: Optional[str] = None


@dataclass
class CatalogStats:
    total_products: int = 0
    total_inquiries: int = 0
    recent_inquiries: int = 0
