from __future__ import annotations
"""
Mapping utilities to convert engine and store objects into API responses.

Centralises the mapping from InventoryItem / ScoredItem / ResultPage /
Inquiry into the Pydantic schemas in config, so the HTTP layer and the CLI
render the same shapes.
"""

import math
from typing import List

from .config import InquiryOut, Product, ScoredProduct, SearchResponse
from .pipeline_types import Inquiry, InventoryItem, ResultPage, ScoredItem

RUPEE = "₹"


def format_inr(amount: float) -> str:
    """
    Format a price with Indian digit grouping: 123456 -> '₹1,23,456'.

    Fractions are kept only when present (up to 2 places).
    """
    if amount is None or (isinstance(amount, float) and not math.isfinite(amount)):
        return f"{RUPEE}{amount}"

    negative = amount < 0
    rounded = round(abs(float(amount)), 2)
    whole = int(rounded)
    frac = rounded - whole

    digits = str(whole)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups: List[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    if frac > 0:
        digits += f"{frac:.2f}"[1:].rstrip("0")

    return f"{'-' if negative else ''}{RUPEE}{digits}"


def to_api_product(item: InventoryItem) -> Product:
    return Product(
        id=item.item_id,
        brand=item.brand,
        model=item.model,
        price=item.price,
        display_price=format_inr(item.price),
        memory_gb=item.memory_gb,
        storage_type=item.storage_type,
        storage_gb=item.storage_gb,
        processor=item.processor,
        purposes=list(item.purposes),
        screen_inches=item.screen_inches,
        graphics=item.graphics,
        images=list(item.images),
        description=item.description,
        availability=item.availability,
    )


def to_api_scored(scored: ScoredItem) -> ScoredProduct:
    return ScoredProduct(
        product=to_api_product(scored.item),
        match_score=scored.match_score,
        match_reasons=list(scored.reasons),
        is_best_match=scored.is_best_match,
    )


def page_to_response(page: ResultPage) -> SearchResponse:
    """Convert a ResultPage into the GET /api/products body."""
    return SearchResponse(
        items=[to_api_scored(s) for s in page.items],
        total_count=page.total_count,
        total_pages=page.total_pages,
        page=page.page,
        page_size=page.page_size,
    )


def to_api_inquiry(inquiry: Inquiry) -> InquiryOut:
    return InquiryOut(
        id=inquiry.inquiry_id,
        name=inquiry.name,
        phone=inquiry.phone,
        email=inquiry.email,
        message=inquiry.message,
        product_ids=list(inquiry.product_ids),
        created_at=inquiry.created_at,
    )
