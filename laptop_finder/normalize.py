from __future__ import annotations

"""
Query normalisation: the single place where loosely-typed request input
turns into a strict FilterCriteria.

Raw queries come from URL parameters or CLI flags, so every value may be
absent, a single string, or a list of strings. Nothing untyped should get
past this module.

Public helpers:

* parse_number(token) -> float
    Lenient numeric parse; malformed tokens become NaN rather than raising.

* normalize_query(raw) -> FilterCriteria
    Build the filter criteria consumed by filtering and scoring.

* parse_strategy(value) -> SortStrategy
    Resolve a sort value, rejecting unknown ones with InvalidStrategy.

* parse_paging(raw, default_size) -> (page, page_size)
    Lenient page/limit parse; malformed values yield an empty page.
"""

import math
import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from .config import DEFAULT_PAGE_SIZE
from .pipeline_types import FilterCriteria, SortStrategy
from .ranking import InvalidStrategy

RawValue = Union[None, str, Sequence[str]]
RawQuery = Mapping[str, RawValue]

# ---------------------------------------------------------------------------
# Query parameter names
# ---------------------------------------------------------------------------

PURPOSE_KEY = "purpose"
RAM_KEY = "ram"
STORAGE_TYPE_KEY = "storageType"
STORAGE_SIZE_KEY = "storageSize"
SCREEN_SIZE_KEY = "screenSize"
BRAND_KEY = "brand"
MIN_PRICE_KEY = "minPrice"
MAX_PRICE_KEY = "maxPrice"
SEARCH_KEY = "q"
SORT_KEY = "sort"
PAGE_KEY = "page"
LIMIT_KEY = "limit"

FILTER_KEYS = (
    PURPOSE_KEY,
    RAM_KEY,
    STORAGE_TYPE_KEY,
    STORAGE_SIZE_KEY,
    SCREEN_SIZE_KEY,
    BRAND_KEY,
    MIN_PRICE_KEY,
    MAX_PRICE_KEY,
    SEARCH_KEY,
)

# Storefront spellings accepted alongside the canonical strategy names.
STRATEGY_ALIASES = {
    "match": SortStrategy.RELEVANCE,
    "price-low": SortStrategy.PRICE_ASCENDING,
    "price-high": SortStrategy.PRICE_DESCENDING,
}

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")

# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------


def _as_list(value: RawValue) -> List[str]:
    """Coerce an absent / scalar / repeated value into a list of strings.

    Empty strings are dropped, so ``""``, ``[]`` and ``[""]`` (what a blank
    form field arrives as) all count as absent.
    """
    if value is None:
        return []
    if isinstance(value, str):
        values = [value]
    elif isinstance(value, (list, tuple, set, frozenset)):
        values = [str(v) for v in value]
    else:
        values = [str(value)]
    return [v for v in values if v]


def _first(value: RawValue) -> Optional[str]:
    values = _as_list(value)
    return values[0] if values else None


def parse_number(token: Any) -> float:
    """Parse a numeric token the way the storefront always has.

    * surrounding whitespace is ignored and an empty token is 0
    * plain decimals and exponents, ``Infinity`` and 0x/0o/0b literals parse
    * anything else is NaN; NaN fails every comparison downstream
    """
    if token is None:
        return math.nan
    if isinstance(token, bool):
        return float(token)
    if isinstance(token, (int, float)):
        return float(token)

    text = str(token).strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.match(text):
        return float(text)
    m = _PREFIXED_RE.match(text)
    if m:
        return float(int(text, 0))
    m = _INFINITY_RE.match(text)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf
    return math.nan


def _numbers(value: RawValue) -> frozenset:
    return frozenset(parse_number(v) for v in _as_list(value))


def _strings(value: RawValue) -> frozenset:
    return frozenset(_as_list(value))


def _bound(value: RawValue, default: float) -> float:
    token = _first(value)
    if token is None:
        return default
    return parse_number(token)


def _to_page_int(token: Optional[str], default: int) -> int:
    if token is None:
        return default
    num = parse_number(token)
    if math.isnan(num) or math.isinf(num):
        return 0
    return int(num)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_query(raw: Optional[RawQuery]) -> FilterCriteria:
    """Turn a raw query mapping into FilterCriteria.

    Never raises for malformed values: an unparseable number simply becomes
    NaN and excludes every item on that axis.
    """
    raw = raw or {}
    search = _first(raw.get(SEARCH_KEY))
    return FilterCriteria(
        purposes=_strings(raw.get(PURPOSE_KEY)),
        memory_sizes_gb=_numbers(raw.get(RAM_KEY)),
        storage_types=_strings(raw.get(STORAGE_TYPE_KEY)),
        storage_sizes_gb=_numbers(raw.get(STORAGE_SIZE_KEY)),
        screen_sizes_inches=_numbers(raw.get(SCREEN_SIZE_KEY)),
        brands=_strings(raw.get(BRAND_KEY)),
        price_min=_bound(raw.get(MIN_PRICE_KEY), 0.0),
        price_max=_bound(raw.get(MAX_PRICE_KEY), math.inf),
        search_text=search or None,
    )


def parse_strategy(value: RawValue) -> SortStrategy:
    """Resolve a sort value; absent means relevance, unknown is rejected."""
    token = _first(value)
    if token is None:
        return SortStrategy.RELEVANCE
    if token in STRATEGY_ALIASES:
        return STRATEGY_ALIASES[token]
    try:
        return SortStrategy(token)
    except ValueError:
        raise InvalidStrategy(token) from None


def parse_paging(
    raw: Optional[RawQuery],
    default_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[int, int]:
    """Return (page, page_size) from ``page`` / ``limit``; malformed -> 0."""
    raw = raw or {}
    page = _to_page_int(_first(raw.get(PAGE_KEY)), 1)
    size = _to_page_int(_first(raw.get(LIMIT_KEY)), default_size)
    return page, size
