from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
CATALOG_SEED_PATH = Path(
    os.getenv("LAPTOP_FINDER_CATALOG_PATH", str(DATA_DIR / "catalog_seed.json"))
)


# ---------------------------
# Admin
# ---------------------------

ADMIN_PASSWORD = os.getenv("LAPTOP_FINDER_ADMIN_PASSWORD", "admin123")


# ---------------------------
# Result size policy
# ---------------------------

DEFAULT_PAGE_SIZE = int(os.getenv("LAPTOP_FINDER_PAGE_SIZE", "8"))


# ---------------------------
# Match scoring weights
# ---------------------------

PURPOSE_MATCH_POINTS = 3      # per shared usage tag
SUFFICIENT_RAM_POINTS = 2
STORAGE_TYPE_POINTS = 2
SUFFICIENT_STORAGE_POINTS = 1
PREFERRED_BRAND_POINTS = 1
OVER_BUDGET_PENALTY = 1

BEST_MATCH_THRESHOLD = 5      # score strictly above this earns the badge


# ---------------------------
# Similar products
# ---------------------------

SIMILAR_PRICE_WINDOW = 20_000  # strictly less than, same currency unit as price
SIMILAR_LIMIT = 4

RECENT_INQUIRY_HOURS = 24


# ---------------------------
# Quick presets: name -> (raw query, sort)
# ---------------------------

PRESETS: Dict[str, Dict[str, object]] = {
    "budget": {
        "query": {"maxPrice": "50000"},
        "sort": "price-ascending",
    },
    "gaming": {
        "query": {"purpose": ["Gaming"], "ram": ["16", "32"]},
        "sort": "relevance",
    },
    "student": {
        "query": {"purpose": ["Student", "Office"], "maxPrice": "60000"},
        "sort": "price-ascending",
    },
}


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

# Kept in step with constants.STORAGE_TYPE_OPTIONS / PURPOSE_OPTIONS.
StorageType = Literal["SSD", "HDD", "SSD+HDD"]
Purpose = Literal["Office", "Student", "Gaming", "Content Creation", "Business"]


class ProductBase(BaseModel):
    brand: str = Field(min_length=1)
    model: str = Field(min_length=1)
    price: float = Field(ge=0)
    memory_gb: int = Field(gt=0)
    storage_type: StorageType
    storage_gb: int = Field(gt=0)
    processor: str
    purposes: List[Purpose] = Field(min_length=1)
    screen_inches: float = Field(gt=0)
    graphics: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    description: str = ""
    availability: str = "In Stock"


class ProductCreate(ProductBase):
    """
    Request body for POST /api/admin/products.
    """


class ProductUpdate(BaseModel):
    """
    Request body for PUT /api/admin/products/{id}. Every field is optional;
    only the ones sent are changed.
    """

    brand: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0)
    memory_gb: Optional[int] = Field(default=None, gt=0)
    storage_type: Optional[StorageType] = None
    storage_gb: Optional[int] = Field(default=None, gt=0)
    processor: Optional[str] = None
    purposes: Optional[List[Purpose]] = Field(default=None, min_length=1)
    screen_inches: Optional[float] = Field(default=None, gt=0)
    graphics: Optional[str] = None
    images: Optional[List[str]] = None
    description: Optional[str] = None
    availability: Optional[str] = None


class Product(BaseModel):
    """
    Canonical schema for a single catalog item as returned by the API.
    """

    id: str
    brand: str
    model: str
    price: float
    display_price: str
    memory_gb: int
    storage_type: str
    storage_gb: int
    processor: str
    purposes: List[str]
    screen_inches: float
    graphics: Optional[str] = None
    images: List[str]
    description: str
    availability: str


class ScoredProduct(BaseModel):
    """
    A product as it appears in a result page, with its match signals.
    """

    product: Product
    match_score: int
    match_reasons: List[str]
    is_best_match: bool


class SearchResponse(BaseModel):
    """
    Response body for GET /api/products.
    """

    items: List[ScoredProduct]
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    page: int
    page_size: int


class InquiryCreate(BaseModel):
    name: str = Field(min_length=2)
    phone: str = Field(min_length=10)
    email: EmailStr
    message: Optional[str] = None
    product_ids: List[str] = Field(min_length=1)


class InquiryOut(BaseModel):
    id: str
    name: str
    phone: str
    email: str
    message: Optional[str] = None
    product_ids: List[str]
    created_at: str


class LoginRequest(BaseModel):
    password: str


class LoginResponse(BaseModel):
    success: bool
    token: str


class StatsResponse(BaseModel):
    total_products: int
    total_inquiries: int
    recent_inquiries: int


class OptionsResponse(BaseModel):
    purposes: List[str]
    ram_gb: List[int]
    storage_types: List[str]
    storage_gb: List[int]
    screen_inches: List[float]
    brands: List[str]


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
