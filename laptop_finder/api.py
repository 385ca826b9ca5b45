from __future__ import annotations

"""
FastAPI application for the laptop storefront.

- Storefront routes delegate every search to pipeline.search, the same
  function the CLI calls, so previews and server answers cannot drift
- Admin routes take the admin token as an explicit bearer credential
- The catalog store is injected with Depends so tests can swap it
"""

import secrets
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger

from . import config
from .config import (
    DEFAULT_PAGE_SIZE,
    HealthResponse,
    InquiryCreate,
    InquiryOut,
    LoginRequest,
    LoginResponse,
    OptionsResponse,
    Product,
    ProductCreate,
    ProductUpdate,
    SearchResponse,
    StatsResponse,
)
from .constants import (
    BRAND_OPTIONS,
    PURPOSE_OPTIONS,
    RAM_OPTIONS,
    SCREEN_SIZE_OPTIONS,
    STORAGE_SIZE_OPTIONS,
    STORAGE_TYPE_OPTIONS,
)
from ._singletons import get_store
from .mapping import page_to_response, to_api_inquiry, to_api_product
from .normalize import SORT_KEY, parse_paging
from .pipeline import search
from .presets import apply_preset
from .ranking import InvalidStrategy
from .similar import similar_items
from .storage import CatalogStore


# -----------------------
# Dependencies
# -----------------------

_bearer = HTTPBearer(auto_error=False)


def _same_secret(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def store_dependency() -> CatalogStore:
    return get_store()


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> str:
    """Admin capability check: the bearer token must equal the admin password."""
    if credentials is None or not _same_secret(credentials.credentials, config.ADMIN_PASSWORD):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return credentials.credentials


def _raw_query(request: Request) -> Dict[str, List[str]]:
    """Query string as key -> list of values; repeated keys keep every value."""
    params = request.query_params
    return {key: params.getlist(key) for key in params.keys()}


def _run_search(raw: Dict[str, object], store: CatalogStore) -> SearchResponse:
    page, page_size = parse_paging(raw, DEFAULT_PAGE_SIZE)
    try:
        result = search(
            store.list(),
            raw,
            strategy=raw.get(SORT_KEY),
            page=page,
            page_size=page_size,
        )
    except InvalidStrategy as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return page_to_response(result)


# -----------------------
# FastAPI app + startup
# -----------------------

app = FastAPI(title="Laptop Finder")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event() -> None:
    logger.info("Starting app warmup...")
    try:
        store = get_store()
        logger.info("Catalog store ready with {} products", len(store.list()))
    except FileNotFoundError as e:
        logger.warning("Catalog seed missing, store will load on first request: {}", e)
    logger.info("Warmup complete.")


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.get("/api/options", response_model=OptionsResponse)
def options() -> OptionsResponse:
    return OptionsResponse(
        purposes=PURPOSE_OPTIONS,
        ram_gb=RAM_OPTIONS,
        storage_types=STORAGE_TYPE_OPTIONS,
        storage_gb=STORAGE_SIZE_OPTIONS,
        screen_inches=SCREEN_SIZE_OPTIONS,
        brands=BRAND_OPTIONS,
    )


# -----------------------
# Storefront
# -----------------------

@app.get("/api/products", response_model=SearchResponse)
def list_products(request: Request, store: CatalogStore = Depends(store_dependency)):
    return _run_search(_raw_query(request), store)


@app.get("/api/presets/{name}", response_model=SearchResponse)
def preset_products(
    name: str,
    request: Request,
    store: CatalogStore = Depends(store_dependency),
):
    try:
        raw, strategy = apply_preset(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown preset {name!r}")
    raw[SORT_KEY] = strategy.value
    # Paging still comes from the request.
    for key, values in _raw_query(request).items():
        if key in ("page", "limit"):
            raw[key] = values
    return _run_search(raw, store)


@app.get("/api/products/{item_id}", response_model=Product)
def get_product(item_id: str, store: CatalogStore = Depends(store_dependency)):
    item = store.by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_api_product(item)


@app.get("/api/products/{item_id}/similar", response_model=List[Product])
def get_similar_products(item_id: str, store: CatalogStore = Depends(store_dependency)):
    items = store.list()
    target = next((i for i in items if i.item_id == item_id), None)
    if target is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return [to_api_product(i) for i in similar_items(target, items)]


@app.post("/api/inquiries", response_model=InquiryOut, status_code=201)
def create_inquiry(body: InquiryCreate, store: CatalogStore = Depends(store_dependency)):
    inquiry = store.create_inquiry(body.model_dump())
    return to_api_inquiry(inquiry)


# -----------------------
# Admin
# -----------------------

@app.post("/api/admin/login", response_model=LoginResponse)
def admin_login(body: LoginRequest) -> LoginResponse:
    if not _same_secret(body.password, config.ADMIN_PASSWORD):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(status_code=401, detail="Invalid password")
    return LoginResponse(success=True, token=config.ADMIN_PASSWORD)


@app.get("/api/admin/inquiries", response_model=List[InquiryOut])
def admin_inquiries(
    _: str = Depends(require_admin),
    store: CatalogStore = Depends(store_dependency),
):
    return [to_api_inquiry(i) for i in store.list_inquiries()]


@app.get("/api/admin/stats", response_model=StatsResponse)
def admin_stats(
    _: str = Depends(require_admin),
    store: CatalogStore = Depends(store_dependency),
):
    stats = store.stats()
    return StatsResponse(
        total_products=stats.total_products,
        total_inquiries=stats.total_inquiries,
        recent_inquiries=stats.recent_inquiries,
    )


@app.post("/api/admin/products", response_model=Product, status_code=201)
def admin_create_product(
    body: ProductCreate,
    _: str = Depends(require_admin),
    store: CatalogStore = Depends(store_dependency),
):
    item = store.create(body.model_dump())
    return to_api_product(item)


@app.put("/api/admin/products/{item_id}", response_model=Product)
def admin_update_product(
    item_id: str,
    body: ProductUpdate,
    _: str = Depends(require_admin),
    store: CatalogStore = Depends(store_dependency),
):
    changes = {
        k: v for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or k == "graphics"
    }
    item = store.update(item_id, changes)
    if item is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_api_product(item)


@app.delete("/api/admin/products/{item_id}", status_code=204)
def admin_delete_product(
    item_id: str,
    _: str = Depends(require_admin),
    store: CatalogStore = Depends(store_dependency),
):
    if not store.delete(item_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)
