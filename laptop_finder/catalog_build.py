from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from loguru import logger

from .config import CATALOG_SEED_PATH
from .constants import DEFAULT_AVAILABILITY
from .pipeline_types import InventoryItem


# ---------------------------
# Column detection / standardization
# ---------------------------

# Catalog exports come from the admin form (camelCase), the SQL dump
# (snake_case) and hand-edited spreadsheets, so we accept several spellings.
COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "item_id": ["id", "item_id", "product_id", "sku"],
    "brand": ["brand", "Brand", "make", "manufacturer"],
    "model": ["model", "Model", "name", "title"],
    "price": ["price", "Price", "price_inr", "mrp"],
    "memory_gb": ["memory_gb", "ramGb", "ram_gb", "ram", "RAM", "memory"],
    "storage_type": ["storage_type", "storageType", "Storage Type", "disk_type"],
    "storage_gb": ["storage_gb", "storageGb", "storage", "Storage", "disk_gb"],
    "processor": ["processor", "cpu", "CPU", "chip"],
    "purposes": ["purposes", "purpose", "Purpose", "usage", "use_cases"],
    "screen_inches": ["screen_inches", "screenIn", "screen_in", "screen", "display"],
    "graphics": ["graphics", "gpu", "GPU"],
    "images": ["images", "image_urls", "photos"],
    "description": ["description", "Description", "summary"],
    "availability": ["availability", "Availability", "stock", "status"],
}

REQUIRED_COLUMNS = ["brand", "model", "price"]

CANONICAL_COLUMNS = list(COLUMN_CANDIDATES)

_LIST_SPLIT_RE = re.compile(r"[;,|]+")


def _standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename columns from a raw export to the canonical internal schema.
    The first candidate present wins; matching is case-insensitive.
    """
    col_map: Dict[str, str] = {}
    lower_to_original = {c.lower(): c for c in df.columns}

    for canon, candidates in COLUMN_CANDIDATES.items():
        for candidate in candidates:
            if candidate in df.columns:
                col_map[candidate] = canon
                break
            cand_lower = candidate.lower()
            if cand_lower in lower_to_original:
                col_map[lower_to_original[cand_lower]] = canon
                break

    logger.info("Standardizing columns with map: {}", col_map)

    df_std = df.rename(columns=col_map)

    missing = [c for c in REQUIRED_COLUMNS if c not in df_std.columns]
    if missing:
        logger.warning("Raw catalog is missing required columns: {}", missing)

    return df_std


# ---------------------------
# Field parsing helpers
# ---------------------------

def _is_missing(value) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, np.ndarray)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_list_field(value) -> List[str]:
    """
    Parse a list-valued field (purposes, images).

    - NaN / None -> []
    - "Gaming; Office" or "Gaming,Office" -> ["Gaming", "Office"]
    - list/tuple/np.ndarray -> list[str], blanks dropped
    Duplicates are dropped, first occurrence kept.
    """
    if _is_missing(value):
        return []

    if isinstance(value, (list, tuple, np.ndarray)):
        tokens = [str(v).strip() for v in value]
    else:
        tokens = [p.strip() for p in _LIST_SPLIT_RE.split(str(value))]

    out: List[str] = []
    for tok in tokens:
        if tok and tok not in out:
            out.append(tok)
    return out


def parse_size(value) -> int:
    """
    Parse a size such as RAM or storage into an integer number of GB.

    - numeric -> int
    - "16 GB" -> 16, "1 TB" -> 1024
    - unparseable -> 0
    """
    if _is_missing(value):
        return 0

    if isinstance(value, (int, float, np.integer, np.floating)):
        return max(0, int(value))

    text = str(value).strip().lower()
    m = re.search(r"(\d+(?:\.\d+)?)\s*(tb|gb)?", text)
    if not m:
        return 0
    amount = float(m.group(1))
    if m.group(2) == "tb":
        amount *= 1024
    return int(amount)


def parse_price(value) -> Optional[float]:
    """Parse a price; currency signs and digit grouping are ignored."""
    if _is_missing(value):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    cleaned = re.sub(r"[^\d.]", "", str(value))
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_screen(value) -> float:
    if _is_missing(value):
        return 0.0
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    m = re.search(r"\d+(?:\.\d+)?", str(value))
    return float(m.group(0)) if m else 0.0


def _optional_text(value) -> Optional[str]:
    if _is_missing(value):
        return None
    text = str(value).strip()
    return text or None


# ---------------------------
# Catalog normalization
# ---------------------------

def normalize_catalog_df(df_raw: pd.DataFrame) -> pd.DataFrame:
    """
    Main normalization pipeline for a raw laptop catalog.

    Output columns: item_id, brand, model, price, memory_gb, storage_type,
    storage_gb, processor, purposes, screen_inches, graphics, images,
    description, availability.

    Rows without brand, model or a parseable price are dropped.
    """
    logger.info("Normalizing catalog dataframe with {} raw rows", len(df_raw))

    df = _standardize_columns(df_raw.copy())

    if any(c not in df.columns for c in REQUIRED_COLUMNS):
        logger.error("Required columns missing after standardization; resulting catalog will be empty.")
        return pd.DataFrame(columns=CANONICAL_COLUMNS)

    for col in CANONICAL_COLUMNS:
        if col not in df.columns:
            df[col] = None

    df["brand"] = df["brand"].map(_optional_text)
    df["model"] = df["model"].map(_optional_text)
    df["price"] = df["price"].map(parse_price)

    before = len(df)
    df = df[df["brand"].notna() & df["model"].notna() & df["price"].notna()].copy()
    if len(df) < before:
        logger.warning("Dropped {} rows missing brand, model or price", before - len(df))

    df["item_id"] = df["item_id"].map(lambda v: _optional_text(v) or str(uuid.uuid4()))
    df["memory_gb"] = df["memory_gb"].map(parse_size)
    df["storage_gb"] = df["storage_gb"].map(parse_size)
    df["storage_type"] = df["storage_type"].map(lambda v: _optional_text(v) or "SSD")
    df["processor"] = df["processor"].map(lambda v: _optional_text(v) or "")
    df["purposes"] = df["purposes"].map(parse_list_field)
    df["screen_inches"] = df["screen_inches"].map(parse_screen)
    df["graphics"] = df["graphics"].map(_optional_text)
    df["images"] = df["images"].map(parse_list_field)
    df["description"] = df["description"].map(lambda v: _optional_text(v) or "")
    df["availability"] = df["availability"].map(
        lambda v: _optional_text(v) or DEFAULT_AVAILABILITY
    )

    df_out = df[CANONICAL_COLUMNS].drop_duplicates(subset=["item_id"]).reset_index(drop=True)

    logger.info("Catalog normalization complete. Final rows: {}", len(df_out))

    return df_out


def items_from_df(df: pd.DataFrame) -> List[InventoryItem]:
    """Convert a normalized catalog frame into InventoryItems."""
    items: List[InventoryItem] = []
    for row in df.itertuples(index=False):
        items.append(
            InventoryItem(
                item_id=str(row.item_id),
                brand=row.brand,
                model=row.model,
                price=float(row.price),
                memory_gb=int(row.memory_gb),
                storage_type=row.storage_type,
                storage_gb=int(row.storage_gb),
                processor=row.processor,
                purposes=tuple(row.purposes),
                screen_inches=float(row.screen_inches),
                graphics=_optional_text(row.graphics),
                images=tuple(row.images),
                description=row.description,
                availability=row.availability,
            )
        )
    return items


# ---------------------------
# IO helpers
# ---------------------------

def load_raw_catalog(path: Path) -> pd.DataFrame:
    """
    Load raw catalog rows from a .json (array of objects) or .csv file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    ext = path.suffix.lower()
    logger.info("Loading raw catalog from {}", path)
    if ext == ".json":
        df = pd.read_json(path, orient="records", dtype=False)
    elif ext == ".csv":
        df = pd.read_csv(path, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported catalog format {ext!r}; use .json or .csv")
    logger.info("Loaded {} rows from raw catalog", len(df))
    return df


def load_catalog(path: Path = CATALOG_SEED_PATH) -> List[InventoryItem]:
    """
    End-to-end: load raw catalog -> normalize -> InventoryItems.
    """
    return items_from_df(normalize_catalog_df(load_raw_catalog(path)))
