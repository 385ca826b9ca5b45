from __future__ import annotations

"""Quick-start presets offered on the storefront landing page."""

from copy import deepcopy
from typing import Dict, List, Tuple

from .config import PRESETS
from .normalize import parse_strategy
from .pipeline_types import SortStrategy


def preset_names() -> List[str]:
    return list(PRESETS)


def apply_preset(name: str) -> Tuple[Dict[str, object], SortStrategy]:
    """
    Return (raw_query, strategy) for a named preset.

    Raises KeyError for an unknown name. The raw query is a fresh copy and
    goes through the normal query normalisation like any other.
    """
    preset = PRESETS[name]
    return deepcopy(preset["query"]), parse_strategy(preset["sort"])
