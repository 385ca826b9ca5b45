import pytest

from laptop_finder.normalize import normalize_query
from laptop_finder.pipeline_types import SortStrategy
from laptop_finder.presets import apply_preset, preset_names


def test_preset_names():
    assert set(preset_names()) == {"budget", "gaming", "student"}


def test_budget_preset():
    raw, strategy = apply_preset("budget")
    assert strategy is SortStrategy.PRICE_ASCENDING
    assert normalize_query(raw).price_max == 50000


def test_gaming_preset():
    raw, strategy = apply_preset("gaming")
    c = normalize_query(raw)
    assert strategy is SortStrategy.RELEVANCE
    assert c.purposes == {"Gaming"}
    assert c.memory_sizes_gb == {16, 32}


def test_student_preset_returns_fresh_copy():
    raw, _ = apply_preset("student")
    raw["purpose"].append("Gaming")
    again, strategy = apply_preset("student")
    assert again["purpose"] == ["Student", "Office"]
    assert strategy is SortStrategy.PRICE_ASCENDING


def test_unknown_preset():
    with pytest.raises(KeyError):
        apply_preset("luxury")
