import pytest

from laptop_finder.pipeline_types import InventoryItem


def _item(item_id="x", **overrides) -> InventoryItem:
    fields = dict(
        item_id=item_id,
        brand="Dell",
        model="Inspiron 15",
        price=40000,
        memory_gb=8,
        storage_type="SSD",
        storage_gb=512,
        processor="Intel Core i5",
        purposes=("Office",),
        screen_inches=15.6,
    )
    fields.update(overrides)
    if "purposes" in overrides:
        fields["purposes"] = tuple(overrides["purposes"])
    return InventoryItem(**fields)


@pytest.fixture
def make_item():
    return _item


@pytest.fixture
def catalog():
    return [
        _item("dell", brand="Dell", model="Inspiron 15", price=40000, memory_gb=8),
        _item(
            "asus", brand="Asus", model="ROG Strix", price=90000, memory_gb=16,
            purposes=["Gaming"], processor="AMD Ryzen 7",
        ),
        _item(
            "hp", brand="HP", model="Victus", price=65000, memory_gb=16,
            purposes=["Gaming", "Student"], storage_gb=1024,
        ),
        _item(
            "lenovo", brand="Lenovo", model="ThinkPad E14", price=65000, memory_gb=16,
            purposes=["Business", "Office"], screen_inches=14,
        ),
        _item(
            "apple", brand="Apple", model="MacBook Air", price=99900, memory_gb=8,
            purposes=["Student"], processor="Apple M2", storage_gb=256, screen_inches=13,
        ),
    ]
