from __future__ import annotations

"""Option vocabularies offered to buyers and admins.

These mirror the choices the storefront's filter panel and product form
expose. The engine does not validate against them: an item or query may
carry values outside these lists and is filtered/scored like any other.
Admin product bodies are stricter; see the Literal types in config.
"""

PURPOSE_OPTIONS = [
    "Office",
    "Student",
    "Gaming",
    "Content Creation",
    "Business",
]

RAM_OPTIONS = [4, 8, 16, 32, 64]

STORAGE_TYPE_OPTIONS = [
    "SSD",
    "HDD",
    "SSD+HDD",
]

STORAGE_SIZE_OPTIONS = [128, 256, 512, 1024, 2048]

SCREEN_SIZE_OPTIONS = [13, 14, 15, 15.6, 17]

BRAND_OPTIONS = [
    "Dell",
    "HP",
    "Lenovo",
    "Asus",
    "Acer",
    "Apple",
    "MSI",
    "Razer",
]

DEFAULT_AVAILABILITY = "In Stock"
