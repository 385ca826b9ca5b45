from laptop_finder.filtering import filter_items, matches_criteria
from laptop_finder.normalize import normalize_query
from laptop_finder.pipeline_types import FilterCriteria


def _ids(items):
    return [i.item_id for i in items]


def test_empty_criteria_keeps_everything_in_order(catalog):
    assert filter_items(catalog, FilterCriteria()) == catalog


def test_purpose_is_any_overlap(catalog):
    kept = filter_items(catalog, normalize_query({"purpose": ["Gaming", "Business"]}))
    assert _ids(kept) == ["asus", "hp", "lenovo"]


def test_memory_is_exact_membership(catalog):
    kept = filter_items(catalog, normalize_query({"ram": "8"}))
    assert _ids(kept) == ["dell", "apple"]


def test_screen_size_is_exact_membership(catalog):
    assert _ids(filter_items(catalog, normalize_query({"screenSize": "14"}))) == ["lenovo"]
    assert filter_items(catalog, normalize_query({"screenSize": "15"})) == []


def test_storage_size_and_brand(catalog):
    kept = filter_items(catalog, normalize_query({"storageSize": ["1024", "256"], "brand": "HP"}))
    assert _ids(kept) == ["hp"]


def test_search_text_is_case_insensitive_over_four_fields(catalog):
    assert _ids(filter_items(catalog, normalize_query({"q": "ryzen"}))) == ["asus"]
    assert _ids(filter_items(catalog, normalize_query({"q": "THINKPAD"}))) == ["lenovo"]
    assert _ids(filter_items(catalog, normalize_query({"q": "stud"}))) == ["hp", "apple"]
    assert _ids(filter_items(catalog, normalize_query({"q": "apple"}))) == ["apple"]


def test_price_range_is_inclusive(catalog):
    kept = filter_items(catalog, normalize_query({"minPrice": "65000", "maxPrice": "90000"}))
    assert _ids(kept) == ["asus", "hp", "lenovo"]


def test_inverted_price_range_matches_nothing(catalog):
    c = normalize_query({"minPrice": "60000", "maxPrice": "50000"})
    assert filter_items(catalog, c) == []


def test_malformed_numeric_input_fails_closed(catalog):
    assert filter_items(catalog, normalize_query({"ram": "lots"})) == []
    assert filter_items(catalog, normalize_query({"minPrice": "abc"})) == []


def test_empty_axis_never_excludes(catalog, make_item):
    odd = make_item("odd", purposes=["Unlisted"], storage_type="HDD", brand="Nobody")
    for axis in ("purposes", "memory_sizes_gb", "storage_types", "storage_sizes_gb",
                 "screen_sizes_inches", "brands"):
        assert matches_criteria(odd, FilterCriteria(**{axis: frozenset()}))
