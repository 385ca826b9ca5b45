from laptop_finder.config import SearchResponse
from laptop_finder.mapping import format_inr, page_to_response, to_api_product
from laptop_finder.pipeline import search


def test_format_inr_groups_indian_style():
    assert format_inr(999) == "₹999"
    assert format_inr(42990) == "₹42,990"
    assert format_inr(123456) == "₹1,23,456"
    assert format_inr(12345678) == "₹1,23,45,678"
    assert format_inr(1000.5) == "₹1,000.5"


def test_to_api_product_strict_schema(make_item):
    product = to_api_product(make_item("a", graphics="RTX 4050", images=("front.jpg",)))
    assert product.id == "a"
    assert product.display_price == "₹40,000"
    assert product.purposes == ["Office"]
    assert product.images == ["front.jpg"]
    assert product.graphics == "RTX 4050"


def test_page_to_response_structure(catalog):
    resp = page_to_response(search(catalog, {"purpose": "Gaming"}, page_size=1))
    assert isinstance(resp, SearchResponse)
    assert resp.total_count == 2
    assert resp.total_pages == 2
    assert len(resp.items) == 1
    assert resp.items[0].match_reasons[0] == "Matches Gaming"
