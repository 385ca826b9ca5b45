import json

from laptop_finder.cli import main


def test_cli_search_prints_ranked_matches(capsys):
    code = main(["search", "--purpose", "Gaming", "--ram", "16", "--sort", "price-low"])
    assert code == 0
    out = capsys.readouterr().out
    assert "matches, page 1 of" in out
    assert "Victus 15" in out
    assert "Matches Gaming" in out


def test_cli_search_json_matches_api_shape(capsys):
    code = main(["search", "--preset", "budget", "--json", "--limit", "3"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["page_size"] == 3
    prices = [i["product"]["price"] for i in data["items"]]
    assert prices == sorted(prices)
    assert all(p <= 50000 for p in prices)


def test_cli_rejects_unknown_sort(capsys):
    assert main(["search", "--sort", "popular"]) == 2
