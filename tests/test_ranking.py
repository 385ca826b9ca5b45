import itertools

import pytest

from laptop_finder.pipeline_types import ScoredItem, SortStrategy
from laptop_finder.ranking import InvalidStrategy, rank_items


def _scored(make_item, item_id, score, price):
    return ScoredItem(item=make_item(item_id, price=price), match_score=score)


def _ids(ranked):
    return [s.item.item_id for s in ranked]


def test_relevance_orders_by_score_then_price(make_item):
    scored = [
        _scored(make_item, "a", 1, 50000),
        _scored(make_item, "b", 5, 90000),
        _scored(make_item, "c", 5, 60000),
        _scored(make_item, "d", -1, 10000),
    ]
    assert _ids(rank_items(scored, SortStrategy.RELEVANCE)) == ["c", "b", "a", "d"]


def test_relevance_is_stable_for_full_ties(make_item):
    tied = [_scored(make_item, name, 3, 40000) for name in "xyz"]
    for perm in itertools.permutations(tied):
        assert _ids(rank_items(list(perm))) == _ids(perm)


def test_price_strategies_ignore_score_and_keep_ties(make_item):
    scored = [
        _scored(make_item, "a", 9, 30000),
        _scored(make_item, "b", 0, 10000),
        _scored(make_item, "c", 4, 30000),
    ]
    assert _ids(rank_items(scored, SortStrategy.PRICE_ASCENDING)) == ["b", "a", "c"]
    assert _ids(rank_items(scored, SortStrategy.PRICE_DESCENDING)) == ["a", "c", "b"]


def test_rank_accepts_strategy_value_strings(make_item):
    scored = [_scored(make_item, "a", 0, 2), _scored(make_item, "b", 0, 1)]
    assert _ids(rank_items(scored, "price-ascending")) == ["b", "a"]


def test_unknown_strategy_raises(make_item):
    with pytest.raises(InvalidStrategy) as exc:
        rank_items([], "random")
    assert "random" in str(exc.value)


def test_rank_does_not_mutate_input(make_item):
    scored = [_scored(make_item, "a", 0, 2), _scored(make_item, "b", 1, 1)]
    snapshot = list(scored)
    rank_items(scored)
    assert scored == snapshot
