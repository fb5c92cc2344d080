"""Tests for order-key mapping - pure functions, no IO."""

import pytest

from store_api.core.domain_types import SortDirection
from store_api.core.ordering import (
    NEWEST, OLDEST, PRICE_HIGHEST, PRICE_LOWEST, product_order_by,
    user_order_by,
)
from store_api.core.repository_protocols import ListQuery


def test_user_oldest_is_created_at_ascending():
    assert user_order_by("oldest") == OLDEST
    assert OLDEST.column == "created_at"
    assert OLDEST.direction == SortDirection.ASC


def test_user_newest_is_created_at_descending():
    assert user_order_by("newest") == NEWEST
    assert NEWEST.direction == SortDirection.DESC


@pytest.mark.parametrize("order", ["", "priceLowest", "OLDEST", "random"])
def test_user_unknown_order_falls_back_to_newest(order):
    assert user_order_by(order) == NEWEST


def test_product_price_orders():
    assert product_order_by("priceLowest") == PRICE_LOWEST
    assert product_order_by("priceHighest") == PRICE_HIGHEST
    assert PRICE_LOWEST.column == "price"
    assert PRICE_LOWEST.direction == SortDirection.ASC
    assert PRICE_HIGHEST.direction == SortDirection.DESC


def test_product_oldest_and_default():
    assert product_order_by("oldest") == OLDEST
    assert product_order_by("newest") == NEWEST
    assert product_order_by("cheapest") == NEWEST


def test_list_query_defaults():
    query = ListQuery()
    assert (query.offset, query.limit, query.order_by, query.filters) == (0, 10, NEWEST, {})


def test_list_query_rejects_negative_bounds():
    with pytest.raises(ValueError):
        ListQuery(offset=-1)
    with pytest.raises(ValueError):
        ListQuery(limit=-5)
