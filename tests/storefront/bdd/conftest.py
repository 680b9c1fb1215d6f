"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from builders import create_shop_item, register_customer, stock_of
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.order.order import Order


@pytest.fixture()
def items():
    """Shop item ids by title."""
    return {}


@pytest.fixture()
def outcome():
    """Holds the last order, or the error a step raised."""
    return {"order": None, "error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer", target_fixture="customer_id")
def _():
    return register_customer(name="John", surname="Doe", address="123 Main St")


@given(parsers.cfparse('a shop item "{title}" with {stock:d} units in stock'))
def _(items, title, stock):
    items[title] = create_shop_item(title=title, stock=stock)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{title}" has {stock:d} units in stock'))
def _(items, title, stock):
    assert stock_of(items[title]) == stock


@then(parsers.cfparse('the order status is "{status}"'))
def _(outcome, status):
    assert outcome["order"]["status"] == status


@then("no order exists")
def _():
    assert current_domain.repository_for(Order).list_all() == []


@then(parsers.cfparse('the order is rejected with "{kind}"'))
@then(parsers.cfparse('the listing is rejected with "{kind}"'))
def _(outcome, kind):
    names = {"NotFound": "ObjectNotFoundError"}
    assert outcome["error"] is not None
    assert type(outcome["error"]).__name__ == names.get(kind, kind)
