"""Shared BDD fixtures and step definitions for order admission."""

import pytest
from orders.order.admission import OrderAdmission
from orders.order.order import Order
from orders.order.queries import OrderQueries
from orders.store.seeding import SEED_STORES, seed_stores
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def admission(settings, services):
    return OrderAdmission(settings, services)


@pytest.fixture()
def queries(settings, services):
    return OrderQueries(settings, services)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the reference stores are seeded")
def _():
    seed_stores()


@given("all order flags are disabled")
def _(fake_flags):
    for name in list(fake_flags.flags):
        fake_flags.flags[name]["enabled"] = False


@given(parsers.cfparse('the "{name}" flag is enabled'))
def _(fake_flags, name):
    fake_flags.set_flag(name, True)


@given(parsers.cfparse('the "{name}" flag is enabled with a limit of {limit:d}'))
def _(fake_flags, name, limit):
    fake_flags.set_flag(name, True, limit=limit)


@given(parsers.cfparse("{count:d} orders already exist"))
def _(count):
    repo = current_domain.repository_for(Order)
    for _ in range(count):
        repo.add(Order.place(product_id="MacPro", quantity=1, store_id=SEED_STORES[0]["id"]))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is rejected as "{kind}"'))
def _(outcome, kind):
    assert outcome["order"] is None
    assert outcome["error"].kind == kind


@then("the order is admitted")
def _(outcome):
    assert outcome["error"] is None
    assert outcome["order"].record_type == "Orders"


@then("no orders are stored")
def _():
    assert current_domain.repository_for(Order).scan() == []
