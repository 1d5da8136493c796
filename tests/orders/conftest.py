import pytest
from orders.config import FlagIdentity, Settings
from orders.faults.fake_adapter import NeverFail
from orders.flags.fake_adapter import FakeFlagClient
from orders.invoices.fake_adapter import FakeObjectStore
from orders.services import Services


# Flag values as deployed, with every toggle switched off
DISABLED_FLAGS = {
    "createOrderAllowList": {"enabled": False, "allow": "qa"},
    "opsLimitListOrdersResults": {"enabled": False, "limit": 10},
    "opsPreventCreateOrders": {"enabled": False},
    "releaseCheckCreateOrderQuantity": {"enabled": False, "limit": 10},
}


@pytest.fixture(scope="session")
def _orders_domain(request):
    """Initialize the orders domain once per session."""
    from orders.domain import orders

    orders.init()
    return orders


@pytest.fixture(autouse=True)
def run_around_tests(_orders_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _orders_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        invoice_root=tmp_path / "buckets",
        flag_identity=FlagIdentity(
            application="orders-app",
            environment="develop",
            configuration="orders-flags",
        ),
        seed_stores=False,
    )


@pytest.fixture()
def fake_flags():
    return FakeFlagClient(flags={name: dict(value) for name, value in DISABLED_FLAGS.items()})


@pytest.fixture()
def fake_invoices():
    return FakeObjectStore()


@pytest.fixture()
def services(fake_flags, fake_invoices):
    return Services(flags=fake_flags, faults=NeverFail(), invoices=fake_invoices)


@pytest.fixture()
def stores():
    """Seed the reference stores and return their ids."""
    from orders.store.seeding import seed_stores

    return seed_stores()
