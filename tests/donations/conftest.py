import os

import pytest


@pytest.fixture(scope="session")
def _donations_domain(request):
    """Initialize the donations domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from donations.domain import donations

    donations.init()
    return donations


@pytest.fixture(scope="session", autouse=True)
def setup_db(_donations_domain):
    from donations.utils.db import drop_db, setup_db

    setup_db(_donations_domain)

    yield

    drop_db(_donations_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_donations_domain):
    """Push domain context before each test, cleanup after."""
    from donations.notification.channel import reset_senders

    reset_senders()
    ctx = _donations_domain.domain_context()
    ctx.push()

    yield

    from donations.notification.dispatcher import wait_for_dispatches
    from protean import current_domain

    wait_for_dispatches(timeout=5)

    for _, provider in current_domain.providers.items():
        provider._data_reset()
    for _, broker in current_domain.brokers.items():
        broker._data_reset()
    current_domain.event_store.store._data_reset()
    ctx.pop()
    reset_senders()


@pytest.fixture()
def sender():
    """The in-memory email sender used by the dispatcher during tests."""
    from donations.notification.channel import get_sender

    return get_sender("fake")
