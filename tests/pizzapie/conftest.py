import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def pizzapie_bed():
    from pizzapie.domain import pizzapie

    bed = DomainFixture(pizzapie)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(pizzapie_bed):
    """Run each test inside the domain context and wipe all stores afterwards."""
    with pizzapie_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        for _, broker in current_domain.brokers.items():
            broker._data_reset()

        current_domain.event_store.store._data_reset()
