"""Application tests for OrderDeliveryEventHandler: drivers react to Order events.

Covers:
- on_order_dispatched: assigns the order to the driver
- on_order_completed: releases the driver back to the roster
"""

from datetime import UTC, datetime

import pytest
from pizzapie.driver.driver import Driver, DriverState
from pizzapie.driver.management import RegisterDriver
from pizzapie.driver.order_events import OrderDeliveryEventHandler
from pizzapie.order.events import OrderCompleted, OrderDispatched
from protean import current_domain
from shared.errors import DomainException


def _register_driver():
    return current_domain.process(
        RegisterDriver(first_name="Sam", last_name="Speedy"),
        asynchronous=False,
    )


def _dispatched(order_id, driver_id):
    return OrderDispatched(
        order_id=order_id,
        driver_id=driver_id,
        driver_first_name="Sam",
        driver_last_name="Speedy",
        dispatched_at=datetime.now(UTC),
    )


def _completed(order_id, driver_id):
    return OrderCompleted(
        order_id=order_id,
        driver_id=driver_id,
        completed_at=datetime.now(UTC),
    )


class TestOnOrderDispatched:
    def test_assigns_driver(self):
        driver_id = _register_driver()

        OrderDeliveryEventHandler().on_order_dispatched(_dispatched("ord-001", driver_id))

        driver = current_domain.repository_for(Driver).get(driver_id)
        assert driver.state == DriverState.DELIVERING.value
        assert str(driver.current_order_id) == "ord-001"

    def test_unavailable_driver_raises(self):
        driver_id = _register_driver()
        handler = OrderDeliveryEventHandler()
        handler.on_order_dispatched(_dispatched("ord-001", driver_id))

        with pytest.raises(DomainException):
            handler.on_order_dispatched(_dispatched("ord-002", driver_id))


class TestOnOrderCompleted:
    def test_releases_driver(self):
        driver_id = _register_driver()
        handler = OrderDeliveryEventHandler()
        handler.on_order_dispatched(_dispatched("ord-001", driver_id))

        handler.on_order_completed(_completed("ord-001", driver_id))

        driver = current_domain.repository_for(Driver).get(driver_id)
        assert driver.state == DriverState.AVAILABLE.value
        assert driver.current_order_id is None

    def test_order_without_driver_is_ignored(self):
        driver_id = _register_driver()

        OrderDeliveryEventHandler().on_order_completed(_completed("ord-001", None))

        driver = current_domain.repository_for(Driver).get(driver_id)
        assert driver.state == DriverState.AVAILABLE.value
