"""Tests for the Driver aggregate: registration and availability."""

import pytest
from pizzapie.driver.driver import Driver, DriverState
from pizzapie.driver.events import DriverAssigned, DriverRegistered, DriverReleased, DriverStateChanged
from protean.exceptions import ValidationError
from shared.errors import DomainException


def _make_driver():
    driver = Driver.register(first_name="Sam", last_name="Speedy")
    driver._events.clear()
    return driver


class TestRegistration:
    def test_register_starts_available(self):
        driver = Driver.register(first_name="Sam", last_name="Speedy")

        assert driver.state == DriverState.AVAILABLE.value
        assert driver.is_available
        assert driver.current_order_id is None

    def test_register_raises_event(self):
        driver = Driver.register(first_name="Sam")

        assert len(driver._events) == 1
        event = driver._events[0]
        assert isinstance(event, DriverRegistered)
        assert event.driver_id == str(driver.id)
        assert event.first_name == "Sam"

    def test_full_name(self):
        assert _make_driver().full_name == "Sam Speedy"
        assert Driver.register(first_name="Cher").full_name == "Cher"

    def test_first_name_is_required(self):
        with pytest.raises(ValidationError):
            Driver.register(first_name=None)


class TestChangeState:
    def test_go_off_duty(self):
        driver = _make_driver()
        driver.change_state("Off_Duty")

        assert driver.state == DriverState.OFF_DUTY.value
        assert not driver.is_available

        event = driver._events[-1]
        assert isinstance(event, DriverStateChanged)
        assert event.previous_state == "Available"
        assert event.new_state == "Off_Duty"

    def test_back_on_duty(self):
        driver = _make_driver()
        driver.change_state(DriverState.OFF_DUTY.value)
        driver.change_state(DriverState.AVAILABLE.value)

        assert driver.is_available

    def test_same_state_is_a_no_op(self):
        driver = _make_driver()
        driver.change_state("Available")

        assert driver._events == []

    def test_unknown_state(self):
        driver = _make_driver()
        with pytest.raises(ValidationError) as exc:
            driver.change_state("Napping")

        assert "state" in exc.value.messages

    def test_cannot_choose_delivering(self):
        driver = _make_driver()
        with pytest.raises(DomainException, match="order is dispatched"):
            driver.change_state("Delivering")

    def test_cannot_clock_out_mid_delivery(self):
        driver = _make_driver()
        driver.assign("ord-001")

        with pytest.raises(DomainException, match="out on a delivery"):
            driver.change_state("Off_Duty")


class TestDeliveries:
    def test_assign(self):
        driver = _make_driver()
        driver.assign("ord-001")

        assert driver.state == DriverState.DELIVERING.value
        assert str(driver.current_order_id) == "ord-001"
        assert isinstance(driver._events[-1], DriverAssigned)

    def test_assign_requires_available_driver(self):
        driver = _make_driver()
        driver.change_state("Off_Duty")

        with pytest.raises(DomainException, match="not available"):
            driver.assign("ord-001")

    def test_release(self):
        driver = _make_driver()
        driver.assign("ord-001")
        driver.release("ord-001")

        assert driver.is_available
        assert driver.current_order_id is None
        assert isinstance(driver._events[-1], DriverReleased)

    def test_release_other_order(self):
        driver = _make_driver()
        driver.assign("ord-001")

        with pytest.raises(DomainException, match="not delivering order ord-002"):
            driver.release("ord-002")
