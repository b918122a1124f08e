"""Application tests for registering drivers and changing their state."""

import pytest
from pizzapie.driver.driver import Driver, DriverState
from pizzapie.driver.management import ChangeDriverState, RegisterDriver
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _register_driver(**overrides):
    defaults = {"first_name": "Sam", "last_name": "Speedy"}
    defaults.update(overrides)
    return current_domain.process(RegisterDriver(**defaults), asynchronous=False)


def _change_state(driver_id, state):
    current_domain.process(ChangeDriverState(driver_id=driver_id, state=state), asynchronous=False)


class TestRegisterDriver:
    def test_returns_id(self):
        assert _register_driver() is not None

    def test_persists_available_driver(self):
        driver_id = _register_driver()

        driver = current_domain.repository_for(Driver).get(driver_id)
        assert driver.first_name == "Sam"
        assert driver.last_name == "Speedy"
        assert driver.state == DriverState.AVAILABLE.value

    def test_last_name_is_optional(self):
        driver_id = _register_driver(last_name=None)
        assert current_domain.repository_for(Driver).get(driver_id).full_name == "Sam"

    def test_first_name_is_required(self):
        with pytest.raises(ValidationError):
            _register_driver(first_name="")


class TestChangeDriverState:
    def test_clock_out(self):
        driver_id = _register_driver()
        _change_state(driver_id, "Off_Duty")

        driver = current_domain.repository_for(Driver).get(driver_id)
        assert driver.state == DriverState.OFF_DUTY.value

    def test_clock_back_in(self):
        driver_id = _register_driver()
        _change_state(driver_id, "Off_Duty")
        _change_state(driver_id, "Available")

        assert current_domain.repository_for(Driver).get(driver_id).is_available

    def test_unknown_state(self):
        driver_id = _register_driver()

        with pytest.raises(ValidationError):
            _change_state(driver_id, "Napping")

    def test_unknown_driver(self):
        with pytest.raises(ObjectNotFoundError):
            _change_state("no-such-driver", "Off_Duty")
