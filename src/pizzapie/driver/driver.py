"""Driver aggregate: who is free to take a pizza out.

A driver is Available or Off_Duty by choice and Delivering while carrying
an order. Delivering is entered and left only through order dispatch and
completion, never by a manual state change.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String
from shared.errors import DomainException

from pizzapie.domain import pizzapie
from pizzapie.driver.events import (
    DriverAssigned,
    DriverRegistered,
    DriverReleased,
    DriverStateChanged,
)


class DriverState(Enum):
    AVAILABLE = "Available"
    DELIVERING = "Delivering"
    OFF_DUTY = "Off_Duty"


# States a driver may pick for themselves
_SELECTABLE_STATES = {DriverState.AVAILABLE, DriverState.OFF_DUTY}


@pizzapie.aggregate
class Driver:
    first_name = String(required=True, max_length=100)
    last_name = String(max_length=100)
    state = String(choices=DriverState, default=DriverState.AVAILABLE.value)
    current_order_id = Identifier()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, first_name, last_name=None):
        now = datetime.now(UTC)
        driver = cls(
            first_name=first_name,
            last_name=last_name,
            state=DriverState.AVAILABLE.value,
            created_at=now,
            updated_at=now,
        )
        driver.raise_(
            DriverRegistered(
                driver_id=str(driver.id),
                first_name=first_name,
                last_name=last_name,
                registered_at=now,
            )
        )
        return driver

    @property
    def full_name(self):
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def is_available(self):
        return DriverState(self.state) == DriverState.AVAILABLE

    def change_state(self, new_state):
        """Clock in or out. Changing to the current state does nothing."""
        try:
            target = DriverState(new_state)
        except ValueError:
            raise ValidationError({"state": [f"Unknown driver state: {new_state}"]}) from None

        current = DriverState(self.state)
        if target == current:
            return

        if current == DriverState.DELIVERING:
            raise DomainException(f"Driver {self.full_name} is out on a delivery")
        if target not in _SELECTABLE_STATES:
            raise DomainException("Drivers start delivering only when an order is dispatched to them")

        now = datetime.now(UTC)
        self.state = target.value
        self.updated_at = now

        self.raise_(
            DriverStateChanged(
                driver_id=str(self.id),
                previous_state=current.value,
                new_state=target.value,
                changed_at=now,
            )
        )

    def assign(self, order_id):
        if not self.is_available:
            raise DomainException(f"Driver {self.full_name} is not available")

        now = datetime.now(UTC)
        self.state = DriverState.DELIVERING.value
        self.current_order_id = order_id
        self.updated_at = now

        self.raise_(
            DriverAssigned(
                driver_id=str(self.id),
                order_id=str(order_id),
                assigned_at=now,
            )
        )

    def release(self, order_id):
        if DriverState(self.state) != DriverState.DELIVERING or str(self.current_order_id) != str(order_id):
            raise DomainException(f"Driver {self.full_name} is not delivering order {order_id}")

        now = datetime.now(UTC)
        self.state = DriverState.AVAILABLE.value
        self.current_order_id = None
        self.updated_at = now

        self.raise_(
            DriverReleased(
                driver_id=str(self.id),
                order_id=str(order_id),
                released_at=now,
            )
        )
