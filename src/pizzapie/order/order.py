"""Order aggregate (Event Sourced): one pizza from order to doorstep.

All state changes are captured as domain events and the current state is
rebuilt by replaying them via @apply methods.

State Machine:
    NEW → COOKING → READY → DELIVERING → COMPLETED
"""

import json
from datetime import UTC, datetime, timedelta
from enum import Enum

from protean import apply
from protean.fields import DateTime, HasMany, Identifier, Integer, String, ValueObject
from shared.errors import DomainException

from pizzapie.domain import pizzapie
from pizzapie.menu import DEFAULT_TOPPING_COOK_TIME, PizzaSize, cook_time_for
from pizzapie.order.events import (
    OrderCompleted,
    OrderCreated,
    OrderDispatched,
    OrderSentToKitchen,
    PizzaReady,
)


class PizzaState(Enum):
    NEW = "New"
    COOKING = "Cooking"
    READY = "Ready"
    DELIVERING = "Delivering"
    COMPLETED = "Completed"


# State machine transition map
_VALID_TRANSITIONS = {
    PizzaState.NEW: {PizzaState.COOKING},
    PizzaState.COOKING: {PizzaState.READY},
    PizzaState.READY: {PizzaState.DELIVERING},
    PizzaState.DELIVERING: {PizzaState.COMPLETED},
    PizzaState.COMPLETED: set(),  # Terminal
}

_TRANSITION_ERRORS = {
    PizzaState.COOKING: "Pizza must be in open state to start cooking",
    PizzaState.READY: "Pizza must be cooking before it can be marked ready",
    PizzaState.DELIVERING: "Pizza must be ready before it can be dispatched",
    PizzaState.COMPLETED: "Pizza must be out for delivery before the order can be completed",
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@pizzapie.value_object(part_of="Order")
class AssignedDriver:
    """The driver carrying the pizza, captured when the order is dispatched."""

    driver_id = Identifier(required=True)
    first_name = String(required=True, max_length=100)
    last_name = String(max_length=100)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@pizzapie.entity(part_of="Order")
class PizzaTopping:
    """A topping on the pizza. Two toppings are the same topping when their names match."""

    name = String(required=True, max_length=50)
    cook_time = Integer(default=DEFAULT_TOPPING_COOK_TIME, min_value=0)


# ---------------------------------------------------------------------------
# Aggregate Root (Event Sourced)
# ---------------------------------------------------------------------------
@pizzapie.aggregate(event_sourced=True)
class Order:
    customer_name = String(required=True, max_length=100)
    size = String(required=True, choices=PizzaSize)
    state = String(choices=PizzaState, default=PizzaState.NEW.value)
    toppings = HasMany(PizzaTopping)
    cook_time = Integer(default=0)
    ready_at = DateTime()
    driver = ValueObject(AssignedDriver)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_name, size, toppings=None):
        """Place a new order. The pizza starts in the New state.

        Args:
            customer_name: Who the pizza is for.
            size: A ``PizzaSize`` or its value.
            toppings: List of dicts with ``name`` and ``cook_time``.
        """
        toppings = toppings or []
        size_value = size.value if isinstance(size, PizzaSize) else size

        order = cls._create_new()
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                customer_name=customer_name,
                size=size_value,
                toppings=json.dumps(
                    [
                        {
                            "name": topping["name"],
                            "cook_time": topping.get("cook_time", DEFAULT_TOPPING_COOK_TIME),
                        }
                        for topping in toppings
                    ]
                ),
                cook_time=cook_time_for(toppings),
                created_at=datetime.now(UTC),
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_state):
        current = PizzaState(self.state)
        if target_state not in _VALID_TRANSITIONS.get(current, set()):
            raise DomainException(_TRANSITION_ERRORS[target_state])

    @property
    def topping_names(self):
        return [topping.name for topping in self.toppings or []]

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def send_to_kitchen(self, sent_at=None):
        """Put the pizza in the oven. It will be ready after ``cook_time`` seconds."""
        self._assert_can_transition(PizzaState.COOKING)

        sent_at = sent_at or datetime.now(UTC)
        self.raise_(
            OrderSentToKitchen(
                order_id=str(self.id),
                cook_time=self.cook_time,
                sent_at=sent_at,
                ready_at=sent_at + timedelta(seconds=self.cook_time),
            )
        )

    def mark_ready(self):
        """Take the pizza out of the oven."""
        self._assert_can_transition(PizzaState.READY)
        self.raise_(
            PizzaReady(
                order_id=str(self.id),
                ready_at=datetime.now(UTC),
            )
        )

    def dispatch(self, driver_id, first_name, last_name=None):
        """Hand the pizza over to a driver."""
        self._assert_can_transition(PizzaState.DELIVERING)
        self.raise_(
            OrderDispatched(
                order_id=str(self.id),
                driver_id=str(driver_id),
                driver_first_name=first_name,
                driver_last_name=last_name,
                dispatched_at=datetime.now(UTC),
            )
        )

    def complete(self):
        """Close the order once the customer has the pizza."""
        self._assert_can_transition(PizzaState.COMPLETED)
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                driver_id=str(self.driver.driver_id) if self.driver else None,
                completed_at=datetime.now(UTC),
            )
        )

    # -------------------------------------------------------------------
    # @apply methods rebuild state during event replay
    # -------------------------------------------------------------------
    @apply
    def _on_order_created(self, event: OrderCreated):
        self.id = event.order_id
        self.customer_name = event.customer_name
        self.size = event.size
        self.state = PizzaState.NEW.value
        self.cook_time = event.cook_time
        self.created_at = event.created_at
        self.updated_at = event.created_at

        toppings_data = json.loads(event.toppings) if isinstance(event.toppings, str) else []
        self.toppings = [PizzaTopping(**topping_data) for topping_data in toppings_data]

    @apply
    def _on_sent_to_kitchen(self, event: OrderSentToKitchen):
        self.state = PizzaState.COOKING.value
        self.ready_at = event.ready_at
        self.updated_at = event.sent_at

    @apply
    def _on_pizza_ready(self, event: PizzaReady):
        self.state = PizzaState.READY.value
        self.ready_at = event.ready_at
        self.updated_at = event.ready_at

    @apply
    def _on_order_dispatched(self, event: OrderDispatched):
        self.state = PizzaState.DELIVERING.value
        self.driver = AssignedDriver(
            driver_id=event.driver_id,
            first_name=event.driver_first_name,
            last_name=event.driver_last_name,
        )
        self.updated_at = event.dispatched_at

    @apply
    def _on_order_completed(self, event: OrderCompleted):
        self.state = PizzaState.COMPLETED.value
        self.updated_at = event.completed_at
