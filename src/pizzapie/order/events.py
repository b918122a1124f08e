"""Domain events for the Order aggregate.

Events are persisted to the event store and used for:
- Rebuilding aggregate state via @apply (event sourcing)
- Updating the dashboard projections
- Driving driver availability through the driver event handler
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from pizzapie.domain import pizzapie


@pizzapie.event(part_of="Order")
class OrderCreated:
    """A customer placed a pizza order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    size = String(required=True)
    toppings = Text()  # JSON: list of {name, cook_time}
    cook_time = Integer(required=True)
    created_at = DateTime(required=True)


@pizzapie.event(part_of="Order")
class OrderSentToKitchen:
    """The pizza went into the oven."""

    __version__ = 1

    order_id = Identifier(required=True)
    cook_time = Integer(required=True)
    sent_at = DateTime(required=True)
    ready_at = DateTime(required=True)


@pizzapie.event(part_of="Order")
class PizzaReady:
    """The pizza came out of the oven and waits for a driver."""

    __version__ = 1

    order_id = Identifier(required=True)
    ready_at = DateTime(required=True)


@pizzapie.event(part_of="Order")
class OrderDispatched:
    """A driver left with the pizza."""

    __version__ = 1

    order_id = Identifier(required=True)
    driver_id = Identifier(required=True)
    driver_first_name = String(required=True)
    driver_last_name = String()
    dispatched_at = DateTime(required=True)


@pizzapie.event(part_of="Order")
class OrderCompleted:
    """The pizza was handed to the customer."""

    __version__ = 1

    order_id = Identifier(required=True)
    driver_id = Identifier()
    completed_at = DateTime(required=True)
