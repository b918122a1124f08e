"""Order timeline: append-only audit trail of all order events."""

import uuid

from protean.core.projector import on
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from pizzapie.domain import pizzapie
from pizzapie.order.events import (
    OrderCompleted,
    OrderCreated,
    OrderDispatched,
    OrderSentToKitchen,
    PizzaReady,
)
from pizzapie.order.order import Order


@pizzapie.projection
class OrderTimeline:
    entry_id = Identifier(identifier=True, required=True)
    order_id = Identifier(required=True)
    event_type = String(required=True)
    description = String(required=True)
    occurred_at = DateTime(required=True)


def _add_entry(order_id, event_type, description, occurred_at):
    current_domain.repository_for(OrderTimeline).add(
        OrderTimeline(
            entry_id=str(uuid.uuid4()),
            order_id=order_id,
            event_type=event_type,
            description=description,
            occurred_at=occurred_at,
        )
    )


@pizzapie.projector(projector_for=OrderTimeline, aggregates=[Order])
class OrderTimelineProjector:
    @on(OrderCreated)
    def on_order_created(self, event):
        _add_entry(
            event.order_id,
            "OrderCreated",
            f"{event.size} pizza ordered by {event.customer_name}",
            event.created_at,
        )

    @on(OrderSentToKitchen)
    def on_sent_to_kitchen(self, event):
        _add_entry(
            event.order_id,
            "OrderSentToKitchen",
            f"Pizza in the oven for {event.cook_time}s",
            event.sent_at,
        )

    @on(PizzaReady)
    def on_pizza_ready(self, event):
        _add_entry(event.order_id, "PizzaReady", "Pizza is ready for pickup", event.ready_at)

    @on(OrderDispatched)
    def on_order_dispatched(self, event):
        _add_entry(
            event.order_id,
            "OrderDispatched",
            f"Out for delivery with {event.driver_first_name}",
            event.dispatched_at,
        )

    @on(OrderCompleted)
    def on_order_completed(self, event):
        _add_entry(event.order_id, "OrderCompleted", "Pizza delivered", event.completed_at)
