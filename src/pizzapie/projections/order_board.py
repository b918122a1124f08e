"""Order board: the dashboard's list of orders and where each pizza is."""

import json

from protean.core.projector import on
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from pizzapie.domain import pizzapie
from pizzapie.order.events import (
    OrderCompleted,
    OrderCreated,
    OrderDispatched,
    OrderSentToKitchen,
    PizzaReady,
)
from pizzapie.order.order import Order, PizzaState


@pizzapie.projection
class OrderBoard:
    order_id = Identifier(identifier=True, required=True)
    customer_name = String(required=True)
    size = String(required=True)
    state = String(required=True)
    toppings = Text()  # JSON: list of topping names
    topping_count = Integer(default=0)
    cook_time = Integer(default=0)
    ready_at = DateTime()
    driver_id = Identifier()
    driver_name = String()
    created_at = DateTime()
    updated_at = DateTime()

    @property
    def topping_names(self):
        return json.loads(self.toppings) if self.toppings else []


@pizzapie.projector(projector_for=OrderBoard, aggregates=[Order])
class OrderBoardProjector:
    @on(OrderCreated)
    def on_order_created(self, event):
        toppings = json.loads(event.toppings) if isinstance(event.toppings, str) else []
        current_domain.repository_for(OrderBoard).add(
            OrderBoard(
                order_id=event.order_id,
                customer_name=event.customer_name,
                size=event.size,
                state=PizzaState.NEW.value,
                toppings=json.dumps([topping["name"] for topping in toppings]),
                topping_count=len(toppings),
                cook_time=event.cook_time,
                created_at=event.created_at,
                updated_at=event.created_at,
            )
        )

    @on(OrderSentToKitchen)
    def on_sent_to_kitchen(self, event):
        repo = current_domain.repository_for(OrderBoard)
        entry = repo.get(event.order_id)
        entry.state = PizzaState.COOKING.value
        entry.ready_at = event.ready_at
        entry.updated_at = event.sent_at
        repo.add(entry)

    @on(PizzaReady)
    def on_pizza_ready(self, event):
        repo = current_domain.repository_for(OrderBoard)
        entry = repo.get(event.order_id)
        entry.state = PizzaState.READY.value
        entry.ready_at = event.ready_at
        entry.updated_at = event.ready_at
        repo.add(entry)

    @on(OrderDispatched)
    def on_order_dispatched(self, event):
        repo = current_domain.repository_for(OrderBoard)
        entry = repo.get(event.order_id)
        entry.state = PizzaState.DELIVERING.value
        entry.driver_id = event.driver_id
        entry.driver_name = " ".join(part for part in (event.driver_first_name, event.driver_last_name) if part)
        entry.updated_at = event.dispatched_at
        repo.add(entry)

    @on(OrderCompleted)
    def on_order_completed(self, event):
        repo = current_domain.repository_for(OrderBoard)
        entry = repo.get(event.order_id)
        entry.state = PizzaState.COMPLETED.value
        entry.updated_at = event.completed_at
        repo.add(entry)
