"""PizzaStore: the single entry point for everything that happens to orders.

Commands go through the domain synchronously (``current_domain.process``),
queries read the projections. The HTTP layer talks to nothing else.
"""

import json

import structlog
from protean.utils.globals import current_domain

from pizzapie.driver.driver import Driver
from pizzapie.driver.management import ChangeDriverState, RegisterDriver
from pizzapie.order.completion import CompleteOrder
from pizzapie.order.creation import CreateOrder
from pizzapie.order.dispatch import DispatchOrder
from pizzapie.order.kitchen import DetectReadyPizzas, MarkPizzaReady, SendToKitchen
from pizzapie.projections.order_board import OrderBoard
from pizzapie.projections.order_timeline import OrderTimeline

logger = structlog.get_logger(__name__)


class PizzaStore:
    def send(self, command):
        """Dispatch a command to its handler and return the handler's result."""
        logger.debug("Dispatching command", command=type(command).__name__)
        return current_domain.process(command, asynchronous=False)

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def create_order(self, customer_name, size, toppings=None):
        return self.send(
            CreateOrder(
                customer_name=customer_name,
                size=str(size) if size is not None else None,
                toppings=json.dumps(list(toppings or [])),
            )
        )

    def cook_pizza(self, order_id):
        self.send(SendToKitchen(order_id=order_id))

    def pizza_ready(self, order_id):
        self.send(MarkPizzaReady(order_id=order_id))

    def release_ready_pizzas(self, as_of=None):
        return self.send(DetectReadyPizzas(as_of=as_of))

    def dispatch_pizza(self, order_id, driver_id):
        self.send(DispatchOrder(order_id=order_id, driver_id=driver_id))

    def complete_order(self, order_id):
        self.send(CompleteOrder(order_id=order_id))

    def orders(self, state=None):
        query = current_domain.repository_for(OrderBoard)._dao.query
        if state:
            query = query.filter(state=state)
        return query.order_by("created_at").all().items

    def order_by_id(self, order_id):
        return current_domain.repository_for(OrderBoard).get(order_id)

    def order_timeline(self, order_id):
        # Raises ObjectNotFoundError for unknown orders
        self.order_by_id(order_id)
        return (
            current_domain.repository_for(OrderTimeline)
            ._dao.query.filter(order_id=order_id)
            .order_by("occurred_at")
            .all()
            .items
        )

    # -------------------------------------------------------------------
    # Drivers
    # -------------------------------------------------------------------
    def register_driver(self, first_name, last_name=None):
        return self.send(RegisterDriver(first_name=first_name, last_name=last_name))

    def change_driver_state(self, driver_id, state):
        self.send(ChangeDriverState(driver_id=driver_id, state=state))

    def drivers(self, state=None):
        query = current_domain.repository_for(Driver)._dao.query
        if state:
            query = query.filter(state=state)
        return query.order_by("created_at").all().items

    def driver_by_id(self, driver_id):
        return current_domain.repository_for(Driver).get(driver_id)
