"""Order creation: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from pizzapie.domain import pizzapie
from pizzapie.order.builder import OrderBuilder
from pizzapie.order.order import Order

logger = structlog.get_logger(__name__)


@pizzapie.command(part_of="Order")
class CreateOrder:
    """Place an order. Name, size and toppings are checked by the order builder."""

    customer_name = String(max_length=100)
    size = String(max_length=20)  # Size name or menu id
    toppings = Text()  # JSON: list of topping names or menu ids


@pizzapie.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        toppings = json.loads(command.toppings) if isinstance(command.toppings, str) else command.toppings

        order = OrderBuilder(command.customer_name, command.size).toppings(toppings).build()
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            size=order.size,
            toppings=order.topping_names,
            cook_time=order.cook_time,
        )
        return str(order.id)
