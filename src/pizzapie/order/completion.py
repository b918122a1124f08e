"""Order completion: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from pizzapie.domain import pizzapie
from pizzapie.order.order import Order


@pizzapie.command(part_of="Order")
class CompleteOrder:
    """Close an order once the driver has handed the pizza over."""

    order_id = Identifier(required=True)


@pizzapie.command_handler(part_of=Order)
class CompleteOrderHandler:
    @handle(CompleteOrder)
    def complete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.complete()
        repo.add(order)
