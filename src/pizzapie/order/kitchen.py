"""Kitchen: putting pizzas in the oven and taking them out.

``DetectReadyPizzas`` is meant to be triggered periodically (the dashboard
polls ``POST /kitchen/ready-check``). It scans the OrderBoard projection for
cooking pizzas whose cook time has elapsed and marks each one ready.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain
from shared.errors import DomainException

from pizzapie.domain import pizzapie
from pizzapie.order.order import Order, PizzaState
from pizzapie.projections.order_board import OrderBoard

logger = structlog.get_logger(__name__)


@pizzapie.command(part_of="Order")
class SendToKitchen:
    """Start cooking a newly placed order."""

    order_id = Identifier(required=True)


@pizzapie.command(part_of="Order")
class MarkPizzaReady:
    """Take a cooked pizza out of the oven."""

    order_id = Identifier(required=True)


@pizzapie.command(part_of="Order")
class DetectReadyPizzas:
    """Mark every pizza whose cook time has elapsed as ready."""

    as_of = DateTime()  # Optional: defaults to now


def _as_naive_utc(value):
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


@pizzapie.command_handler(part_of=Order)
class KitchenHandler:
    @handle(SendToKitchen)
    def send_to_kitchen(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.send_to_kitchen()
        repo.add(order)

        logger.info(
            "Pizza sent to kitchen",
            order_id=str(order.id),
            cook_time=order.cook_time,
            ready_at=str(order.ready_at),
        )

    @handle(MarkPizzaReady)
    def mark_ready(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_ready()
        repo.add(order)

    @handle(DetectReadyPizzas)
    def detect_ready_pizzas(self, command):
        as_of = _as_naive_utc(command.as_of or datetime.now(UTC))

        cooking = (
            current_domain.repository_for(OrderBoard)._dao.query.filter(state=PizzaState.COOKING.value).all().items
        )
        done = [entry for entry in cooking if entry.ready_at and _as_naive_utc(entry.ready_at) <= as_of]

        if not done:
            logger.debug("No pizzas ready yet", cooking_count=len(cooking))
            return 0

        ready_count = 0
        for entry in done:
            try:
                current_domain.process(
                    MarkPizzaReady(order_id=str(entry.order_id)),
                    asynchronous=False,
                )
                ready_count += 1
            except (DomainException, ValidationError, InvalidOperationError) as exc:
                logger.warning(
                    "Failed to mark pizza ready",
                    order_id=str(entry.order_id),
                    error=str(exc),
                )

        logger.info("Kitchen ready check complete", ready_count=ready_count)
        return ready_count
