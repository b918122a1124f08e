"""Driver availability follows the order stream.

OrderDispatched puts the driver on the road; OrderCompleted brings them
back to the roster.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from pizzapie.domain import pizzapie
from pizzapie.driver.driver import Driver
from pizzapie.order.events import OrderCompleted, OrderDispatched

logger = structlog.get_logger(__name__)


@pizzapie.event_handler(part_of=Driver, stream_category="pizzapie::order")
class OrderDeliveryEventHandler:
    """Reacts to Order events to keep driver availability in step."""

    @handle(OrderDispatched)
    def on_order_dispatched(self, event: OrderDispatched) -> None:
        repo = current_domain.repository_for(Driver)
        driver = repo.get(event.driver_id)
        driver.assign(event.order_id)
        repo.add(driver)

        logger.info(
            "Driver out for delivery",
            driver_id=str(event.driver_id),
            order_id=str(event.order_id),
        )

    @handle(OrderCompleted)
    def on_order_completed(self, event: OrderCompleted) -> None:
        if not event.driver_id:
            logger.warning("Completed order had no driver", order_id=str(event.order_id))
            return

        repo = current_domain.repository_for(Driver)
        driver = repo.get(event.driver_id)
        driver.release(event.order_id)
        repo.add(driver)

        logger.info(
            "Driver back from delivery",
            driver_id=str(event.driver_id),
            order_id=str(event.order_id),
        )
