"""Order dispatch: hand a ready pizza to an available driver."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain
from shared.errors import DomainException

from pizzapie.domain import pizzapie
from pizzapie.driver.driver import Driver
from pizzapie.order.order import Order

logger = structlog.get_logger(__name__)


@pizzapie.command(part_of="Order")
class DispatchOrder:
    order_id = Identifier(required=True)
    driver_id = Identifier(required=True)


@pizzapie.command_handler(part_of=Order)
class DispatchOrderHandler:
    @handle(DispatchOrder)
    def dispatch_order(self, command):
        driver = current_domain.repository_for(Driver).get(command.driver_id)
        if not driver.is_available:
            raise DomainException(f"Driver {driver.full_name} is not available")

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.dispatch(
            driver_id=str(driver.id),
            first_name=driver.first_name,
            last_name=driver.last_name,
        )
        repo.add(order)

        logger.info(
            "Pizza dispatched",
            order_id=str(order.id),
            driver_id=str(driver.id),
        )
