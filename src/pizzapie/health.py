"""Health checks for the stores the PizzaPie API depends on."""

from protean.utils.globals import current_domain
from shared.health import HealthCheckResource, register_resource

from pizzapie.projections.order_board import OrderBoard


class OrderBoardStorage(HealthCheckResource):
    name = "order-board"

    def ping(self):
        current_domain.repository_for(OrderBoard)._dao.query.limit(1).all()


class OrderEventStore(HealthCheckResource):
    name = "event-store"

    def ping(self):
        current_domain.event_store.store.read("pizzapie::order", no_of_messages=1)


register_resource(OrderBoardStorage())
register_resource(OrderEventStore())
