"""FastAPI routes for PizzaPie: orders, the kitchen, drivers and the menu.

Thin adapters that translate HTTP requests into PizzaStore calls.
Errors propagate to the exception handlers installed by ``shared.http``.
"""

from fastapi import APIRouter

from pizzapie.api.schemas import (
    ChangeDriverStateRequest,
    CreateOrderRequest,
    DispatchOrderRequest,
    DriverIdResponse,
    DriverResponse,
    OrderIdResponse,
    OrderResponse,
    ReadyCheckResponse,
    RegisterDriverRequest,
    SizeResponse,
    StatusResponse,
    TimelineEntryResponse,
    ToppingResponse,
)
from pizzapie.menu import SIZES, TOPPINGS
from pizzapie.store import PizzaStore

store = PizzaStore()


def _order_response(entry) -> OrderResponse:
    return OrderResponse(
        order_id=str(entry.order_id),
        customer_name=entry.customer_name,
        size=entry.size,
        state=entry.state,
        toppings=entry.topping_names,
        cook_time=entry.cook_time or 0,
        ready_at=entry.ready_at,
        driver_id=str(entry.driver_id) if entry.driver_id else None,
        driver_name=entry.driver_name,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


def _driver_response(driver) -> DriverResponse:
    return DriverResponse(
        driver_id=str(driver.id),
        first_name=driver.first_name,
        last_name=driver.last_name,
        state=driver.state,
        current_order_id=str(driver.current_order_id) if driver.current_order_id else None,
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest) -> OrderIdResponse:
    order_id = store.create_order(
        customer_name=body.customer_name,
        size=body.size,
        toppings=body.toppings,
    )
    return OrderIdResponse(order_id=order_id)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(state: str | None = None) -> list[OrderResponse]:
    return [_order_response(entry) for entry in store.orders(state=state)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(store.order_by_id(order_id))


@order_router.get("/{order_id}/timeline", response_model=list[TimelineEntryResponse])
async def get_order_timeline(order_id: str) -> list[TimelineEntryResponse]:
    return [
        TimelineEntryResponse(
            event_type=entry.event_type,
            description=entry.description,
            occurred_at=entry.occurred_at,
        )
        for entry in store.order_timeline(order_id)
    ]


@order_router.put("/{order_id}/cook", response_model=StatusResponse)
async def cook_pizza(order_id: str) -> StatusResponse:
    store.cook_pizza(order_id)
    return StatusResponse()


@order_router.put("/{order_id}/ready", response_model=StatusResponse)
async def mark_pizza_ready(order_id: str) -> StatusResponse:
    store.pizza_ready(order_id)
    return StatusResponse()


@order_router.put("/{order_id}/dispatch", response_model=StatusResponse)
async def dispatch_pizza(order_id: str, body: DispatchOrderRequest) -> StatusResponse:
    store.dispatch_pizza(order_id, body.driver_id)
    return StatusResponse()


@order_router.put("/{order_id}/complete", response_model=StatusResponse)
async def complete_order(order_id: str) -> StatusResponse:
    store.complete_order(order_id)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Kitchen Router
# ---------------------------------------------------------------------------
kitchen_router = APIRouter(prefix="/kitchen", tags=["kitchen"])


@kitchen_router.post("/ready-check", response_model=ReadyCheckResponse)
async def ready_check() -> ReadyCheckResponse:
    """Mark every pizza whose cook time has elapsed as ready."""
    return ReadyCheckResponse(ready_count=store.release_ready_pizzas())


# ---------------------------------------------------------------------------
# Driver Router
# ---------------------------------------------------------------------------
driver_router = APIRouter(prefix="/drivers", tags=["drivers"])


@driver_router.post("", status_code=201, response_model=DriverIdResponse)
async def register_driver(body: RegisterDriverRequest) -> DriverIdResponse:
    driver_id = store.register_driver(first_name=body.first_name, last_name=body.last_name)
    return DriverIdResponse(driver_id=driver_id)


@driver_router.get("", response_model=list[DriverResponse])
async def list_drivers(state: str | None = None) -> list[DriverResponse]:
    return [_driver_response(driver) for driver in store.drivers(state=state)]


@driver_router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(driver_id: str) -> DriverResponse:
    return _driver_response(store.driver_by_id(driver_id))


@driver_router.put("/{driver_id}/state", response_model=StatusResponse)
async def change_driver_state(driver_id: str, body: ChangeDriverStateRequest) -> StatusResponse:
    store.change_driver_state(driver_id, body.state)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Menu Router
# ---------------------------------------------------------------------------
menu_router = APIRouter(tags=["menu"])


@menu_router.get("/toppings", response_model=list[ToppingResponse])
async def list_toppings() -> list[ToppingResponse]:
    return [ToppingResponse(**topping) for topping in TOPPINGS]


@menu_router.get("/sizes", response_model=list[SizeResponse])
async def list_sizes() -> list[SizeResponse]:
    return [SizeResponse(**size) for size in SIZES]
