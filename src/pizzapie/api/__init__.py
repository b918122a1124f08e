"""PizzaPie API package."""

from pizzapie.api.routes import driver_router, kitchen_router, menu_router, order_router

__all__ = ["order_router", "kitchen_router", "driver_router", "menu_router"]
