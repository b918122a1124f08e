"""Pydantic request/response schemas for the PizzaPie API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    """Sizes and toppings may be given by menu name or by menu id."""

    customer_name: str
    size: int | str
    toppings: list[int | str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Ada Lovelace",
                    "size": "Large",
                    "toppings": ["Pepperoni", "Mushrooms"],
                }
            ]
        }
    }


class DispatchOrderRequest(BaseModel):
    driver_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class OrderResponse(BaseModel):
    order_id: str
    customer_name: str
    size: str
    state: str
    toppings: list[str] = Field(default_factory=list)
    cook_time: int = 0
    ready_at: datetime | None = None
    driver_id: str | None = None
    driver_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TimelineEntryResponse(BaseModel):
    event_type: str
    description: str
    occurred_at: datetime


class ReadyCheckResponse(BaseModel):
    ready_count: int


# ---------------------------------------------------------------------------
# Driver Schemas
# ---------------------------------------------------------------------------
class RegisterDriverRequest(BaseModel):
    first_name: str
    last_name: str | None = None


class ChangeDriverStateRequest(BaseModel):
    state: str


class DriverIdResponse(BaseModel):
    driver_id: str


class DriverResponse(BaseModel):
    driver_id: str
    first_name: str
    last_name: str | None = None
    state: str
    current_order_id: str | None = None


# ---------------------------------------------------------------------------
# Menu Schemas
# ---------------------------------------------------------------------------
class ToppingResponse(BaseModel):
    id: int
    name: str
    cook_time: int


class SizeResponse(BaseModel):
    id: int
    name: str
    diameter_inches: int


class StatusResponse(BaseModel):
    status: str = "ok"
