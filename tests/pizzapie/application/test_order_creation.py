"""Application tests for order creation via domain.process()."""

import json

import pytest
from pizzapie.order.creation import CreateOrder
from pizzapie.order.order import Order, PizzaState
from protean import current_domain
from protean.exceptions import ValidationError
from shared.errors import DomainException


def _create_order(**overrides):
    defaults = {
        "customer_name": "Ada Lovelace",
        "size": "Large",
        "toppings": json.dumps(["Pepperoni", "Mushrooms"]),
    }
    defaults.update(overrides)
    return current_domain.process(CreateOrder(**defaults), asynchronous=False)


class TestCreateOrderFlow:
    def test_create_order_returns_id(self):
        order_id = _create_order()
        assert order_id is not None

    def test_create_order_persists_in_event_store(self):
        order_id = _create_order()
        order = current_domain.repository_for(Order).get(order_id)
        assert str(order.id) == order_id

    def test_create_order_rebuilds_details(self):
        order_id = _create_order(size="small")
        order = current_domain.repository_for(Order).get(order_id)

        assert order.customer_name == "Ada Lovelace"
        assert order.size == "Small"
        assert order.state == PizzaState.NEW.value
        assert order.topping_names == ["Pepperoni", "Mushrooms"]

    def test_create_order_from_menu_ids(self):
        order_id = _create_order(size="3", toppings=json.dumps([1, 2]))
        order = current_domain.repository_for(Order).get(order_id)

        assert order.size == "Large"
        assert order.topping_names == ["Pepperoni", "Mushrooms"]

    def test_create_order_without_toppings(self):
        order_id = _create_order(toppings=json.dumps([]))
        order = current_domain.repository_for(Order).get(order_id)
        assert order.toppings == []

    def test_create_order_stores_events(self):
        _create_order()

        messages = current_domain.event_store.store.read("pizzapie::order")
        order_created_events = [m for m in messages if m.metadata.headers.type == "Pizzapie.OrderCreated.v1"]
        assert len(order_created_events) == 1


class TestCreateOrderRejections:
    def test_empty_customer_name(self):
        with pytest.raises(DomainException) as exc:
            _create_order(customer_name="")
        assert exc.value.messages == ["Customer name empty"]

    def test_empty_name_reported_with_other_problems(self):
        with pytest.raises(DomainException) as exc:
            _create_order(customer_name="", size="Huge", toppings=json.dumps(["Anchovies"]))

        assert exc.value.messages == [
            "Customer name empty",
            "Unknown pizza size: Huge",
            "Unknown topping: Anchovies",
        ]

    def test_customer_name_too_long(self):
        with pytest.raises(ValidationError) as exc:
            _create_order(customer_name="A" * 101)
        assert "customer_name" in exc.value.messages

    def test_blank_customer_name(self):
        with pytest.raises(DomainException, match="Customer name empty"):
            _create_order(customer_name="   ")

    def test_unknown_size_and_topping(self):
        with pytest.raises(DomainException) as exc:
            _create_order(size="Gigantic", toppings=json.dumps(["Anchovies"]))

        assert exc.value.messages == ["Unknown pizza size: Gigantic", "Unknown topping: Anchovies"]

    def test_rejected_order_is_not_stored(self):
        with pytest.raises(DomainException):
            _create_order(size="Gigantic")

        messages = current_domain.event_store.store.read("pizzapie::order")
        assert not [m for m in messages if m.metadata.headers.type == "Pizzapie.OrderCreated.v1"]
