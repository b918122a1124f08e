"""Fluent construction of orders from what the customer asked for.

    order = OrderBuilder("Ada", "Large").toppings(["Pepperoni", "Onions"]).build()

Every problem with the request is collected and reported in one
``DomainException`` when ``build()`` is called.
"""

from shared.builder import FluentBuilder

from pizzapie.menu import find_size, find_topping
from pizzapie.order.order import Order


class OrderBuilder(FluentBuilder):
    def __init__(self, customer_name, size):
        super().__init__()

        if not customer_name or not customer_name.strip():
            self.add_domain_error("Customer name empty")

        self._customer_name = customer_name.strip() if customer_name else customer_name
        self._size = find_size(size)
        if self._size is None:
            self.add_domain_error(f"Unknown pizza size: {size}")

        self._toppings = []

    def toppings(self, refs):
        """Add toppings by menu name or menu id."""
        seen = {topping["name"] for topping in self._toppings}
        for ref in refs or []:
            topping = find_topping(ref)
            if topping is None:
                self.add_domain_error(f"Unknown topping: {ref}")
                continue
            if topping["name"] in seen:
                self.add_domain_error(f"Topping {topping['name']} listed more than once")
                continue

            seen.add(topping["name"])
            self._toppings.append({"name": topping["name"], "cook_time": topping["cook_time"]})
        return self

    def _construct(self):
        return Order.create(
            customer_name=self._customer_name,
            size=self._size,
            toppings=self._toppings,
        )
