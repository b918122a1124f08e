"""Menu reference data: pizza sizes, toppings and their cook times.

The dashboard looks toppings and sizes up by numeric id; the domain works
with names. Cook times are in seconds.
"""

from enum import Enum

BASE_COOK_TIME = 5
DEFAULT_TOPPING_COOK_TIME = 1


class PizzaSize(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    EXTRA_LARGE = "Extra_Large"


SIZES = [
    {"id": 1, "name": PizzaSize.SMALL.value, "diameter_inches": 10},
    {"id": 2, "name": PizzaSize.MEDIUM.value, "diameter_inches": 12},
    {"id": 3, "name": PizzaSize.LARGE.value, "diameter_inches": 14},
    {"id": 4, "name": PizzaSize.EXTRA_LARGE.value, "diameter_inches": 16},
]

TOPPINGS = [
    {"id": 1, "name": "Pepperoni", "cook_time": 2},
    {"id": 2, "name": "Mushrooms", "cook_time": 1},
    {"id": 3, "name": "Onions", "cook_time": 1},
    {"id": 4, "name": "Sausage", "cook_time": 3},
    {"id": 5, "name": "Bacon", "cook_time": 3},
    {"id": 6, "name": "Extra Cheese", "cook_time": 1},
    {"id": 7, "name": "Black Olives", "cook_time": 1},
    {"id": 8, "name": "Green Peppers", "cook_time": 1},
    {"id": 9, "name": "Pineapple", "cook_time": 2},
    {"id": 10, "name": "Spinach", "cook_time": 1},
]

_TOPPINGS_BY_NAME = {topping["name"].lower(): topping for topping in TOPPINGS}


def parse_size(value):
    """Return the ``PizzaSize`` for a name such as ``"large"``, or None."""
    if isinstance(value, PizzaSize):
        return value
    if not value:
        return None

    normalized = str(value).strip().replace(" ", "_").lower()
    return next((size for size in PizzaSize if size.value.lower() == normalized), None)


def size_by_id(size_id):
    return next((size for size in SIZES if size["id"] == size_id), None)


def topping_by_id(topping_id):
    return next((topping for topping in TOPPINGS if topping["id"] == topping_id), None)


def topping_by_name(name):
    if not name:
        return None
    return _TOPPINGS_BY_NAME.get(name.strip().lower())


def cook_time_for(toppings):
    """Total seconds in the oven: the base time plus each topping's cook time."""
    return BASE_COOK_TIME + sum(topping.get("cook_time", DEFAULT_TOPPING_COOK_TIME) for topping in toppings)


def _is_menu_id(ref):
    if isinstance(ref, bool):
        return False
    return isinstance(ref, int) or (isinstance(ref, str) and ref.strip().isdigit())


def find_size(ref):
    """Resolve a size from its menu id (``3``, ``"3"``) or its name."""
    if _is_menu_id(ref):
        size = size_by_id(int(ref))
        return PizzaSize(size["name"]) if size else None
    return parse_size(ref)


def find_topping(ref):
    """Resolve a topping from its menu id or its name."""
    if _is_menu_id(ref):
        return topping_by_id(int(ref))
    if not isinstance(ref, str):
        return None
    return topping_by_name(ref)
