"""Domain events for the Driver aggregate."""

from protean.fields import DateTime, Identifier, String

from pizzapie.domain import pizzapie


@pizzapie.event(part_of="Driver")
class DriverRegistered:
    """A new driver joined the delivery roster."""

    __version__ = 1

    driver_id = Identifier(required=True)
    first_name = String(required=True)
    last_name = String()
    registered_at = DateTime(required=True)


@pizzapie.event(part_of="Driver")
class DriverStateChanged:
    """A driver clocked in or out."""

    __version__ = 1

    driver_id = Identifier(required=True)
    previous_state = String(required=True)
    new_state = String(required=True)
    changed_at = DateTime(required=True)


@pizzapie.event(part_of="Driver")
class DriverAssigned:
    """A driver left to deliver an order."""

    __version__ = 1

    driver_id = Identifier(required=True)
    order_id = Identifier(required=True)
    assigned_at = DateTime(required=True)


@pizzapie.event(part_of="Driver")
class DriverReleased:
    """A driver finished a delivery and is available again."""

    __version__ = 1

    driver_id = Identifier(required=True)
    order_id = Identifier(required=True)
    released_at = DateTime(required=True)
