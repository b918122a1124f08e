"""Driver roster management: commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from pizzapie.domain import pizzapie
from pizzapie.driver.driver import Driver


@pizzapie.command(part_of="Driver")
class RegisterDriver:
    first_name = String(required=True, max_length=100)
    last_name = String(max_length=100)


@pizzapie.command(part_of="Driver")
class ChangeDriverState:
    """Clock a driver in (Available) or out (Off_Duty)."""

    driver_id = Identifier(required=True)
    state = String(required=True, max_length=20)


@pizzapie.command_handler(part_of=Driver)
class ManageDriverHandler:
    @handle(RegisterDriver)
    def register_driver(self, command):
        driver = Driver.register(
            first_name=command.first_name,
            last_name=command.last_name,
        )
        current_domain.repository_for(Driver).add(driver)
        return str(driver.id)

    @handle(ChangeDriverState)
    def change_driver_state(self, command):
        repo = current_domain.repository_for(Driver)
        driver = repo.get(command.driver_id)
        driver.change_state(command.state)
        repo.add(driver)
