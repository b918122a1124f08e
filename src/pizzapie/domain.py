"""PizzaPie bounded context: pizza orders, the kitchen and delivery drivers.

Orders are event sourced; drivers are plain aggregates whose availability
follows the order stream. Read models for the dashboard are projections.
"""

from protean.domain import Domain

from pizzapie.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

pizzapie = Domain(name="pizzapie")
