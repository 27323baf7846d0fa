"""Placement bounded context — order validation and orchestration.

Validates a proposed order against inventory rules, hands it to fulfillment,
enriches the result with customer tax information and notifies the customer.
Every external system is reached through a port in ``placement.gateway``.

Nothing in the library imports this module, and no elements are registered on
the domain. Applications import it to initialise the domain; importing it also
runs ``configure_logging()``. Without it, structlog keeps its default
configuration.
"""

from protean.domain import Domain

from placement.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
placement = Domain(name="placement")
