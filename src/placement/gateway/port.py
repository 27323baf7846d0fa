"""Collaborator ports (abstract interfaces).

Defines the contracts every adapter for an external system must implement:
inventory, customer directory, tax rates, fulfillment and email. Placement
logic depends only on these, so fake adapters (dev/test) and production
integrations are interchangeable.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from placement.customer.customer import Customer
from placement.order.order import Order
from placement.order.summary import OrderConfirmation, TaxEntry


class InventoryPort(ABC):
    """Answers stock availability questions."""

    @abstractmethod
    def is_in_stock(self, sku: str) -> bool:
        """Return True when the product with ``sku`` can be ordered."""
        ...


class CustomerPort(ABC):
    """Customer directory lookup."""

    @abstractmethod
    def get(self, customer_id) -> Customer:
        """Return the customer with ``customer_id``."""
        ...


class TaxRatePort(ABC):
    """Tax rate lookup by location."""

    @abstractmethod
    def get_tax_entries(self, postal_code: str, country: str | None) -> Sequence[TaxEntry]:
        """Return the tax entries applicable at a location, in jurisdiction order."""
        ...


class FulfillmentPort(ABC):
    """Commits an order for shipping."""

    @abstractmethod
    def fulfill(self, order: Order) -> OrderConfirmation:
        """Fulfill ``order`` and return the authoritative confirmation."""
        ...


class EmailPort(ABC):
    """Customer email dispatch."""

    @abstractmethod
    def send_order_confirmation_email(self, customer_id, order_id) -> None:
        """Send the order confirmation email. Return values are ignored by callers."""
        ...
