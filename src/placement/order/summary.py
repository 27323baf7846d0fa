"""Fulfillment confirmation, tax entries and the order summary returned to callers."""

from dataclasses import dataclass
from decimal import Decimal

from placement.order.order import OrderItem


@dataclass(frozen=True)
class OrderConfirmation:
    """Record produced by fulfillment.

    Authoritative for the customer identity of the placed order: the customer is
    resolved from ``customer_id`` here, not from the submitted order.
    """

    customer_id: int | str
    order_id: int | str
    order_number: str


@dataclass(frozen=True)
class TaxEntry:
    """A single jurisdiction's tax rule, e.g. ``TaxEntry("WA State", Decimal("0.065"))``."""

    description: str
    rate: Decimal


@dataclass(frozen=True)
class OrderSummary:
    """Outcome of a successful placement.

    ``net_total`` is the pre-tax, undiscounted sum of the order's line totals.
    ``taxes`` holds the tax entries exactly as the tax rate service returned
    them, in the same order.
    """

    customer_id: int | str
    order_id: int | str
    order_number: str
    net_total: Decimal
    taxes: tuple[TaxEntry, ...] = ()
    order_items: tuple[OrderItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "taxes", tuple(self.taxes))
        object.__setattr__(self, "order_items", tuple(self.order_items))

    @property
    def tax_total(self) -> Decimal:
        return sum((self.net_total * tax.rate for tax in self.taxes), Decimal("0"))

    @property
    def total(self) -> Decimal:
        """Net total plus every applicable tax."""
        return self.net_total + self.tax_total
