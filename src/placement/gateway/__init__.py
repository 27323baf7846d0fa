"""Collaborator adapter registry.

Provides get_*() / set_*() to swap the adapter behind each port:
- Fake in-memory adapters for development and testing (the defaults)
- Production integrations, installed with the matching set_*() call
"""

from placement.gateway.fake_customers import FakeCustomerDirectory
from placement.gateway.fake_email import FakeEmailer
from placement.gateway.fake_fulfillment import FakeFulfillment
from placement.gateway.fake_inventory import FakeInventory
from placement.gateway.fake_tax_rates import FakeTaxRates
from placement.gateway.port import CustomerPort, EmailPort, FulfillmentPort, InventoryPort, TaxRatePort

_DEFAULT_FACTORIES = {
    "inventory": FakeInventory,
    "customers": FakeCustomerDirectory,
    "tax_rates": FakeTaxRates,
    "fulfillment": FakeFulfillment,
    "emails": FakeEmailer,
}

_current_gateways: dict[str, object] = {}


def _get(name: str):
    if name not in _current_gateways:
        _current_gateways[name] = _DEFAULT_FACTORIES[name]()
    return _current_gateways[name]


def get_inventory() -> InventoryPort:
    """Return the current inventory adapter. Defaults to FakeInventory."""
    return _get("inventory")


def set_inventory(adapter: InventoryPort) -> None:
    _current_gateways["inventory"] = adapter


def get_customers() -> CustomerPort:
    """Return the current customer directory. Defaults to FakeCustomerDirectory."""
    return _get("customers")


def set_customers(adapter: CustomerPort) -> None:
    _current_gateways["customers"] = adapter


def get_tax_rates() -> TaxRatePort:
    """Return the current tax rate service. Defaults to FakeTaxRates."""
    return _get("tax_rates")


def set_tax_rates(adapter: TaxRatePort) -> None:
    _current_gateways["tax_rates"] = adapter


def get_fulfillment() -> FulfillmentPort:
    """Return the current fulfillment adapter. Defaults to FakeFulfillment."""
    return _get("fulfillment")


def set_fulfillment(adapter: FulfillmentPort) -> None:
    _current_gateways["fulfillment"] = adapter


def get_emails() -> EmailPort:
    """Return the current email adapter. Defaults to FakeEmailer."""
    return _get("emails")


def set_emails(adapter: EmailPort) -> None:
    _current_gateways["emails"] = adapter


def reset_gateways() -> None:
    """Reset every port to its default fake adapter (useful for testing)."""
    _current_gateways.clear()
