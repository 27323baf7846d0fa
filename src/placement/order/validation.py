"""Order validation engine.

Business rules are plain functions over the order's SKUs. Each rule returns its
violation message, or ``None`` when the order passes it. Every rule is
evaluated before anything is reported, so an order that breaks several rules
fails with all of their messages at once.
"""

from collections.abc import Callable, Sequence

from placement.gateway.port import InventoryPort
from placement.order.errors import OrderValidationError
from placement.order.order import Order

DUPLICATE_SKUS = "Duplicate SKUs found."
ITEMS_NOT_IN_STOCK = "Ordered item(s) not in stock."

Rule = Callable[[Sequence[str], InventoryPort], str | None]


def duplicate_skus(skus: Sequence[str], inventory: InventoryPort) -> str | None:  # noqa: ARG001
    """Every order item must carry a different SKU."""
    if len(set(skus)) != len(skus):
        return DUPLICATE_SKUS
    return None


def skus_out_of_stock(skus: Sequence[str], inventory: InventoryPort) -> str | None:
    """Every SKU must be reported in stock.

    Inventory is asked once per distinct SKU, and no further once one is out.
    """
    if all(inventory.is_in_stock(sku) for sku in dict.fromkeys(skus)):
        return None
    return ITEMS_NOT_IN_STOCK


DEFAULT_RULES: tuple[Rule, ...] = (duplicate_skus, skus_out_of_stock)


class OrderValidator:
    """Checks a proposed order against the placement business rules."""

    def __init__(self, inventory: InventoryPort, rules: Sequence[Rule] = DEFAULT_RULES):
        self.inventory = inventory
        self.rules = tuple(rules)

    def violations(self, order: Order) -> tuple[str, ...]:
        """Return the distinct violation messages for ``order``, in rule order."""
        skus = order.skus
        results = (rule(skus, self.inventory) for rule in self.rules)
        return tuple(dict.fromkeys(message for message in results if message is not None))

    def validate(self, order: Order) -> None:
        """Raise ``OrderValidationError`` unless ``order`` passes every rule."""
        violations = self.violations(order)
        if violations:
            raise OrderValidationError(violations)
