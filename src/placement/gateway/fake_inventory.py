"""Fake inventory adapter — answers stock checks from an in-memory table."""

from placement.gateway.port import InventoryPort


class FakeInventory(InventoryPort):
    """Inventory adapter with configurable per-SKU stock flags."""

    def __init__(self, stock: dict[str, bool] | None = None, default_in_stock: bool = True):
        self.stock: dict[str, bool] = dict(stock or {})
        self.default_in_stock = default_in_stock
        self.calls: list[str] = []

    def configure(self, stock: dict[str, bool] | None = None, default_in_stock: bool = True):
        """Configure the fake adapter behavior for testing."""
        self.stock = dict(stock or {})
        self.default_in_stock = default_in_stock

    def is_in_stock(self, sku: str) -> bool:
        self.calls.append(sku)
        return self.stock.get(sku, self.default_in_stock)

    def reset(self):
        """Clear recorded calls and stock flags."""
        self.stock.clear()
        self.default_in_stock = True
        self.calls.clear()
