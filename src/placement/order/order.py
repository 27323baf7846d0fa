"""Order value objects: the proposed order submitted for placement.

An Order is created by the caller and never changes while it is being placed.
Prices are ``Decimal`` amounts; floats are rejected at construction so that
currency arithmetic is exact.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from protean.exceptions import ValidationError


@dataclass(frozen=True)
class Product:
    """A sellable product, identified in inventory by its SKU."""

    product_id: int | str
    sku: str
    price: Decimal
    name: str = ""
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.sku, str) or not self.sku:
            raise ValidationError({"sku": ["SKU must be a non-empty string"]})
        if not isinstance(self.price, Decimal):
            raise ValidationError({"price": [f"Price must be a Decimal amount, got {type(self.price).__name__}"]})
        if not self.price.is_finite():
            raise ValidationError({"price": ["Price must be a finite amount"]})
        if self.price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})


@dataclass(frozen=True)
class OrderItem:
    """A product and the quantity ordered."""

    product: Product
    quantity: int

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be a positive integer"]})

    @property
    def sku(self) -> str:
        return self.product.sku

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.product.price


@dataclass(frozen=True)
class Order:
    """A customer's proposed order.

    ``order_items`` may be empty; an empty order is neither rejected here nor by
    the validator and places with a zero net total.
    """

    customer_id: int | str
    order_items: tuple[OrderItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable, store an immutable tuple
        object.__setattr__(self, "order_items", tuple(self.order_items))

    @classmethod
    def of(cls, customer_id, items: Iterable[tuple[Product, int]]) -> "Order":
        """Build an order from ``(product, quantity)`` pairs."""
        return cls(
            customer_id=customer_id,
            order_items=tuple(OrderItem(product=product, quantity=quantity) for product, quantity in items),
        )

    @property
    def skus(self) -> tuple[str, ...]:
        return tuple(item.sku for item in self.order_items)

    @property
    def net_total(self) -> Decimal:
        """Pre-tax, undiscounted sum of quantity times unit price."""
        return sum((item.line_total for item in self.order_items), Decimal("0"))
