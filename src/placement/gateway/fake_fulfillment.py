"""Fake fulfillment adapter — confirms orders without touching a warehouse.

Issues sequential order ids and ``ORD-000001``-style order numbers. The
confirmation normally keeps the order's customer; ``reassign_to`` simulates a
fulfillment system that transfers ownership to another customer.
"""

from placement.gateway.port import FulfillmentPort
from placement.order.order import Order
from placement.order.summary import OrderConfirmation


class FakeFulfillment(FulfillmentPort):
    """Fulfillment adapter that records every order it confirms."""

    def __init__(self, first_order_id: int = 1):
        self.first_order_id = first_order_id
        self.next_order_id = first_order_id
        self.reassign_to = None
        self.fulfilled: list[Order] = []

    def configure(self, next_order_id: int | None = None, reassign_to=None):
        """Configure the fake adapter behavior for testing."""
        if next_order_id is not None:
            self.next_order_id = next_order_id
        self.reassign_to = reassign_to

    def fulfill(self, order: Order) -> OrderConfirmation:
        order_id = self.next_order_id
        self.next_order_id += 1
        self.fulfilled.append(order)

        customer_id = self.reassign_to if self.reassign_to is not None else order.customer_id
        return OrderConfirmation(
            customer_id=customer_id,
            order_id=order_id,
            order_number=f"ORD-{order_id:06d}",
        )

    def reset(self):
        self.next_order_id = self.first_order_id
        self.reassign_to = None
        self.fulfilled.clear()
