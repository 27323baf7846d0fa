"""Fake customer directory — looks customers up in memory."""

from protean.exceptions import ObjectNotFoundError

from placement.customer.customer import Customer
from placement.gateway.port import CustomerPort


class FakeCustomerDirectory(CustomerPort):
    """Customer directory holding registered customers by id."""

    def __init__(self, customers: list[Customer] | None = None):
        self.customers: dict = {customer.customer_id: customer for customer in customers or []}
        self.calls: list = []

    def add(self, customer: Customer) -> None:
        self.customers[customer.customer_id] = customer

    def get(self, customer_id) -> Customer:
        self.calls.append(customer_id)
        try:
            return self.customers[customer_id]
        except KeyError:
            raise ObjectNotFoundError({"_entity": f"Customer {customer_id} not found"}) from None

    def reset(self):
        self.customers.clear()
        self.calls.clear()
