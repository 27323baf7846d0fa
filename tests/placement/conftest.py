from decimal import Decimal

import pytest
from placement.customer.customer import Customer
from placement.gateway.fake_customers import FakeCustomerDirectory
from placement.gateway.fake_email import FakeEmailer
from placement.gateway.fake_fulfillment import FakeFulfillment
from placement.gateway.fake_inventory import FakeInventory
from placement.gateway.fake_tax_rates import FakeTaxRates
from placement.order.order import Order, OrderItem, Product
from placement.order.service import OrderService
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def placement_bed():
    from placement.domain import placement

    bed = DomainFixture(placement)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(placement_bed):
    with placement_bed.domain_context():
        yield


def make_order(customer_id=1, second_sku="BCDEF"):
    """Two-line order: 12 x 10.0 (ABCDE) and 3 x 11.0 (second_sku)."""
    return Order(
        customer_id=customer_id,
        order_items=[
            OrderItem(product=Product(product_id=5, sku="ABCDE", price=Decimal("10.0")), quantity=12),
            OrderItem(product=Product(product_id=6, sku=second_sku, price=Decimal("11.0")), quantity=3),
        ],
    )


@pytest.fixture
def order():
    return make_order()


@pytest.fixture
def customer():
    return Customer(customer_id=1, postal_code="99999", country="US", state_or_province="WA")


@pytest.fixture
def inventory():
    return FakeInventory()


@pytest.fixture
def customers(customer):
    return FakeCustomerDirectory([customer])


@pytest.fixture
def tax_rates():
    return FakeTaxRates()


@pytest.fixture
def fulfillment():
    return FakeFulfillment(first_order_id=7)


@pytest.fixture
def emails():
    return FakeEmailer()


@pytest.fixture
def order_service(inventory, customers, emails, fulfillment, tax_rates):
    return OrderService(
        inventory=inventory,
        customers=customers,
        emails=emails,
        fulfillment=fulfillment,
        tax_rates=tax_rates,
    )


@pytest.fixture
def order_factory():
    return make_order
