"""Shared BDD fixtures and step definitions for order placement."""

from decimal import Decimal

import pytest
from placement.customer.customer import Customer
from placement.order.errors import OrderValidationError
from placement.order.order import Order, OrderItem, Product
from placement.order.summary import TaxEntry
from pytest_bdd import given, parsers, then, when


@pytest.fixture
def placement_result():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer {customer_id:d} living at postal code "{postal_code}" in "{country}"'))
def _customer(customers, customer_id, postal_code, country):
    customers.add(Customer(customer_id=customer_id, postal_code=postal_code, country=country))


@given(parsers.cfparse('the tax rate service charges "{first}" at {first_rate} and "{second}" at {second_rate} there'))
def _taxes(tax_rates, customers, first, first_rate, second, second_rate):
    customer = customers.get(1)
    tax_rates.register(
        customer.postal_code,
        customer.country,
        [TaxEntry(first, Decimal(first_rate)), TaxEntry(second, Decimal(second_rate))],
    )


@given(parsers.cfparse('"{sku}" is out of stock'))
def _out_of_stock(inventory, sku):
    inventory.stock[sku] = False


@given(
    parsers.cfparse('an order for {qty1:d} of "{sku1}" at {price1} and {qty2:d} of "{sku2}" at {price2}'),
    target_fixture="proposed_order",
)
def _order(qty1, sku1, price1, qty2, sku2, price2):
    return Order(
        customer_id=1,
        order_items=[
            OrderItem(product=Product(product_id=1, sku=sku1, price=Decimal(price1)), quantity=qty1),
            OrderItem(product=Product(product_id=2, sku=sku2, price=Decimal(price2)), quantity=qty2),
        ],
    )


@given("an empty order", target_fixture="proposed_order")
def _empty_order():
    return Order(customer_id=1)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the order is placed")
def _place(order_service, proposed_order, placement_result):
    try:
        placement_result["summary"] = order_service.place_order(proposed_order)
    except OrderValidationError as exc:
        placement_result["error"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is fulfilled once")
def _fulfilled_once(fulfillment, proposed_order):
    assert fulfillment.fulfilled == [proposed_order]


@then(parsers.cfparse("the summary net total is {amount}"))
def _net_total(placement_result, amount):
    assert placement_result["summary"].net_total == Decimal(amount)


@then(parsers.cfparse("the summary total is {amount}"))
def _total(placement_result, amount):
    assert placement_result["summary"].total == Decimal(amount)


@then(parsers.cfparse('the summary lists taxes "{descriptions}"'))
def _taxes_listed(placement_result, descriptions):
    expected = [d.strip() for d in descriptions.split(",")]
    assert [tax.description for tax in placement_result["summary"].taxes] == expected


@then("a confirmation email is sent for the summary")
def _email_sent(emails, placement_result):
    summary = placement_result["summary"]
    assert emails.sent_emails == [{"customer_id": summary.customer_id, "order_id": summary.order_id}]


@then(parsers.cfparse('the order is rejected with "{message}"'))
def _rejected(placement_result, message):
    assert "summary" not in placement_result
    assert message in placement_result["error"].violations


@then("nothing is fulfilled")
def _nothing_fulfilled(fulfillment):
    assert fulfillment.fulfilled == []


@then("no confirmation email is sent")
def _no_email(emails):
    assert emails.sent_emails == []
