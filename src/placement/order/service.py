"""Order placement — validates, fulfills, prices and confirms an order.

Flow:
    1. Validate the order against every business rule → OrderValidationError
    2. Fulfill the order → OrderConfirmation
    3. Resolve the customer named on the confirmation
    4. Look up tax entries for the customer's postal code and country
    5. Compute the net total (exact Decimal arithmetic)
    6. Assemble the OrderSummary
    7. Email the order confirmation to the customer
    8. Return the summary

Validation failure stops the flow before anything is fulfilled or sent.
Exceptions raised by collaborators propagate to the caller unchanged.
"""

from placement.gateway.port import CustomerPort, EmailPort, FulfillmentPort, InventoryPort, TaxRatePort
from placement.order.errors import OrderValidationError
from placement.order.order import Order
from placement.order.summary import OrderSummary
from placement.order.validation import OrderValidator
from placement.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """Places orders through the five injected collaborator ports."""

    def __init__(
        self,
        inventory: InventoryPort,
        customers: CustomerPort,
        emails: EmailPort,
        fulfillment: FulfillmentPort,
        tax_rates: TaxRatePort,
    ):
        self.customers = customers
        self.emails = emails
        self.fulfillment = fulfillment
        self.tax_rates = tax_rates
        self.validator = OrderValidator(inventory)

    @property
    def inventory(self) -> InventoryPort:
        return self.validator.inventory

    @classmethod
    def from_gateways(cls) -> "OrderService":
        """Build a service wired to the adapters currently in the gateway registry."""
        from placement import gateway

        return cls(
            inventory=gateway.get_inventory(),
            customers=gateway.get_customers(),
            emails=gateway.get_emails(),
            fulfillment=gateway.get_fulfillment(),
            tax_rates=gateway.get_tax_rates(),
        )

    def place_order(self, order: Order) -> OrderSummary:
        """Place ``order`` and return its summary.

        Raises:
            OrderValidationError: with every violated rule, when the order is invalid.
        """
        try:
            self.validator.validate(order)
        except OrderValidationError as exc:
            logger.info("Order rejected", customer_id=order.customer_id, violations=list(exc.violations))
            raise

        confirmation = self.fulfillment.fulfill(order)
        logger.info(
            "Order fulfilled",
            order_id=confirmation.order_id,
            order_number=confirmation.order_number,
        )

        customer = self.customers.get(confirmation.customer_id)
        taxes = self.tax_rates.get_tax_entries(customer.postal_code, customer.country)

        summary = OrderSummary(
            customer_id=confirmation.customer_id,
            order_id=confirmation.order_id,
            order_number=confirmation.order_number,
            net_total=order.net_total,
            taxes=taxes,
            order_items=order.order_items,
        )
        logger.info(
            "Order summary assembled",
            order_id=summary.order_id,
            net_total=str(summary.net_total),
            tax_entries=len(summary.taxes),
        )

        self.emails.send_order_confirmation_email(summary.customer_id, summary.order_id)
        logger.info("Order confirmation email dispatched", customer_id=summary.customer_id, order_id=summary.order_id)

        return summary
