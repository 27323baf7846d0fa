"""Fake email adapter — records order confirmation emails for testing."""

from placement.gateway.port import EmailPort


class FakeEmailer(EmailPort):
    """Email adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send_order_confirmation_email(self, customer_id, order_id) -> None:
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)

        self.sent_emails.append({"customer_id": customer_id, "order_id": order_id})

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
