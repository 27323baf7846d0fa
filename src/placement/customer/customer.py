"""Customer value object, as returned by the customer directory."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Customer details needed to look up applicable taxes."""

    customer_id: int | str
    postal_code: str
    country: str | None = None
    state_or_province: str | None = None
