"""Aggregated business-rule failure raised when an order cannot be placed."""

from collections.abc import Iterable

from protean.exceptions import ValidationError


class OrderValidationError(ValidationError):
    """All business-rule violations found on an order, reported together.

    ``violations`` is a read-only tuple of distinct messages in rule order.
    ``messages`` follows the Protean convention of field-keyed lists, with every
    violation filed under ``"order"``; it is a copy, and changing it does not
    affect ``violations``.
    """

    def __init__(self, violations: Iterable[str]):
        if isinstance(violations, str):
            raise TypeError("OrderValidationError expects a collection of messages, not a single string")

        violations = tuple(dict.fromkeys(violations))
        if not violations:
            raise ValueError("OrderValidationError requires at least one violation")

        self._violations = violations
        super().__init__({"order": list(violations)})

    @property
    def violations(self) -> tuple[str, ...]:
        return self._violations

    def __reduce__(self):
        return (type(self), (self._violations,))
