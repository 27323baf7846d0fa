"""Fake tax rate service — serves tax entries from an in-memory table."""

from collections.abc import Sequence

from placement.gateway.port import TaxRatePort
from placement.order.summary import TaxEntry


class FakeTaxRates(TaxRatePort):
    """Tax rates keyed by ``(postal_code, country)``, with a fallback list."""

    def __init__(self, default_entries: Sequence[TaxEntry] = ()):
        self.entries: dict[tuple[str, str | None], list[TaxEntry]] = {}
        self.default_entries = list(default_entries)
        self.calls: list[tuple[str, str | None]] = []

    def register(self, postal_code: str, country: str | None, entries: Sequence[TaxEntry]) -> None:
        self.entries[(postal_code, country)] = list(entries)

    def get_tax_entries(self, postal_code: str, country: str | None) -> list[TaxEntry]:
        self.calls.append((postal_code, country))
        return list(self.entries.get((postal_code, country), self.default_entries))

    def reset(self):
        self.entries.clear()
        self.default_entries = []
        self.calls.clear()
