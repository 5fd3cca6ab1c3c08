"""A product line as it appears on a document."""

from __future__ import annotations

from dataclasses import dataclass

from posprint.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """Name, quantity and unit price of one product line.

    Immutable once added to a document context.
    """

    name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def create(name: str, quantity: int, unit_price, currency: str | None = None) -> LineItem:
        price = Money.of(unit_price) if currency is None else Money.of(unit_price, currency)
        return LineItem(name=name, quantity=Quantity(quantity), unit_price=price)
