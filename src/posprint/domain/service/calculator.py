"""Monetary calculations for document totals.

Every amount is truncated toward zero before it takes part in a
calculation: quantities and unit prices per item, the tax rate and the
subtotal before tax, subtotal and tax before the grand total. Totals
printed by older firmware were computed this way and receipts must
match them to the cent, so there is no rounding-mode setting.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal

from posprint.domain.model.line_item import LineItem

DEFAULT_TAX_RATE = Decimal("10")

_ZERO = Decimal("0")


def _truncate(value) -> int:
    return int(value)


def calculate_subtotal(items: Iterable[LineItem]) -> Decimal:
    total = 0
    for item in items:
        total += _truncate(item.quantity.value) * _truncate(item.unit_price.amount)
    return Decimal(total)


def calculate_tax(rate, subtotal) -> Decimal:
    """``rate`` percent of ``subtotal``, both truncated, result truncated."""
    raw = Decimal(_truncate(rate) * _truncate(subtotal)) / 100
    return raw.to_integral_value(rounding=ROUND_DOWN)


def calculate_grand_total(subtotal, tax) -> Decimal:
    return Decimal(_truncate(subtotal) + _truncate(tax))


@dataclass
class MonetaryTotals:
    subtotal: Decimal = _ZERO
    tax_rate: Decimal = DEFAULT_TAX_RATE
    tax: Decimal = _ZERO
    grand_total: Decimal = _ZERO


class MonetaryCalculator:
    """Keeps running totals for a list of line items.

    The subtotal is only recomputed when it is exactly zero at the moment
    tax or the grand total is requested. Items added after the subtotal
    was computed are NOT reflected until ``calculate_subtotal()`` is
    called again explicitly. Callers relying on fresh totals must
    trigger that themselves.
    """

    def __init__(self, items: list[LineItem] | None = None) -> None:
        self._items: list[LineItem] = items if items is not None else []
        self.totals = MonetaryTotals()

    @property
    def items(self) -> list[LineItem]:
        return self._items

    def add_item(self, item: LineItem) -> None:
        self._items.append(item)

    def calculate_subtotal(self) -> Decimal:
        self.totals.subtotal = calculate_subtotal(self._items)
        return self.totals.subtotal

    def set_tax(self, rate) -> Decimal:
        self.totals.tax_rate = Decimal(rate)
        self._ensure_subtotal()
        self.totals.tax = calculate_tax(self.totals.tax_rate, self.totals.subtotal)
        return self.totals.tax

    def calculate_grand_total(self) -> Decimal:
        self._ensure_subtotal()
        self.totals.grand_total = calculate_grand_total(
            self.totals.subtotal, self.totals.tax
        )
        return self.totals.grand_total

    def snapshot(self) -> MonetaryTotals:
        return MonetaryTotals(
            subtotal=self.totals.subtotal,
            tax_rate=self.totals.tax_rate,
            tax=self.totals.tax,
            grand_total=self.totals.grand_total,
        )

    def _ensure_subtotal(self) -> None:
        if self.totals.subtotal == 0:
            self.calculate_subtotal()
