"""Formats a single product line for the receipt body.

Output is two lines::

    2 x Coffee
    €2,50                                      €5,00

The second line reuses the summary row budgets so item totals line up
with the subtotal and total rows printed below them.
"""

from __future__ import annotations

from decimal import Decimal

from posprint.domain.model.line_item import LineItem
from posprint.domain.model.value_objects import DEFAULT_CURRENCY
from posprint.domain.service.layout import ColumnLayout


def format_line_item(
    name: str,
    quantity: int,
    unit_price: str | int | Decimal,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    return format_item(LineItem.create(name, quantity, unit_price, currency))


def format_item(item: LineItem) -> str:
    layout = ColumnLayout(item.unit_price.currency)
    return "\n".join([
        f"{item.quantity.value} x {item.name}",
        layout.pad_summary(str(item.unit_price), item.line_total.amount),
    ])
