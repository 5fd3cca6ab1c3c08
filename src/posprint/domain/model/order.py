"""Order data consumed by the receipt layout.

Orders are owned by the shop system; the printer only reads them.
These dataclasses describe the subset of an order a receipt needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass(frozen=True)
class OrderProduct:
    """A product line as recorded on the order.

    ``price`` is what the line costs in total, not per unit.
    """

    name: str
    quantity: int
    price: Decimal

    @property
    def unit_price(self) -> Decimal:
        """Line price divided by quantity; the line price itself when quantity is 0."""
        if not self.quantity:
            return self.price
        return self.price / self.quantity


@dataclass(frozen=True)
class OrderPayment:
    method: str
    amount: Decimal


@dataclass
class ReceiptOrder:
    """Snapshot of a settled order.

    ``vat_percentages`` maps a percentage label (``"9"``, ``"21"``) to the
    VAT amount charged at that rate. Iteration follows insertion order;
    nothing sorts it.
    """

    invoice_id: str
    products: list[OrderProduct] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    vat_percentages: dict[str, Decimal] = field(default_factory=dict)
    tax_total: Decimal = Decimal("0")
    payments: list[OrderPayment] = field(default_factory=list)
    discount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
