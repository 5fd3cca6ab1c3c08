"""Reads ReceiptOrder snapshots from JSON files.

Expected shape::

    {
      "invoice_id": "2024-0042",
      "created_at": "2024-03-05T14:03:09",
      "products": [{"name": "Coffee", "quantity": 2, "price": "5.00"}],
      "subtotal": "5.00",
      "vat_percentages": {"9": "0.41"},
      "tax_total": "0.41",
      "payments": [{"method": "Pin", "amount": "5.00"}],
      "discount": "0",
      "total": "5.00"
    }

A product's ``price`` is the line total; the receipt derives the unit
price from it.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from posprint.domain.exceptions import ConfigurationError
from posprint.domain.model.order import OrderPayment, OrderProduct, ReceiptOrder
from posprint.domain.model.value_objects import to_decimal


class JsonOrderSource:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> ReceiptOrder:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Cannot read order file {self._file_path}: {exc}") from exc
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Malformed order file {self._file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> ReceiptOrder:
        products = [
            OrderProduct(
                name=p["name"],
                quantity=int(p["quantity"]),
                price=to_decimal(p["price"]),
            )
            for p in raw.get("products", [])
        ]
        payments = [
            OrderPayment(method=p["method"], amount=to_decimal(p["amount"]))
            for p in raw.get("payments", [])
        ]
        order = ReceiptOrder(
            invoice_id=str(raw["invoice_id"]),
            products=products,
            subtotal=to_decimal(raw.get("subtotal", "0")),
            vat_percentages={
                str(pct): to_decimal(amount)
                for pct, amount in (raw.get("vat_percentages") or {}).items()
            },
            tax_total=to_decimal(raw.get("tax_total", "0")),
            payments=payments,
            discount=to_decimal(raw.get("discount", "0")),
            total=to_decimal(raw.get("total", "0")),
        )
        if "created_at" in raw:
            order.created_at = datetime.fromisoformat(raw["created_at"])
        return order
