"""Document context: everything a document needs, frozen before assembly.

The builder keeps the familiar setter-style configuration of a receipt
printer (``set_store``, ``add_item``, ``set_tax`` ...) but the assemblers
only ever see the immutable ``DocumentContext`` it produces, so the
order of setter calls cannot leak into the printed layout.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from posprint.domain.model.blocks import ImageMode
from posprint.domain.model.line_item import LineItem
from posprint.domain.model.order import ReceiptOrder
from posprint.domain.model.store import StoreProfile
from posprint.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    TextScale,
    to_decimal,
)
from posprint.domain.service.calculator import MonetaryCalculator, MonetaryTotals
from posprint.domain.service.layout import ColumnLayout


@dataclass(frozen=True)
class DocumentContext:
    store: StoreProfile
    currency: str = DEFAULT_CURRENCY
    items: tuple[LineItem, ...] = ()
    totals: MonetaryTotals = field(default_factory=MonetaryTotals)
    logo: str | None = None
    image_mode: ImageMode = ImageMode.GRAPHICS
    code_payload: str | Mapping | None = None
    transaction_id: str = ""
    request_amount: Decimal = Decimal("0")
    order: ReceiptOrder | None = None
    text_scale: TextScale = field(default_factory=TextScale)

    @property
    def layout(self) -> ColumnLayout:
        return ColumnLayout(self.currency)

    @property
    def code_content(self) -> str | None:
        """Payload as printable text, or None when nothing should print.

        Text payloads print as-is; structured payloads are JSON-encoded.
        """
        if not self.code_payload:
            return None
        if isinstance(self.code_payload, str):
            return self.code_payload
        return json.dumps(dict(self.code_payload), separators=(",", ":"))


class DocumentContextBuilder:
    """Collects document settings and line items, then freezes them."""

    def __init__(self) -> None:
        self._store = StoreProfile(name="")
        self._currency = DEFAULT_CURRENCY
        self._calculator = MonetaryCalculator()
        self._logo: str | None = None
        self._image_mode = ImageMode.GRAPHICS
        self._code_payload: str | Mapping | None = None
        self._transaction_id = ""
        self._request_amount = Decimal("0")
        self._order: ReceiptOrder | None = None
        self._text_scale = TextScale()

    # --- Identity ------------------------------------------------------------

    def set_store(
        self,
        name: str,
        address: str = "",
        phone: str = "",
        email: str = "",
        website: str = "",
    ) -> DocumentContextBuilder:
        self._store = StoreProfile(name, address, phone, email, website)
        return self

    def set_currency(self, currency: str) -> DocumentContextBuilder:
        self._currency = currency
        return self

    def set_logo(
        self, logo: str | None, mode: ImageMode = ImageMode.GRAPHICS
    ) -> DocumentContextBuilder:
        self._logo = logo
        self._image_mode = mode
        return self

    def set_text_size(self, width: int = 1, height: int = 1) -> DocumentContextBuilder:
        self._text_scale = TextScale(width, height)
        return self

    # --- Content -------------------------------------------------------------

    def set_order(self, order: ReceiptOrder | None) -> DocumentContextBuilder:
        self._order = order
        return self

    def add_item(self, name: str, quantity: int, price) -> DocumentContextBuilder:
        """Add a line priced in the currency configured at this moment."""
        self._calculator.add_item(LineItem.create(name, quantity, price, self._currency))
        return self

    def set_transaction_id(self, transaction_id: str) -> DocumentContextBuilder:
        self._transaction_id = transaction_id
        return self

    def set_qr_code(self, payload: str | Mapping | None) -> DocumentContextBuilder:
        self._code_payload = payload
        return self

    def set_request_amount(self, amount) -> DocumentContextBuilder:
        self._request_amount = to_decimal(amount)
        return self

    # --- Totals --------------------------------------------------------------

    def calculate_subtotal(self) -> DocumentContextBuilder:
        self._calculator.calculate_subtotal()
        return self

    def set_tax(self, rate) -> DocumentContextBuilder:
        self._calculator.set_tax(rate)
        return self

    def calculate_grand_total(self) -> DocumentContextBuilder:
        self._calculator.calculate_grand_total()
        return self

    # --- Result --------------------------------------------------------------

    def build(self) -> DocumentContext:
        return DocumentContext(
            store=self._store,
            currency=self._currency,
            items=tuple(self._calculator.items),
            totals=self._calculator.snapshot(),
            logo=self._logo,
            image_mode=self._image_mode,
            code_payload=self._code_payload,
            transaction_id=self._transaction_id,
            request_amount=self._request_amount,
            order=self._order,
            text_scale=self._text_scale,
        )
