"""Application service: assemble a sales receipt.

Turns a frozen DocumentContext and its attached order into the ordered
list of printable blocks. The sequence is fixed; optional parts (logo,
discount, barcode) are skipped silently when absent.
"""

from __future__ import annotations

from posprint.application.document_context import DocumentContext
from posprint.domain.exceptions import MissingOrderContext, UninitializedSession
from posprint.domain.model.blocks import (
    Align,
    Barcode,
    Cut,
    DoubleWidth,
    Emphasis,
    Feed,
    Image,
    Initialize,
    Justification,
    PrintableBlock,
    Rule,
    Text,
    TextSize,
)
from posprint.domain.model.line_item import LineItem
from posprint.domain.model.order import ReceiptOrder
from posprint.domain.repository.settings_store import SettingsStore
from posprint.domain.repository.text_lookup import TextLookup
from posprint.domain.service.layout import format_timestamp
from posprint.domain.service.line_item_formatter import format_item

NAMESPACE = "receipt"
LEFT_MARGIN = 1


def logo_blocks(context: DocumentContext) -> list[PrintableBlock]:
    if not context.logo:
        return []
    return [Image(context.logo, context.image_mode)]


def text_size_blocks(context: DocumentContext) -> list[PrintableBlock]:
    if context.text_scale.is_default:
        return []
    return [TextSize(context.text_scale.width, context.text_scale.height)]


class ReceiptAssembler:

    def __init__(self, text_lookup: TextLookup, settings: SettingsStore) -> None:
        self._text = text_lookup
        self._settings = settings

    def assemble(
        self,
        context: DocumentContext,
        session_ready: bool,
        copy: bool = False,
    ) -> list[PrintableBlock]:
        """Build the receipt for ``context.order``.

        Raises before producing anything when no session is ready or no
        order is attached, so a receipt is never half printed.
        """
        if not session_ready:
            raise UninitializedSession("Printer has not been initialized.")
        if context.order is None:
            raise MissingOrderContext("A receipt needs an order to print.")

        order = context.order
        blocks: list[PrintableBlock] = [
            Initialize(left_margin=LEFT_MARGIN),
            Justification(Align.CENTER),
        ]
        blocks += text_size_blocks(context)
        blocks += logo_blocks(context)
        blocks += self._store_header(context)
        blocks += self._title(order, copy)
        blocks += self._items(context, order)
        blocks += self._summary(context, order)
        blocks += self._footer(order)

        if context.code_content:
            blocks.append(Barcode(context.code_content))
        blocks += [Feed(2), Cut()]
        return blocks

    # --- Sections -------------------------------------------------------------

    def _store_header(self, context: DocumentContext) -> list[PrintableBlock]:
        street = f"{self._settings.get('company_street')} {self._settings.get('company_street_number')}"
        city = f"{self._settings.get('company_postal_code')} {self._settings.get('company_city')}"
        return [
            DoubleWidth(True),
            Feed(2),
            Text(context.store.name),
            DoubleWidth(False),
            Text(street),
            Text(city),
            Feed(2),
        ]

    def _title(self, order: ReceiptOrder, copy: bool) -> list[PrintableBlock]:
        if copy:
            title = self._label("receipt-copy", "KOPIE BON")
        else:
            title = self._label("receipt", "BON")
        transaction = self._label("transaction_id", "Transactie ID:")
        return [
            Emphasis(True),
            Text(title),
            Emphasis(False),
            Feed(),
            Justification(Align.CENTER),
            Text(f"{transaction} #{order.invoice_id}"),
            Justification(Align.LEFT),
            Feed(2),
        ]

    def _items(self, context: DocumentContext, order: ReceiptOrder) -> list[PrintableBlock]:
        blocks: list[PrintableBlock] = []
        for index, product in enumerate(order.products):
            if index:
                blocks.append(Rule())
            item = LineItem.create(
                product.name, product.quantity, product.unit_price, context.currency
            )
            blocks.append(Text(format_item(item)))
        blocks.append(Feed(2))
        return blocks

    def _summary(self, context: DocumentContext, order: ReceiptOrder) -> list[PrintableBlock]:
        layout = context.layout
        blocks: list[PrintableBlock] = [
            Emphasis(True),
            Text(layout.pad_summary(self._label("subtotal", "Subtotaal"), order.subtotal)),
            Emphasis(False),
            Feed(),
            Rule(),
        ]

        tax_label = self._label("tax-percentage", "BTW")
        for percentage, amount in order.vat_percentages.items():
            blocks.append(Text(layout.pad_summary(f"{tax_label} {percentage}%", amount)))
        blocks += [
            Text(layout.pad_summary(self._label("tax-total", "BTW totaal"), order.tax_total)),
            Rule(),
            Feed(),
        ]

        for payment in order.payments:
            blocks.append(Text(layout.pad_summary(payment.method, payment.amount)))
        blocks += [Rule(), Feed(2)]

        if order.discount > 0:
            blocks += [
                Emphasis(True),
                Text(layout.pad_summary(self._label("discount", "Korting"), order.discount)),
                Emphasis(False),
                Feed(2),
            ]

        blocks += [
            DoubleWidth(True),
            Emphasis(True),
            Text(layout.pad_summary(self._label("total", "Totaal"), order.total, double_width=True)),
            DoubleWidth(False),
            Rule(),
            Emphasis(False),
            Feed(),
        ]
        return blocks

    def _footer(self, order: ReceiptOrder) -> list[PrintableBlock]:
        return [
            Feed(),
            Justification(Align.CENTER),
            Text(self._label("thanks-for-shopping", "Bedankt voor je bezoek!")),
            Feed(),
            Text(format_timestamp(order.created_at)),
            Feed(2),
            Text(f"Email: {self._settings.get('site_to_email')}"),
            Text(f"Webshop: {self._settings.get('site_url')}"),
            Text(f"Telefoon: {self._settings.get('company_phone_number')}"),
            Feed(2),
        ]

    # --- Internal helpers -----------------------------------------------------

    def _label(self, key: str, fallback: str) -> str:
        return self._text.lookup(key, NAMESPACE, fallback)
