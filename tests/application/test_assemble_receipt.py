"""Tests for the receipt block sequence.

Uses fake text lookup and settings collaborators; no printer.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from posprint.application.assemble_receipt import ReceiptAssembler
from posprint.application.document_context import DocumentContextBuilder
from posprint.domain.exceptions import MissingOrderContext, UninitializedSession
from posprint.domain.model.blocks import (
    Align,
    Barcode,
    Cut,
    DoubleWidth,
    Emphasis,
    Feed,
    Image,
    ImageMode,
    Initialize,
    Justification,
    Rule,
    Text,
    TextSize,
)
from posprint.domain.model.order import OrderPayment, OrderProduct, ReceiptOrder
from posprint.domain.service.layout import ColumnLayout
from posprint.domain.service.line_item_formatter import format_line_item
from tests.fakes import FakeSettingsStore, FakeTextLookup

LAYOUT = ColumnLayout("€")


def _order(**overrides) -> ReceiptOrder:
    values = dict(
        invoice_id="2024-0042",
        products=[OrderProduct("Coffee", 2, Decimal("5.00"))],
        subtotal=Decimal("5.00"),
        vat_percentages={"9": Decimal("0.41")},
        tax_total=Decimal("0.41"),
        payments=[OrderPayment("Pin", Decimal("5.00"))],
        discount=Decimal("0"),
        total=Decimal("5.00"),
        created_at=datetime(2024, 3, 5, 14, 3, 9),
    )
    values.update(overrides)
    return ReceiptOrder(**values)


def _builder(order: ReceiptOrder | None = None) -> DocumentContextBuilder:
    return DocumentContextBuilder().set_store("Koffiebar").set_order(order or _order())


def _assemble(context, copy=False, lookup=None):
    assembler = ReceiptAssembler(lookup or FakeTextLookup(), FakeSettingsStore())
    return assembler.assemble(context, session_ready=True, copy=copy)


def _texts(blocks) -> list[str]:
    return [b.content for b in blocks if isinstance(b, Text)]


class TestReceiptSequence:

    def test_full_sequence(self):
        blocks = _assemble(_builder().build())

        assert blocks == [
            Initialize(left_margin=1),
            Justification(Align.CENTER),
            DoubleWidth(True),
            Feed(2),
            Text("Koffiebar"),
            DoubleWidth(False),
            Text("Markt 1"),
            Text("3511 AA Utrecht"),
            Feed(2),
            Emphasis(True),
            Text("BON"),
            Emphasis(False),
            Feed(),
            Justification(Align.CENTER),
            Text("Transactie ID: #2024-0042"),
            Justification(Align.LEFT),
            Feed(2),
            Text(format_line_item("Coffee", 2, Decimal("2.50"), "€")),
            Feed(2),
            Emphasis(True),
            Text(LAYOUT.pad_summary("Subtotaal", Decimal("5.00"))),
            Emphasis(False),
            Feed(),
            Rule(),
            Text(LAYOUT.pad_summary("BTW 9%", Decimal("0.41"))),
            Text(LAYOUT.pad_summary("BTW totaal", Decimal("0.41"))),
            Rule(),
            Feed(),
            Text(LAYOUT.pad_summary("Pin", Decimal("5.00"))),
            Rule(),
            Feed(2),
            DoubleWidth(True),
            Emphasis(True),
            Text(LAYOUT.pad_summary("Totaal", Decimal("5.00"), double_width=True)),
            DoubleWidth(False),
            Rule(),
            Emphasis(False),
            Feed(),
            Feed(),
            Justification(Align.CENTER),
            Text("Bedankt voor je bezoek!"),
            Feed(),
            Text("5 March 2024 14:03:09"),
            Feed(2),
            Text("Email: info@koffiebar.nl"),
            Text("Webshop: https://koffiebar.nl"),
            Text("Telefoon: 030 123 4567"),
            Feed(2),
            Feed(2),
            Cut(),
        ]

    def test_copy_title(self):
        texts = _texts(_assemble(_builder().build(), copy=True))
        assert "KOPIE BON" in texts
        assert "BON" not in texts

    def test_labels_come_from_lookup(self):
        lookup = FakeTextLookup({("receipt", "total"): "Total", ("receipt", "receipt"): "RECEIPT"})
        texts = _texts(_assemble(_builder().build(), lookup=lookup))
        assert "RECEIPT" in texts
        assert LAYOUT.pad_summary("Total", Decimal("5.00"), double_width=True) in texts
        assert ("receipt", "thanks-for-shopping") in lookup.requested

    def test_ends_with_cut(self):
        assert _assemble(_builder().build())[-1] == Cut()


class TestReceiptItems:

    def test_rule_between_items_not_after_last(self):
        order = _order(products=[
            OrderProduct("Coffee", 2, Decimal("5.00")),
            OrderProduct("Muffin", 1, Decimal("3.00")),
            OrderProduct("Tea", 1, Decimal("1.75")),
        ])
        blocks = _assemble(_builder(order).build())
        first = blocks.index(Text(format_line_item("Coffee", 2, Decimal("2.50"))))

        assert blocks[first:first + 6] == [
            Text(format_line_item("Coffee", 2, Decimal("2.50"))),
            Rule(),
            Text(format_line_item("Muffin", 1, Decimal("3.00"))),
            Rule(),
            Text(format_line_item("Tea", 1, Decimal("1.75"))),
            Feed(2),
        ]

    def test_order_price_is_line_total(self):
        order = _order(products=[OrderProduct("Coffee", 2, Decimal("5.00"))])
        texts = _texts(_assemble(_builder(order).build()))

        assert "2 x Coffee\n" + LAYOUT.pad_summary("€2,50", Decimal("5.00")) in texts

    def test_zero_quantity_prints_line_price_as_unit_price(self):
        order = _order(products=[OrderProduct("Refill", 0, Decimal("1.00"))])
        texts = _texts(_assemble(_builder(order).build()))

        assert "0 x Refill\n" + LAYOUT.pad_summary("€1,00", Decimal("0")) in texts

    def test_negative_line_prints(self):
        order = _order(products=[OrderProduct("Statiegeld retour", 1, Decimal("-0.15"))])
        texts = _texts(_assemble(_builder(order).build()))

        assert "1 x Statiegeld retour\n" + LAYOUT.pad_summary("€-0,15", Decimal("-0.15")) in texts

    def test_no_products(self):
        blocks = _assemble(_builder(_order(products=[])).build())
        assert not any(t.startswith("2 x") for t in _texts(blocks))


class TestReceiptSummary:

    def test_no_discount_row_when_zero(self):
        texts = _texts(_assemble(_builder().build()))
        assert not any(t.startswith("Korting") for t in texts)

    def test_discount_row_emphasized_before_total(self):
        order = _order(discount=Decimal("50"))
        blocks = _assemble(_builder(order).build())
        discount = Text(LAYOUT.pad_summary("Korting", Decimal("50")))

        assert blocks.count(discount) == 1
        at = blocks.index(discount)
        assert blocks[at - 1] == Emphasis(True)
        assert blocks[at + 1] == Emphasis(False)
        total = blocks.index(Text(LAYOUT.pad_summary("Totaal", Decimal("5.00"), double_width=True)))
        assert at < total

    def test_vat_rows_keep_source_order(self):
        order = _order(vat_percentages={"21": Decimal("2.10"), "9": Decimal("0.45")})
        texts = _texts(_assemble(_builder(order).build()))
        rows = [t for t in texts if t.startswith("BTW ") and "%" in t]
        assert rows == [
            LAYOUT.pad_summary("BTW 21%", Decimal("2.10")),
            LAYOUT.pad_summary("BTW 9%", Decimal("0.45")),
        ]

    def test_empty_vat_mapping(self):
        texts = _texts(_assemble(_builder(_order(vat_percentages={})).build()))
        assert not any("%" in t for t in texts)
        assert LAYOUT.pad_summary("BTW totaal", Decimal("0.41")) in texts

    def test_one_row_per_payment(self):
        order = _order(payments=[
            OrderPayment("Contant", Decimal("3.00")),
            OrderPayment("Pin", Decimal("2.00")),
        ])
        texts = _texts(_assemble(_builder(order).build()))
        assert LAYOUT.pad_summary("Contant", Decimal("3.00")) in texts
        assert LAYOUT.pad_summary("Pin", Decimal("2.00")) in texts

    def test_context_currency_used(self):
        context = _builder().set_currency("$").build()
        texts = _texts(_assemble(context))
        assert ColumnLayout("$").pad_summary("Subtotaal", Decimal("5.00")) in texts


class TestReceiptOptionalParts:

    def test_logo(self):
        context = _builder().set_logo("logo.png", ImageMode.BIT_IMAGE_COLUMN).build()
        blocks = _assemble(context)
        assert blocks[2] == Image("logo.png", ImageMode.BIT_IMAGE_COLUMN)

    def test_no_logo_no_image(self):
        assert not any(isinstance(b, Image) for b in _assemble(_builder().build()))

    def test_barcode_before_cut(self):
        blocks = _assemble(_builder().set_qr_code("2024-0042").build())
        assert blocks[-3:] == [Barcode("2024-0042"), Feed(2), Cut()]

    def test_no_barcode_without_payload(self):
        assert not any(isinstance(b, Barcode) for b in _assemble(_builder().build()))

    def test_text_size_after_initialize(self):
        blocks = _assemble(_builder().set_text_size(2, 2).build())
        assert blocks[2] == TextSize(2, 2)

    def test_missing_settings_render_empty(self):
        assembler = ReceiptAssembler(FakeTextLookup(), FakeSettingsStore({}))
        texts = _texts(assembler.assemble(_builder().build(), session_ready=True))
        assert "Email: " in texts
        assert "Telefoon: " in texts


class TestReceiptFailures:

    def test_uninitialized_session(self):
        assembler = ReceiptAssembler(FakeTextLookup(), FakeSettingsStore())
        with pytest.raises(UninitializedSession, match="not been initialized"):
            assembler.assemble(_builder().build(), session_ready=False)

    def test_missing_order(self):
        assembler = ReceiptAssembler(FakeTextLookup(), FakeSettingsStore())
        context = DocumentContextBuilder().set_store("Koffiebar").build()
        with pytest.raises(MissingOrderContext):
            assembler.assemble(context, session_ready=True)

    def test_session_checked_before_order(self):
        assembler = ReceiptAssembler(FakeTextLookup(), FakeSettingsStore())
        with pytest.raises(UninitializedSession):
            assembler.assemble(DocumentContextBuilder().build(), session_ready=False)
