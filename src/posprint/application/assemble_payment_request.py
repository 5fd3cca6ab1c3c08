"""Application service: assemble a payment request slip.

A payment request shows a QR code the customer scans to pay, plus the
requested amount. The amount comes from the context, not from order
lines; the attached order only supplies the printed timestamp.
"""

from __future__ import annotations

from posprint.application.assemble_receipt import logo_blocks, text_size_blocks
from posprint.application.document_context import DocumentContext
from posprint.domain.exceptions import MissingOrderContext, UninitializedSession
from posprint.domain.model.blocks import (
    Align,
    Cut,
    DoubleWidth,
    Emphasis,
    Feed,
    Initialize,
    Justification,
    PrintableBlock,
    QRCode,
    Rule,
    Text,
)
from posprint.domain.service.layout import format_timestamp

TITLE = "PAYMENT REQUEST"
INSTRUCTION = "Please scan the code below\nto make payment"
DISCLAIMER = "This is not a proof of payment."


class PaymentRequestAssembler:

    def assemble(self, context: DocumentContext, session_ready: bool) -> list[PrintableBlock]:
        if not session_ready:
            raise UninitializedSession("Printer has not been initialized.")
        if context.order is None:
            raise MissingOrderContext("A payment request needs an order for its timestamp.")

        layout = context.layout
        total = layout.pad_summary("TOTAL", context.request_amount, double_width=True)
        header = layout.pad_header(f"TID: {context.transaction_id}")

        blocks: list[PrintableBlock] = [
            Initialize(),
            Feed(),
            Justification(Align.CENTER),
        ]
        blocks += text_size_blocks(context)
        blocks += logo_blocks(context)
        blocks += [
            Text(context.store.name),
            Text(context.store.address),
            Text(header),
            Feed(),
            Rule(),
            Emphasis(True),
            Text(TITLE),
            Emphasis(False),
            Rule(),
            Feed(),
            Text(INSTRUCTION),
            Feed(),
        ]
        if context.code_content:
            blocks.append(QRCode(context.code_content))
        blocks += [
            Feed(),
            DoubleWidth(True),
            Text(total),
            Feed(),
            DoubleWidth(False),
            Feed(),
            Justification(Align.CENTER),
            Text(DISCLAIMER),
            Feed(),
            Text(format_timestamp(context.order.created_at)),
            Feed(2),
            Cut(),
        ]
        return blocks
