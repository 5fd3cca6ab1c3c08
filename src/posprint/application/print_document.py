"""Application service: Print Receipt / Print Payment Request use cases.

Orchestrates assembly and transmission. A ready session is closed once
the handler is done with it, whether assembly and transmission succeeded
or not. An uninitialized session is left untouched. Errors propagate
unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from posprint.application.assemble_payment_request import PaymentRequestAssembler
from posprint.application.assemble_receipt import ReceiptAssembler
from posprint.application.document_context import DocumentContext
from posprint.domain.model.blocks import PrintableBlock
from posprint.domain.repository.printer_session import PrinterSession
from posprint.domain.repository.settings_store import SettingsStore
from posprint.domain.repository.text_lookup import TextLookup

logger = logging.getLogger(__name__)


def _print(
    session: PrinterSession,
    assemble: Callable[[bool], list[PrintableBlock]],
    kind: str,
) -> list[PrintableBlock]:
    ready = session.is_ready
    try:
        blocks = assemble(ready)
        logger.debug(f"Assembled {kind} with {len(blocks)} blocks")
        session.transmit(blocks)
    finally:
        if ready:
            session.close()
    logger.info(f"Printed {kind}")
    return blocks


class PrintReceiptHandler:

    def __init__(
        self,
        session: PrinterSession,
        text_lookup: TextLookup,
        settings: SettingsStore,
    ) -> None:
        self._session = session
        self._assembler = ReceiptAssembler(text_lookup, settings)

    def handle(self, context: DocumentContext, copy: bool = False) -> list[PrintableBlock]:
        return _print(
            self._session,
            lambda ready: self._assembler.assemble(context, ready, copy=copy),
            "receipt copy" if copy else "receipt",
        )


class PrintPaymentRequestHandler:

    def __init__(self, session: PrinterSession) -> None:
        self._session = session
        self._assembler = PaymentRequestAssembler()

    def handle(self, context: DocumentContext) -> list[PrintableBlock]:
        return _print(
            self._session,
            lambda ready: self._assembler.assemble(context, ready),
            "payment request",
        )
