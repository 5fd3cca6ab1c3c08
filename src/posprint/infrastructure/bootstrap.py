"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import sys

from posprint.application.document_context import DocumentContextBuilder
from posprint.domain.model.order import ReceiptOrder
from posprint.infrastructure.config import AppConfig
from posprint.infrastructure.persistence.dict_settings_store import DictSettingsStore
from posprint.infrastructure.persistence.dict_text_lookup import DictTextLookup
from posprint.infrastructure.printing.escpos_session import (
    EscposPrinterSession,
    create_printer,
)
from posprint.infrastructure.printing.text_preview_session import TextPreviewSession


def text_lookup(config: AppConfig) -> DictTextLookup:
    return DictTextLookup(config.translations)


def settings_store(config: AppConfig) -> DictSettingsStore:
    return DictSettingsStore(config.settings)


def printer_session(
    config: AppConfig, preview: bool = False
) -> EscposPrinterSession | TextPreviewSession:
    if preview:
        return TextPreviewSession(sys.stdout)
    printer = config.printer
    return EscposPrinterSession(create_printer(printer.connector, printer.device, printer.port))


def context_builder(config: AppConfig, order: ReceiptOrder | None = None) -> DocumentContextBuilder:
    """A builder preloaded with the shop identity and order lines."""
    store = config.store
    builder = (
        DocumentContextBuilder()
        .set_currency(config.currency)
        .set_store(store.name, store.address, store.phone, store.email, store.website)
        .set_logo(config.logo, config.image_mode)
        .set_order(order)
    )
    if order is not None:
        for product in order.products:
            builder.add_item(product.name, product.quantity, product.unit_price)
    builder.set_tax(config.tax_rate).calculate_grand_total()
    return builder
