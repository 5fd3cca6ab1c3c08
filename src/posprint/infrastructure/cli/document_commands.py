"""CLI commands for printing documents."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from posprint.application.open_drawer import OpenDrawerHandler
from posprint.application.print_document import (
    PrintPaymentRequestHandler,
    PrintReceiptHandler,
)
from posprint.domain.exceptions import DomainException
from posprint.infrastructure import bootstrap
from posprint.infrastructure.config import AppConfig, load_config
from posprint.infrastructure.persistence.json_order_source import JsonOrderSource


def _config(ctx: click.Context) -> AppConfig:
    try:
        return load_config(ctx.obj.get("config_path") if ctx.obj else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _parse_amount(raw: str) -> Decimal:
    """Accept both '12.50' and '12,50'."""
    try:
        return Decimal(raw.replace(",", "."))
    except InvalidOperation:
        raise click.BadParameter(f"Invalid amount '{raw}'.")


_order_option = click.option(
    "--order",
    "order_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Order JSON file.",
)
_preview_option = click.option(
    "--preview", is_flag=True, default=False, help="Print as text to stdout instead."
)


@click.command("receipt")
@_order_option
@click.option("--copy", is_flag=True, default=False, help="Print as a receipt copy.")
@click.option("--barcode", default=None, help="Barcode payload printed under the footer.")
@_preview_option
@click.pass_context
def print_receipt(
    ctx: click.Context,
    order_path: Path,
    copy: bool,
    barcode: str | None,
    preview: bool,
) -> None:
    """Print a sales receipt for an order."""
    config = _config(ctx)

    try:
        order = JsonOrderSource(order_path).load()
        context = (
            bootstrap.context_builder(config, order)
            .set_transaction_id(order.invoice_id)
            .set_qr_code(barcode)
            .build()
        )
        handler = PrintReceiptHandler(
            session=bootstrap.printer_session(config, preview),
            text_lookup=bootstrap.text_lookup(config),
            settings=bootstrap.settings_store(config),
        )
        handler.handle(context, copy=copy)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("request")
@_order_option
@click.option("--amount", required=True, help="Amount to request, e.g. 12.50.")
@click.option("--transaction-id", required=True, help="Payment terminal transaction id.")
@click.option("--qr", default=None, help="QR code payload to scan for payment.")
@_preview_option
@click.pass_context
def print_request(
    ctx: click.Context,
    order_path: Path,
    amount: str,
    transaction_id: str,
    qr: str | None,
    preview: bool,
) -> None:
    """Print a payment request with a QR code."""
    config = _config(ctx)
    request_amount = _parse_amount(amount)

    try:
        order = JsonOrderSource(order_path).load()
        context = (
            bootstrap.context_builder(config, order)
            .set_request_amount(request_amount)
            .set_transaction_id(transaction_id)
            .set_qr_code(qr)
            .build()
        )
        handler = PrintPaymentRequestHandler(bootstrap.printer_session(config, preview))
        handler.handle(context)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("drawer")
@click.option("--pin", type=click.IntRange(0, 1), default=0, help="Drawer kick connector pin.")
@click.pass_context
def drawer_open(ctx: click.Context, pin: int) -> None:
    """Open the cash drawer attached to the printer."""
    config = _config(ctx)
    handler = OpenDrawerHandler(bootstrap.printer_session(config))
    if not handler.handle(pin=pin):
        raise click.ClickException("Printer has not been initialized.")
    click.echo("Drawer opened.")
