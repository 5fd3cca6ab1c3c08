"""PrinterSession backed by python-escpos.

Replays printable blocks one by one against an ``escpos`` printer
object. Connector selection lives in ``create_printer``; the session
itself only ever talks to the common ``Escpos`` interface.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from escpos.escpos import Escpos
from escpos.printer import CupsPrinter, Dummy, File, Network, Win32Raw

from posprint.domain.model.blocks import (
    Barcode,
    Cut,
    DoubleWidth,
    Emphasis,
    Feed,
    Image,
    ImageMode,
    Initialize,
    Justification,
    PrintableBlock,
    Pulse,
    QRCode,
    Rule,
    Text,
    TextSize,
)
from posprint.domain.repository.printer_session import PrinterSession
from posprint.domain.service.layout import ColumnLayout

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_PORT = 9100
DEFAULT_FILE_DEVICE = "/dev/stdout"
QR_MODULE_SIZE = 8

_GS = b"\x1d"

_IMAGE_IMPL = {
    ImageMode.GRAPHICS: "graphics",
    ImageMode.BIT_IMAGE: "bitImageRaster",
    ImageMode.BIT_IMAGE_COLUMN: "bitImageColumn",
}


def create_printer(
    connector: str,
    device: str | None = None,
    port: int = DEFAULT_NETWORK_PORT,
) -> Escpos:
    """Instantiate the escpos printer for a connector kind.

    Unknown kinds fall back to a file connector on stdout.
    """
    kind = (connector or "").lower()
    if kind == "network":
        return Network(device, port=port)
    if kind == "cups":
        return CupsPrinter(device)
    if kind == "windows":
        return Win32Raw(device)
    if kind == "dummy":
        return Dummy()
    if kind != "file":
        logger.warning(f"Unknown connector '{connector}', printing to {DEFAULT_FILE_DEVICE}")
    return File(device or DEFAULT_FILE_DEVICE)


class EscposPrinterSession(PrinterSession):

    def __init__(self, printer: Escpos | None) -> None:
        self._printer = printer
        self._text_size: TextSize | None = None

    # --- PrinterSession interface ---------------------------------------------

    @property
    def is_ready(self) -> bool:
        return self._printer is not None

    def transmit(self, blocks: Sequence[PrintableBlock]) -> None:
        for block in blocks:
            self._apply(block)

    def close(self) -> None:
        if self._printer is None:
            return
        logger.info("Closing printer connection")
        self._printer.close()
        self._printer = None

    # --- Block replay ---------------------------------------------------------

    def _apply(self, block: PrintableBlock) -> None:
        p = self._printer
        if isinstance(block, Text):
            p.text(block.content + "\n")
        elif isinstance(block, Rule):
            p.text(ColumnLayout.rule(block.width) + "\n")
        elif isinstance(block, Feed):
            p.ln(block.lines)
        elif isinstance(block, Emphasis):
            p.set(bold=block.on)
        elif isinstance(block, Justification):
            p.set(align=block.align.value)
        elif isinstance(block, DoubleWidth):
            if block.on:
                p.set(double_width=True)
            elif self._text_size is not None:
                # leaving double width restores the document scale
                self._set_text_size(self._text_size)
            else:
                p.set(normal_textsize=True)
        elif isinstance(block, TextSize):
            self._text_size = block
            self._set_text_size(block)
        elif isinstance(block, Initialize):
            self._text_size = None
            p.hw("INIT")
            margin = block.left_margin
            p._raw(_GS + b"L" + bytes((margin % 256, margin // 256)))
        elif isinstance(block, Image):
            p.ln()
            p.image(block.ref, impl=_IMAGE_IMPL[block.mode])
            p.ln()
        elif isinstance(block, Barcode):
            p.barcode("{B" + block.payload, "CODE128", function_type="B")
        elif isinstance(block, QRCode):
            p.qr(block.payload, size=QR_MODULE_SIZE)
        elif isinstance(block, Cut):
            p.cut()
        elif isinstance(block, Pulse):
            # ESC p m t1 t2, pulse times in units of 2 ms
            p.cashdraw([27, 112, block.pin, block.on_ms // 2, block.off_ms // 2])
        else:
            raise TypeError(f"Unsupported block: {block!r}")

    def _set_text_size(self, size: TextSize) -> None:
        self._printer.set(custom_size=True, width=size.width, height=size.height)
