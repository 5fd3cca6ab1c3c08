"""PrinterSession that renders documents as plain text.

Used by ``--preview`` on the command line and by tests that want to
look at a whole document at once. Codes and images become marker lines.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from posprint.domain.model.blocks import (
    Align,
    Barcode,
    Cut,
    Feed,
    Image,
    Justification,
    PrintableBlock,
    Pulse,
    QRCode,
    Rule,
    Text,
)
from posprint.domain.repository.printer_session import PrinterSession
from posprint.domain.service.layout import ColumnLayout

PAPER_WIDTH = 48


class TextPreviewSession(PrinterSession):

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._open = True
        self.lines: list[str] = []

    @property
    def is_ready(self) -> bool:
        return self._open

    def transmit(self, blocks: Sequence[PrintableBlock]) -> None:
        rendered = render(blocks)
        self.lines.extend(rendered)
        if self._stream is not None:
            self._stream.write("\n".join(rendered) + "\n")

    def close(self) -> None:
        self._open = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def render(blocks: Sequence[PrintableBlock]) -> list[str]:
    lines: list[str] = []
    align = Align.LEFT

    def emit(content: str) -> None:
        for line in content.split("\n"):
            lines.append(line.center(PAPER_WIDTH).rstrip() if align is Align.CENTER else line)

    for block in blocks:
        if isinstance(block, Justification):
            align = block.align
        elif isinstance(block, Text):
            emit(block.content)
        elif isinstance(block, Rule):
            emit(ColumnLayout.rule(block.width))
        elif isinstance(block, Feed):
            lines.extend([""] * block.lines)
        elif isinstance(block, Image):
            emit(f"[image {block.ref}]")
        elif isinstance(block, Barcode):
            emit(f"[barcode {block.payload}]")
        elif isinstance(block, QRCode):
            emit(f"[qr {block.payload}]")
        elif isinstance(block, Pulse):
            lines.append(f"[drawer pulse pin {block.pin}]")
        elif isinstance(block, Cut):
            lines.append("--- cut ---")
    return lines
