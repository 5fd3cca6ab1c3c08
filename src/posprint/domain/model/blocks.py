"""Printable blocks: the output of document assembly.

A document is an ordered list of these. They carry no behavior; a
printer session interprets them against a transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

DEFAULT_RULE_WIDTH = 47


class Align(Enum):
    LEFT = "left"
    CENTER = "center"


class ImageMode(Enum):
    """How a bitmap is sent to the printer."""

    GRAPHICS = 0
    BIT_IMAGE = 1
    BIT_IMAGE_COLUMN = 2


@dataclass(frozen=True)
class Initialize:
    """Reset the device and set the left print margin (in dots)."""

    left_margin: int = 0


@dataclass(frozen=True)
class Text:
    """One line of text; the session terminates it with a newline."""

    content: str


@dataclass(frozen=True)
class Rule:
    """A dashed separator line ``width`` characters long."""

    width: int = DEFAULT_RULE_WIDTH


@dataclass(frozen=True)
class Emphasis:
    on: bool


@dataclass(frozen=True)
class Justification:
    align: Align


@dataclass(frozen=True)
class DoubleWidth:
    on: bool


@dataclass(frozen=True)
class TextSize:
    width: int
    height: int


@dataclass(frozen=True)
class Image:
    ref: str
    mode: ImageMode = ImageMode.GRAPHICS


@dataclass(frozen=True)
class Barcode:
    """CODE128 barcode."""

    payload: str


@dataclass(frozen=True)
class QRCode:
    payload: str


@dataclass(frozen=True)
class Feed:
    lines: int = 1


@dataclass(frozen=True)
class Cut:
    pass


@dataclass(frozen=True)
class Pulse:
    """Kick the cash drawer connected to ``pin``."""

    pin: int = 0
    on_ms: int = 120
    off_ms: int = 240


PrintableBlock = Union[
    Initialize,
    Text,
    Rule,
    Emphasis,
    Justification,
    DoubleWidth,
    TextSize,
    Image,
    Barcode,
    QRCode,
    Feed,
    Cut,
    Pulse,
]
