"""Column layout for fixed-width receipt lines.

Thermal receipts are laid out on a 48-character line (24 in double-width
mode). Headers split the line into two equal columns; summary rows use
a narrow label column and a wide, right-aligned value column.

Padding never truncates: a field longer than its column is emitted in
full and pushes the line past its nominal width.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from posprint.domain.model.blocks import DEFAULT_RULE_WIDTH
from posprint.domain.model.value_objects import DEFAULT_CURRENCY, format_amount

HEADER_COLUMN_WIDTH = 16
HEADER_COLUMN_WIDTH_DOUBLE = 8

SUMMARY_LABEL_WIDTH = 12
SUMMARY_VALUE_WIDTH = 36
SUMMARY_LABEL_WIDTH_DOUBLE = 6
SUMMARY_VALUE_WIDTH_DOUBLE = 19


@dataclass(frozen=True)
class ColumnLayout:
    currency: str = DEFAULT_CURRENCY

    def format_currency(self, value: str | int | Decimal) -> str:
        return f"{self.currency}{format_amount(value)}"

    def pad_header(self, left: str, right: str = "", double_width: bool = False) -> str:
        width = HEADER_COLUMN_WIDTH_DOUBLE if double_width else HEADER_COLUMN_WIDTH
        return left.ljust(width) + right.rjust(width)

    def pad_summary(
        self,
        label: str,
        value: str | int | Decimal,
        double_width: bool = False,
        format_as_currency: bool = True,
    ) -> str:
        if double_width:
            label_width, value_width = SUMMARY_LABEL_WIDTH_DOUBLE, SUMMARY_VALUE_WIDTH_DOUBLE
        else:
            label_width, value_width = SUMMARY_LABEL_WIDTH, SUMMARY_VALUE_WIDTH

        text = self.format_currency(value) if format_as_currency else str(value)
        return label.ljust(label_width) + text.rjust(value_width)

    @staticmethod
    def rule(width: int = DEFAULT_RULE_WIDTH) -> str:
        return "-" * width


def format_timestamp(moment: datetime) -> str:
    """``5 March 2024 14:03:09``, day without leading zero."""
    return f"{moment.day} {moment.strftime('%B %Y %H:%M:%S')}"
