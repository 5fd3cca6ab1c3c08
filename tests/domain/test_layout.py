"""Unit tests for the column layout rules."""

from datetime import datetime
from decimal import Decimal

import pytest

from posprint.domain.service.layout import ColumnLayout, format_timestamp


@pytest.fixture
def layout():
    return ColumnLayout("€")


class TestPadHeader:

    def test_left_only_fills_both_columns(self, layout):
        assert layout.pad_header("TID: 123", "", False) == "TID: 123" + " " * 8 + " " * 16
        assert len(layout.pad_header("TID: 123")) == 32

    def test_right_column_is_right_aligned(self, layout):
        assert layout.pad_header("Left", "Right") == "Left".ljust(16) + " " * 11 + "Right"

    def test_double_width_halves_columns(self, layout):
        assert layout.pad_header("A", "B", True) == "A" + " " * 7 + " " * 7 + "B"

    def test_overflow_is_not_truncated(self, layout):
        text = layout.pad_header("x" * 20, "y" * 20)
        assert text == "x" * 20 + "y" * 20


class TestPadSummary:

    def test_normal_row_is_48_characters(self, layout):
        row = layout.pad_summary("Subtotaal", Decimal("8.00"))
        assert len(row) == 48
        assert row.startswith("Subtotaal   ")
        assert row.endswith("€8,00")

    def test_double_width_row_is_25_characters(self, layout):
        row = layout.pad_summary("Totaal", Decimal("8.80"), double_width=True)
        assert row == "Totaal" + "€8,80".rjust(19)

    def test_long_label_overflows(self, layout):
        row = layout.pad_summary("Betaald met creditcard", Decimal("1"))
        assert row.startswith("Betaald met creditcard")
        assert len(row) == len("Betaald met creditcard") + 36

    def test_unformatted_value(self, layout):
        row = layout.pad_summary("Items", "3", format_as_currency=False)
        assert row == "Items".ljust(12) + "3".rjust(36)

    def test_empty_label_and_value(self, layout):
        assert layout.pad_summary("", "", format_as_currency=False) == " " * 48

    def test_currency_symbol_comes_from_layout(self):
        row = ColumnLayout("$").pad_summary("Total", 1234)
        assert row.endswith("$1.234,00")

    @pytest.mark.parametrize("amount", ["0", "0.05", "12.34", "1234.5", "987654.32"])
    def test_formatted_value_parses_back(self, layout, amount):
        row = layout.pad_summary("Total", Decimal(amount))
        numeric = row.strip().split("€")[1].replace(".", "").replace(",", ".")
        assert Decimal(numeric) == Decimal(amount).quantize(Decimal("0.01"))


class TestRule:

    def test_default_width(self):
        assert ColumnLayout.rule() == "-" * 47

    def test_custom_width(self):
        assert ColumnLayout.rule(10) == "-" * 10


class TestFormatTimestamp:

    def test_day_without_leading_zero(self):
        assert format_timestamp(datetime(2024, 3, 5, 14, 3, 9)) == "5 March 2024 14:03:09"

    def test_time_is_zero_padded(self):
        assert format_timestamp(datetime(2023, 12, 24, 7, 0, 0)) == "24 December 2023 07:00:00"
