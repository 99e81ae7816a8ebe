"""Tests for the purchase line encoding."""

import math
from datetime import date

import pytest

from purchases.category import Category
from purchases.codec import (
    DecodeError,
    decode,
    decode_lines,
    encode,
    parse_date,
    parse_price,
    parse_quantity,
)
from purchases.models import make_product, make_purchase


def _purchase(name="Coffee", price=3.5, category="food", quantity=2, day=date(2024, 1, 15)):
    return make_purchase(make_product(name, price, category), quantity, day)


class TestEncode:
    def test_field_order_and_separator(self):
        assert encode(_purchase()) == "coffee, 3.5, food, 2, 2024-01-15"

    def test_whole_price_keeps_decimal_point(self):
        line = encode(_purchase("Book", 12.0, "culture", 1, date(2024, 2, 1)))
        assert line == "book, 12.0, culture, 1, 2024-02-01"

    def test_unknown_category_written_as_other(self):
        line = encode(_purchase(category="gadgets"))
        assert line.split(", ")[2] == "other"

    def test_no_trailing_newline(self):
        assert not encode(_purchase()).endswith("\n")


class TestDecode:
    def test_roundtrip(self):
        purchase = _purchase("Noise Cancelling Headphones", 199.99, "technology", 1)
        assert decode(encode(purchase)) == purchase

    def test_roundtrip_negative_price(self):
        purchase = _purchase(price=-2.5)
        assert decode(encode(purchase)) == purchase

    def test_short_line_dropped(self):
        assert decode("x, 1, food") is None

    def test_short_line_strict(self):
        with pytest.raises(DecodeError, match="expected 5 fields"):
            decode("x, 1, food", strict=True)

    def test_bad_price(self):
        with pytest.raises(DecodeError, match="price"):
            decode("x, notanumber, food, 1, 2024-01-01")

    def test_bad_quantity(self):
        with pytest.raises(DecodeError, match="quantity"):
            decode("x, 1.0, food, -1, 2024-01-01")

    def test_bad_date(self):
        with pytest.raises(DecodeError, match="date"):
            decode("x, 1.0, food, 1, 2024-13-01")

    @pytest.mark.parametrize("price", ["1_000", "３.５", "0x10", "1.5.2"])
    def test_price_with_non_decimal_syntax(self, price):
        with pytest.raises(DecodeError, match="price"):
            decode(f"x, {price}, food, 1, 2024-01-01")

    def test_extra_fields_ignored(self):
        purchase = decode("x, 1.0, food, 1, 2024-01-01, extra")
        assert purchase.product.name == "x"
        assert purchase.date == date(2024, 1, 1)

    def test_unknown_category_decodes_to_other(self):
        purchase = decode("x, 1.0, groceries, 1, 2024-01-01")
        assert purchase.product.category is Category.OTHER


class TestDecodeLines:
    def test_keeps_file_order(self):
        text = "a, 1.0, food, 1, 2024-01-01\nb, 2.0, style, 3, 2024-01-02"
        purchases = decode_lines(text)
        assert [p.product.name for p in purchases] == ["a", "b"]

    def test_crlf_and_blank_lines(self):
        text = "a, 1.0, food, 1, 2024-01-01\r\n\r\nb, 2.0, style, 3, 2024-01-02\n"
        assert len(decode_lines(text)) == 2

    def test_short_line_skipped(self):
        text = "x, 1, food\na, 1.0, food, 1, 2024-01-01"
        purchases = decode_lines(text)
        assert len(purchases) == 1
        assert purchases[0].product.name == "a"

    def test_corrupt_line_aborts_with_line_number(self):
        text = "a, 1.0, food, 1, 2024-01-01\nx, notanumber, food, 1, 2024-01-01"
        with pytest.raises(DecodeError, match="line 2") as exc_info:
            decode_lines(text)
        assert exc_info.value.line_no == 2
        assert exc_info.value.line == "x, notanumber, food, 1, 2024-01-01"

    def test_empty_text(self):
        assert decode_lines("") == []


class TestFieldParsers:
    def test_parse_price(self):
        assert parse_price(" 3.5 ") == 3.5
        assert parse_price("-1") == -1.0
        with pytest.raises(ValueError):
            parse_price("abc")

    @pytest.mark.parametrize(
        "text,expected",
        [("12", 12.0), ("+.5", 0.5), ("4.", 4.0), ("1e3", 1000.0), ("-2.5E-1", -0.25), ("inf", float("inf"))],
    )
    def test_parse_price_accepts(self, text, expected):
        assert parse_price(text) == expected

    @pytest.mark.parametrize("text", ["1_5", "３.５", "", ".", "1e", "١"])
    def test_parse_price_rejects(self, text):
        with pytest.raises(ValueError):
            parse_price(text)

    def test_parse_price_nan(self):
        assert math.isnan(parse_price("NaN"))

    @pytest.mark.parametrize("text,expected", [("0", 0), ("7", 7), ("+3", 3), (" 12 ", 12)])
    def test_parse_quantity(self, text, expected):
        assert parse_quantity(text) == expected

    @pytest.mark.parametrize("text", ["-1", "1.5", "", "two", "1e3"])
    def test_parse_quantity_rejects(self, text):
        with pytest.raises(ValueError):
            parse_quantity(text)

    def test_parse_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("text", ["2023-02-29", "2024-1-5", "20240105", "15/01/2024", ""])
    def test_parse_date_rejects(self, text):
        with pytest.raises(ValueError):
            parse_date(text)
