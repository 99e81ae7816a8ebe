"""Line-oriented text encoding for purchases.

One purchase per line, fields joined by ``", "`` in the fixed order::

    name, price, category, quantity, date

No escaping is performed: a name containing the separator corrupts the
record boundary when read back.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from .category import Category
from .models import Product, Purchase

logger = logging.getLogger(__name__)

SEPARATOR = ", "
FIELD_COUNT = 5

_PRICE_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)
_QUANTITY_RE = re.compile(r"\+?[0-9]+")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class DecodeError(ValueError):
    """A stored record is well-shaped but one of its fields cannot be parsed."""

    def __init__(self, message: str, line: str = "", line_no: int | None = None) -> None:
        self.line = line
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}: {line!r}"
        super().__init__(message)


def parse_price(text: str) -> float:
    """Parse price text as a float. No bound checks.

    Only ASCII decimal or exponent notation is accepted (plus inf and nan).

    Raises:
        ValueError: If the text is not a floating-point number.
    """
    text = text.strip()
    if not _PRICE_RE.fullmatch(text):
        raise ValueError(f"invalid price: {text!r}")
    return float(text)


def parse_quantity(text: str) -> int:
    """Parse a non-negative decimal integer.

    Raises:
        ValueError: If the text is not a non-negative integer.
    """
    text = text.strip()
    if not _QUANTITY_RE.fullmatch(text):
        raise ValueError(f"invalid quantity: {text!r}")
    return int(text)


def parse_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date.

    Raises:
        ValueError: If the text is not a valid ISO calendar date.
    """
    text = text.strip()
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"invalid date: {text!r}")
    return date.fromisoformat(text)


def encode(purchase: Purchase) -> str:
    """Format a purchase as a single line (no trailing newline)."""
    product = purchase.product
    return SEPARATOR.join(
        [
            product.name,
            repr(float(product.price)),
            product.category.format(),
            str(purchase.quantity),
            purchase.date.isoformat(),
        ]
    )


def decode(line: str, strict: bool = False) -> Purchase | None:
    """Parse one stored line into a Purchase.

    Lines with fewer than five fields return None, or raise DecodeError
    when ``strict`` is set. Fields past the fifth are ignored.

    Raises:
        DecodeError: If price, quantity or date cannot be parsed.
    """
    fields = line.split(SEPARATOR)
    if len(fields) < FIELD_COUNT:
        if strict:
            raise DecodeError(
                f"expected {FIELD_COUNT} fields, got {len(fields)}", line
            )
        logger.debug("Dropping short record (%d fields): %r", len(fields), line)
        return None

    name, price, category, quantity, purchase_date = fields[:FIELD_COUNT]
    try:
        price_value = parse_price(price)
    except ValueError:
        raise DecodeError("price is not a float", line) from None
    try:
        quantity_value = parse_quantity(quantity)
    except ValueError:
        raise DecodeError("quantity is not an integer", line) from None
    try:
        date_value = parse_date(purchase_date)
    except ValueError:
        raise DecodeError("date cannot be parsed", line) from None

    product = Product(
        name=name, price=price_value, category=Category.parse(category)
    )
    return Purchase(product=product, quantity=quantity_value, date=date_value)


def decode_lines(text: str, strict: bool = False) -> list[Purchase]:
    """Decode every line of a store file's contents.

    Blank lines are skipped. The first corrupt record aborts the whole
    read; no partial result is returned.

    Raises:
        DecodeError: On the first record that cannot be decoded.
    """
    purchases: list[Purchase] = []
    for line_no, raw in enumerate(text.split("\n"), 1):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        try:
            purchase = decode(line, strict=strict)
        except DecodeError as e:
            raise DecodeError(str(e.args[0]), line, line_no) from None
        if purchase is not None:
            purchases.append(purchase)
    return purchases
