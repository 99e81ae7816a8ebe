"""Per-category spend report."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .category import Category
from .models import Purchase
from .store import PurchaseFile


@dataclass
class Bucket:
    """Purchases sharing one category, built fresh for each report."""

    category: Category
    purchases: list[Purchase] = field(default_factory=list)

    def value(self) -> float:
        return bucket_value(self)


def bucket_by_category(purchases: Iterable[Purchase]) -> list[Bucket]:
    """Group purchases into one bucket per category.

    Buckets follow the Category declaration order; each keeps its
    purchases in input order.
    """
    buckets = {category: Bucket(category) for category in Category}
    for purchase in purchases:
        buckets[purchase.product.category].purchases.append(purchase)
    return list(buckets.values())


def bucket_value(bucket: Bucket) -> float:
    total = 0.0
    for purchase in bucket.purchases:
        total += purchase.value()
    return total


def sort_buckets(buckets: Iterable[Bucket]) -> list[Bucket]:
    """Order buckets by value, highest first. Ties keep input order.

    Buckets whose value is NaN go last.
    """
    return sorted(buckets, key=_sort_key, reverse=True)


def _sort_key(bucket: Bucket) -> tuple[bool, float]:
    value = bucket_value(bucket)
    if math.isnan(value):
        return (False, 0.0)
    return (True, value)


def format_report(buckets: Iterable[Bucket]) -> list[str]:
    return [
        f"{bucket.category.format()}: {bucket_value(bucket)}"
        for bucket in sort_buckets(buckets)
    ]


def report(buckets: Iterable[Bucket], output_func: Callable[[str], None] = print) -> None:
    """Print ``<category>: <value>`` for every bucket, highest spend first."""
    for line in format_report(buckets):
        output_func(line)


def report_as_dict(buckets: Iterable[Bucket]) -> list[dict]:
    """Return the sorted report as JSON-ready dicts."""
    return [
        {
            "category": bucket.category.format(),
            "value": bucket_value(bucket),
            "count": len(bucket.purchases),
        }
        for bucket in sort_buckets(buckets)
    ]


def exec_bucket_comparison(
    path: str | Path,
    strict: bool = False,
    output_func: Callable[[str], None] = print,
) -> list[Bucket]:
    """Load the store at ``path``, bucket it and print the report.

    Raises:
        FileNotFoundError: If the store file does not exist.
        DecodeError: If any stored record is corrupt; nothing is printed.
    """
    purchases = PurchaseFile(path, strict=strict).load_all()
    buckets = bucket_by_category(purchases)
    report(buckets, output_func=output_func)
    return buckets
