"""Personal purchase tracker: flat-file storage and per-category spend reports."""

from .category import Category
from .codec import DecodeError, decode, decode_lines, encode
from .config import TrackerConfig, load_config
from .models import Product, Purchase, make_product, make_purchase
from .prompts import PurchasePrompter
from .report import (
    Bucket,
    bucket_by_category,
    bucket_value,
    exec_bucket_comparison,
    format_report,
    report,
    sort_buckets,
)
from .store import PurchaseFile, load_purchases, write_purchase

__all__ = [
    "Category",
    "Product",
    "Purchase",
    "make_product",
    "make_purchase",
    "encode",
    "decode",
    "decode_lines",
    "DecodeError",
    "PurchaseFile",
    "write_purchase",
    "load_purchases",
    "PurchasePrompter",
    "Bucket",
    "bucket_by_category",
    "bucket_value",
    "sort_buckets",
    "format_report",
    "report",
    "exec_bucket_comparison",
    "TrackerConfig",
    "load_config",
]
