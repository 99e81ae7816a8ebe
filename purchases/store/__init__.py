"""Flat-file storage for recorded purchases."""

from .purchase_file import (
    DEFAULT_STORE_PATH,
    PurchaseFile,
    load_purchases,
    write_purchase,
)

__all__ = [
    "DEFAULT_STORE_PATH",
    "PurchaseFile",
    "load_purchases",
    "write_purchase",
]
