"""Append-or-create purchase file."""

from __future__ import annotations

import logging
from pathlib import Path

from ..codec import decode_lines, encode
from ..models import Purchase

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = "purchase.txt"


class PurchaseFile:
    """Reads and appends purchase records in a single text file.

    The file is opened and closed within each call. It is not safe for
    concurrent writers.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH, strict: bool = False) -> None:
        self._path = Path(path).expanduser()
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def write(self, purchase: Purchase) -> None:
        """Store a purchase as a new line.

        A missing or empty file gets exactly one line with no leading
        newline; otherwise a newline and the record are appended.

        Raises:
            OSError: If the file cannot be created or written.
        """
        line = encode(purchase)
        if self._path.exists() and self._path.stat().st_size > 0:
            with open(self._path, "a", encoding="utf-8", newline="") as f:
                f.write("\n" + line)
        else:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8", newline="") as f:
                f.write(line)
        logger.debug("Stored purchase in %s: %s", self._path, line)

    def read_text(self) -> str:
        """Return the raw file contents.

        Raises:
            FileNotFoundError: If the store file does not exist.
        """
        with open(self._path, encoding="utf-8", newline="") as f:
            return f.read()

    def load_all(self, strict: bool | None = None) -> list[Purchase]:
        """Load every purchase in file order.

        Args:
            strict: Reject short lines instead of dropping them. Defaults to
                the value given at construction.

        Raises:
            FileNotFoundError: If the store file does not exist.
            DecodeError: If any record is corrupt; nothing is returned.
        """
        if strict is None:
            strict = self._strict
        purchases = decode_lines(self.read_text(), strict=strict)
        logger.debug("Loaded %d purchases from %s", len(purchases), self._path)
        return purchases


def write_purchase(purchase: Purchase, path: str | Path = DEFAULT_STORE_PATH) -> None:
    """Append a purchase to the file at ``path``."""
    PurchaseFile(path).write(purchase)


def load_purchases(path: str | Path = DEFAULT_STORE_PATH, strict: bool = False) -> list[Purchase]:
    """Load all purchases stored at ``path``."""
    return PurchaseFile(path, strict=strict).load_all()
