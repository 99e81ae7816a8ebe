"""Interactive console entry of purchases."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TypeVar

from .category import Category
from .codec import parse_date, parse_price, parse_quantity
from .models import Purchase, make_product, make_purchase
from .store import PurchaseFile

logger = logging.getLogger(__name__)

T = TypeVar("T")

PRICE_ERROR = "Price must be a float"
QUANTITY_ERROR = "Quantity must be an integer"
DATE_ERROR = "Date must be in the format yyyy-mm-dd"


class PurchasePrompter:
    """Asks for purchases on the console and writes each one to the store.

    Every field is read as one line. Price, quantity and date are asked
    again until they parse; a bad value never ends the session.
    """

    def __init__(
        self,
        store: PurchaseFile,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
        affirmative: str = "y",
    ) -> None:
        self._store = store
        self._input = input_func or input
        self._output = output_func or print
        self._affirmative = affirmative

    def _ask(self, prompt: str) -> str:
        self._output(prompt)
        return self._input("> ").strip()

    def _ask_until(self, prompt: str, parse: Callable[[str], T], error: str) -> T:
        while True:
            text = self._ask(prompt)
            try:
                return parse(text)
            except ValueError:
                logger.debug("Rejected input %r for %r", text, prompt)
                self._output(error)

    def ask_name(self) -> str:
        while True:
            name = self._ask("Enter product name:")
            if name:
                return name

    def ask_price(self) -> float:
        return self._ask_until("Enter price:", parse_price, PRICE_ERROR)

    def ask_category(self) -> Category:
        return Category.parse(self._ask("Enter product type:"))

    def ask_quantity(self) -> int:
        return self._ask_until("Enter quantity:", parse_quantity, QUANTITY_ERROR)

    def ask_date(self) -> date:
        return self._ask_until("Enter date (yyyy-mm-dd):", parse_date, DATE_ERROR)

    def prompt_purchase(self) -> Purchase:
        """Ask for every field of one purchase and build it."""
        name = self.ask_name()
        price = self.ask_price()
        category = self.ask_category()
        quantity = self.ask_quantity()
        purchase_date = self.ask_date()
        product = make_product(name, price, category)
        return make_purchase(product, quantity, purchase_date)

    def run(self) -> list[Purchase]:
        """Record purchases until the user declines to add another.

        End of input stops the session; purchases already stored are kept.

        Returns:
            The purchases written during this session.
        """
        added: list[Purchase] = []
        try:
            while True:
                self._output("Add a purchase")
                purchase = self.prompt_purchase()
                self._store.write(purchase)
                added.append(purchase)
                self._output("Purchase added")
                if self._ask("Add another purchase? (y/n)") != self._affirmative:
                    break
        except EOFError:
            logger.debug("Input closed after %d purchases", len(added))
        return added
