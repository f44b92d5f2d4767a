"""Shopping cart: counts scanned item names against an inventory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .discount import Discount
from .errors import InventoryError, Result
from .inventory import Inventory
from .item import InventoryItem
from .loader import load_inventory

if TYPE_CHECKING:
    from .summation import SummationResult

logger = logging.getLogger(__name__)

SCAN_SEPARATOR = ","


@dataclass(frozen=True)
class CartEntry:
    item: InventoryItem
    amount: int


class Cart:
    """Item name -> scanned quantity, in first-scan order.

    Names the inventory does not know are ignored rather than rejected.
    """

    def __init__(self, inventory: Inventory | None = None):
        if inventory is None:
            inventory = load_inventory()
        self.inventory = inventory
        self._amounts: dict[str, int] = {}

    @property
    def items(self) -> list[InventoryItem]:
        return self.inventory.items

    @property
    def discounts(self) -> list[Discount]:
        return self.inventory.discounts

    def add_discount(
        self, attributes: dict[str, Any], *, persist: bool = False
    ) -> Result[Discount, InventoryError]:
        return self.inventory.add_discount(attributes, persist=persist)

    def scan(self, name: str) -> "Cart":
        item = self.inventory.find_item(name)
        if item is None:
            logger.warning("Ignoring unknown item %r", name)
            return self
        self._amounts[item.name] = self._amounts.get(item.name, 0) + 1
        return self

    def bulk_scan(self, names: str) -> "Cart":
        """Scan a comma-separated list such as ``"A, B, A"``."""
        for token in names.split(SCAN_SEPARATOR):
            name = token.strip()
            if name:
                self.scan(name)
        return self

    def remove(self, name: str) -> int | None:
        """Un-scan one unit. Returns the remaining count, or None if absent."""
        if name not in self._amounts:
            return None
        remaining = self._amounts[name] - 1
        if remaining > 0:
            self._amounts[name] = remaining
        else:
            del self._amounts[name]
        return remaining

    def entries(self) -> list[CartEntry]:
        entries: list[CartEntry] = []
        for name, amount in self._amounts.items():
            item = self.inventory.find_item(name)
            if item is not None:
                entries.append(CartEntry(item=item, amount=amount))
        return entries

    def total(self) -> SummationResult:
        from .summation import summarize

        return summarize(self, self.inventory.discounts)
