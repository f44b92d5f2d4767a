"""Inventory catalog: the items that can be scanned and the discount pool.

Edits go through ``add_item`` / ``add_discount``.  Both validate the raw
attribute mapping first and return an ``Err`` instead of raising when it is
rejected, leaving the inventory untouched.  With ``persist=True`` an accepted
edit is written back to the inventory's source file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .discount import Discount
from .errors import Err, InventoryError, Ok, Result
from .item import InventoryItem
from .serialization import discount_from_dict, item_from_dict

logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    items: list[InventoryItem] = field(default_factory=list)
    discounts: list[Discount] = field(default_factory=list)
    source_path: Path | None = None

    def find_item(self, name: str) -> InventoryItem | None:
        for item in self.items:
            if item.name == name:
                return item
        return None

    def add_item(
        self, attributes: dict[str, Any], *, persist: bool = False
    ) -> Result[InventoryItem, InventoryError]:
        try:
            item = item_from_dict(attributes)
        except InventoryError as e:
            logger.warning("Rejected item %r: %s", attributes.get("name"), e)
            return Err(e)

        self.items.append(item)
        logger.info("Added item %r (id=%r)", item.name, item.id)
        if persist:
            self.save()
        return Ok(item)

    def add_discount(
        self, attributes: dict[str, Any], *, persist: bool = False
    ) -> Result[Discount, InventoryError]:
        """Add a discount from a complete attribute mapping (every DISCOUNT_KEYS entry)."""
        try:
            discount = discount_from_dict(attributes, strict=True)
        except InventoryError as e:
            logger.warning("Rejected discount %r: %s", attributes.get("name"), e)
            return Err(e)

        self.discounts.append(discount)
        logger.info("Added discount %r", discount.name)
        if persist:
            self.save()
        return Ok(discount)

    def save(self, path: str | Path | None = None) -> Path:
        """Write the inventory definition to ``path`` (default: its source file)."""
        from .loader import dump_inventory

        target = Path(path) if path is not None else self.source_path
        if target is None:
            raise InventoryError("Inventory has no source path to save to")
        dump_inventory(self, target)
        return target
