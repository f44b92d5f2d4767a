"""Inventory items: what can be scanned into a cart and at what unit cost."""

from dataclasses import dataclass
from typing import Any

ITEM_KEYS: tuple[str, ...] = ("id", "name", "cost")


@dataclass(frozen=True)
class InventoryItem:
    id: Any
    name: str
    cost: float
