"""Read and write YAML inventory definitions.

An inventory definition has two top-level mappings::

    items:
      A: {id: 1, name: A, cost: 50}
    discounts:
      batch_discount_on_a:
        application_context: batch
        applicable_item_count: 2
        fixed_amount_total: 90
        applicable_item_id: 1

Discount keys are the discount names.  Attributes missing from a discount
take the base-discount defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .config import Settings
from .errors import InventoryError, InventoryFormatError
from .inventory import Inventory
from .serialization import (
    discount_from_dict,
    discount_to_dict,
    item_from_dict,
    item_to_dict,
)

logger = logging.getLogger(__name__)

ITEMS_KEY = "items"
DISCOUNTS_KEY = "discounts"

DEFAULT_INVENTORY_PATH = Path(__file__).parent / "data" / "inventory.yml"


def resolve_inventory_path(
    path: str | Path | None = None, settings: Settings | None = None
) -> Path:
    """Explicit path, else CHECKOUT_INVENTORY_PATH, else the bundled inventory."""
    if path is not None:
        return Path(path)
    settings = settings or Settings.from_env()
    return settings.inventory_path or DEFAULT_INVENTORY_PATH


def _read_document(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text()
    except OSError as e:
        raise InventoryFormatError(f"Could not read inventory {path}: {e}") from e

    try:
        document = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise InventoryFormatError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(document, dict):
        raise InventoryFormatError(f"Inventory {path} must be a mapping")
    return document


def _section(document: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    section = document.get(key) or {}
    if not isinstance(section, dict):
        raise InventoryFormatError(f"'{key}' in {path} must be a mapping")
    return section


def load_inventory(
    path: str | Path | None = None, settings: Settings | None = None
) -> Inventory:
    source = resolve_inventory_path(path, settings)
    document = _read_document(source)

    try:
        items = [
            item_from_dict(attrs)
            for attrs in _section(document, ITEMS_KEY, source).values()
        ]
        discounts = [
            discount_from_dict({**(attrs or {}), "name": name})
            for name, attrs in _section(document, DISCOUNTS_KEY, source).items()
        ]
    except (InventoryError, TypeError) as e:
        raise InventoryFormatError(f"Malformed inventory {source}: {e}") from e

    logger.debug(
        "Loaded %d items and %d discounts from %s", len(items), len(discounts), source
    )
    return Inventory(items=items, discounts=discounts, source_path=source)


def inventory_to_document(inventory: Inventory) -> dict[str, Any]:
    discounts: dict[str, Any] = {}
    for discount in inventory.discounts:
        attrs = discount_to_dict(discount)
        discounts[attrs.pop("name")] = attrs
    return {
        ITEMS_KEY: {item.name: item_to_dict(item) for item in inventory.items},
        DISCOUNTS_KEY: discounts,
    }


def dump_inventory(inventory: Inventory, path: str | Path) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w") as f:
        f.write(yaml.safe_dump(inventory_to_document(inventory), sort_keys=False))
    logger.info("Wrote inventory to %s", target)
