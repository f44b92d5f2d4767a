"""Dict conversion for inventory records.

Every record serializes to the plain mapping used by inventory definitions.
Round-trip: discount_from_dict(discount_to_dict(d)) == d.
"""

from __future__ import annotations

from typing import Any

from .discount import (
    DISCOUNT_KEYS,
    ApplicationContext,
    DeductibleType,
    Discount,
)
from .errors import InventoryError
from .item import ITEM_KEYS, InventoryItem


def _missing_keys(d: dict[str, Any], keys: tuple[str, ...]) -> list[str]:
    return [k for k in keys if k not in d]


def _number(
    d: dict[str, Any],
    key: str,
    default: Any,
    types: tuple[type, ...] = (int, float),
) -> Any:
    """Numeric attribute, or ``default`` when absent or null."""
    value = d.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, types):
        raise InventoryError(f"{d.get('name')!r}: {key} must be a number, got {value!r}")
    return value


def _flag(d: dict[str, Any], key: str, *, absent: bool) -> bool:
    """Boolean attribute.  A missing key means ``absent``; null means False."""
    if key not in d:
        return absent
    value = d[key]
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InventoryError(f"{d.get('name')!r}: {key} must be true or false, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


def item_to_dict(item: InventoryItem) -> dict[str, Any]:
    return {"id": item.id, "name": item.name, "cost": item.cost}


def item_from_dict(d: dict[str, Any]) -> InventoryItem:
    missing = _missing_keys(d, ITEM_KEYS)
    if missing:
        raise InventoryError(f"Item is missing attributes: {', '.join(missing)}")
    cost = d["cost"]
    if isinstance(cost, bool) or not isinstance(cost, (int, float)) or cost < 0:
        raise InventoryError(f"Item {d['name']!r} has an invalid cost: {cost!r}")
    return InventoryItem(id=d["id"], name=str(d["name"]), cost=cost)


# ---------------------------------------------------------------------------
# Discounts
# ---------------------------------------------------------------------------


def discount_to_dict(discount: Discount) -> dict[str, Any]:
    return {
        "name": discount.name,
        "global": discount.is_global,
        "deductible_type": discount.deductible_type.value,
        "deductible_amount": discount.deductible_amount,
        "fixed_amount_total": discount.fixed_amount_total,
        "application_context": discount.application_context.value,
        "applicable_item_count": discount.applicable_item_count,
        "applicable_item_id": discount.applicable_item_id,
        "usable": discount.usable,
        "priority": discount.priority,
        "gt_bias": discount.gt_bias,
    }


def discount_from_dict(d: dict[str, Any], *, strict: bool = False) -> Discount:
    """Build a Discount from its attribute mapping.

    With ``strict`` every key in DISCOUNT_KEYS must be present (values may be
    null).  Otherwise only ``name`` is required and absent keys take the
    base-discount defaults.
    """
    required = DISCOUNT_KEYS if strict else ("name",)
    missing = _missing_keys(d, required)
    if missing:
        raise InventoryError(f"Discount is missing attributes: {', '.join(missing)}")

    try:
        deductible_type = DeductibleType(d.get("deductible_type") or "unit")
        context = ApplicationContext(d.get("application_context") or "single")
    except ValueError as e:
        raise InventoryError(f"Discount {d['name']!r}: {e}") from e

    return Discount(
        name=str(d["name"]),
        is_global=_flag(d, "global", absent=False),
        deductible_type=deductible_type,
        deductible_amount=_number(d, "deductible_amount", 0),
        fixed_amount_total=_number(d, "fixed_amount_total", None),
        application_context=context,
        applicable_item_count=_number(d, "applicable_item_count", 1, types=(int,)),
        applicable_item_id=d.get("applicable_item_id"),
        usable=_flag(d, "usable", absent=True),
        priority=_number(d, "priority", 1),
        gt_bias=_number(d, "gt_bias", None),
    )
