"""Discount rules.

A discount is either scoped to one inventory item or global (cart-wide).
Item-scoped discounts come in two application contexts:

- batch: a deduction for a whole group of ``applicable_item_count`` units,
  repeatable while enough units remain
- single: a per-unit deduction for whatever units the batch discounts
  did not consume

The deduction itself is either a flat amount (UNIT) or a percentage of the
price it is applied to (PERCENTAGE).  Batch discounts may instead carry a
``fixed_amount_total``, the price charged for one whole batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .item import InventoryItem


class DeductibleType(Enum):
    UNIT = "unit"
    PERCENTAGE = "percentage"


class ApplicationContext(Enum):
    BATCH = "batch"
    SINGLE = "single"


# Attribute keys as they appear in an inventory definition.  ``global`` maps
# to the ``is_global`` field.
DISCOUNT_KEYS: tuple[str, ...] = (
    "name",
    "global",
    "deductible_type",
    "deductible_amount",
    "fixed_amount_total",
    "application_context",
    "applicable_item_count",
    "applicable_item_id",
    "usable",
    "priority",
    "gt_bias",
)

# Template for a no-op discount.  Merge ``name`` and ``applicable_item_id``
# into it to build a complete attribute mapping.
BASE_DISCOUNT_ATTRIBUTES: dict[str, Any] = {
    "global": False,
    "deductible_type": "unit",
    "deductible_amount": 0,
    "fixed_amount_total": None,
    "application_context": "single",
    "applicable_item_count": 1,
    "usable": True,
    "priority": 1,
    "gt_bias": None,
}


@dataclass(frozen=True)
class Discount:
    """One discount rule. Lower ``priority`` is applied first."""

    name: str
    is_global: bool = False
    deductible_type: DeductibleType = DeductibleType.UNIT
    deductible_amount: float = 0
    fixed_amount_total: float | None = None
    application_context: ApplicationContext = ApplicationContext.SINGLE
    applicable_item_count: int = 1
    applicable_item_id: Any = None
    usable: bool = True
    priority: float = 1
    gt_bias: float | None = None

    @property
    def is_batch(self) -> bool:
        return not self.is_global and self.application_context is ApplicationContext.BATCH

    @property
    def is_single(self) -> bool:
        return not self.is_global and self.application_context is ApplicationContext.SINGLE

    @property
    def is_percentage_based(self) -> bool:
        return self.deductible_type is DeductibleType.PERCENTAGE

    @property
    def is_unit_based(self) -> bool:
        return self.deductible_type is DeductibleType.UNIT

    @property
    def is_valid(self) -> bool:
        """Whether the discount may be used at all.

        Batch discounts must cover more than one unit, single discounts
        exactly one, and global discounts must actually deduct something.
        """
        if not self.usable:
            return False
        if self.is_global:
            return self.deductible_amount > 0
        if self.is_batch:
            return self.applicable_item_count > 1
        return self.applicable_item_count == 1

    def deductible_for(self, price: float) -> float:
        """Amount this discount takes off ``price``."""
        if self.is_percentage_based:
            return price * self.deductible_amount / 100
        return self.deductible_amount


def base_discount_for(item: InventoryItem) -> Discount:
    """No-op single discount attached to entries without a real rule."""
    return Discount(
        name=f"base_discount_on_{item.name.lower()}",
        applicable_item_id=item.id,
    )
