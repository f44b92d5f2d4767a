"""Choose and order the discounts that apply to one cart entry."""

from __future__ import annotations

from collections.abc import Iterable

from .cart import CartEntry
from .discount import Discount, base_discount_for


def sort_discounts(discounts: Iterable[Discount]) -> tuple[Discount, ...]:
    """Ascending priority; ties keep pool order."""
    return tuple(sorted(discounts, key=lambda d: d.priority))


def select_discounts(
    entry: CartEntry, discounts: Iterable[Discount]
) -> tuple[tuple[Discount, ...], tuple[Discount, ...]]:
    """Return ``(batch_discounts, single_discounts)`` for ``entry``.

    Only valid discounts bound to the entry's item are considered.  When
    none are, the item's base discount stands in as the only single rule.
    """
    item = entry.item
    matching = [
        d for d in discounts if d.is_valid and d.applicable_item_id == item.id
    ]
    if not matching:
        matching = [base_discount_for(item)]

    batch = sort_discounts(d for d in matching if d.is_batch)
    single = sort_discounts(d for d in matching if d.is_single)
    return batch, single
