"""Per-entry pricing.

An entry is priced by threading a Cursor through its discounts:

1. Batch discounts, in priority order.  Each one consumes whole batches of
   ``applicable_item_count`` units for as long as the remainder allows.
2. Single discounts are folded over the unit cost into one discounted unit
   price, which is charged for every unit the batches left over.

Cursors are immutable; every step returns a new one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .cart import CartEntry
from .discount import Discount, base_discount_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    entry: CartEntry
    current_cost: float
    remainder: int
    applied_discounts: tuple[str, ...] = ()

    @property
    def is_priced(self) -> bool:
        return self.remainder == 0


def initial_cursor(entry: CartEntry) -> Cursor:
    return Cursor(entry=entry, current_cost=0, remainder=entry.amount)


def batch_cost(unit_cost: float, discount: Discount) -> float:
    """Price charged for one batch of ``discount``."""
    if discount.fixed_amount_total is not None:
        return discount.fixed_amount_total
    return unit_cost - discount.deductible_for(unit_cost) * discount.applicable_item_count


def apply_batch_discount(cursor: Cursor, discount: Discount) -> Cursor:
    """Consume as many whole batches of ``discount`` as the remainder allows."""
    count = discount.applicable_item_count
    if count < 1:
        return cursor

    batches = cursor.remainder // count
    if batches == 0:
        return cursor

    cost = batch_cost(cursor.entry.item.cost, discount)
    logger.debug(
        "%s: %d batch(es) of %d via %r",
        cursor.entry.item.name,
        batches,
        count,
        discount.name,
    )
    return replace(
        cursor,
        current_cost=cursor.current_cost + cost * batches,
        remainder=cursor.remainder - batches * count,
        applied_discounts=cursor.applied_discounts + (discount.name,) * batches,
    )


def discounted_price(price: float, discount: Discount) -> float:
    """``price`` after ``discount``; a deduction that leaves nothing positive is skipped."""
    computed = price - discount.deductible_for(price)
    return computed if computed > 0 else price


def discounted_unit_price(unit_cost: float, discounts: Iterable[Discount]) -> float:
    price = unit_cost
    for discount in discounts:
        price = discounted_price(price, discount)
    return price


def apply_single_discounts(cursor: Cursor, discounts: Iterable[Discount]) -> Cursor:
    discounts = tuple(discounts)
    unit_price = discounted_unit_price(cursor.entry.item.cost, discounts)
    return replace(
        cursor,
        current_cost=cursor.current_cost + cursor.remainder * unit_price,
        remainder=0,
        applied_discounts=cursor.applied_discounts + tuple(d.name for d in discounts),
    )


def price_entry(
    entry: CartEntry,
    batch_discounts: Iterable[Discount],
    single_discounts: Iterable[Discount],
) -> Cursor:
    cursor = initial_cursor(entry)
    for discount in batch_discounts:
        cursor = apply_batch_discount(cursor, discount)

    single_discounts = tuple(single_discounts)
    # every entry records at least one discount
    if not single_discounts and not cursor.applied_discounts:
        single_discounts = (base_discount_for(entry.item),)
    return apply_single_discounts(cursor, single_discounts)
