"""Cart summation: price every entry, then apply the global discounts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .cart import CartEntry
from .discount import Discount
from .global_discounts import apply_global_discounts
from .pricing import Cursor, price_entry
from .selection import select_discounts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummationResult:
    total: float
    cursors: tuple[Cursor, ...]
    global_discounts_applied: tuple[str, ...] = ()

    def cursor_for(self, item_name: str) -> Cursor | None:
        for cursor in self.cursors:
            if cursor.entry.item.name == item_name:
                return cursor
        return None

    @property
    def raw_total(self) -> float:
        """Sum of the entry costs before global discounts."""
        return sum(c.current_cost for c in self.cursors)


def _entries_of(cart: object) -> list[CartEntry]:
    entries = getattr(cart, "entries", None)
    if callable(entries):
        return list(entries())
    return list(cart)  # type: ignore[call-overload]


def summarize(cart: object, discounts: Iterable[Discount]) -> SummationResult:
    """Price ``cart`` against ``discounts``.

    ``cart`` is anything with an ``entries()`` method, or an iterable of
    CartEntry.  Inputs are not modified; repeated calls give equal results.
    """
    usable = tuple(d for d in discounts if d.is_valid)

    cursors = []
    for entry in _entries_of(cart):
        batch, single = select_discounts(entry, usable)
        cursors.append(price_entry(entry, batch, single))

    raw_total = sum(c.current_cost for c in cursors)
    total, applied = apply_global_discounts(raw_total, usable)
    logger.debug("Raw total %s, final total %s, globals %s", raw_total, total, applied)

    return SummationResult(
        total=total,
        cursors=tuple(cursors),
        global_discounts_applied=applied,
    )
