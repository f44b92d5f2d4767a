"""Cart-wide discounts applied to the summed entry costs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .discount import Discount
from .selection import sort_discounts

logger = logging.getLogger(__name__)


def global_scope_discounts(discounts: Iterable[Discount]) -> tuple[Discount, ...]:
    return sort_discounts(d for d in discounts if d.is_valid and d.is_global)


def passes_threshold(discount: Discount, total: float) -> bool:
    return discount.gt_bias is None or total >= discount.gt_bias


def apply_global_discounts(
    total: float, discounts: Iterable[Discount]
) -> tuple[float, tuple[str, ...]]:
    """Fold the global discounts over ``total``.

    Each ``gt_bias`` is checked against the running total, so an earlier
    discount can push the total below a later one's threshold.  Returns the
    final total (never below zero) and the names of the discounts applied.
    """
    current = total
    applied: list[str] = []
    for discount in global_scope_discounts(discounts):
        if not passes_threshold(discount, current):
            logger.debug(
                "Skipping %r: total %s below threshold %s",
                discount.name,
                current,
                discount.gt_bias,
            )
            continue
        current = max(current - discount.deductible_for(current), 0)
        applied.append(discount.name)
    return current, tuple(applied)
