from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gilded_rose.changes import ChangeLog
from gilded_rose.models import Item
from gilded_rose.rules import rule_for

logger = logging.getLogger(__name__)


def tick(items: list[Item], changes: ChangeLog | None = None) -> None:
    """
    Advance the inventory by one day, mutating items in place.

    Rules (per item, in list order):
    - Non-ageing kinds (Sulfuras) are left untouched.
    - The kind's before_sell_in adjustment runs against the current sell_in.
    - sell_in drops by one.
    - If sell_in is now negative, the kind's after_expiry adjustment runs.

    Quality helpers saturate at [0, 50], so no input can raise.
    When a ChangeLog is given, each ageing item's net change is recorded.
    """
    if changes is not None:
        changes.start_day()

    for index, item in enumerate(items):
        rule = rule_for(item)
        if not rule.ages:
            continue

        quality_before = item.quality
        rule.before_sell_in(item)
        item.sell_in -= 1
        if item.sell_in < 0:
            rule.after_expiry(item)

        if changes is not None:
            changes.record(index, item, quality_before)

    logger.debug("tick applied to %d items", len(items))


def tick_debug(items: list[Item]) -> list[tuple[int, int]]:
    """
    Advance the inventory by one day, returning the (sell_in, quality) pair of
    every item as it was BEFORE the update.

    This provides observability for traces without changing tick() behavior.
    """
    before = [(item.sell_in, item.quality) for item in items]
    tick(items)
    return before


@dataclass
class GildedRose:
    """The shop: owns its items and ages them one day per update_quality()."""

    items: list[Item] = field(default_factory=list)

    def update_quality(self, changes: ChangeLog | None = None) -> None:
        tick(self.items, changes=changes)
