from __future__ import annotations

from dataclasses import dataclass

from gilded_rose.categories import ItemKind
from gilded_rose.engine import tick_debug
from gilded_rose.models import Item


@dataclass(frozen=True)
class ItemTrace:
    name: str
    kind: ItemKind
    # BEFORE the day's update
    sell_in_before: int
    quality_before: int
    # AFTER the day's update
    sell_in_after: int
    quality_after: int

    @property
    def quality_delta(self) -> int:
        return self.quality_after - self.quality_before

    @property
    def expired(self) -> bool:
        return self.sell_in_after < 0


@dataclass(frozen=True)
class DayTrace:
    day: int
    items: list[ItemTrace]


def snapshot_day(day: int, items: list[Item], before: list[tuple[int, int]]) -> DayTrace:
    """
    Create a trace snapshot for the given day.

    Captures both:
      - before: (sell_in, quality) pairs taken before the update
      - the items themselves: post-update state

    This function does not modify simulation behavior.
    """
    traces: list[ItemTrace] = []
    for idx, item in enumerate(items):
        sell_in_before, quality_before = before[idx]
        traces.append(
            ItemTrace(
                name=item.name,
                kind=item.kind,
                sell_in_before=int(sell_in_before),
                quality_before=int(quality_before),
                sell_in_after=item.sell_in,
                quality_after=item.quality,
            )
        )
    return DayTrace(day=day, items=traces)


def run_days_with_trace(items: list[Item], num_days: int) -> list[DayTrace]:
    """
    Run the inventory for num_days days, returning a per-day trace log.

    Uses engine.tick_debug() for behavior (same rules) + observability.
    """
    log: list[DayTrace] = []
    for d in range(1, num_days + 1):
        before = tick_debug(items)
        log.append(snapshot_day(d, items, before))
    return log
