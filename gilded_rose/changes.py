from __future__ import annotations

from dataclasses import dataclass, field

from gilded_rose.models import Item


@dataclass(frozen=True, slots=True)
class ItemChange:
    """Net effect of one day on one ageing item."""

    day: int
    index: int
    name: str
    sell_in_after: int
    quality_before: int
    quality_after: int

    @property
    def quality_delta(self) -> int:
        return self.quality_after - self.quality_before

    @property
    def expired(self) -> bool:
        return self.sell_in_after < 0


@dataclass
class ChangeLog:
    """
    Collects an ItemChange per ageing item per tick.

    Day numbering lives here so tick() keeps no state between calls.
    Sulfuras never ages and is never recorded.
    """

    changes: list[ItemChange] = field(default_factory=list)
    days: int = field(default=0, init=False)

    def start_day(self) -> int:
        self.days += 1
        return self.days

    def record(self, index: int, item: Item, quality_before: int) -> ItemChange:
        if self.days <= 0:
            raise RuntimeError("ChangeLog.start_day() must be called before recording changes.")
        change = ItemChange(
            day=self.days,
            index=index,
            name=item.name,
            sell_in_after=item.sell_in,
            quality_before=quality_before,
            quality_after=item.quality,
        )
        self.changes.append(change)
        return change

    def for_day(self, day: int) -> list[ItemChange]:
        return [c for c in self.changes if c.day == day]

    def expired_on(self, day: int) -> list[str]:
        """Names of items that were past their sell-by date at the end of day."""
        return [c.name for c in self.for_day(day) if c.expired]
