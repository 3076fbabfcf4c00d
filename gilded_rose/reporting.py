from __future__ import annotations

from typing import Iterable

from gilded_rose.engine import tick
from gilded_rose.models import Item

INVENTORY_HEADER = "name, sellIn, quality"


def format_item(item: Item) -> str:
    return str(item)


def render_inventory(items: Iterable[Item]) -> str:
    lines = [INVENTORY_HEADER]
    lines.extend(format_item(item) for item in items)
    return "\n".join(lines)


def render_days(items: list[Item], num_days: int) -> str:
    """
    Render the day-by-day transcript, ticking items between days.

    Day 0 shows the starting inventory; the items end up aged num_days - 1 days.
    """
    blocks: list[str] = []
    for day in range(num_days):
        if day > 0:
            tick(items)
        blocks.append(f"-------- day {day} --------\n{render_inventory(items)}\n")
    return "\n".join(blocks)
