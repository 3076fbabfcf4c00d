from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from gilded_rose.categories import ItemKind
from gilded_rose.models import Item

MIN_QUALITY = 0
MAX_QUALITY = 50

# Backstage passes gain one extra point below each of these sell_in marks.
BACKSTAGE_DOUBLE_BELOW = 11
BACKSTAGE_TRIPLE_BELOW = 6


def increase_quality(item: Item) -> None:
    if item.quality < MAX_QUALITY:
        item.quality += 1


def decrease_quality(item: Item) -> None:
    if item.quality > MIN_QUALITY:
        item.quality -= 1


def reset_quality(item: Item) -> None:
    item.quality = MIN_QUALITY


def _no_change(item: Item) -> None:
    pass


def _backstage_before_sell_in(item: Item) -> None:
    # Each step is capped on its own, matching three separate +1 updates.
    increase_quality(item)
    if item.sell_in < BACKSTAGE_DOUBLE_BELOW:
        increase_quality(item)
    if item.sell_in < BACKSTAGE_TRIPLE_BELOW:
        increase_quality(item)


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Transition for one item kind:
      - before_sell_in runs first, against the current sell_in
      - sell_in then drops by one if the kind ages
      - after_expiry runs only once the new sell_in is negative
    """

    before_sell_in: Callable[[Item], None]
    after_expiry: Callable[[Item], None]
    ages: bool = True


RULES: dict[ItemKind, Rule] = {
    ItemKind.NORMAL: Rule(decrease_quality, decrease_quality),
    ItemKind.AGED_BRIE: Rule(increase_quality, increase_quality),
    ItemKind.BACKSTAGE_PASS: Rule(_backstage_before_sell_in, reset_quality),
    ItemKind.SULFURAS: Rule(_no_change, _no_change, ages=False),
}


def rule_for(item: Item) -> Rule:
    return RULES[item.kind]
