from __future__ import annotations

from gilded_rose.categories import AGED_BRIE, BACKSTAGE_PASS, SULFURAS
from gilded_rose.models import Item


def classic_catalog() -> list[Item]:
    """The nine-item starting inventory of the texttest fixture. Fresh items on every call."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE, 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item(SULFURAS, 0, 80),
        Item(SULFURAS, -1, 80),
        Item(BACKSTAGE_PASS, 15, 20),
        Item(BACKSTAGE_PASS, 10, 49),
        Item(BACKSTAGE_PASS, 5, 49),
        Item("Conjured Mana Cake", 3, 6),
    ]
