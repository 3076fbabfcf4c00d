from __future__ import annotations

from enum import Enum


class ItemKind(str, Enum):
    """
    Closed set of item categories. The kind decides which rule a tick applies.
    """

    NORMAL = "NORMAL"
    AGED_BRIE = "AGED_BRIE"
    BACKSTAGE_PASS = "BACKSTAGE_PASS"
    SULFURAS = "SULFURAS"


AGED_BRIE = "Aged Brie"
BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"
SULFURAS = "Sulfuras, Hand of Ragnaros"

KIND_BY_NAME: dict[str, ItemKind] = {
    AGED_BRIE: ItemKind.AGED_BRIE,
    BACKSTAGE_PASS: ItemKind.BACKSTAGE_PASS,
    SULFURAS: ItemKind.SULFURAS,
}


def kind_for_name(name: str) -> ItemKind:
    """Exact-match lookup; anything not in the catalog is a normal item."""
    return KIND_BY_NAME.get(name, ItemKind.NORMAL)
