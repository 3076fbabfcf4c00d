from dataclasses import dataclass, field
from typing import Any

from gilded_rose.categories import ItemKind, kind_for_name


@dataclass
class Item:
    name: str
    # Days left to sell; goes negative once the item has expired.
    sell_in: int
    # Bounded to [0, 50] by the engine (Sulfuras is never touched).
    quality: int
    # Resolved whenever name is assigned so ticks never compare strings.
    kind: ItemKind = field(init=False, repr=False, compare=False)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "kind":
            raise AttributeError("kind is derived from name")
        object.__setattr__(self, key, value)
        if key == "name":
            object.__setattr__(self, "kind", kind_for_name(value))

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"
