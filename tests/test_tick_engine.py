from gilded_rose.categories import AGED_BRIE, BACKSTAGE_PASS, SULFURAS
from gilded_rose.engine import tick
from gilded_rose.models import Item
from tests._support.inventory_helpers import single_after


def test_normal_item_sell_in_and_quality_decrease():
    items = [Item("foo", 10, 10)]

    tick(items)

    assert items[0].sell_in == 9
    assert items[0].quality == 9


def test_tick_returns_none_and_mutates_in_place():
    item = Item("foo", 3, 3)
    items = [item]

    result = tick(items)

    assert result is None
    assert items[0] is item
    assert (item.sell_in, item.quality) == (2, 2)


def test_normal_item_quality_stops_decreasing_at_0():
    item = single_after("bar", 10, 10, days=20)
    assert item.quality == 0
    assert item.sell_in == -10


def test_normal_item_degrades_twice_as_fast_after_expiry():
    item = single_after("foo", 0, 10, days=1)
    assert item.sell_in == -1
    assert item.quality == 8


def test_sulfuras_is_constant():
    item = single_after(SULFURAS, 10, 10, days=20)
    assert item.quality == 10
    assert item.sell_in == 10


def test_sulfuras_keeps_quality_above_cap():
    item = single_after(SULFURAS, -1, 80, days=5)
    assert (item.sell_in, item.quality) == (-1, 80)


def test_aged_brie_quality_increases():
    """
    10 days at +1, then 10 expired days at +2:
      10 -> 20 -> 40
    """
    item = single_after(AGED_BRIE, 10, 10, days=20)
    assert item.quality == 40


def test_aged_brie_caps_at_50():
    item = single_after(AGED_BRIE, 5, 45, days=20)
    assert item.quality == 50


def test_backstage_pass_quality_increases_far_from_concert():
    item = single_after(BACKSTAGE_PASS, 50, 20, days=20)
    assert item.quality == 40


def test_backstage_pass_quality_grows_faster_near_concert_and_caps():
    item = single_after(BACKSTAGE_PASS, 20, 20, days=20)
    assert item.quality == 50
    assert item.sell_in == 0


def test_backstage_pass_quality_drops_to_zero_after_concert():
    item = single_after(BACKSTAGE_PASS, 19, 20, days=20)
    assert item.sell_in == -1
    assert item.quality == 0


def test_items_update_independently_in_list_order():
    items = [
        Item("foo", 1, 5),
        Item(AGED_BRIE, 1, 5),
        Item(SULFURAS, 1, 80),
        Item(BACKSTAGE_PASS, 1, 5),
    ]

    tick(items)

    assert [(i.sell_in, i.quality) for i in items] == [
        (0, 4),
        (0, 6),
        (1, 80),
        (0, 8),
    ]


def test_empty_inventory_is_a_no_op():
    items: list[Item] = []
    tick(items)
    assert items == []
