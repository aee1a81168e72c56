import random
from collections import Counter

import pytest

from azul_core import BagExhausted, InvalidPlayerCount, InvariantViolation, Supply, TileColor, deal_factories, new_shuffled_bag
from azul_core.supply import factory_count, refill_bag


def test_new_bag_holds_twenty_of_each_color():
    bag = new_shuffled_bag(random.Random(0))
    assert len(bag) == 100
    assert Counter(bag) == {color: 20 for color in TileColor}


def test_new_bag_is_shuffled_by_rng():
    first = new_shuffled_bag(random.Random(1))
    assert first == new_shuffled_bag(random.Random(1))
    assert first != new_shuffled_bag(random.Random(2))


@pytest.mark.parametrize("players, factories", [(2, 5), (3, 7), (4, 9)])
def test_factory_count(players, factories):
    assert factory_count(players) == factories


@pytest.mark.parametrize("players", [0, 1, 5])
def test_factory_count_rejects_player_count(players):
    with pytest.raises(InvalidPlayerCount, match="must be 2, 3 or 4"):
        factory_count(players)


def test_deal_takes_from_front_of_bag():
    bag = new_shuffled_bag(random.Random(3))
    supply = Supply(bag=list(bag))

    dealt = deal_factories(supply, 3, random.Random(0))

    assert dealt == 28
    assert supply.factories == [bag[i * 4 : i * 4 + 4] for i in range(7)]
    assert supply.bag == bag[28:]


def test_deal_refills_bag_from_discard():
    supply = Supply(
        bag=[TileColor.RED] * 5,
        discard=[TileColor.BLUE] * 30,
    )

    deal_factories(supply, 2, random.Random(0))

    assert supply.factories[0] == [TileColor.RED] * 4
    assert supply.factories[1][0] == TileColor.RED
    assert supply.discard == []
    assert len(supply.bag) == 15
    assert all(len(f) == 4 for f in supply.factories)


def test_deal_raises_when_bag_and_discard_run_short():
    supply = Supply(bag=[TileColor.RED] * 10, discard=[TileColor.BLUE] * 5)

    with pytest.raises(BagExhausted) as exc_info:
        deal_factories(supply, 2, random.Random(0))

    assert exc_info.value.needed == 20
    assert exc_info.value.available == 15
    assert supply.bag == [TileColor.RED] * 10
    assert supply.discard == [TileColor.BLUE] * 5
    assert supply.factories == []


def test_partial_deal_fills_what_it_can():
    supply = Supply(bag=[TileColor.RED] * 10, discard=[TileColor.BLUE] * 5)

    dealt = deal_factories(supply, 2, random.Random(0), allow_partial=True)

    assert dealt == 15
    assert [len(f) for f in supply.factories] == [4, 4, 4, 3, 0]
    assert supply.bag == []


def test_deal_refuses_while_piles_hold_tiles():
    supply = Supply(bag=[TileColor.RED] * 40, center=[TileColor.AQUA])
    with pytest.raises(InvariantViolation):
        deal_factories(supply, 2, random.Random(0))


def test_refill_bag_appends_shuffled_discard():
    supply = Supply(bag=[TileColor.RED], discard=[TileColor.BLUE, TileColor.AQUA])
    moved = refill_bag(supply, random.Random(0))
    assert moved == 2
    assert supply.bag[0] == TileColor.RED
    assert sorted(supply.bag[1:]) == sorted([TileColor.BLUE, TileColor.AQUA])
    assert supply.discard == []
    assert refill_bag(supply, random.Random(0)) == 0
