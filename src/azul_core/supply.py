import logging
import random
from dataclasses import dataclass, field

from .enums import TileColor
from .errors import BagExhausted, InvalidPlayerCount, InvariantViolation

LOGGER = logging.getLogger(__name__)

TILES_PER_COLOR = 20
TILES_PER_FACTORY = 4
FACTORIES_BY_PLAYERS = {2: 5, 3: 7, 4: 9}


@dataclass
class Supply:
    bag: list[TileColor] = field(default_factory=list)
    discard: list[TileColor] = field(default_factory=list)
    factories: list[list[TileColor]] = field(default_factory=list)
    center: list[TileColor] = field(default_factory=list)

    def clone(self) -> "Supply":
        return Supply(
            bag=list(self.bag),
            discard=list(self.discard),
            factories=[list(f) for f in self.factories],
            center=list(self.center),
        )

    def piles_empty(self) -> bool:
        return not self.center and all(not f for f in self.factories)


def factory_count(number_of_players: int) -> int:
    if number_of_players not in FACTORIES_BY_PLAYERS:
        raise InvalidPlayerCount(number_of_players)
    return FACTORIES_BY_PLAYERS[number_of_players]


def new_shuffled_bag(rng: random.Random | None = None) -> list[TileColor]:
    rng = rng or random.Random()
    bag = []
    for color in TileColor:
        bag.extend([color] * TILES_PER_COLOR)
    rng.shuffle(bag)
    return bag


def refill_bag(supply: Supply, rng: random.Random) -> int:
    """Shuffle the discard pile and append it behind whatever is left in the bag."""
    moved = len(supply.discard)
    if not moved:
        return 0
    rng.shuffle(supply.discard)
    supply.bag.extend(supply.discard)
    supply.discard.clear()
    LOGGER.debug("reshuffled %d discarded tiles into the bag (%d in bag)", moved, len(supply.bag))
    return moved


def deal_factories(
    supply: Supply,
    number_of_players: int,
    rng: random.Random,
    *,
    allow_partial: bool = False,
) -> int:
    """Fill every factory from the front of the bag; returns the number of tiles dealt.

    A short bag is topped up from the discard pile first. Without
    ``allow_partial`` a supply that still cannot fill every factory raises
    ``BagExhausted`` before anything is touched.
    """
    count = factory_count(number_of_players)
    if not supply.piles_empty():
        raise InvariantViolation("cannot deal factories while tiles remain on factories or center")
    needed = count * TILES_PER_FACTORY
    available = len(supply.bag) + len(supply.discard)
    if available < needed and not allow_partial:
        raise BagExhausted(needed, available)

    if len(supply.bag) < needed:
        refill_bag(supply, rng)
    bag = supply.bag
    supply.factories = [
        bag[i * TILES_PER_FACTORY : (i + 1) * TILES_PER_FACTORY] for i in range(count)
    ]
    dealt = min(needed, len(bag))
    del bag[:dealt]
    if dealt < needed:
        LOGGER.info("supply short: dealt %d of %d tiles", dealt, needed)
    return dealt
