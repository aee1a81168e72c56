from enum import Enum


class TileColor(str, Enum):
    BLACK = "BLACK"
    AQUA = "AQUA"
    BLUE = "BLUE"
    YELLOW = "YELLOW"
    RED = "RED"


class GamePhase(str, Enum):
    CREATED = "created"
    DRAFTING = "drafting"
    WALL_TILING = "wall_tiling"
    GAME_END = "game_end"
