from .enums import TileColor
from .errors import InvariantViolation
from .player import PATTERN_LINE_SIZES, PlayerBoard

WALL_PATTERN = [
    [TileColor.BLUE, TileColor.YELLOW, TileColor.RED, TileColor.BLACK, TileColor.AQUA],
    [TileColor.AQUA, TileColor.BLUE, TileColor.YELLOW, TileColor.RED, TileColor.BLACK],
    [TileColor.BLACK, TileColor.AQUA, TileColor.BLUE, TileColor.YELLOW, TileColor.RED],
    [TileColor.RED, TileColor.BLACK, TileColor.AQUA, TileColor.BLUE, TileColor.YELLOW],
    [TileColor.YELLOW, TileColor.RED, TileColor.BLACK, TileColor.AQUA, TileColor.BLUE],
]
WALL_COLOR_TO_COL = [{color: col for col, color in enumerate(row)} for row in WALL_PATTERN]

BOARD_SIZE = 5


def wall_has_color(wall: list[list[bool]], row: int, color: TileColor) -> bool:
    return wall[row][WALL_COLOR_TO_COL[row][color]]


def tile_pattern_lines(board: PlayerBoard, discard: list[TileColor]) -> list[tuple[int, int]]:
    """Move every complete pattern line onto the wall.

    One tile per complete line lands on the wall; the rest of the line goes
    to ``discard``. Incomplete lines carry over. Returns the ``(row, col)``
    cells filled, top row first.
    """
    placed = []
    for line_idx, capacity in enumerate(PATTERN_LINE_SIZES):
        line = board.pattern_lines[line_idx]
        if len(line) != capacity:
            continue
        tile = line.pop()
        col = WALL_COLOR_TO_COL[line_idx][tile]
        if board.wall[line_idx][col]:
            raise InvariantViolation(f"wall cell ({line_idx}, {col}) already holds {tile.value}")
        if any(t != tile for t in line):
            raise InvariantViolation(f"pattern line {line_idx} mixes colors")
        board.wall[line_idx][col] = True
        discard.extend(line)
        board.pattern_lines[line_idx] = []
        placed.append((line_idx, col))
    return placed


def has_complete_row(wall: list[list[bool]]) -> bool:
    return any(all(row) for row in wall)


def should_end(players: list[PlayerBoard]) -> bool:
    return any(has_complete_row(p.wall) for p in players)
