"""Final scoring policies.

The engine only records what happened each round (wall placements in order,
floor counts) in ``GameState.round_log``; a ``ScoringPolicy`` turns that
record into points once the match is over.
"""

from .enums import TileColor
from .player import default_wall
from .state import GameState
from .wall import BOARD_SIZE, WALL_COLOR_TO_COL

FLOOR_PENALTIES = (-1, -1, -2, -2, -2, -3, -3)
ROW_BONUS = 2
COLUMN_BONUS = 7
COLOR_BONUS = 10


def _line_len(wall, row, col, dr, dc):
    length = 1
    r = row + dr
    c = col + dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and wall[r][c]:
        length += 1
        r += dr
        c += dc
    r = row - dr
    c = col - dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and wall[r][c]:
        length += 1
        r -= dr
        c -= dc
    return length


def placement_points(wall: list[list[bool]], row: int, col: int) -> int:
    """Points for a tile just set at (row, col): 1 if isolated, else both run lengths."""
    horizontal = _line_len(wall, row, col, 0, 1)
    vertical = _line_len(wall, row, col, 1, 0)
    horiz_score = horizontal if horizontal > 1 else 0
    vert_score = vertical if vertical > 1 else 0
    return 1 if horiz_score == 0 and vert_score == 0 else horiz_score + vert_score


def floor_penalty(count: int) -> int:
    return sum(FLOOR_PENALTIES[:count])


def end_game_bonus(wall: list[list[bool]]) -> int:
    bonus = ROW_BONUS * sum(1 for row in wall if all(row))
    bonus += COLUMN_BONUS * sum(
        1 for col in range(BOARD_SIZE) if all(wall[r][col] for r in range(BOARD_SIZE))
    )
    bonus += COLOR_BONUS * sum(
        1
        for color in TileColor
        if all(wall[r][WALL_COLOR_TO_COL[r][color]] for r in range(BOARD_SIZE))
    )
    return bonus


class ScoringPolicy:
    def score(self, state: GameState) -> dict[int, int]:
        raise NotImplementedError


class StandardScoring(ScoringPolicy):
    """Tabletop scoring.

    Placement and floor points are replayed from the round log; end-game
    bonuses are read off the final walls.
    """

    def score(self, state: GameState) -> dict[int, int]:
        walls = {idx: default_wall() for idx in range(state.number_of_players)}
        scores = {idx: 0 for idx in range(state.number_of_players)}
        # Tiles kept on the floor across rounds are charged once, in the round they landed.
        carried = {idx: 0 for idx in range(state.number_of_players)}
        for entry in state.round_log:
            idx = entry["player"]
            wall = walls[idx]
            gained = 0
            for row, col in entry["placements"]:
                wall[row][col] = True
                gained += placement_points(wall, row, col)
            new_on_floor = entry["floor"] - carried[idx]
            carried[idx] = entry.get("floor_kept", 0)
            scores[idx] = max(0, scores[idx] + gained + floor_penalty(new_on_floor))
        for idx, player in enumerate(state.players):
            scores[idx] += end_game_bonus(player.wall)
        return scores


class TilesPlacedScoring(ScoringPolicy):
    """One point per tile on the wall; no adjacency, penalties or bonuses."""

    def score(self, state: GameState) -> dict[int, int]:
        return {idx: sum(sum(row) for row in p.wall) for idx, p in enumerate(state.players)}


DEFAULT_POLICY = StandardScoring()
