"""JSON-ready views of a match.

``public_view`` is what every seat may see: piles, boards, the round log and
how many tiles sit in the bag and discard pile. ``snapshot_state`` adds a
``hidden`` section (bag order, discard contents, rng state) so that
``restore_state`` can rebuild the exact match.
"""

import random

from .actions import Move
from .enums import GamePhase, TileColor
from .player import PlayerBoard
from .rules import Ruleset
from .state import GameState
from .supply import Supply


def move_to_dict(move: Move) -> dict:
    return {"source": move.source, "color": move.color.value, "line": move.line}


def move_from_dict(data: dict) -> Move:
    return Move(source=int(data["source"]), color=TileColor(data["color"]), line=int(data["line"]))


def _names(tiles) -> list[str]:
    return [t.value for t in tiles]


def _colors(names) -> list[TileColor]:
    return [TileColor(n) for n in names]


def _board_view(board: PlayerBoard) -> dict:
    return {
        "pattern_lines": [_names(line) for line in board.pattern_lines],
        "wall": [list(row) for row in board.wall],
        "floor_line": _names(board.floor_line),
        "has_first_player_token": board.has_first_player_token,
    }


def _board_from_view(data: dict) -> PlayerBoard:
    return PlayerBoard(
        pattern_lines=[_colors(line) for line in data["pattern_lines"]],
        wall=[[bool(cell) for cell in row] for row in data["wall"]],
        floor_line=_colors(data["floor_line"]),
        has_first_player_token=bool(data["has_first_player_token"]),
    )


def public_view(state: GameState) -> dict:
    supply = state.supply
    return {
        "round": state.round_number,
        "phase": state.phase.value,
        "current_player": state.current_player,
        "starting_player": state.starting_player,
        "end_reason": state.end_reason,
        "ruleset": state.ruleset.to_dict(),
        "factories": [_names(f) for f in supply.factories],
        "center": _names(supply.center),
        "first_player_token_in_center": state.first_player_token_in_center,
        "bag_count": len(supply.bag),
        "discard_count": len(supply.discard),
        "players": [_board_view(p) for p in state.players],
        "round_log": [dict(entry) for entry in state.round_log],
    }


def snapshot_state(state: GameState) -> dict:
    """Lossless snapshot; ``restore_state(snapshot_state(s))`` plays on exactly like ``s``."""
    data = public_view(state)
    version, internal, gauss_next = state.rng.getstate()
    data["hidden"] = {
        "bag": _names(state.supply.bag),
        "discard": _names(state.supply.discard),
        "rng": [version, list(internal), gauss_next],
    }
    return data


def restore_state(snapshot: dict) -> GameState:
    hidden = snapshot.get("hidden")
    if hidden is None:
        raise ValueError("a public view has no bag or rng state and cannot be restored")
    version, internal, gauss_next = hidden["rng"]
    rng = random.Random()
    rng.setstate((version, tuple(internal), gauss_next))

    return GameState(
        players=[_board_from_view(p) for p in snapshot["players"]],
        current_player=int(snapshot["current_player"]),
        phase=GamePhase(snapshot["phase"]),
        supply=Supply(
            bag=_colors(hidden["bag"]),
            discard=_colors(hidden["discard"]),
            factories=[_colors(f) for f in snapshot["factories"]],
            center=_colors(snapshot["center"]),
        ),
        starting_player=int(snapshot["starting_player"]),
        ruleset=Ruleset.from_dict(snapshot["ruleset"]),
        round_number=int(snapshot["round"]),
        first_player_token_in_center=bool(snapshot["first_player_token_in_center"]),
        end_reason=snapshot["end_reason"],
        rng=rng,
        round_log=[dict(entry) for entry in snapshot["round_log"]],
    )
