"""Baseline move pickers used for self-play and tests."""

import random
from dataclasses import dataclass, field
from typing import Iterable

from .actions import Move
from .enums import TileColor
from .state import GameState


class Agent:
    def select_move(self, state: GameState) -> Move:
        raise NotImplementedError


COLOR_RANK = {c: i for i, c in enumerate(TileColor)}


def _sorted_moves(moves: Iterable[Move]) -> list[Move]:
    def line_order(m: Move) -> int:
        return 99 if m.to_floor else m.line

    return sorted(moves, key=lambda m: (m.source, COLOR_RANK[m.color], line_order(m)))


def _tiles_taken(state: GameState, move: Move) -> int:
    pile = state.supply.center if move.from_center else state.supply.factories[move.source - 1]
    return sum(1 for t in pile if t == move.color)


def _overflow(state: GameState, move: Move) -> int:
    taken = _tiles_taken(state, move)
    if move.to_floor:
        return taken
    return max(0, taken - state.players[state.current_player].free_space(move.line))


@dataclass
class RandomAgent:
    """Chooses uniformly among legal moves."""

    rng: random.Random = field(default_factory=random.Random)

    def select_move(self, state: GameState) -> Move:
        moves = state.legal_moves()
        if not moves:
            raise RuntimeError("no legal moves available")
        return self.rng.choice(moves)


class FirstLegalAgent:
    """Picks the first move under a stable ordering."""

    def select_move(self, state: GameState) -> Move:
        moves = _sorted_moves(state.legal_moves())
        if not moves:
            raise RuntimeError("no legal moves available")
        return moves[0]


class GreedyFillAgent:
    """
    Prefers completing pattern lines, then the least overflow, then the fullest line.

    Ties fall back to the stable move order.
    """

    def select_move(self, state: GameState) -> Move:
        moves = _sorted_moves(state.legal_moves())
        if not moves:
            raise RuntimeError("no legal moves available")
        player = state.players[state.current_player]

        def key(move: Move):
            taken = _tiles_taken(state, move)
            if move.to_floor:
                return (True, taken, 0, -taken)
            free = player.free_space(move.line)
            completes = taken >= free > 0
            fill = len(player.pattern_lines[move.line]) + min(taken, free)
            return (not completes, _overflow(state, move), -fill, -taken)

        return min(moves, key=key)
