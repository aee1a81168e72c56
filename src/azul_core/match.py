"""Boundary functions used by the game-lifecycle layer.

Every function here treats its input state as read-only and hands back a
new ``GameState``; callers must still serialize calls per match.
"""

import random

from .enums import GamePhase
from .errors import MatchFinished, MatchNotFinished, NotCurrentPlayer
from .moves import parse_move
from .player import PlayerBoard
from .rules import Ruleset
from .scoring import DEFAULT_POLICY, ScoringPolicy
from .state import GameState
from .supply import Supply, deal_factories, factory_count, new_shuffled_bag


def create_match(
    number_of_players: int = 2,
    *,
    ruleset: Ruleset | None = None,
    seed: int | None = None,
) -> GameState:
    factories = factory_count(number_of_players)
    ruleset = ruleset or Ruleset()
    rng = random.Random(seed)
    supply = Supply(
        bag=new_shuffled_bag(rng),
        discard=[],
        factories=[[] for _ in range(factories)],
        center=[],
    )
    deal_factories(supply, number_of_players, rng)
    return GameState(
        players=[PlayerBoard() for _ in range(number_of_players)],
        current_player=0,
        phase=GamePhase.CREATED,
        supply=supply,
        starting_player=0,
        ruleset=ruleset,
        round_number=1,
        first_player_token_in_center=ruleset.first_player_token,
        rng=rng,
    )


def apply(state: GameState, token: str, acting_player: int) -> GameState:
    """Play ``token`` for ``acting_player`` and return the resulting state."""
    if state.is_terminal():
        raise MatchFinished("the match has already finished")
    if acting_player != state.current_player:
        raise NotCurrentPlayer(acting_player, state.current_player)
    move = parse_move(token, state.number_of_factories, allow_floor=state.floor_allowed())
    return state.clone().apply_move(move)


def is_finished(state: GameState) -> bool:
    return state.is_terminal()


def force_end(state: GameState, reason: str) -> GameState:
    """Finish the match regardless of the walls, e.g. when it went stale."""
    ended = state.clone()
    ended.finish(reason)
    return ended


def score(state: GameState, policy: ScoringPolicy | None = None) -> dict[int, int]:
    if not state.is_terminal():
        raise MatchNotFinished("scores are only available once the match has finished")
    return (policy or DEFAULT_POLICY).score(state)
