import logging
from dataclasses import dataclass, field
from typing import Callable

from .agents import Agent
from .match import apply, create_match, force_end, score
from .moves import format_move
from .rules import Ruleset
from .state import GameState

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 50


@dataclass
class GameResult:
    final_state: GameState
    scores: dict[int, int]
    moves: list[str] = field(default_factory=list)


def play_game(
    agents: list[Agent],
    *,
    seed: int | None = None,
    ruleset: Ruleset | None = None,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    on_state: Callable[[GameState], None] | None = None,
) -> GameResult:
    """Drive a match through the token interface until it finishes.

    ``on_state`` sees every state reached, the initial one included.
    """
    state = create_match(len(agents), ruleset=ruleset, seed=seed)
    moves = []
    if on_state:
        on_state(state)
    while not state.is_terminal():
        if state.round_number > max_rounds:
            state = force_end(state, "round limit reached")
        else:
            player = state.current_player
            # Clone to protect state from accidental mutation by agent code.
            token = format_move(agents[player].select_move(state.clone()))
            state = apply(state, token, player)
            moves.append(token)
        if on_state:
            on_state(state)
    LOGGER.debug("game over after %d moves: %s", len(moves), state.end_reason)
    return GameResult(final_state=state, scores=score(state), moves=moves)


def play_series(
    agents: list[Agent],
    games: int,
    *,
    seed: int | None = None,
    ruleset: Ruleset | None = None,
) -> list[GameResult]:
    results = []
    for i in range(games):
        game_seed = None if seed is None else seed + i
        results.append(play_game(agents, seed=game_seed, ruleset=ruleset))
    return results
