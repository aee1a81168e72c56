import random
from types import SimpleNamespace

from azul_core import FirstLegalAgent, GreedyFillAgent, Move, RandomAgent, TileColor, create_match


def test_random_agent_picks_from_available():
    moves = [
        Move(source=0, color=TileColor.BLUE, line=0),
        Move(source=0, color=TileColor.BLUE, line=1),
    ]
    state = SimpleNamespace(legal_moves=lambda: list(moves))
    agent = RandomAgent(rng=random.Random(42))

    assert agent.select_move(state) in moves


def test_first_legal_agent_prefers_lowest_source_and_line():
    state = create_match(seed=10)
    state.supply.factories = [[], [TileColor.BLUE]] + [[] for _ in range(3)]
    state.supply.center = [TileColor.RED]

    move = FirstLegalAgent().select_move(state)
    assert move == Move(source=Move.CENTER, color=TileColor.RED, line=0)


def test_greedy_fill_completes_pattern_line_when_possible():
    state = create_match(seed=11)
    state.supply.factories = [[] for _ in state.supply.factories]
    state.supply.center = [TileColor.YELLOW, TileColor.BLUE, TileColor.BLUE]
    state.players[0].pattern_lines[1] = [TileColor.YELLOW]  # needs one more to complete

    move = GreedyFillAgent().select_move(state)
    assert move == Move(source=Move.CENTER, color=TileColor.YELLOW, line=1)


def test_greedy_fill_avoids_overflow():
    state = create_match(seed=12)
    state.supply.factories = [[TileColor.RED] * 4] + [[] for _ in range(4)]
    state.supply.center = []

    move = GreedyFillAgent().select_move(state)
    assert move == Move(source=1, color=TileColor.RED, line=3)
