from .actions import Move
from .agents import Agent, FirstLegalAgent, GreedyFillAgent, RandomAgent
from .enums import GamePhase, TileColor
from .errors import (
    AzulError,
    BagExhausted,
    ColorNotInPile,
    InputError,
    InvalidColor,
    InvalidLine,
    InvalidPlayerCount,
    InvalidSource,
    InvariantViolation,
    LineColorConflict,
    LineFull,
    MalformedToken,
    MatchFinished,
    MatchNotFinished,
    NotCurrentPlayer,
    RuleViolation,
    SetupError,
    WallAlreadyHasColor,
)
from .match import apply, create_match, force_end, is_finished, score
from .moves import format_move, parse_move
from .player import PATTERN_LINE_SIZES, PlayerBoard
from .rules import Ruleset, load_ruleset
from .scoring import ScoringPolicy, StandardScoring, TilesPlacedScoring
from .simulation import GameResult, play_game, play_series
from .state import GameState
from .supply import Supply, deal_factories, new_shuffled_bag
from .wall import WALL_PATTERN, should_end

__all__ = [
    "Agent",
    "AzulError",
    "BagExhausted",
    "ColorNotInPile",
    "FirstLegalAgent",
    "GamePhase",
    "GameResult",
    "GameState",
    "GreedyFillAgent",
    "InputError",
    "InvalidColor",
    "InvalidLine",
    "InvalidPlayerCount",
    "InvalidSource",
    "InvariantViolation",
    "LineColorConflict",
    "LineFull",
    "MalformedToken",
    "MatchFinished",
    "MatchNotFinished",
    "Move",
    "NotCurrentPlayer",
    "PATTERN_LINE_SIZES",
    "PlayerBoard",
    "RandomAgent",
    "RuleViolation",
    "Ruleset",
    "ScoringPolicy",
    "SetupError",
    "StandardScoring",
    "Supply",
    "TileColor",
    "TilesPlacedScoring",
    "WALL_PATTERN",
    "WallAlreadyHasColor",
    "apply",
    "create_match",
    "deal_factories",
    "force_end",
    "format_move",
    "is_finished",
    "load_ruleset",
    "new_shuffled_bag",
    "parse_move",
    "play_game",
    "play_series",
    "score",
    "should_end",
]
