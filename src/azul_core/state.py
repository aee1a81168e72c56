import logging
import random
from collections import Counter
from dataclasses import dataclass, field

from .actions import Move
from .enums import GamePhase, TileColor
from .errors import (
    ColorNotInPile,
    InvalidLine,
    InvalidSource,
    InvariantViolation,
    LineColorConflict,
    LineFull,
    MatchFinished,
    RuleViolation,
    WallAlreadyHasColor,
)
from .player import PATTERN_LINE_SIZES, PlayerBoard
from .rules import Ruleset
from .supply import Supply, deal_factories
from .wall import WALL_PATTERN, should_end, tile_pattern_lines, wall_has_color

LOGGER = logging.getLogger(__name__)

END_REASON_WALL_ROW = "wall row completed"
END_REASON_SUPPLY = "supply exhausted"


@dataclass
class GameState:
    players: list[PlayerBoard]
    current_player: int
    phase: GamePhase
    supply: Supply
    starting_player: int = 0
    ruleset: Ruleset = field(default_factory=Ruleset)
    round_number: int = 1
    first_player_token_in_center: bool = False
    end_reason: str | None = None
    rng: random.Random = field(default_factory=random.Random, repr=False)
    round_log: list[dict] = field(default_factory=list)

    @property
    def number_of_players(self) -> int:
        return len(self.players)

    @property
    def number_of_factories(self) -> int:
        return len(self.supply.factories)

    def clone(self) -> "GameState":
        clone_rng = random.Random()
        clone_rng.setstate(self.rng.getstate())
        return GameState(
            players=[p.clone() for p in self.players],
            current_player=self.current_player,
            phase=self.phase,
            supply=self.supply.clone(),
            starting_player=self.starting_player,
            ruleset=self.ruleset,
            round_number=self.round_number,
            first_player_token_in_center=self.first_player_token_in_center,
            end_reason=self.end_reason,
            rng=clone_rng,
            round_log=list(self.round_log),
        )

    def is_terminal(self) -> bool:
        return self.phase == GamePhase.GAME_END

    def tile_counts(self) -> Counter:
        """Count every tile in play, wall included."""
        counts = Counter()
        supply = self.supply
        counts.update(supply.bag)
        counts.update(supply.discard)
        counts.update(supply.center)
        for factory in supply.factories:
            counts.update(factory)
        for player in self.players:
            for line in player.pattern_lines:
                counts.update(line)
            counts.update(player.floor_line)
            for r, row in enumerate(player.wall):
                counts.update(WALL_PATTERN[r][c] for c, filled in enumerate(row) if filled)
        return counts

    def legal_moves(self) -> list[Move]:
        if self.phase not in (GamePhase.CREATED, GamePhase.DRAFTING):
            return []
        player = self.players[self.current_player]
        moves = []
        floor_moves = []
        line_count = len(PATTERN_LINE_SIZES)

        for source in range(self.number_of_factories + 1):
            pile = self._source_pile(source)
            for color in TileColor:
                if color not in pile:
                    continue
                for line_idx in range(line_count):
                    if self._placement_error(player, line_idx, color) is None:
                        moves.append(Move(source=source, color=color, line=line_idx))
                floor_moves.append(Move(source=source, color=color, line=Move.FLOOR))
        # A player with no pattern-line placement left sends the whole pick to the floor.
        if self.ruleset.allow_floor_target or not moves:
            moves.extend(floor_moves)
        return moves

    def floor_forced(self) -> bool:
        """True when the current player cannot place any pile color on a pattern line."""
        if self.phase not in (GamePhase.CREATED, GamePhase.DRAFTING):
            return False
        player = self.players[self.current_player]
        for source in range(self.number_of_factories + 1):
            for color in set(self._source_pile(source)):
                for line_idx in range(len(PATTERN_LINE_SIZES)):
                    if self._placement_error(player, line_idx, color) is None:
                        return False
        return True

    def floor_allowed(self) -> bool:
        return self.ruleset.allow_floor_target or self.floor_forced()

    def check_move(self, move: Move) -> None:
        """Raise the error ``move`` would hit, without touching the state."""
        if self.phase == GamePhase.GAME_END:
            raise MatchFinished("the match has already finished")
        if self.phase not in (GamePhase.CREATED, GamePhase.DRAFTING):
            raise InvariantViolation(f"cannot draft during {self.phase.value}")
        if not 0 <= move.source <= self.number_of_factories:
            raise InvalidSource(f"source {move.source} is not between 0 and {self.number_of_factories}")
        if move.to_floor:
            if not self.floor_allowed():
                raise InvalidLine("tiles may only go to the floor when no pattern line can take them")
        elif not 0 <= move.line < len(PATTERN_LINE_SIZES):
            raise InvalidLine(f"line {move.line} is not between 0 and {len(PATTERN_LINE_SIZES) - 1}")

        if move.color not in self._source_pile(move.source):
            where = "center" if move.from_center else f"factory {move.source}"
            raise ColorNotInPile(f"{where} holds no {move.color.value} tiles")
        if not move.to_floor:
            error = self._placement_error(self.players[self.current_player], move.line, move.color)
            if error is not None:
                raise error

    def apply_move(self, move: Move) -> "GameState":
        self.check_move(move)
        self.phase = GamePhase.DRAFTING
        player = self.players[self.current_player]

        pile = self._source_pile(move.source)
        picked = [t for t in pile if t == move.color]
        remainder = [t for t in pile if t != move.color]
        if move.from_center:
            self.supply.center = remainder
            if self.first_player_token_in_center:
                self.first_player_token_in_center = False
                player.has_first_player_token = True
        else:
            self.supply.factories[move.source - 1] = []
            self.supply.center.extend(remainder)

        self._place_tiles(player, picked, move.line)
        self._advance_turn_after_draft()
        return self

    def _source_pile(self, source: int) -> list[TileColor]:
        if source == Move.CENTER:
            return self.supply.center
        return self.supply.factories[source - 1]

    def _placement_error(self, player: PlayerBoard, line_idx: int, color: TileColor) -> RuleViolation | None:
        line = player.pattern_lines[line_idx]
        if line and line[0] != color:
            return LineColorConflict(f"pattern line {line_idx} already holds {line[0].value}")
        if wall_has_color(player.wall, line_idx, color):
            return WallAlreadyHasColor(f"wall row {line_idx} already has {color.value}")
        if self.ruleset.strict_capacity and player.free_space(line_idx) == 0:
            return LineFull(f"pattern line {line_idx} is full")
        return None

    def _place_tiles(self, player: PlayerBoard, tiles: list[TileColor], line_idx: int) -> None:
        if line_idx == Move.FLOOR:
            self._add_to_floor(player, tiles)
            return
        to_line = min(player.free_space(line_idx), len(tiles))
        player.pattern_lines[line_idx].extend(tiles[:to_line])
        if to_line < len(tiles):
            self._add_to_floor(player, tiles[to_line:])

    def _add_to_floor(self, player: PlayerBoard, tiles: list[TileColor]) -> None:
        cap = self.ruleset.floor_line_cap
        if cap is None:
            player.floor_line.extend(tiles)
            return
        room = max(0, cap - player.floor_count())
        player.floor_line.extend(tiles[:room])
        self.supply.discard.extend(tiles[room:])

    def _advance_turn_after_draft(self) -> None:
        if self.supply.piles_empty():
            self._end_round()
        else:
            self.current_player = (self.current_player + 1) % self.number_of_players

    def _end_round(self) -> None:
        self.phase = GamePhase.WALL_TILING
        discard = self.supply.discard
        for idx, player in enumerate(self.players):
            placements = tile_pattern_lines(player, discard)
            entry = {
                "round": self.round_number,
                "player": idx,
                "placements": [[row, col] for row, col in placements],
                "floor": player.floor_count(),
            }
            if player.has_first_player_token:
                self.starting_player = idx
                player.has_first_player_token = False
            if self.ruleset.discard_floor_lines:
                discard.extend(player.floor_line)
                player.floor_line = []
            entry["floor_kept"] = len(player.floor_line)
            self.round_log.append(entry)
        LOGGER.debug("round %d tiled; %d tiles in discard", self.round_number, len(discard))

        if should_end(self.players):
            self.finish(END_REASON_WALL_ROW)
            return

        self.round_number += 1
        self.first_player_token_in_center = self.ruleset.first_player_token
        dealt = deal_factories(self.supply, self.number_of_players, self.rng, allow_partial=True)
        if not dealt:
            self.finish(END_REASON_SUPPLY)
            return
        self.current_player = self.starting_player
        self.phase = GamePhase.DRAFTING

    def finish(self, reason: str) -> None:
        self.phase = GamePhase.GAME_END
        self.end_reason = reason
        self.first_player_token_in_center = False
        LOGGER.info("match finished after round %d: %s", self.round_number, reason)
