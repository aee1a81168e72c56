"""Compact move tokens: ``"<source>_<COLOR>_<line>"``.

``"0_RED_3"`` takes every red tile from the center into pattern line 3;
``"2_BLACK_1"`` takes every black tile from factory 2 into pattern line 1.
"""

from .actions import Move
from .enums import TileColor
from .errors import InvalidColor, InvalidLine, InvalidSource, MalformedToken
from .player import PATTERN_LINE_SIZES
from .supply import FACTORIES_BY_PLAYERS

SEPARATOR = "_"
FLOOR_TOKEN = "F"


def _parse_index(raw: str) -> int | None:
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


def parse_move(
    token: str,
    number_of_factories: int = max(FACTORIES_BY_PLAYERS.values()),
    *,
    allow_floor: bool = False,
) -> Move:
    separators = token.count(SEPARATOR)
    if separators != 2:
        raise MalformedToken(f"move {token!r} must contain exactly 2 separators, found {separators}")
    raw_source, raw_color, raw_line = token.split(SEPARATOR)

    source = _parse_index(raw_source)
    if source is None or source > number_of_factories:
        raise InvalidSource(f"source {raw_source!r} is not a number between 0 and {number_of_factories}")

    try:
        color = TileColor[raw_color.upper()]
    except KeyError:
        names = ", ".join(c.value for c in TileColor)
        raise InvalidColor(f"color {raw_color!r} is not one of {names}") from None

    if allow_floor and raw_line.upper() == FLOOR_TOKEN:
        return Move(source=source, color=color, line=Move.FLOOR)
    line = _parse_index(raw_line)
    if line is None or line >= len(PATTERN_LINE_SIZES):
        raise InvalidLine(f"line {raw_line!r} is not a number between 0 and {len(PATTERN_LINE_SIZES) - 1}")
    return Move(source=source, color=color, line=line)


def format_move(move: Move) -> str:
    line = FLOOR_TOKEN if move.to_floor else str(move.line)
    return SEPARATOR.join((str(move.source), move.color.value, line))
