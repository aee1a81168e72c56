import pytest

from azul_core import (
    InvalidColor,
    InvalidLine,
    InvalidSource,
    MalformedToken,
    Move,
    TileColor,
    format_move,
    parse_move,
)


def test_parse_center_move():
    assert parse_move("0_RED_3", 5) == Move(source=0, color=TileColor.RED, line=3)


def test_parse_factory_move_is_case_insensitive():
    move = parse_move("2_black_1", 5)
    assert move == Move(source=2, color=TileColor.BLACK, line=1)
    assert not move.from_center


@pytest.mark.parametrize(
    "token, error",
    [
        ("x_RED_3", InvalidSource),
        ("0_PURPLE_3", InvalidColor),
        ("0_RED_9", InvalidLine),
        ("0_RED", MalformedToken),
        ("0_RED_3_1", MalformedToken),
        ("6_RED_3", InvalidSource),
        ("-1_RED_3", InvalidSource),
        ("_RED_3", InvalidSource),
        ("0__3", InvalidColor),
        ("0_RED_", InvalidLine),
        ("0_RED_-1", InvalidLine),
        ("0_RED_F", InvalidLine),
    ],
)
def test_parse_errors(token, error):
    with pytest.raises(error):
        parse_move(token, 5)


def test_errors_are_ordered_by_field():
    # Source is checked before color, color before line.
    with pytest.raises(InvalidSource):
        parse_move("x_PURPLE_9", 5)
    with pytest.raises(InvalidColor):
        parse_move("1_PURPLE_9", 5)


def test_source_range_follows_factory_count():
    assert parse_move("9_AQUA_0", 9).source == 9
    with pytest.raises(InvalidSource, match="between 0 and 7"):
        parse_move("9_AQUA_0", 7)


def test_error_kind_names_the_failure():
    with pytest.raises(MalformedToken) as exc_info:
        parse_move("0RED3", 5)
    assert exc_info.value.kind == "MalformedToken"
    assert isinstance(exc_info.value, ValueError)


def test_floor_token_when_allowed():
    move = parse_move("0_Blue_f", 5, allow_floor=True)
    assert move.to_floor
    assert format_move(move) == "0_BLUE_F"


def test_format_move():
    assert format_move(Move(source=2, color=TileColor.BLACK, line=1)) == "2_BLACK_1"
    assert format_move(parse_move("0_aqua_4", 5)) == "0_AQUA_4"
