"""Error taxonomy for the rules core.

Input, rule and setup errors leave the caller's state untouched and can be
shown to the player as-is. ``InvariantViolation`` marks a defect in the
engine itself and is never expected from ``create_match``/``apply``.
"""


class AzulError(Exception):
    """Base class for every recoverable error raised by the core."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class InputError(AzulError, ValueError):
    pass


class MalformedToken(InputError):
    pass


class InvalidSource(InputError):
    pass


class InvalidColor(InputError):
    pass


class InvalidLine(InputError):
    pass


class NotCurrentPlayer(InputError):
    def __init__(self, acting_player: int, current_player: int) -> None:
        super().__init__(f"player {acting_player} cannot move; it is player {current_player}'s turn")
        self.acting_player = acting_player
        self.current_player = current_player


class RuleViolation(AzulError, ValueError):
    pass


class ColorNotInPile(RuleViolation):
    pass


class LineColorConflict(RuleViolation):
    pass


class WallAlreadyHasColor(RuleViolation):
    pass


class LineFull(RuleViolation):
    pass


class SetupError(AzulError, ValueError):
    pass


class InvalidPlayerCount(SetupError):
    def __init__(self, number_of_players: int) -> None:
        super().__init__(f"number of players must be 2, 3 or 4, got {number_of_players}")
        self.number_of_players = number_of_players


class BagExhausted(SetupError):
    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"need {needed} tiles to deal factories, only {available} left in bag and discard")
        self.needed = needed
        self.available = available


class MatchFinished(AzulError):
    pass


class MatchNotFinished(AzulError):
    pass


class InvariantViolation(RuntimeError):
    pass
