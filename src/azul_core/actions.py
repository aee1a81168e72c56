from dataclasses import dataclass

from .enums import TileColor


@dataclass(frozen=True)
class Move:
    source: int  # 0 for center, 1..N for factories
    color: TileColor
    line: int  # 0-4 for pattern lines, -1 for floor

    CENTER = 0
    FLOOR = -1

    @property
    def from_center(self) -> bool:
        return self.source == Move.CENTER

    @property
    def to_floor(self) -> bool:
        return self.line == Move.FLOOR
