import os
from dataclasses import asdict, dataclass

RULESET_ENV_VAR = "AZUL_RULESET"
DEFAULT_PRESET = "observed"


@dataclass(frozen=True)
class Ruleset:
    """Optional rule variants.

    The defaults describe the plain drafting game: no first player token, an
    uncapped floor line that keeps its tiles for the whole match, overflow
    absorbed by the floor, and moves targeting a pattern line unless none can
    take the pick. ``recirculating()`` returns floor tiles to the discard pile
    at each round end; ``canonical()`` switches on the tabletop rules.
    """

    strict_capacity: bool = False
    floor_line_cap: int | None = None
    first_player_token: bool = False
    allow_floor_target: bool = False
    discard_floor_lines: bool = False

    @classmethod
    def observed(cls) -> "Ruleset":
        return cls()

    @classmethod
    def recirculating(cls) -> "Ruleset":
        return cls(discard_floor_lines=True)

    @classmethod
    def canonical(cls) -> "Ruleset":
        return cls(
            strict_capacity=True,
            floor_line_cap=7,
            first_player_token=True,
            allow_floor_target=True,
            discard_floor_lines=True,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Ruleset":
        cap = data.get("floor_line_cap")
        return cls(
            strict_capacity=bool(data.get("strict_capacity", False)),
            floor_line_cap=None if cap is None else int(cap),
            first_player_token=bool(data.get("first_player_token", False)),
            allow_floor_target=bool(data.get("allow_floor_target", False)),
            discard_floor_lines=bool(data.get("discard_floor_lines", False)),
        )


PRESETS = {
    "observed": Ruleset.observed,
    "recirculating": Ruleset.recirculating,
    "canonical": Ruleset.canonical,
}


def load_ruleset(name: str | None = None) -> Ruleset:
    """Resolve a preset by name, falling back to ``$AZUL_RULESET`` and then ``observed``."""
    if name is None:
        name = os.getenv(RULESET_ENV_VAR) or DEFAULT_PRESET
    key = name.strip().lower()
    if key not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"unknown ruleset {name!r}; expected one of: {known}")
    return PRESETS[key]()
