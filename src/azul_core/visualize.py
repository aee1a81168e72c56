import matplotlib.pyplot as plt
from matplotlib import patches

from .enums import TileColor
from .state import GameState
from .wall import WALL_PATTERN

COLOR_MAP = {
    TileColor.BLACK: "#2C2C2C",
    TileColor.AQUA: "#5BC8C0",
    TileColor.BLUE: "#4A90E2",
    TileColor.YELLOW: "#F5D547",
    TileColor.RED: "#D64045",
}


def plot_player_board(ax: plt.Axes, state: GameState, player_idx: int) -> None:
    player = state.players[player_idx]
    marker = " *" if player_idx == state.current_player and not state.is_terminal() else ""
    ax.set_title(f"Player {player_idx}{marker}")
    ax.set_xlim(0, 11)
    ax.set_ylim(0, 6)
    ax.invert_yaxis()
    ax.axis("off")

    for r, line in enumerate(player.pattern_lines):
        capacity = r + 1
        for c in range(capacity):
            x = 4 - c
            color = COLOR_MAP[line[0]] if c < len(line) else "#FFFFFF"
            rect = patches.Rectangle((x, r), 0.9, 0.9, linewidth=1, edgecolor="gray", facecolor=color)
            ax.add_patch(rect)

    for r, row in enumerate(player.wall):
        for c, filled in enumerate(row):
            base_color = COLOR_MAP[WALL_PATTERN[r][c]]
            face = base_color if filled else "#FFFFFF"
            rect = patches.Rectangle(
                (c + 5.5, r), 0.9, 0.9, linewidth=1, edgecolor=base_color, facecolor=face
            )
            ax.add_patch(rect)

    for i, tile in enumerate(player.floor_line):
        rect = patches.Rectangle((i * 0.5, 5.1), 0.45, 0.45, linewidth=1, edgecolor="gray", facecolor=COLOR_MAP[tile])
        ax.add_patch(rect)
    if player.has_first_player_token:
        ax.text(10.2, 5.5, "1st", fontsize=9, color="black")


def plot_state(state: GameState) -> plt.Figure:
    fig, axes = plt.subplots(1, state.number_of_players, figsize=(5 * state.number_of_players, 3.5))
    for idx, ax in enumerate(axes):
        plot_player_board(ax, state, idx)
    title = f"Round {state.round_number} | Phase: {state.phase.value}"
    if state.end_reason:
        title += f" ({state.end_reason})"
    fig.suptitle(title)
    fig.tight_layout()
    return fig


def plot_supply(state: GameState) -> plt.Figure:
    piles = [state.supply.center, *state.supply.factories]
    height = 1 + 0.5 * ((max(len(p) for p in piles) + 1) // 2)
    fig, ax = plt.subplots(figsize=(1.2 * len(piles), height))
    ax.axis("off")
    ax.set_xlim(0, len(piles) * 1.2)
    ax.set_ylim(0, height)
    ax.invert_yaxis()
    for source, pile in enumerate(piles):
        ax.text(source * 1.2 + 0.1, 0.3, "C" if source == 0 else str(source), fontsize=9)
        for i, tile in enumerate(pile):
            x = source * 1.2 + 0.1 + (i % 2) * 0.5
            y = 0.5 + (i // 2) * 0.5
            ax.add_patch(patches.Rectangle((x, y), 0.45, 0.45, edgecolor="gray", facecolor=COLOR_MAP[tile]))
    fig.tight_layout()
    return fig
