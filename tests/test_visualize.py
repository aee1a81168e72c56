import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from azul_core import TileColor, create_match, force_end  # noqa: E402
from azul_core.visualize import plot_state, plot_supply  # noqa: E402


def test_plot_state_draws_every_player():
    state = create_match(3, seed=0)
    state.players[0].pattern_lines[2] = [TileColor.RED] * 2
    state.players[1].floor_line = [TileColor.AQUA]
    fig = plot_state(force_end(state, "test"))
    assert len(fig.axes) == 3
    assert "test" in fig._suptitle.get_text()
    plt.close(fig)


def test_plot_supply_draws_center_and_factories():
    state = create_match(seed=1)
    fig = plot_supply(state)
    assert len(fig.axes[0].patches) == 20
    plt.close(fig)
