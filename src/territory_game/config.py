"""Gameplay constants for the territory flood game."""

from typing import Final

OWNER_NONE: Final[int] = 0
OWNER_PLAYER: Final[int] = 1
OWNER_CPU: Final[int] = 2

SIDES: Final[tuple[int, int]] = (OWNER_PLAYER, OWNER_CPU)

RESULT_IN_PROGRESS: Final[str] = "in_progress"
RESULT_PLAYER_WINS: Final[str] = "player_wins"
RESULT_CPU_WINS: Final[str] = "cpu_wins"

DEFAULT_PALETTE: Final[tuple[str, ...]] = (
    "orangered",
    "goldenrod",
    "khaki",
    "orchid",
    "yellowgreen",
    "cadetblue",
)
MIN_PALETTE_SIZE: Final[int] = 2
# Self, opponent and starting color can all be excluded at once.
MIN_RECOMMENDED_PALETTE_SIZE: Final[int] = 4

BOARD_WIDTH: Final[int] = 800
BOARD_HEIGHT: Final[int] = 600
BORDER_EPSILON: Final[float] = 1e-3

DEFAULT_MAX_HEADLESS_TURNS: Final[int] = 1000

SIDE_NAMES: Final[dict[int, str]] = {
    OWNER_NONE: "Neutral",
    OWNER_PLAYER: "You",
    OWNER_CPU: "CPU",
}
