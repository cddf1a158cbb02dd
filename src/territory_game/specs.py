"""Game presets bundling palette and board tuning."""

from dataclasses import dataclass
from typing import Final

from territory_game.config import BOARD_HEIGHT, BOARD_WIDTH, BORDER_EPSILON, DEFAULT_PALETTE

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True)
class GameSpec:
    """Configuration for one game over a cell subdivision.

    ``bounds`` is ``(min_x, min_y, max_x, max_y)`` of the outer rectangle.
    When ``None`` the board derives it from the bounding box of all cells.
    """

    palette: tuple[str, ...]
    border_tolerance: float
    bounds: Bounds | None = None


GAME_STANDARD: Final[GameSpec] = GameSpec(
    palette=DEFAULT_PALETTE,
    border_tolerance=BORDER_EPSILON,
    bounds=(0.0, 0.0, float(BOARD_WIDTH), float(BOARD_HEIGHT)),
)

GAME_FIT_TO_CELLS: Final[GameSpec] = GameSpec(
    palette=DEFAULT_PALETTE,
    border_tolerance=BORDER_EPSILON,
)

__all__ = [
    "Bounds",
    "GameSpec",
    "GAME_STANDARD",
    "GAME_FIT_TO_CELLS",
]
