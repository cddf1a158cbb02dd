"""Turn-based territory flood game engine over polygon cell boards."""

from territory_game.board import Board, Cell, CellRecord, assign_random_colors
from territory_game.config import (
    DEFAULT_PALETTE,
    OWNER_CPU,
    OWNER_NONE,
    OWNER_PLAYER,
    RESULT_CPU_WINS,
    RESULT_IN_PROGRESS,
    RESULT_PLAYER_WINS,
)
from territory_game.errors import IllegalMove, InvalidGraph, InvalidSetup, OutOfRange, TerritoryError
from territory_game.game import TerritoryGame
from territory_game.play import run_headless
from territory_game.snapshot import CellView, GameSnapshot
from territory_game.specs import GAME_FIT_TO_CELLS, GAME_STANDARD, GameSpec
from territory_game.strategy import BaseStrategy, GreedyFrontierStrategy, RandomStrategy, frontier_tally

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "CellRecord",
    "assign_random_colors",
    "DEFAULT_PALETTE",
    "OWNER_NONE",
    "OWNER_PLAYER",
    "OWNER_CPU",
    "RESULT_IN_PROGRESS",
    "RESULT_PLAYER_WINS",
    "RESULT_CPU_WINS",
    "TerritoryError",
    "OutOfRange",
    "InvalidGraph",
    "InvalidSetup",
    "IllegalMove",
    "TerritoryGame",
    "run_headless",
    "CellView",
    "GameSnapshot",
    "GameSpec",
    "GAME_STANDARD",
    "GAME_FIT_TO_CELLS",
    "BaseStrategy",
    "GreedyFrontierStrategy",
    "RandomStrategy",
    "frontier_tally",
]
