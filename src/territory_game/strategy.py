"""Opponent policies that pick a color for one side."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from territory_game.config import OWNER_NONE
from territory_game.errors import IllegalMove


def frontier_tally(game, side) -> dict[str, int]:
    """Count unowned frontier occurrences per legal color for ``side``.

    A frontier cell touching several of ``side``'s cells is counted once per
    touching cell. Cells owned by either side never count. Every legal color
    is present in the result, with zero when absent from the frontier.
    """
    legal = game.legal_colors(side)
    counts = {color: 0 for color in legal}
    board = game.board
    for cell_id in board.owned_ids(side):
        for neighbor_id in board.neighbors_of(cell_id):
            neighbor = board.cells[neighbor_id]
            if neighbor.owner != OWNER_NONE:
                continue
            if neighbor.color in counts:
                counts[neighbor.color] += 1
    return counts


class BaseStrategy(ABC):
    """Color-picking policy driven through the engine's query surface."""

    name = "base"

    @abstractmethod
    def choose_color(self, game, side) -> str:
        """Return a color from ``game.legal_colors(side)``.

        Raises:
            IllegalMove: when ``side`` has no legal color.
        """

    @staticmethod
    def _legal_or_raise(game, side) -> list[str]:
        legal = game.legal_colors(side)
        if not legal:
            raise IllegalMove(f"No legal color for side {side}; palette too small")
        return legal


class GreedyFrontierStrategy(BaseStrategy):
    """Pick the legal color showing most often on the unowned frontier.

    Ties go to the earliest color in palette order. With an empty frontier
    the first legal color is played, so a move is always produced while any
    legal color exists.
    """

    name = "greedy"

    def choose_color(self, game, side) -> str:
        legal = self._legal_or_raise(game, side)
        counts = frontier_tally(game, side)

        best = None
        best_count = 0
        for color in legal:
            if counts[color] > best_count:
                best = color
                best_count = counts[color]

        if best is None:
            return legal[0]
        return best


class RandomStrategy(BaseStrategy):
    """Uniform choice among legal colors from a per-instance RNG."""

    name = "random"

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def choose_color(self, game, side) -> str:
        return self.rng.choice(self._legal_or_raise(game, side))


__all__ = [
    "frontier_tally",
    "BaseStrategy",
    "GreedyFrontierStrategy",
    "RandomStrategy",
]
