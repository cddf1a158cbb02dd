"""Read-only views of game state for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass

from territory_game.config import (
    OWNER_PLAYER,
    RESULT_CPU_WINS,
    RESULT_IN_PROGRESS,
    RESULT_PLAYER_WINS,
)


@dataclass(frozen=True)
class CellView:
    cell_id: int
    color: str
    owner: int


@dataclass(frozen=True)
class GameSnapshot:
    """State of one game at a single point in time."""

    cells: tuple[CellView, ...]
    turn: int
    result: str
    player_legal_colors: tuple[str, ...]
    owner_counts: tuple[int, int, int]

    @property
    def is_over(self) -> bool:
        return self.result != RESULT_IN_PROGRESS

    def status_text(self) -> str:
        if self.result == RESULT_PLAYER_WINS:
            return "Game over: You win!"
        if self.result == RESULT_CPU_WINS:
            return "Game over: CPU wins!"
        return "Your turn" if self.turn == OWNER_PLAYER else "CPU thinking..."


__all__ = ["CellView", "GameSnapshot"]
