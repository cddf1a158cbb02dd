import logging
from collections import deque

from territory_game.board import Board
from territory_game.config import (
    DEFAULT_PALETTE,
    MIN_PALETTE_SIZE,
    MIN_RECOMMENDED_PALETTE_SIZE,
    OWNER_CPU,
    OWNER_NONE,
    OWNER_PLAYER,
    RESULT_CPU_WINS,
    RESULT_IN_PROGRESS,
    RESULT_PLAYER_WINS,
    SIDE_NAMES,
    SIDES,
)
from territory_game.errors import IllegalMove, InvalidSetup
from territory_game.snapshot import CellView, GameSnapshot
from territory_game.specs import GAME_FIT_TO_CELLS
from territory_game.strategy import GreedyFrontierStrategy

logger = logging.getLogger(__name__)


class TerritoryGame:
    def __init__(self, board, palette=DEFAULT_PALETTE, player_start=None, cpu_start=None, cpu_strategy=None):
        self.board = board
        self.palette = self._validate_palette(palette)

        if player_start is None or cpu_start is None:
            default_player, default_cpu = board.default_start_cells()
            player_start = default_player if player_start is None else player_start
            cpu_start = default_cpu if cpu_start is None else cpu_start
        self._validate_starts(player_start, cpu_start)

        for cell in board.all_cells():
            if cell.color not in self.palette:
                raise InvalidSetup(f"Cell {cell.cell_id} color {cell.color!r} is not in the palette")
            if cell.owner != OWNER_NONE:
                raise InvalidSetup(f"Cell {cell.cell_id} is already owned; boards cannot be reused")

        self.start_cells = {
            OWNER_PLAYER: player_start,
            OWNER_CPU: cpu_start,
        }
        board.claim(player_start, OWNER_PLAYER)
        board.claim(cpu_start, OWNER_CPU)

        self.starting_color = {
            side: board.get_cell(cell_id).color for side, cell_id in self.start_cells.items()
        }
        self.last_color = {
            OWNER_PLAYER: None,
            OWNER_CPU: None,
        }
        self.turn = OWNER_PLAYER
        self.result = RESULT_IN_PROGRESS
        self.move_count = 0
        self.last_move_log = []
        self.cpu_strategy = cpu_strategy or GreedyFrontierStrategy()

        # Border membership never changes, so it is resolved once.
        self.border_cell_ids = board.border_cell_ids()
        if not self.border_cell_ids:
            logger.warning("Board has no border cells; the game cannot be won")

    @classmethod
    def from_records(cls, records, spec=GAME_FIT_TO_CELLS, player_start=None, cpu_start=None, cpu_strategy=None):
        board = Board(records, bounds=spec.bounds, border_tolerance=spec.border_tolerance)
        return cls(
            board,
            palette=spec.palette,
            player_start=player_start,
            cpu_start=cpu_start,
            cpu_strategy=cpu_strategy,
        )

    @staticmethod
    def _validate_palette(palette):
        palette = tuple(palette)
        if len(palette) < MIN_PALETTE_SIZE:
            raise InvalidSetup(f"Palette needs at least {MIN_PALETTE_SIZE} colors, got {len(palette)}")
        if len(set(palette)) != len(palette):
            raise InvalidSetup(f"Palette colors must be distinct: {palette!r}")
        if len(palette) < MIN_RECOMMENDED_PALETTE_SIZE:
            logger.warning(
                "Palette of %d colors can leave a side without legal moves (%d recommended)",
                len(palette),
                MIN_RECOMMENDED_PALETTE_SIZE,
            )
        return palette

    def _validate_starts(self, player_start, cpu_start):
        count = len(self.board)
        for label, cell_id in (("player", player_start), ("cpu", cpu_start)):
            if isinstance(cell_id, bool) or not isinstance(cell_id, int):
                raise InvalidSetup(f"{label} start must be a cell id, got {cell_id!r}")
            if not 0 <= cell_id < count:
                raise InvalidSetup(f"{label} start {cell_id} outside 0..{count - 1}")
        if player_start == cpu_start:
            raise InvalidSetup(f"Both sides cannot start on cell {player_start}")

    @staticmethod
    def opponent_of(side):
        return OWNER_CPU if side == OWNER_PLAYER else OWNER_PLAYER

    @staticmethod
    def _check_side(side):
        if side not in SIDES:
            raise IllegalMove(f"Unknown side: {side!r}")

    @property
    def is_over(self):
        return self.result != RESULT_IN_PROGRESS

    @property
    def winner(self):
        if self.result == RESULT_PLAYER_WINS:
            return OWNER_PLAYER
        if self.result == RESULT_CPU_WINS:
            return OWNER_CPU
        return None

    def owned_cells(self, side):
        self._check_side(side)
        return self.board.owned_ids(side)

    def legal_colors(self, side):
        self._check_side(side)
        own_last = self.last_color[side]
        forbidden = {own_last, self.last_color[self.opponent_of(side)]}
        if own_last is None:
            forbidden.add(self.starting_color[side])
        return [color for color in self.palette if color not in forbidden]

    def apply_move(self, side, color):
        """Play ``color`` for ``side`` and return the newly annexed cell ids.

        Every check happens before any cell is touched, so a rejected move
        leaves the game unchanged.
        """
        if self.is_over:
            raise IllegalMove(f"Game is over ({self.result})")
        self._check_side(side)
        if side != self.turn:
            raise IllegalMove(f"Not {SIDE_NAMES[side]}'s turn")
        if color not in self.legal_colors(side):
            raise IllegalMove(f"Color {color!r} is not legal for {SIDE_NAMES[side]}")

        self.last_move_log = []
        annexed = self._flood(side, color)
        self.last_color[side] = color
        self.turn = self.opponent_of(side)
        self.move_count += 1
        self._log(f"Move {self.move_count}: {SIDE_NAMES[side]} -> {color} | annexed {len(annexed)}")
        self._check_result()
        return annexed

    def _flood(self, side, color):
        board = self.board
        opponent = self.opponent_of(side)
        owned = board.owned_ids(side)
        for cell_id in owned:
            board.recolor(cell_id, color)

        annexed = []
        queue = deque(owned)
        visited = set(owned)
        while queue:
            current = queue.popleft()
            for neighbor_id in sorted(board.neighbors_of(current)):
                if neighbor_id in visited:
                    continue
                visited.add(neighbor_id)
                neighbor = board.cells[neighbor_id]
                if neighbor.owner == opponent:
                    continue
                if neighbor.owner == side:
                    board.recolor(neighbor_id, color)
                    queue.append(neighbor_id)
                    continue
                if neighbor.color == color:
                    board.claim(neighbor_id, side)
                    board.recolor(neighbor_id, color)
                    annexed.append(neighbor_id)
                    queue.append(neighbor_id)
        return annexed

    def _check_result(self):
        if not self.border_cell_ids:
            return
        cells = self.board.cells
        if all(cells[i].owner == OWNER_PLAYER for i in self.border_cell_ids):
            self._set_result(RESULT_PLAYER_WINS)
        elif all(cells[i].owner == OWNER_CPU for i in self.border_cell_ids):
            self._set_result(RESULT_CPU_WINS)

    def _set_result(self, result):
        self.result = result
        logger.info("Game over after %d moves: %s", self.move_count, result)
        self._log(f"Result: {result}")

    def play_cpu_turn(self, strategy=None):
        if self.is_over:
            raise IllegalMove(f"Game is over ({self.result})")
        if self.turn != OWNER_CPU:
            raise IllegalMove("Not CPU's turn")
        strategy = strategy or self.cpu_strategy
        color = strategy.choose_color(self, OWNER_CPU)
        self.apply_move(OWNER_CPU, color)
        return color

    def snapshot(self):
        return GameSnapshot(
            cells=tuple(
                CellView(cell_id=cell.cell_id, color=cell.color, owner=cell.owner)
                for cell in self.board.all_cells()
            ),
            turn=self.turn,
            result=self.result,
            player_legal_colors=tuple(self.legal_colors(OWNER_PLAYER)),
            owner_counts=self.board.count_owners(),
        )

    def _log(self, message):
        self.last_move_log.append(message)
        logger.debug(message)
