import logging
import random
from collections import deque
from dataclasses import dataclass, replace

from territory_game.config import BORDER_EPSILON, OWNER_CPU, OWNER_NONE, OWNER_PLAYER, SIDES
from territory_game.errors import InvalidGraph, OutOfRange
from territory_game.geometry import (
    bounding_box,
    is_border_point,
    open_ring,
    point_in_polygon,
    squared_distance,
    vertex_centroid,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellRecord:
    """One cell as delivered by the geometry layer."""

    cell_id: int
    boundary_points: tuple
    neighbors: tuple
    color: str | None = None
    site: tuple | None = None

    @classmethod
    def from_mapping(cls, data):
        if "id" not in data:
            raise InvalidGraph(f"Cell record without an id: {data!r}")
        points = data.get("boundary_points", data.get("polygon"))
        if points is None:
            raise InvalidGraph(f"Cell {data['id']} has no boundary points")
        site = data.get("site")
        return cls(
            cell_id=data["id"],
            boundary_points=tuple((float(x), float(y)) for x, y in points),
            neighbors=tuple(data.get("neighbors", ())),
            color=data.get("color"),
            site=None if site is None else (float(site[0]), float(site[1])),
        )


def coerce_record(record):
    if isinstance(record, CellRecord):
        return record
    return CellRecord.from_mapping(record)


def assign_random_colors(records, palette, rng=None):
    """Return copies of ``records`` with a random palette color on every cell."""

    if not palette:
        raise ValueError("palette must not be empty")
    rng = rng or random
    colors = list(palette)
    return [replace(coerce_record(record), color=rng.choice(colors)) for record in records]


class Cell:
    def __init__(self, cell_id, boundary_points, neighbors, color, site=None):
        self.cell_id = cell_id
        self.boundary_points = boundary_points
        self.neighbors = neighbors
        self.site = site
        self._color = color
        self._owner = OWNER_NONE

    @property
    def color(self):
        return self._color

    @property
    def owner(self):
        return self._owner

    def anchor(self):
        """Point used for nearest-cell lookups: the site, else the vertex centroid."""

        if self.site is not None:
            return self.site
        return vertex_centroid(self.boundary_points)

    def __repr__(self):
        return f"Cell(id={self.cell_id}, color={self._color!r}, owner={self._owner})"


class Board:
    """Fixed adjacency graph of polygon cells.

    Geometry and adjacency never change after construction. Cell color and
    owner change only through ``recolor`` and ``claim``, which the game engine
    calls while applying a move.
    """

    def __init__(self, records, bounds=None, border_tolerance=BORDER_EPSILON):
        records = [coerce_record(r) for r in records]
        for record in records:
            if isinstance(record.cell_id, bool) or not isinstance(record.cell_id, int):
                raise InvalidGraph(f"Cell id must be an integer, got {record.cell_id!r}")
        records.sort(key=lambda r: r.cell_id)
        if not records:
            raise InvalidGraph("Board needs at least one cell.")
        for index, record in enumerate(records):
            if record.cell_id != index:
                raise InvalidGraph(
                    f"Cell ids must be contiguous from 0: expected {index}, got {record.cell_id}"
                )
            if record.color is None:
                raise InvalidGraph(f"Cell {index} has no color")
            if not open_ring(record.boundary_points):
                raise InvalidGraph(f"Cell {index} has an empty boundary")

        self.cells = [
            Cell(
                cell_id=record.cell_id,
                boundary_points=tuple(record.boundary_points),
                neighbors=frozenset(record.neighbors),
                color=record.color,
                site=record.site,
            )
            for record in records
        ]
        self.validate_integrity()

        if bounds is None:
            bounds = bounding_box(p for cell in self.cells for p in cell.boundary_points)
        min_x, min_y, max_x, max_y = (float(v) for v in bounds)
        if max_x <= min_x or max_y <= min_y:
            raise InvalidGraph(f"Degenerate board bounds: {bounds!r}")
        self.bounds = (min_x, min_y, max_x, max_y)
        self.border_tolerance = float(border_tolerance)
        self._border_flags = [
            any(is_border_point(p, self.bounds, self.border_tolerance) for p in cell.boundary_points)
            for cell in self.cells
        ]
        logger.debug(
            "Built board: %d cells, %d on border, bounds=%s",
            len(self.cells),
            sum(self._border_flags),
            self.bounds,
        )

    def __len__(self):
        return len(self.cells)

    def _check_id(self, cell_id):
        if isinstance(cell_id, bool) or not isinstance(cell_id, int):
            raise OutOfRange(f"Cell id must be an integer, got {cell_id!r}")
        if not 0 <= cell_id < len(self.cells):
            raise OutOfRange(f"Cell id {cell_id} outside 0..{len(self.cells) - 1}")

    def get_cell(self, cell_id):
        self._check_id(cell_id)
        return self.cells[cell_id]

    def all_cells(self):
        return list(self.cells)

    def neighbors_of(self, cell_id):
        self._check_id(cell_id)
        return self.cells[cell_id].neighbors

    def is_border_cell(self, cell_id):
        self._check_id(cell_id)
        return self._border_flags[cell_id]

    def border_cell_ids(self):
        return tuple(i for i, flag in enumerate(self._border_flags) if flag)

    def owned_ids(self, owner):
        return [cell.cell_id for cell in self.cells if cell.owner == owner]

    def count_owners(self):
        player = cpu = neutral = 0
        for cell in self.cells:
            if cell.owner == OWNER_PLAYER:
                player += 1
            elif cell.owner == OWNER_CPU:
                cpu += 1
            else:
                neutral += 1
        return player, cpu, neutral

    def same_color_region(self, cell_id):
        """Connected cells sharing ``cell_id``'s color, in breadth-first order."""

        self._check_id(cell_id)
        target_color = self.cells[cell_id].color
        region = [cell_id]
        visited = {cell_id}
        queue = deque([cell_id])
        while queue:
            current = queue.popleft()
            for neighbor_id in sorted(self.cells[current].neighbors):
                if neighbor_id in visited:
                    continue
                visited.add(neighbor_id)
                if self.cells[neighbor_id].color == target_color:
                    region.append(neighbor_id)
                    queue.append(neighbor_id)
        return region

    def cell_at(self, x, y):
        for cell in self.cells:
            if point_in_polygon((x, y), cell.boundary_points):
                return cell
        return None

    def nearest_cell(self, x, y):
        # min() keeps the lowest id on ties.
        return min(self.cells, key=lambda cell: squared_distance(cell.anchor(), (x, y)))

    def corner_cells(self):
        min_x, min_y, max_x, max_y = self.bounds
        corners = ((min_x, min_y), (max_x, min_y), (min_x, max_y), (max_x, max_y))
        return {self.nearest_cell(x, y).cell_id for x, y in corners}

    def default_start_cells(self):
        """Return ``(player_start, cpu_start)``: bottom-left and top-right cells."""

        min_x, min_y, max_x, max_y = self.bounds
        player_start = self.nearest_cell(min_x, max_y).cell_id
        cpu_start = self.nearest_cell(max_x, min_y).cell_id
        return player_start, cpu_start

    def recolor(self, cell_id, color):
        self._check_id(cell_id)
        self.cells[cell_id]._color = color

    def claim(self, cell_id, owner):
        if owner not in SIDES:
            raise ValueError(f"Invalid owner: {owner}")
        cell = self.get_cell(cell_id)
        if cell.owner not in (OWNER_NONE, owner):
            raise ValueError(f"Cell {cell_id} already owned by {cell.owner}")
        cell._owner = owner

    def validate_integrity(self):
        count = len(self.cells)
        for cell in self.cells:
            if cell.owner not in (OWNER_NONE, OWNER_PLAYER, OWNER_CPU):
                raise InvalidGraph(f"Invalid owner on cell {cell.cell_id}: {cell.owner}")
            for neighbor_id in cell.neighbors:
                if isinstance(neighbor_id, bool) or not isinstance(neighbor_id, int):
                    raise InvalidGraph(
                        f"Cell {cell.cell_id} has non-integer neighbor {neighbor_id!r}"
                    )
                if not 0 <= neighbor_id < count:
                    raise InvalidGraph(
                        f"Cell {cell.cell_id} references missing neighbor {neighbor_id}"
                    )
                if neighbor_id == cell.cell_id:
                    raise InvalidGraph(f"Cell {cell.cell_id} lists itself as a neighbor")
                if cell.cell_id not in self.cells[neighbor_id].neighbors:
                    raise InvalidGraph(
                        f"Asymmetric adjacency: {cell.cell_id} -> {neighbor_id} has no reverse edge"
                    )
