"""Pytest configuration and shared board builders."""

import pytest

from territory_game import Board, TerritoryGame

PALETTE4 = ("red", "blue", "green", "yellow")
GRAPH_BOUNDS = (0.0, 0.0, 1000.0, 1000.0)


def square(x, y, size):
    """Closed square ring starting at the top-left corner."""
    return [(x, y), (x + size, y), (x + size, y + size), (x, y + size), (x, y)]


def grid_records(cols, rows, colors, size=10.0):
    """Square cells in row-major order with 4-way adjacency."""
    records = []
    for r in range(rows):
        for c in range(cols):
            cell_id = r * cols + c
            neighbors = []
            if c > 0:
                neighbors.append(cell_id - 1)
            if c < cols - 1:
                neighbors.append(cell_id + 1)
            if r > 0:
                neighbors.append(cell_id - cols)
            if r < rows - 1:
                neighbors.append(cell_id + cols)
            records.append(
                {
                    "id": cell_id,
                    "boundary_points": square(c * size, r * size, size),
                    "neighbors": neighbors,
                    "color": colors[cell_id],
                }
            )
    return records


def graph_records(edges, colors, border_ids=()):
    """Cells for an arbitrary adjacency graph.

    Border cells get a square touching the left edge of ``GRAPH_BOUNDS``;
    the rest get squares well inside it.
    """
    neighbors = {i: set() for i in range(len(colors))}
    for a, b in edges:
        neighbors[a].add(b)
        neighbors[b].add(a)
    records = []
    for cell_id, color in enumerate(colors):
        if cell_id in border_ids:
            points = square(0.0, 100.0 + cell_id * 10.0, 5.0)
        else:
            points = square(100.0 + cell_id * 10.0, 100.0, 5.0)
        records.append(
            {
                "id": cell_id,
                "boundary_points": points,
                "neighbors": sorted(neighbors[cell_id]),
                "color": color,
            }
        )
    return records


def ring_board_colors():
    """5x5 grid: goldenrod border ring, orchid interior, two colored start cells."""
    colors = []
    for r in range(5):
        for c in range(5):
            if r in (0, 4) or c in (0, 4):
                colors.append("goldenrod")
            else:
                colors.append("orchid")
    colors[6] = "orangered"
    colors[18] = "khaki"
    return colors


@pytest.fixture
def quad_game():
    """Four mutually adjacent border cells; player on 0 (red), CPU on 3 (blue)."""
    edges = [(a, b) for a in range(4) for b in range(a + 1, 4)]
    records = graph_records(edges, ["red", "green", "green", "blue"], border_ids={0, 1, 2, 3})
    board = Board(records, bounds=GRAPH_BOUNDS)
    return TerritoryGame(board, palette=PALETTE4, player_start=0, cpu_start=3)


@pytest.fixture
def ring_game():
    """Both starts are interior cells, so either side can win the border ring."""
    board = Board(grid_records(5, 5, ring_board_colors()))
    return TerritoryGame(board, player_start=6, cpu_start=18)


@pytest.fixture
def grid_colors_8x6():
    palette = ("orangered", "goldenrod", "khaki", "orchid", "yellowgreen", "cadetblue")
    return [palette[(i * 7 + i // 8) % len(palette)] for i in range(48)]
