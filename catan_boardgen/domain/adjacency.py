from __future__ import annotations

from typing import List, Tuple

AxialCoord = Tuple[int, int]

BOARD_RADIUS = 2
TILE_COUNT = 19
ROW_WIDTHS: Tuple[int, ...] = (3, 4, 5, 4, 3)

AXIAL_DIRECTIONS: Tuple[AxialCoord, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)

# Row-major: 0-2 top row, 7-11 centre row, 16-18 bottom row.
_ADJACENCY: Tuple[Tuple[int, ...], ...] = (
    (1, 3, 4),
    (0, 2, 4, 5),
    (1, 5, 6),
    (0, 4, 7, 8),
    (0, 1, 3, 5, 8, 9),
    (1, 2, 4, 6, 9, 10),
    (2, 5, 10, 11),
    (3, 8, 12),
    (3, 4, 7, 9, 12, 13),
    (4, 5, 8, 10, 13, 14),
    (5, 6, 9, 11, 14, 15),
    (6, 10, 15),
    (7, 8, 13, 16),
    (8, 9, 12, 14, 16, 17),
    (9, 10, 13, 15, 17, 18),
    (10, 11, 14, 18),
    (12, 13, 17),
    (13, 14, 16, 18),
    (14, 15, 17),
)


def create_adjacency_map() -> List[Tuple[int, ...]]:
    """Return the neighbor indices of each of the 19 standard tiles."""
    return list(_ADJACENCY)


def board_layout() -> List[List[int]]:
    rows: List[List[int]] = []
    next_index = 0
    for width in ROW_WIDTHS:
        rows.append(list(range(next_index, next_index + width)))
        next_index += width
    return rows


def axial_coordinates(radius: int = BOARD_RADIUS) -> List[AxialCoord]:
    """Axial ``(q, r)`` of every tile, ordered to match the tile indices."""
    coords: List[AxialCoord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append((q, r))
    coords.sort(key=lambda item: (item[1], item[0]))
    return coords


def derive_adjacency_from_coordinates(radius: int = BOARD_RADIUS) -> List[Tuple[int, ...]]:
    coords = axial_coordinates(radius)
    index_by_coord = {coord: index for index, coord in enumerate(coords)}
    adjacency: List[Tuple[int, ...]] = []
    for q, r in coords:
        neighbors = {
            index_by_coord[(q + dq, r + dr)]
            for dq, dr in AXIAL_DIRECTIONS
            if (q + dq, r + dr) in index_by_coord
        }
        adjacency.append(tuple(sorted(neighbors)))
    return adjacency


BOARD_LAYOUT: Tuple[Tuple[int, ...], ...] = tuple(tuple(row) for row in board_layout())
