"""Board model, adjacency map and number placement search."""

from .adjacency import (
    BOARD_LAYOUT,
    ROW_WIDTHS,
    TILE_COUNT,
    axial_coordinates,
    create_adjacency_map,
    derive_adjacency_from_coordinates,
)
from .board import CatanBoard, Resource, Tile, build_standard_board, numbers_conflict
from .generator import (
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
    BoardGenerationError,
    distribute_resources,
    generate,
    generate_valid_board,
    place_numbers,
    remove_one,
    validate_number_spacing,
    validate_standard_counts,
)

__all__ = [
    "BOARD_LAYOUT",
    "NUMBER_TOKENS",
    "RESOURCE_COUNTS",
    "ROW_WIDTHS",
    "TILE_COUNT",
    "BoardGenerationError",
    "CatanBoard",
    "Resource",
    "Tile",
    "axial_coordinates",
    "build_standard_board",
    "create_adjacency_map",
    "derive_adjacency_from_coordinates",
    "distribute_resources",
    "generate",
    "generate_valid_board",
    "numbers_conflict",
    "place_numbers",
    "remove_one",
    "validate_number_spacing",
    "validate_standard_counts",
]
