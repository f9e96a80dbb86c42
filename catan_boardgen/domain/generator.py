from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Dict, List, Optional

from ..config import GeneratorConfig
from ..report import format_board_grid, format_resources
from .board import CatanBoard, Resource, build_standard_board, numbers_conflict

logger = logging.getLogger(__name__)

RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.WOOD: 4,
    Resource.BRICK: 3,
    Resource.SHEEP: 4,
    Resource.WHEAT: 4,
    Resource.ORE: 3,
    Resource.DESERT: 1,
}

NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]


class BoardGenerationError(RuntimeError):
    """Raised when no attempt produced a fully numbered board."""


def resource_pool() -> List[Resource]:
    pool: List[Resource] = []
    for resource, count in RESOURCE_COUNTS.items():
        pool.extend([resource] * count)
    return pool


def distribute_resources(board: CatanBoard, rng: random.Random) -> None:
    resources = resource_pool()
    rng.shuffle(resources)
    board.assign_resources(resources)


def shuffled_numbers(rng: random.Random) -> List[int]:
    numbers = NUMBER_TOKENS[:]
    rng.shuffle(numbers)
    return numbers


def remove_one(pool: List[int], value: int) -> int:
    """Remove the first occurrence of ``value`` in place and return where it was."""
    position = pool.index(value)
    del pool[position]
    return position


def place_numbers(board: CatanBoard, pool: List[int], tile_index: int = 0) -> bool:
    """Backtracking search assigning ``pool`` values to tiles from ``tile_index`` on.

    Tiles are visited in ascending order. Desert tiles and tiles that already
    carry a number are skipped without consuming a candidate. ``pool`` is
    consumed while descending and restored on backtrack, so a failed search
    leaves it as it was.
    """
    if tile_index >= len(board.tiles):
        return True

    tile = board.tiles[tile_index]
    if tile.is_desert or tile.number is not None:
        return place_numbers(board, pool, tile_index + 1)

    logger.debug("Placing number at tile %d, resource: %s", tile_index, tile.resource.label)

    tried = set()
    for number in list(pool):
        if number in tried:
            continue
        tried.add(number)

        if not board.is_valid_number_placement(tile_index, number):
            logger.debug("  Number %d not valid at tile %d", number, tile_index)
            continue

        tile.number = number
        logger.debug("  Trying number %d at tile %d", number, tile_index)
        position = remove_one(pool, number)

        if place_numbers(board, pool, tile_index + 1):
            return True

        logger.debug("  Backtracking from number %d at tile %d", number, tile_index)
        tile.number = None
        pool.insert(position, number)

    logger.debug("No valid placement for tile %d", tile_index)
    return False


def generate(board: CatanBoard, rng: Optional[random.Random] = None) -> bool:
    """Distribute resources, then search for a valid numbering.

    Returns ``False`` when the resource layout admits no numbering under the
    adjacency rules. Backtracking clears every number it placed, so the board
    is then left with resources only and no numbers.
    """
    rng = rng if rng is not None else random.Random()

    board.clear_numbers()
    distribute_resources(board, rng)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Resources distributed:\n%s", format_resources(board))
    logger.info("Desert is at position: %s", board.desert_index())

    numbers = shuffled_numbers(rng)
    logger.info("Numbers to place: %s", numbers)

    solved = place_numbers(board, numbers)
    if solved:
        logger.info("Successfully generated board.")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generated board:\n%s", format_board_grid(board))
    else:
        logger.info("Failed to generate a valid board with the given constraints.")
    return solved


def generate_valid_board(config: Optional[GeneratorConfig] = None) -> CatanBoard:
    """Retry ``generate`` until a board passes both validators or attempts run out."""
    config = config or GeneratorConfig()
    rng = config.make_rng()
    board = build_standard_board()

    for attempt in range(1, config.max_attempts + 1):
        if not generate(board, rng):
            logger.warning("Attempt %d/%d produced no valid numbering.", attempt, config.max_attempts)
            continue
        if validate_standard_counts(board) and validate_number_spacing(board):
            return board
        logger.warning("Attempt %d/%d produced a board that failed validation.", attempt, config.max_attempts)

    raise BoardGenerationError(
        "Unable to generate a board that satisfies number placement constraints "
        f"after {config.max_attempts} attempts."
    )


def validate_standard_counts(board: CatanBoard) -> bool:
    if Counter(tile.resource for tile in board.tiles) != Counter(RESOURCE_COUNTS):
        return False
    if any(tile.is_desert and tile.number is not None for tile in board.tiles):
        return False
    numbers = [tile.number for tile in board.tiles if not tile.is_desert]
    return None not in numbers and Counter(numbers) == Counter(NUMBER_TOKENS)


def validate_number_spacing(board: CatanBoard) -> bool:
    for tile in board.tiles:
        if tile.number is None:
            continue
        for neighbor_index in tile.neighbors:
            neighbor_number = board.tiles[neighbor_index].number
            if neighbor_number is not None and numbers_conflict(tile.number, neighbor_number):
                return False
    return True
