from __future__ import annotations

from typing import List

from rich.table import Table

from .domain.adjacency import BOARD_LAYOUT, ROW_WIDTHS
from .domain.board import CatanBoard, Tile

CELL_WIDTH = 12
EMPTY_NUMBER = "--"


def format_tile(tile: Tile) -> str:
    number = f"{tile.number:2d}" if tile.number is not None else EMPTY_NUMBER
    return f"{tile.resource.label:<6}:{number}".center(CELL_WIDTH)


def format_board_grid(board: CatanBoard) -> str:
    """Render the tiles in their hexagonal rows, narrower rows indented by half a cell."""
    widest = max(ROW_WIDTHS)
    lines: List[str] = []
    for row in BOARD_LAYOUT:
        indent = " " * ((widest - len(row)) * CELL_WIDTH // 2)
        cells = "".join(format_tile(board.tiles[index]) for index in row)
        lines.append((indent + cells).rstrip())
    return "\n".join(lines)


def format_resources(board: CatanBoard) -> str:
    return "\n".join(f"Tile {tile.index}: {tile.resource.label}" for tile in board.tiles)


def board_table(board: CatanBoard, title: str = "Board") -> Table:
    table = Table(title=title)
    table.add_column("Tile", justify="right")
    table.add_column("Resource")
    table.add_column("Number", justify="right")
    table.add_column("Neighbors")
    for tile in board.tiles:
        table.add_row(
            str(tile.index),
            tile.resource.label,
            str(tile.number) if tile.number is not None else EMPTY_NUMBER,
            ", ".join(str(index) for index in tile.neighbors),
        )
    return table
