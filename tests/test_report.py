import random
import unittest

from rich.console import Console

from catan_boardgen.domain.board import Resource, build_standard_board
from catan_boardgen.domain.generator import generate
from catan_boardgen.report import CELL_WIDTH, board_table, format_board_grid, format_resources, format_tile


class ReportTests(unittest.TestCase):
    def test_tile_cell_shows_resource_and_number(self) -> None:
        board = build_standard_board()
        board.tiles[0].resource = Resource.WHEAT
        board.tiles[0].number = 8

        cell = format_tile(board.tiles[0])
        self.assertEqual(len(cell), CELL_WIDTH)
        self.assertIn("Wheat : 8", cell)

    def test_unnumbered_tile_shows_placeholder(self) -> None:
        board = build_standard_board()
        self.assertIn("Desert:--", format_tile(board.tiles[9]))

    def test_grid_rows_follow_layout(self) -> None:
        board = build_standard_board()
        self.assertTrue(generate(board, random.Random(3)))

        lines = format_board_grid(board).splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual([line.count(":") for line in lines], [3, 4, 5, 4, 3])
        self.assertTrue(lines[0].startswith(" " * CELL_WIDTH))
        self.assertFalse(lines[2].startswith(" " * (CELL_WIDTH // 2)))

    def test_resource_listing(self) -> None:
        board = build_standard_board()
        board.tiles[1].resource = Resource.ORE
        lines = format_resources(board).splitlines()
        self.assertEqual(len(lines), 19)
        self.assertEqual(lines[1], "Tile 1: Ore")

    def test_table_has_row_per_tile(self) -> None:
        board = build_standard_board()
        self.assertTrue(generate(board, random.Random(4)))
        table = board_table(board)
        self.assertEqual(table.row_count, 19)

        console = Console(record=True, width=100)
        console.print(table)
        self.assertIn("Neighbors", console.export_text())


if __name__ == "__main__":
    unittest.main()
