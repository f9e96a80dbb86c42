import unittest

from catan_boardgen.domain.adjacency import (
    BOARD_LAYOUT,
    ROW_WIDTHS,
    TILE_COUNT,
    axial_coordinates,
    create_adjacency_map,
    derive_adjacency_from_coordinates,
)


class AdjacencyMapTests(unittest.TestCase):
    def test_map_covers_every_tile(self) -> None:
        self.assertEqual(len(create_adjacency_map()), TILE_COUNT)
        self.assertEqual(TILE_COUNT, 19)

    def test_adjacency_is_symmetric(self) -> None:
        adjacency = create_adjacency_map()
        for index, neighbors in enumerate(adjacency):
            self.assertNotIn(index, neighbors)
            for neighbor in neighbors:
                self.assertIn(index, adjacency[neighbor], msg=f"{neighbor} does not list {index}")

    def test_neighbor_counts_between_three_and_six(self) -> None:
        for index, neighbors in enumerate(create_adjacency_map()):
            self.assertGreaterEqual(len(neighbors), 3, msg=f"tile {index}")
            self.assertLessEqual(len(neighbors), 6, msg=f"tile {index}")

    def test_map_is_deterministic(self) -> None:
        self.assertEqual(create_adjacency_map(), create_adjacency_map())

    def test_static_map_matches_hex_geometry(self) -> None:
        self.assertEqual(create_adjacency_map(), derive_adjacency_from_coordinates())

    def test_centre_tile_touches_inner_ring(self) -> None:
        self.assertEqual(create_adjacency_map()[9], (4, 5, 8, 10, 13, 14))


class LayoutTests(unittest.TestCase):
    def test_rows_are_row_major(self) -> None:
        self.assertEqual(ROW_WIDTHS, (3, 4, 5, 4, 3))
        self.assertEqual(BOARD_LAYOUT[0], (0, 1, 2))
        self.assertEqual(BOARD_LAYOUT[2], (7, 8, 9, 10, 11))
        self.assertEqual(BOARD_LAYOUT[4], (16, 17, 18))
        flattened = [index for row in BOARD_LAYOUT for index in row]
        self.assertEqual(flattened, list(range(TILE_COUNT)))

    def test_axial_coordinates_are_centred(self) -> None:
        coords = axial_coordinates()
        self.assertEqual(len(coords), TILE_COUNT)
        self.assertEqual(len(set(coords)), TILE_COUNT)
        self.assertEqual(coords[9], (0, 0))


if __name__ == "__main__":
    unittest.main()
