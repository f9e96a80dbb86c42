from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .adjacency import TILE_COUNT, create_adjacency_map

RED_NUMBERS = frozenset({6, 8})
EDGE_NUMBERS = frozenset({2, 12})


class Resource(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"
    DESERT = "desert"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass
class Tile:
    index: int
    resource: Resource
    number: Optional[int]
    neighbors: Tuple[int, ...]

    @property
    def is_desert(self) -> bool:
        return self.resource is Resource.DESERT


def numbers_conflict(first: int, second: int) -> bool:
    """Whether two numbers may not sit on touching tiles."""
    if first == second:
        return True
    pair = {first, second}
    return pair <= RED_NUMBERS or pair <= EDGE_NUMBERS


class CatanBoard:
    """Nineteen tiles with fixed adjacency; resources and numbers are filled in later."""

    def __init__(self, adjacency: Sequence[Sequence[int]]) -> None:
        if len(adjacency) != TILE_COUNT:
            raise ValueError(f"Expected {TILE_COUNT} adjacency entries, received {len(adjacency)}.")
        # Desert is only a placeholder until resources are distributed.
        self.tiles: List[Tile] = [
            Tile(index=index, resource=Resource.DESERT, number=None, neighbors=tuple(neighbors))
            for index, neighbors in enumerate(adjacency)
        ]

    def __len__(self) -> int:
        return len(self.tiles)

    def resource_at(self, index: int) -> Resource:
        return self.tiles[index].resource

    def number_at(self, index: int) -> Optional[int]:
        return self.tiles[index].number

    def neighbors_of(self, index: int) -> Tuple[int, ...]:
        return self.tiles[index].neighbors

    def desert_index(self) -> Optional[int]:
        return next((tile.index for tile in self.tiles if tile.is_desert), None)

    def assign_resources(self, resources: Sequence[Resource]) -> None:
        if len(resources) != len(self.tiles):
            raise ValueError(f"Expected {len(self.tiles)} resources, received {len(resources)}.")
        for tile, resource in zip(self.tiles, resources):
            tile.resource = resource

    def clear_numbers(self) -> None:
        for tile in self.tiles:
            tile.number = None

    def is_valid_number_placement(self, index: int, number: int) -> bool:
        for neighbor_index in self.tiles[index].neighbors:
            neighbor_number = self.tiles[neighbor_index].number
            if neighbor_number is not None and numbers_conflict(number, neighbor_number):
                return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiles": [
                {
                    "index": tile.index,
                    "resource": tile.resource.value,
                    "number": tile.number,
                    "neighbors": list(tile.neighbors),
                }
                for tile in self.tiles
            ]
        }


def build_standard_board() -> CatanBoard:
    return CatanBoard(create_adjacency_map())
