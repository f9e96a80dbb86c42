"""Standard 19-tile board generator."""

from .config import GeneratorConfig
from .domain import CatanBoard, Resource, build_standard_board, generate, generate_valid_board

__all__ = [
    "CatanBoard",
    "GeneratorConfig",
    "Resource",
    "build_standard_board",
    "generate",
    "generate_valid_board",
]
