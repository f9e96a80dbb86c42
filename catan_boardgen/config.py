from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeneratorConfig:
    seed: Optional[int] = None
    max_attempts: int = 1

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, received {self.max_attempts}.")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
