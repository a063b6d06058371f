"""Runtime settings for the game host."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

# Size of a single board cell in pixels
CELL_SIZE = 24
# Frames per second to run the game loop at
FPS = 60
# Milliseconds between automatic downward moves
DROP_INTERVAL_MS = 1000


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the controller and the pygame front-end."""

    cell_size: int = CELL_SIZE
    fps: int = FPS
    drop_interval_ms: float = DROP_INTERVAL_MS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.drop_interval_ms <= 0:
            raise ValueError(
                f"drop_interval_ms must be positive, got {self.drop_interval_ms}"
            )

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)
