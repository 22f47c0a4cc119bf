from dataclasses import dataclass
from typing import Tuple


# 16:9 at 60 pixels per unit
UNIT = 60


@dataclass
class RenderConfig:
    width: int = 16 * UNIT
    height: int = 9 * UNIT
    frames: int = 240  # 30 is enough for quick iteration
    output_dir: str = "."
    prefix: str = "out-py"
    workers: int = 1
    log_level: str = "INFO"

    @property
    def resolution(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def frame_size(self) -> int:
        """Bytes in one RGB8 frame"""
        return self.width * self.height * 3

    @property
    def index_width(self) -> int:
        """Digits used when zero-padding frame numbers in filenames"""
        return max(3, len(str(self.frames - 1)))

    def frame_path(self, frame: int) -> str:
        """Relative filename for a frame, e.g. out-py-007.ppm"""
        return f"{self.prefix}-{frame:0{self.index_width}d}.ppm"


# Default configuration for full-length output
DEFAULT_CONFIG = RenderConfig()
