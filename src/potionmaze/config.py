from dataclasses import dataclass

from .errors import InvalidConfigurationError
from .tiles import NEEDED_ITEMS, PLAYER

def _positive_int(name: str, value) -> None:
    # bool is an int subclass; a True width is a caller bug, not 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be an int, got {value!r}")
    if value < 1:
        raise InvalidConfigurationError(f"{name} must be >= 1, got {value}")

@dataclass(frozen=True)
class MazeConfig:
    width: int
    height: int
    cell_size: int = 1
    seed: int = 0
    items: int = NEEDED_ITEMS

    def validate(self) -> "MazeConfig":
        _positive_int("width", self.width)
        _positive_int("height", self.height)
        _positive_int("cell_size", self.cell_size)
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise InvalidConfigurationError(f"seed must be an int, got {self.seed!r}")
        if isinstance(self.items, bool) or not isinstance(self.items, int) or self.items < 0:
            raise InvalidConfigurationError(f"items must be an int >= 0, got {self.items!r}")
        return self

@dataclass(frozen=True)
class PlayOptions:
    # fog == 0 shows the whole grid; fog == r shows a (2r+1) square around the player.
    fog: int = 0
    marker: str = PLAYER

    def validate(self) -> "PlayOptions":
        if isinstance(self.fog, bool) or not isinstance(self.fog, int) or self.fog < 0:
            raise InvalidConfigurationError(f"fog must be an int >= 0, got {self.fog!r}")
        if len(self.marker) != 1:
            raise InvalidConfigurationError(f"marker must be one character, got {self.marker!r}")
        return self
