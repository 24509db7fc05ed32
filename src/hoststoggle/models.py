# src/hoststoggle/models.py
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Region:
    """Indices of the start and end marker lines of a project block."""
    start: int
    end: int

    @property
    def body(self) -> range:
        # Marker lines themselves are excluded.
        return range(self.start + 1, self.end)

@dataclass(frozen=True)
class ToggleResult:
    """Immutable outcome of a toggle: the new file lines plus what changed."""
    lines: Tuple[str, ...]
    uncommented: Tuple[str, ...]
    commented: Tuple[str, ...]

    @property
    def changed(self) -> bool:
        return bool(self.uncommented or self.commented)
