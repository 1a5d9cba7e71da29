"""Drawing-surface contract between the scene and a 2D backend.

The scene emits one path per visible face, already projected to 2D screen
coordinates centered on the viewport with y pointing up, then asks the
surface to fill and stroke it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Tuple

Vec2 = Tuple[float, float]


class DrawingSurface(Protocol):
    def begin_path(self) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None: ...

    def stroke(self, color: str) -> None: ...


class PathBuilder:
    """Accumulates the current path for surfaces that draw whole polygons."""

    def __init__(self) -> None:
        self._path: List[Vec2] = []
        self._closed = False

    def begin_path(self) -> None:
        self._path = []
        self._closed = False

    def line_to(self, x: float, y: float) -> None:
        self._path.append((float(x), float(y)))

    def close_path(self) -> None:
        self._closed = True

    @property
    def path(self) -> Tuple[Vec2, ...]:
        return tuple(self._path)

    @property
    def closed(self) -> bool:
        return self._closed


@dataclass(frozen=True)
class DrawCommand:
    """One fill or stroke issued against a recorded path."""

    kind: str
    points: Tuple[Vec2, ...]
    color: str
    closed: bool = True


class RecordingSurface(PathBuilder):
    """Headless surface that keeps every draw call for inspection."""

    def __init__(self) -> None:
        super().__init__()
        self.commands: List[DrawCommand] = []

    def fill(self, color: str) -> None:
        self.commands.append(DrawCommand("fill", self.path, color, self.closed))

    def stroke(self, color: str) -> None:
        self.commands.append(DrawCommand("stroke", self.path, color, self.closed))

    def fills(self) -> List[DrawCommand]:
        return [command for command in self.commands if command.kind == "fill"]

    def clear(self) -> None:
        self.commands.clear()
        self.begin_path()
