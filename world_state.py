from dataclasses import dataclass, field
from typing import List, Tuple

from sight_types import IntPoint, Point


@dataclass(frozen=True)
class Vertical:
    x: int
    y0: int
    y1: int

    def __post_init__(self) -> None:
        if not self.y0 < self.y1:
            raise ValueError(f"Vertical wall needs y0 < y1, got [{self.y0}, {self.y1}] at x={self.x}")


@dataclass(frozen=True)
class Horizontal:
    x0: int
    x1: int
    y: int

    def __post_init__(self) -> None:
        if not self.x0 < self.x1:
            raise ValueError(f"Horizontal wall needs x0 < x1, got [{self.x0}, {self.x1}] at y={self.y}")


@dataclass(frozen=True)
class Region:
    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def __post_init__(self) -> None:
        if not (self.x_min < self.x_max and self.y_min < self.y_max):
            raise ValueError(
                f"Region needs a positive extent, got ({self.x_min},{self.y_min})-({self.x_max},{self.y_max})"
            )

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.y_max - self.y_min


@dataclass(frozen=True)
class WallRect:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (0 < self.width and 0 < self.height):
            raise ValueError(f"WallRect needs a positive size, got {self.width}x{self.height}")

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        )


@dataclass(frozen=True)
class MapLayout:
    bounds: Region
    verticals: Tuple[Vertical, ...]
    horizontals: Tuple[Horizontal, ...]
    rooms: Tuple[Region, ...]
    walls: Tuple[WallRect, ...]
    doors: Tuple[IntPoint, ...]


@dataclass
class ViewerPose:
    position: Point
    velocity: Point = (0.0, 0.0)
    direction: float = 0.0


@dataclass
class FrameStats:
    walls: int = 0
    rays: int = 0
    steps: int = 0
    direction: float = 0.0

    def lines(self) -> List[str]:
        return [
            f"{self.walls} walls",
            f"{self.rays} rays",
            f"{self.steps} steps",
            f"{self.direction:.2f} direction",
        ]


@dataclass
class FrameOutput:
    fan: List[Point] = field(default_factory=list)
    stats: FrameStats = field(default_factory=FrameStats)
