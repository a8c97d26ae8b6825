import random
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from sight_constants import DOOR_GAP, WALL_WIDTH
from sight_types import IntPoint
from world_state import Horizontal, Vertical, WallRect

Segment = Union[Vertical, Horizontal]


def sort_splits(splits: List[int]) -> List[int]:
    """Stable in-place insertion sort; split lists are a handful of entries long."""
    for i in range(len(splits)):
        split = splits[i]
        j = i
        while j > 0 and split < splits[j - 1]:
            splits[j] = splits[j - 1]
            j -= 1
        splits[j] = split
    return splits


class WallMaterializer:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        door_gap: int = DOOR_GAP,
        wall_width: int = WALL_WIDTH,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.door_gap = door_gap
        self.wall_width = wall_width
        self.walls: List[WallRect] = []
        self.doors: List[IntPoint] = []

    @staticmethod
    def vertical_splits(vertical: Vertical, horizontals: Iterable[Horizontal]) -> List[int]:
        splits = [vertical.y0]
        for horizontal in horizontals:
            if horizontal.y < vertical.y0 or vertical.y1 < horizontal.y:
                continue
            # Only lines ending on this wall make a junction.
            if vertical.x != horizontal.x0 and vertical.x != horizontal.x1:
                continue
            splits.append(horizontal.y)
        splits.append(vertical.y1)
        return sort_splits(splits)

    @staticmethod
    def horizontal_splits(horizontal: Horizontal, verticals: Iterable[Vertical]) -> List[int]:
        splits = [horizontal.x0]
        for vertical in verticals:
            if vertical.x < horizontal.x0 or horizontal.x1 < vertical.x:
                continue
            if horizontal.y != vertical.y0 and horizontal.y != vertical.y1:
                continue
            splits.append(vertical.x)
        splits.append(horizontal.x1)
        return sort_splits(splits)

    def _pick_door(self, lo: int, hi: int) -> int:
        half = self.door_gap // 2
        return self.rng.randint(lo + half, hi - half)

    def split_verticals(self, verticals: Sequence[Vertical], horizontals: Sequence[Horizontal]) -> None:
        half = self.door_gap // 2
        width = self.wall_width
        for vertical in verticals:
            splits = self.vertical_splits(vertical, horizontals)
            x = vertical.x
            for y_min, y_max in zip(splits, splits[1:]):
                length = y_max - y_min
                if length <= self.door_gap:
                    self.walls.append(WallRect(x, y_min, width, length + width))
                    continue

                y = self._pick_door(y_min, y_max)
                self.doors.append((x, y))
                self.walls.append(WallRect(x, y_min, width, ((y - half) - y_min) + width))
                self.walls.append(WallRect(x, y + half, width, (y_max - (y + half)) + width))

    def split_horizontals(self, horizontals: Sequence[Horizontal], verticals: Sequence[Vertical]) -> None:
        half = self.door_gap // 2
        width = self.wall_width
        for horizontal in horizontals:
            splits = self.horizontal_splits(horizontal, verticals)
            y = horizontal.y
            for x_min, x_max in zip(splits, splits[1:]):
                length = x_max - x_min
                if length <= self.door_gap:
                    self.walls.append(WallRect(x_min, y, length + width, width))
                    continue

                x = self._pick_door(x_min, x_max)
                self.doors.append((x, y))
                self.walls.append(WallRect(x_min, y, ((x - half) - x_min) + width, width))
                self.walls.append(WallRect(x + half, y, (x_max - (x + half)) + width, width))

    def materialize(self, segments: Iterable[Segment]) -> Tuple[List[WallRect], List[IntPoint]]:
        verticals: List[Vertical] = []
        horizontals: List[Horizontal] = []
        for segment in segments:
            if isinstance(segment, Vertical):
                verticals.append(segment)
            elif isinstance(segment, Horizontal):
                horizontals.append(segment)
            else:
                raise TypeError(f"Expected Vertical or Horizontal, got {type(segment).__name__}")

        self.walls = []
        self.doors = []
        self.split_verticals(verticals, horizontals)
        self.split_horizontals(horizontals, verticals)
        return self.walls, self.doors
