"""
Recursively split a rectangular map into rooms.

Every call draws one wall line across the region (vertical and horizontal
lines alternate with depth) at a random coordinate that keeps both halves at
least ``wall_distance // 2`` wide, then recurses on the two halves. A region
whose span along the current axis is already ``wall_distance`` or less becomes
a room and is not split any further.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from sight_constants import SCREEN_X, SCREEN_Y, WALL_DISTANCE
from world_state import Horizontal, Region, Vertical

VERTICAL = "vertical"
HORIZONTAL = "horizontal"


@dataclass
class PartitionResult:
    verticals: List[Vertical] = field(default_factory=list)
    horizontals: List[Horizontal] = field(default_factory=list)
    rooms: List[Region] = field(default_factory=list)
    # Deepest nesting counted in vertical/horizontal rounds.
    depth: int = 0


def partition(
    bounds: Region,
    wall_distance: int = WALL_DISTANCE,
    orientation: str = VERTICAL,
    rng: Optional[random.Random] = None,
) -> PartitionResult:
    if orientation not in (VERTICAL, HORIZONTAL):
        raise ValueError(f"Unknown orientation '{orientation}'")
    if wall_distance < 2:
        raise ValueError(f"wall_distance must be at least 2, got {wall_distance}")

    rng = rng if rng is not None else random.Random()
    result = PartitionResult()
    half = wall_distance // 2
    deepest = 0

    def split_vertical(region: Region, level: int) -> None:
        nonlocal deepest
        deepest = max(deepest, level)
        if region.x_max - region.x_min <= wall_distance:
            result.rooms.append(region)
            return

        x = rng.randint(region.x_min + half, region.x_max - half)
        result.verticals.append(Vertical(x, region.y_min, region.y_max))

        split_horizontal(Region(region.x_min, region.y_min, x, region.y_max), level + 1)
        split_horizontal(Region(x, region.y_min, region.x_max, region.y_max), level + 1)

    def split_horizontal(region: Region, level: int) -> None:
        nonlocal deepest
        deepest = max(deepest, level)
        if region.y_max - wall_distance <= region.y_min:
            result.rooms.append(region)
            return

        y = rng.randint(region.y_min + half, region.y_max - half)
        result.horizontals.append(Horizontal(region.x_min, region.x_max, y))

        split_vertical(Region(region.x_min, region.y_min, region.x_max, y), level + 1)
        split_vertical(Region(region.x_min, y, region.x_max, region.y_max), level + 1)

    if orientation == VERTICAL:
        split_vertical(bounds, 1)
    else:
        split_horizontal(bounds, 1)

    result.depth = (deepest + 1) // 2
    return result


if __name__ == "__main__":
    found = partition(Region(0, 0, SCREEN_X - 1, SCREEN_Y - 1))
    for line in found.verticals + found.horizontals:
        print(line)
    print(f"{len(found.rooms)} rooms, depth {found.depth}")
