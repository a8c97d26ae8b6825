import logging
import random
from typing import List, Optional, Sequence

from generate_split import VERTICAL, partition
from sight_constants import DOOR_GAP, NODE_RADIUS, SCREEN_X, SCREEN_Y, WALL_DISTANCE, WALL_WIDTH
from sight_types import IntPoint
from wall_materializer import WallMaterializer
from world_state import MapLayout, Region

logger = logging.getLogger(__name__)


def generate_layout(
    width: int = SCREEN_X,
    height: int = SCREEN_Y,
    rng: Optional[random.Random] = None,
    wall_distance: int = WALL_DISTANCE,
    door_gap: int = DOOR_GAP,
    wall_width: int = WALL_WIDTH,
) -> MapLayout:
    rng = rng if rng is not None else random.Random()
    bounds = Region(0, 0, width - 1, height - 1)

    found = partition(bounds, wall_distance, VERTICAL, rng)
    materializer = WallMaterializer(rng, door_gap=door_gap, wall_width=wall_width)
    walls, doors = materializer.materialize(found.verticals + found.horizontals)

    logger.debug(
        "Generated %dx%d map: %d verticals, %d horizontals, %d rooms, %d walls, %d doors (depth %d)",
        width,
        height,
        len(found.verticals),
        len(found.horizontals),
        len(found.rooms),
        len(walls),
        len(doors),
        found.depth,
    )

    return MapLayout(
        bounds=bounds,
        verticals=tuple(found.verticals),
        horizontals=tuple(found.horizontals),
        rooms=tuple(found.rooms),
        walls=tuple(walls),
        doors=tuple(doors),
    )


def room_center(room: Region, node_radius: int = NODE_RADIUS) -> IntPoint:
    return (
        room.x_min + (room.x_max - room.x_min) // 2 + node_radius // 2,
        room.y_min + (room.y_max - room.y_min) // 2 + node_radius // 2,
    )


def room_doors(room: Region, doors: Sequence[IntPoint]) -> List[IntPoint]:
    found = []
    for x, y in doors:
        on_side = (x == room.x_min or x == room.x_max) and room.y_min <= y <= room.y_max
        on_cap = (y == room.y_min or y == room.y_max) and room.x_min <= x <= room.x_max
        if on_side or on_cap:
            found.append((x, y))
    return found
