"""
Field-of-view visibility fan over a set of axis-aligned wall rectangles.

The caster collects candidate rays toward every wall corner inside the view
cone, sorts them by angle, then clips each ray against the walls whose angular
span covers it. The result is a point fan anchored at the apex in front of the
viewer, ready to be drawn as a triangle fan.

Each in-cone corner contributes the corner itself plus two rays nudged by
``EPSILON`` to either side and pushed out to ``reach``. The nudged pair stands
in for an exact test of which faces meet at the corner: one of them slips past
the wall while the other is clipped by it, so the fan hugs the corner on the
correct side.
"""

import math
from typing import List, Sequence

from geometry import extend, intersects_at, no_overlap, rotate, signed_angle, triangle_to_rect, within_fov
from sight_constants import EPSILON, FOV, PLAYER_X, SCREEN_X, SCREEN_Y
from sight_types import Point
from world_state import MapLayout, WallRect

MAP_DIAGONAL = math.sqrt(SCREEN_X * SCREEN_X + SCREEN_Y * SCREEN_Y)


class VisibilityCaster:
    def __init__(self, fov: float = FOV, reach: float = MAP_DIAGONAL, apex_offset: float = PLAYER_X * 0.75):
        # The cone must stay narrower than a half turn for the angular sort.
        if not 0.0 < fov < math.pi:
            raise ValueError(f"fov must be between 0 and pi radians, got {fov}")
        self.fov = fov
        self.reach = reach
        self.apex_offset = apex_offset
        self.rays: List[Point] = []
        self.subset: List[WallRect] = []
        self.steps = 0
        self.apex: Point = (0.0, 0.0)
        self.forward: Point = (0.0, 0.0)

    @classmethod
    def for_layout(cls, layout: MapLayout, fov: float = FOV) -> "VisibilityCaster":
        bounds = layout.bounds
        return cls(fov=fov, reach=math.hypot(bounds.x_max + 1, bounds.y_max + 1))

    def angle_of(self, point: Point) -> float:
        return signed_angle(self.apex, self.forward, point)

    def _collect(self, walls: Sequence[WallRect], bounds) -> None:
        for wall in walls:
            if no_overlap(bounds, wall.as_tuple()):
                continue
            self.subset.append(wall)

            for corner in wall.corners():
                if not within_fov(self.apex, self.forward, corner, self.fov):
                    self.steps += 1
                    continue
                self.rays.append(corner)
                for nudge in (-EPSILON, EPSILON):
                    ray = extend(self.apex, rotate(self.apex, corner, nudge), self.reach)
                    if within_fov(self.apex, self.forward, ray, self.fov):
                        self.rays.append(ray)
                self.steps += 3

    def _sort(self) -> None:
        # Index 0 is the apex and stays put. Angles are recomputed on every
        # comparison so the sort and clip passes see identical values.
        rays = self.rays
        for i in range(1, len(rays)):
            ray = rays[i]
            radians = self.angle_of(ray)
            j = i
            while 1 < j and radians < self.angle_of(rays[j - 1]):
                rays[j] = rays[j - 1]
                j -= 1
                self.steps += 1
            rays[j] = ray

    def _clip(self) -> None:
        rays = self.rays
        for wall in self.subset:
            corners = wall.corners()
            angles = [self.angle_of(corner) for corner in corners]
            lo = min(angles)
            hi = max(angles)
            edges = [(corners[k], corners[(k + 1) % 4]) for k in range(4)]

            for j in range(1, len(rays)):
                radians = self.angle_of(rays[j])
                if radians < lo:
                    continue
                if hi < radians:
                    break
                for start, end in edges:
                    rays[j] = intersects_at(self.apex, rays[j], start, end, default=rays[j])
                self.steps += 4

    def cast(self, walls: Sequence[WallRect], position: Point, direction: float) -> List[Point]:
        x, y = position
        self.apex = rotate(position, (x + self.apex_offset, y), direction)
        self.forward = rotate(position, (x + self.reach, y), direction)

        right = rotate(self.apex, self.forward, -self.fov)
        left = rotate(self.apex, self.forward, self.fov)
        bounds = triangle_to_rect((self.apex, left, right))

        self.steps = 0
        self.rays.clear()
        self.subset.clear()
        self.rays.append(self.apex)
        self.rays.append(right)

        self._collect(walls, bounds)
        self._sort()
        self.rays.append(left)
        self._clip()
        return list(self.rays)


def visible_polygon(
    walls: Sequence[WallRect],
    position: Point,
    direction: float,
    fov: float = FOV,
    reach: float = MAP_DIAGONAL,
) -> List[Point]:
    return VisibilityCaster(fov=fov, reach=reach).cast(walls, position, direction)
