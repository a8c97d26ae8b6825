"""
Plain 2D helpers shared by the visibility caster and the motion integrator.

Points are ``(x, y)`` tuples in screen space (y grows downwards). Angles follow
the same convention as ``rotate``: a positive angle turns counter-clockwise on
screen.
"""

import math
from typing import Optional, Sequence, Tuple

from sight_constants import EPSILON
from sight_types import Point

Rect = Tuple[float, float, float, float]


def rotate(origin: Point, target: Point, radians: float) -> Point:
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    s = math.sin(radians)
    c = math.cos(radians)
    return (origin[0] + dx * c + dy * s, origin[1] - dx * s + dy * c)


def normalize(v: Point) -> Point:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1]) + EPSILON
    return (v[0] / length, v[1] / length)


def extend(a: Point, b: Point, length: float) -> Point:
    vx, vy = normalize((b[0] - a[0], b[1] - a[1]))
    return (a[0] + vx * length, a[1] + vy * length)


def polar_angle(a: Point, b: Point, c: Point) -> float:
    """Angle at ``a`` from ray ``a->b`` to ray ``a->c``, not wrapped."""
    return math.atan2(c[1] - a[1], c[0] - a[0]) - math.atan2(b[1] - a[1], b[0] - a[0])


def wrap_angle(radians: float) -> float:
    """Fold a difference of two ``atan2`` results into (-pi, pi]."""
    if radians <= -math.pi:
        radians += 2.0 * math.pi
    if math.pi < radians:
        radians -= 2.0 * math.pi
    return radians


def signed_angle(origin: Point, forward: Point, target: Point) -> float:
    """Signed polar angle of ``target`` relative to the ``origin->forward`` axis."""
    return wrap_angle(polar_angle(origin, target, forward))


def within_fov(origin: Point, forward: Point, target: Point, fov: float) -> bool:
    radians = signed_angle(origin, forward, target)
    return -fov < radians < fov


def intersects_at(a0: Point, a1: Point, b0: Point, b1: Point, default: Optional[Point] = None) -> Optional[Point]:
    """Crossing point of segments ``a0-a1`` and ``b0-b1``.

    Returns ``default`` when the segments are parallel or do not cross within
    both of their extents.
    """
    d0x, d0y = a0[0] - a1[0], a0[1] - a1[1]
    d1x, d1y = a0[0] - b0[0], a0[1] - b0[1]
    d2x, d2y = b0[0] - b1[0], b0[1] - b1[1]

    denominator = d0x * d2y - d0y * d2x
    if denominator == 0.0:
        return default

    t = (d1x * d2y - d1y * d2x) / denominator
    u = -(d0x * d1y - d0y * d1x) / denominator
    if t < 0.0 or 1.0 < t or u < 0.0 or 1.0 < u:
        return default

    return (a0[0] + t * (a1[0] - a0[0]), a0[1] + t * (a1[1] - a0[1]))


def triangle_to_rect(points: Sequence[Point]) -> Rect:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def no_overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax + aw < bx or bx + bw < ax or ay + ah < by or by + bh < ay


def point_in_polygon(x: float, y: float, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting test."""
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside
