from dataclasses import dataclass

from geometry import normalize, polar_angle
from sight_constants import FRICTION, RUN, SCREEN_X
from sight_types import Point
from world_state import ViewerPose


@dataclass(frozen=True)
class MoveIntent:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    @classmethod
    def from_letters(cls, letters: str) -> "MoveIntent":
        letters = letters.lower()
        unknown = set(letters) - set("wasd")
        if unknown:
            raise ValueError(f"Unknown move keys '{''.join(sorted(unknown))}' (expected w, a, s, d)")
        return cls(left="a" in letters, right="d" in letters, up="w" in letters, down="s" in letters)

    def vector(self) -> Point:
        mx = 0.0
        my = 0.0
        if self.left:
            mx -= 1.0
        if self.right:
            mx += 1.0
        if self.up:
            my -= 1.0
        if self.down:
            my += 1.0
        if self.left or self.right or self.up or self.down:
            return normalize((mx, my))
        return (mx, my)


def facing(position: Point, mouse: Point, reach: float = SCREEN_X * 2.0) -> float:
    """Angle from the world +x axis toward ``mouse``."""
    return polar_angle(position, mouse, (position[0] + reach, position[1]))


def step(
    intent: MoveIntent,
    mouse: Point,
    pose: ViewerPose,
    run: float = RUN,
    friction: float = FRICTION,
    reach: float = SCREEN_X * 2.0,
) -> ViewerPose:
    mx, my = intent.vector()
    vx = (pose.velocity[0] + mx * run) * friction
    vy = (pose.velocity[1] + my * run) * friction
    px = pose.position[0] + vx
    py = pose.position[1] + vy
    return ViewerPose(position=(px, py), velocity=(vx, vy), direction=facing((px, py), mouse, reach))
