import logging
from typing import Optional

from motion import MoveIntent, facing, step
from sight_types import Point
from visibility import VisibilityCaster
from world_state import FrameOutput, FrameStats, MapLayout, ViewerPose

logger = logging.getLogger(__name__)


class FrameEngine:
    def __init__(self, layout: MapLayout, caster: Optional[VisibilityCaster] = None, pose: Optional[ViewerPose] = None):
        self.layout = layout
        self.caster = caster if caster is not None else VisibilityCaster.for_layout(layout)
        if pose is None:
            bounds = layout.bounds
            pose = ViewerPose(position=((bounds.x_max + 1) / 2.0, (bounds.y_max + 1) / 2.0))
        self.pose = pose
        self.frames = 0

    def tick(self, intent: MoveIntent, mouse: Point) -> FrameOutput:
        self.pose = step(intent, mouse, self.pose)
        return self.render()

    def render(self) -> FrameOutput:
        """Cast from the current pose without moving."""
        fan = self.caster.cast(self.layout.walls, self.pose.position, self.pose.direction)
        stats = FrameStats(
            walls=len(self.layout.walls),
            rays=len(fan),
            steps=self.caster.steps,
            direction=self.pose.direction,
        )
        self.frames += 1
        logger.debug(
            "frame %d: pos=(%.1f, %.1f) dir=%.3f rays=%d steps=%d culled=%d",
            self.frames,
            self.pose.position[0],
            self.pose.position[1],
            self.pose.direction,
            stats.rays,
            stats.steps,
            len(self.caster.subset),
        )
        return FrameOutput(fan=fan, stats=stats)

    def aim(self, mouse: Point) -> None:
        """Turn toward ``mouse`` without integrating movement."""
        self.pose = ViewerPose(self.pose.position, self.pose.velocity, facing(self.pose.position, mouse))
