from typing import Optional, Sequence

from geometry import point_in_polygon
from sight_types import Point
from world_state import MapLayout

WALL = "#"
DOOR = "D"
VIEWER = "@"
VISIBLE = "*"
EMPTY = "."


class AsciiRenderer:
    @staticmethod
    def render(
        layout: MapLayout,
        fan: Sequence[Point] = (),
        cell: int = 32,
        viewer: Optional[Point] = None,
        show_coords: bool = False,
    ) -> str:
        if cell <= 0:
            raise ValueError(f"cell must be positive, got {cell}")
        bounds = layout.bounds
        w = (bounds.x_max + cell) // cell
        h = (bounds.y_max + cell) // cell
        grid = [[EMPTY for _ in range(w)] for _ in range(h)]

        if len(fan) >= 3:
            for gy in range(h):
                for gx in range(w):
                    if point_in_polygon(gx * cell + cell / 2.0, gy * cell + cell / 2.0, fan):
                        grid[gy][gx] = VISIBLE

        for wall in layout.walls:
            x0 = int(wall.x) // cell
            y0 = int(wall.y) // cell
            x1 = min(w - 1, int(wall.x + wall.width - 1) // cell)
            y1 = min(h - 1, int(wall.y + wall.height - 1) // cell)
            for gy in range(y0, y1 + 1):
                for gx in range(x0, x1 + 1):
                    grid[gy][gx] = WALL
        for x, y in layout.doors:
            grid[min(h - 1, y // cell)][min(w - 1, x // cell)] = DOOR
        if viewer is not None:
            vx = int(viewer[0]) // cell
            vy = int(viewer[1]) // cell
            if 0 <= vx < w and 0 <= vy < h:
                grid[vy][vx] = VIEWER

        if not show_coords:
            return "\n".join("".join(row) for row in grid)

        label_w = max(2, len(str(h - 1)))
        header = " " * (label_w + 1) + "".join(str(x % 10) for x in range(w))
        lines = [header]
        for y, row in enumerate(grid):
            lines.append(f"{y:>{label_w}} " + "".join(row))
        return "\n".join(lines)
