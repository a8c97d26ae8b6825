import random
from typing import Callable, Dict, List, Optional

from ascii_renderer import AsciiRenderer
from frame_engine import FrameEngine
from map_builder import generate_layout
from motion import MoveIntent
from sight_constants import FOV, SCREEN_X, SCREEN_Y
from sight_types import Point
from visibility import VisibilityCaster
from world_state import FrameOutput, ViewerPose


def parse_point(token: str) -> Point:
    if "," in token:
        xs, ys = token.split(",", 1)
    elif "x" in token:
        xs, ys = token.split("x", 1)
    else:
        raise ValueError(f"Expected coordinate like '300,200', got '{token}'")
    try:
        return float(xs), float(ys)
    except ValueError:
        raise ValueError(f"Expected coordinate like '300,200', got '{token}'") from None


def parse_count(args: List[str], name: str) -> int:
    if not args:
        return 1
    try:
        count = int(args[0])
    except ValueError:
        raise ValueError(f"{name} expects a frame count, got '{args[0]}'") from None
    if count < 0:
        raise ValueError(f"{name} expects a non-negative frame count, got {count}")
    return count


def run_script(
    script_text: str,
    seed: Optional[int] = None,
    width: int = SCREEN_X,
    height: int = SCREEN_Y,
    fov: float = FOV,
    cell: int = 32,
) -> FrameOutput:
    def build(new_seed: Optional[int]) -> FrameEngine:
        layout = generate_layout(width, height, random.Random(new_seed))
        return FrameEngine(layout, VisibilityCaster.for_layout(layout, fov))

    engine = build(seed)
    mouse: Point = (float(width), engine.pose.position[1])
    output = engine.render()

    def advance(intent: MoveIntent, frames: int) -> None:
        nonlocal output
        for _ in range(frames):
            output = engine.tick(intent, mouse)

    def handle_seed(args: List[str]) -> None:
        nonlocal engine, output
        if not args:
            raise ValueError("seed <number> expected")
        try:
            new_seed = int(args[0])
        except ValueError:
            raise ValueError(f"seed expects an integer, got '{args[0]}'") from None
        engine = build(new_seed)
        output = engine.render()

    def handle_pos(args: List[str]) -> None:
        nonlocal output
        if not args:
            raise ValueError("pos <x,y> expected")
        engine.pose = ViewerPose(parse_point(args[0]), (0.0, 0.0), engine.pose.direction)
        engine.aim(mouse)
        output = engine.render()

    def handle_aim(args: List[str]) -> None:
        nonlocal mouse, output
        if not args:
            raise ValueError("aim <x,y> expected")
        mouse = parse_point(args[0])
        engine.aim(mouse)
        output = engine.render()

    def handle_move(args: List[str]) -> None:
        if not args:
            raise ValueError("move <keys> [frames] expected")
        advance(MoveIntent.from_letters(args[0]), parse_count(args[1:], "move"))

    def handle_wait(args: List[str]) -> None:
        advance(MoveIntent(), parse_count(args, "wait"))

    handlers: Dict[str, Callable[[List[str]], None]] = {
        "seed": handle_seed,
        "pos": handle_pos,
        "aim": handle_aim,
        "move": handle_move,
        "wait": handle_wait,
        "frames": handle_wait,
    }

    for raw in script_text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        commands = [cmd.strip() for cmd in line.split(";") if cmd.strip()]
        for cmd in commands:
            parts = cmd.split()
            name = parts[0].lower()
            handler = handlers.get(name)
            if handler is None:
                raise ValueError(f"Unknown script command '{name}'")
            handler(parts[1:])

    print("Script complete")
    print("\n".join(output.stats.lines()))
    print(AsciiRenderer.render(engine.layout, output.fan, cell=cell, viewer=engine.pose.position, show_coords=True))
    return output
