import argparse
import logging
import math
import random

from ascii_renderer import AsciiRenderer
from frame_engine import FrameEngine
from map_builder import generate_layout
from motion import MoveIntent
from sight_constants import FOV, SCREEN_X, SCREEN_Y
from sight_dsl import run_script
from sight_game import run_game
from visibility import VisibilityCaster
from world_state import FrameOutput


def run_headless(frames, seed=None, width=SCREEN_X, height=SCREEN_Y, fov=FOV, cell=32) -> FrameOutput:
    layout = generate_layout(width, height, random.Random(seed))
    engine = FrameEngine(layout, VisibilityCaster.for_layout(layout, fov))
    mouse = (float(width), engine.pose.position[1])
    output = engine.render()
    for _ in range(frames):
        output = engine.tick(MoveIntent(), mouse)
    print(f"Simulated {frames} frames")
    print(f"{len(layout.rooms)} rooms, {len(layout.doors)} doors")
    print("\n".join(output.stats.lines()))
    print(AsciiRenderer.render(layout, output.fan, cell=cell, viewer=engine.pose.position, show_coords=True))
    return output


def main():
    parser = argparse.ArgumentParser(prog="raysight")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window for a number of frames and print an ASCII view.",
    )
    parser.add_argument("--seed", type=int, help="Seed for map generation (random when omitted).")
    parser.add_argument("--frames", type=int, default=1, help="Frames to run in headless mode.")
    parser.add_argument("--width", type=int, default=SCREEN_X, help="Map width in pixels.")
    parser.add_argument("--height", type=int, default=SCREEN_Y, help="Map height in pixels.")
    parser.add_argument("--fov", type=float, default=FOV, help="Half-angle of the view cone in radians.")
    parser.add_argument("--cell", type=int, default=32, help="Pixels per character in the ASCII view.")
    parser.add_argument(
        "--script",
        help="Tiny DSL: commands separated by newlines/semicolons: seed N | pos X,Y | aim X,Y | move KEYS [N] | wait [N]",
    )
    parser.add_argument(
        "--script-file",
        help="Path to a script file using the DSL (ignored if --script is provided).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation and frame details.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.frames < 0:
        parser.error("--frames must be non-negative")
    if args.cell <= 0:
        parser.error("--cell must be positive")
    if not 0.0 < args.fov < math.pi:
        parser.error("--fov must be between 0 and pi radians")

    script_text = None
    if args.script:
        script_text = args.script
    elif args.script_file:
        with open(args.script_file, "r") as fh:
            script_text = fh.read()

    if script_text is not None:
        run_script(script_text, seed=args.seed, width=args.width, height=args.height, fov=args.fov, cell=args.cell)
        return
    if args.headless:
        run_headless(args.frames, args.seed, args.width, args.height, args.fov, args.cell)
        return

    run_game(args.seed, args.width, args.height, args.fov)


if __name__ == "__main__":
    main()
