import random
from typing import Optional

import pygame

from frame_engine import FrameEngine
from sight_graphics import build_static_layer, draw_frame
from map_builder import generate_layout
from motion import MoveIntent
from sight_constants import FOV, FPS, SCREEN_X, SCREEN_Y
from visibility import VisibilityCaster


def intent_from_keys(pressed) -> MoveIntent:
    return MoveIntent(
        left=bool(pressed[pygame.K_a]),
        right=bool(pressed[pygame.K_d]),
        up=bool(pressed[pygame.K_w]),
        down=bool(pressed[pygame.K_s]),
    )


class ViewContext:
    def __init__(self, width: int, height: int):
        self.size = (width, height)
        self.screen = pygame.display.set_mode(self.size)
        self.overlay = pygame.Surface(self.size, pygame.SRCALPHA)
        self.static_layer = None
        self.font = pygame.font.SysFont(None, 24)

    def rebuild_static(self, engine: FrameEngine) -> None:
        self.static_layer = build_static_layer(engine.layout, self.size)


def run_game(seed: Optional[int] = None, width: int = SCREEN_X, height: int = SCREEN_Y, fov: float = FOV) -> None:
    rng = random.Random(seed)

    def new_engine() -> FrameEngine:
        layout = generate_layout(width, height, rng)
        return FrameEngine(layout, VisibilityCaster.for_layout(layout, fov))

    pygame.init()
    pygame.display.set_caption("raysight")
    view = ViewContext(width, height)
    clock = pygame.time.Clock()
    engine = new_engine()
    view.rebuild_static(engine)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    engine = new_engine()
                    view.rebuild_static(engine)

        if not running:
            break

        intent = intent_from_keys(pygame.key.get_pressed())
        output = engine.tick(intent, pygame.mouse.get_pos())
        draw_frame(
            view.screen,
            view.static_layer,
            view.overlay,
            view.font,
            clock.get_fps(),
            engine.pose.position,
            output.fan,
            output.stats,
        )
        pygame.display.flip()

    pygame.quit()
