import math
from typing import Sequence

import pygame

from map_builder import room_center, room_doors
from sight_constants import (
    BACKGROUND,
    DOOR_COLOR,
    DOOR_LINK_COLOR,
    DOOR_RADIUS,
    FAN_COLOR,
    FPS_X,
    FPS_Y,
    NODE_COLOR,
    NODE_RADIUS,
    PLAYER_COLOR,
    PLAYER_X,
    PLAYER_Y,
    STATS_Y,
    TEXT_COLOR,
    WALL_COLOR,
)
from sight_types import Point
from world_state import FrameStats, MapLayout

_PLAYER_SURFACE = None


def get_player_surface():
    global _PLAYER_SURFACE
    if _PLAYER_SURFACE is None:
        _PLAYER_SURFACE = pygame.Surface((PLAYER_X, PLAYER_Y), pygame.SRCALPHA)
        _PLAYER_SURFACE.fill(PLAYER_COLOR)
    return _PLAYER_SURFACE


def build_static_layer(layout: MapLayout, size) -> pygame.Surface:
    """Walls, room markers and doors never change after generation, so they are drawn once."""
    layer = pygame.Surface(size, pygame.SRCALPHA)
    for wall in layout.walls:
        pygame.draw.rect(layer, WALL_COLOR, pygame.Rect(wall.x, wall.y, wall.width, wall.height))

    for room in layout.rooms:
        center = room_center(room)
        for door in room_doors(room, layout.doors):
            pygame.draw.line(layer, DOOR_LINK_COLOR, center, door)
        pygame.draw.circle(layer, NODE_COLOR, center, NODE_RADIUS)

    for door in layout.doors:
        pygame.draw.circle(layer, DOOR_COLOR, door, DOOR_RADIUS)
    return layer


def draw_fan(overlay: pygame.Surface, fan: Sequence[Point]) -> None:
    overlay.fill((0, 0, 0, 0))
    if len(fan) >= 3:
        pygame.draw.polygon(overlay, FAN_COLOR, fan)


def draw_player(surface: pygame.Surface, position: Point, direction: float) -> None:
    image = pygame.transform.rotate(get_player_surface(), math.degrees(direction))
    rect = image.get_rect(center=(round(position[0]), round(position[1])))
    surface.blit(image, rect)


def draw_stats(surface: pygame.Surface, font, fps: float, stats: FrameStats) -> None:
    surface.blit(font.render(f"{fps:.0f} FPS", True, TEXT_COLOR), (FPS_X, FPS_Y))
    y = STATS_Y
    for line in stats.lines():
        surface.blit(font.render(line, True, TEXT_COLOR), (FPS_X, y))
        y += font.get_linesize()


def draw_frame(surface, static_layer, overlay, font, fps, position, fan, stats: FrameStats) -> None:
    surface.fill(BACKGROUND)
    draw_player(surface, position, stats.direction)
    surface.blit(static_layer, (0, 0))
    draw_fan(overlay, fan)
    surface.blit(overlay, (0, 0))
    draw_stats(surface, font, fps, stats)
