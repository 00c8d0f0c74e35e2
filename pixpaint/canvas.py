"""Drawing surface, brush stamping and the editor's mutable state."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

Colour = tuple[int, int, int]

WIDTH = 1920
HEIGHT = 1080
DEFAULT_SIZE = 15
DEFAULT_SAVE_NAME = "my_image.jpg"

WHITE: Colour = (255, 255, 255)
BLACK: Colour = (0, 0, 0)
RED: Colour = (255, 0, 0)
GREEN: Colour = (0, 255, 0)
BLUE: Colour = (0, 0, 255)
YELLOW: Colour = (255, 255, 0)
MAGENTA: Colour = (255, 0, 255)
CYAN: Colour = (0, 255, 255)


@dataclass
class PaintState:
    """Everything the editor remembers between frames."""

    save_name: str = DEFAULT_SAVE_NAME
    open_file: str | None = None
    colour: Colour = BLACK
    size: int = DEFAULT_SIZE
    image: pygame.Surface | None = None


def new_canvas(width: int = WIDTH, height: int = HEIGHT) -> pygame.Surface:
    """Return a blank white image of the given dimensions."""
    surface = pygame.Surface((width, height))
    surface.fill(WHITE)
    return surface


def stamp_brush(
    surface: pygame.Surface,
    pos: tuple[int, int],
    size: int,
    colour: Colour,
) -> pygame.Rect:
    """Paint a square brush centred on ``pos`` and return the area touched.

    The square reaches ``size // 2 - 1`` pixels from the centre in every
    direction; a brush smaller than 2 paints nothing. Pixels outside the
    surface are ignored.
    """
    px, py = pos
    half = size // 2
    if half <= 0:
        return pygame.Rect(px, py, 0, 0)
    side = 2 * half - 1
    area = pygame.Rect(px - half + 1, py - half + 1, side, side)
    return surface.fill(colour, area)


def is_paintable(
    pos: tuple[int, int],
    size: int,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> bool:
    """Tell whether a brush of ``size`` at ``pos`` stays clear of the edges."""
    x, y = pos
    half = size // 2
    return not (
        x >= width - half
        or y >= height - half
        or x <= half
        or y <= half
    )