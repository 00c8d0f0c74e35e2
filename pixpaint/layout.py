"""Buttons, palettes and menus of the editor, and hit testing on them."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from pixpaint.canvas import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    RED,
    YELLOW,
    Colour,
)

BUTTON_SIDE = 30
HIGHLIGHT_SIZE = (35, 30)
HOVER_COLOUR = (255, 255, 255, 100)
PRESS_COLOUR = (216, 250, 8, 200)
ICON_DIR = "button"


class Tool(enum.Enum):
    """Entries of the main toolbar."""

    PENCIL = "pencil"
    ERASER = "eraser"
    FILE = "file"


class FileAction(enum.Enum):
    """Entries of the file menu."""

    SAVE = "save"
    NEW = "new"
    OPEN = "open"


Action = Union[Tool, FileAction, Colour, int]


@dataclass(frozen=True)
class Region:
    """A rectangle whose edges count as inside."""

    x: int
    y: int
    width: int = BUTTON_SIDE
    height: int = BUTTON_SIDE

    def contains(self, point: tuple[int, int]) -> bool:
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


@dataclass(frozen=True)
class Button:
    """A clickable icon and what choosing it means."""

    region: Region
    icon: str
    scale: float
    action: Action


def hit_test(buttons: Iterable[Button], point: tuple[int, int]) -> Button | None:
    """Return the first button under ``point``, or None."""
    return next((b for b in buttons if b.region.contains(point)), None)


def _button(x: int, y: int, icon: str, scale: float, action: Action) -> Button:
    return Button(Region(x, y), f"{ICON_DIR}/{icon}", scale, action)


def main_toolbar() -> list[Button]:
    """Pencil, eraser and file buttons along the top edge."""
    return [
        _button(10, 0, "write.png", 0.08, Tool.PENCIL),
        _button(45, 0, "del.png", 0.08, Tool.ERASER),
        _button(80, 0, "file.png", 0.14, Tool.FILE),
    ]


def colour_palette() -> list[Button]:
    """The seven pencil colours."""
    return [
        _button(10, 45, "colo_1.png", 0.8, RED),
        _button(45, 45, "colo_2.png", 0.8, GREEN),
        _button(80, 45, "colo_3.png", 0.8, BLUE),
        _button(115, 45, "colo_4.png", 0.8, CYAN),
        _button(10, 80, "colo_5.png", 0.8, MAGENTA),
        _button(45, 80, "colo_6.png", 0.8, YELLOW),
        _button(80, 80, "colo_7.png", 0.8, BLACK),
    ]


def size_palette() -> list[Button]:
    """The four brush sizes."""
    return [
        _button(10, 115, "taille_1.png", 0.8, 4),
        _button(45, 115, "taille_2.png", 0.8, 8),
        _button(80, 115, "taille_3.png", 0.8, 12),
        _button(115, 115, "taille_4.png", 0.8, 16),
    ]


def file_menu() -> list[Button]:
    """Save, new and open buttons."""
    return [
        _button(10, 45, "s_file.png", 0.1, FileAction.SAVE),
        _button(45, 45, "n_file.png", 0.07, FileAction.NEW),
        _button(80, 45, "o_file.png", 0.06, FileAction.OPEN),
    ]