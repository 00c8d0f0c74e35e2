"""The interactive paint window: toolbar, palettes, menus and the brush."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from pixpaint.canvas import (
    DEFAULT_SAVE_NAME,
    HEIGHT,
    WHITE,
    WIDTH,
    PaintState,
    is_paintable,
    new_canvas,
    stamp_brush,
)
from pixpaint.layout import (
    HIGHLIGHT_SIZE,
    HOVER_COLOUR,
    PRESS_COLOUR,
    Button,
    FileAction,
    Region,
    Tool,
    colour_palette,
    file_menu,
    hit_test,
    main_toolbar,
    size_palette,
)

FRAMERATE = 120
TITLE = "my paint"

Highlight = tuple[Region, tuple[int, int, int, int]]


class PaintApp:
    """A paint editor bound to one image and one save path."""

    def __init__(
        self, save_name: str = DEFAULT_SAVE_NAME, open_file: str | None = None
    ) -> None:
        self.state = PaintState(
            save_name=save_name, open_file=open_file, image=new_canvas()
        )
        self.toolbar: list[Button] = main_toolbar()
        self.overlay: list[Button] = []
        self.screen: pygame.Surface | None = None
        self.closed = False
        self._frame: pygame.Surface | None = None
        self._icons: dict[str, pygame.Surface | None] = {}

    def _target(self) -> pygame.Surface:
        if self.screen is not None:
            return self.screen
        if self._frame is None:
            self._frame = pygame.Surface((WIDTH, HEIGHT))
        return self._frame

    def _icon(self, button: Button) -> pygame.Surface | None:
        if button.icon not in self._icons:
            try:
                raw = pygame.image.load(button.icon)
            except (pygame.error, OSError):
                icon = None
            else:
                width, height = raw.get_size()
                icon = pygame.transform.scale(
                    raw,
                    (
                        max(1, round(width * button.scale)),
                        max(1, round(height * button.scale)),
                    ),
                )
            self._icons[button.icon] = icon
        return self._icons[button.icon]

    def render(self, highlight: Highlight | None = None) -> pygame.Surface:
        """Draw the image, the buttons and an optional highlight; return the frame."""
        frame = self._target()
        frame.fill(WHITE)
        frame.blit(self.state.image, (0, 0))
        for button in (*self.toolbar, *self.overlay):
            icon = self._icon(button)
            if icon is not None:
                frame.blit(icon, (button.region.x, button.region.y))
        if highlight is not None:
            region, rgba = highlight
            patch = pygame.Surface(HIGHLIGHT_SIZE, pygame.SRCALPHA)
            patch.fill(rgba)
            frame.blit(patch, (region.x, region.y))
        if self.screen is not None:
            pygame.display.flip()
        return frame

    def _pick(self, buttons: Iterable[Button]) -> None:
        chosen = self.choose(buttons)
        if chosen is not None:
            self.apply_button(chosen)

    def apply_button(self, button: Button) -> None:
        """Carry out what choosing ``button`` means."""
        action = button.action
        state = self.state
        if action is Tool.PENCIL:
            self._pick(colour_palette())
            self._pick(size_palette())
        elif action is Tool.ERASER:
            state.colour = WHITE
            self._pick(size_palette())
        elif action is Tool.FILE:
            self._pick(file_menu())
        elif action is FileAction.SAVE:
            pygame.image.save(state.image, state.save_name)
        elif action is FileAction.NEW:
            state.image = new_canvas()
        elif action is FileAction.OPEN:
            if state.open_file is not None:
                state.image = pygame.image.load(state.open_file)
        elif isinstance(action, tuple):
            state.colour = action
        else:
            state.size = action

    def paint_at(self, pos: tuple[int, int]) -> bool:
        """Stamp the brush at ``pos`` unless it is too close to an edge."""
        if not is_paintable(pos, self.state.size):
            return False
        stamp_brush(self.state.image, pos, self.state.size, self.state.colour)
        return True

    def choose(self, buttons: Iterable[Button]) -> Button | None:
        """Show ``buttons`` and wait for a left click on one of them.

        Returns None if the window is closed while waiting.
        """
        buttons = list(buttons)
        self.overlay = buttons
        try:
            self.render()
            while not self.closed:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    self.closed = True
                elif event.type == pygame.MOUSEMOTION:
                    hovered = hit_test(buttons, event.pos)
                    self.render(
                        (hovered.region, HOVER_COLOUR) if hovered else None
                    )
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    chosen = hit_test(buttons, event.pos)
                    if chosen is not None:
                        self.render((chosen.region, PRESS_COLOUR))
                        return chosen
            return None
        finally:
            self.overlay = []

    def _stroke(self, pos: tuple[int, int]) -> None:
        if self.paint_at(pos):
            self.render()

    def _handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.closed = True
            return
        if event.type == pygame.MOUSEMOTION:
            if not is_paintable(event.pos, self.state.size):
                return
            if event.buttons[0]:
                self._stroke(event.pos)
            else:
                hovered = hit_test(self.toolbar, event.pos)
                self.render((hovered.region, HOVER_COLOUR) if hovered else None)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not is_paintable(event.pos, self.state.size):
                return
            button = hit_test(self.toolbar, event.pos)
            if button is None:
                self._stroke(event.pos)
                return
            self.render((button.region, PRESS_COLOUR))
            self.apply_button(button)
            if not self.closed:
                self.render()

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            self.closed = False
            self.render()
            while not self.closed:
                for event in pygame.event.get():
                    self._handle(event)
                    if self.closed:
                        break
                clock.tick(FRAMERATE)
        finally:
            self.screen = None
            pygame.quit()