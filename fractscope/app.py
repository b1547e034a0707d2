"""The interactive viewer: input handling, redraw scheduling and the window loop."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, Sequence

from fractscope.errors import ErrorCode, FractolError, show_error
from fractscope.geometry import Viewport, pixel_to_complex
from fractscope.model import BASE_MOVEMENT_STEP, HEIGHT, WIDTH, ZOOM_FACTOR, Fractal, parse_arguments
from fractscope.render import Image, render_fractal

WINDOW_TITLE = "Fractol"
_FRAMES_PER_SECOND = 60


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class MouseButton(IntEnum):
    """Mouse buttons the viewer reacts to: the scroll wheel."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


_ARROW_STEPS = {
    Key.RIGHT: (BASE_MOVEMENT_STEP, 0.0),
    Key.LEFT: (-BASE_MOVEMENT_STEP, 0.0),
    Key.UP: (0.0, BASE_MOVEMENT_STEP),
    Key.DOWN: (0.0, -BASE_MOVEMENT_STEP),
}


class Viewer:
    """The state of one viewing session; draws the fractal once when created."""

    def __init__(self, fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.fractal = fractal
        self.viewport = Viewport(width=width, height=height)
        self.image = Image(width, height)
        self.needs_redraw = False
        self.running = True
        render_fractal(self.fractal, self.viewport, self.image)

    def handle_key(self, keycode: int) -> None:
        """Escape stops the viewer; the arrow keys pan the view."""
        if keycode == Key.ESC:
            self.running = False
            return
        step = _ARROW_STEPS.get(keycode)
        if step is None:
            return
        self.viewport.shift_x += step[0]
        self.viewport.shift_y += step[1]
        self.needs_redraw = True

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Scrolling zooms in or out around the pointer, unless a redraw is pending."""
        if button not in (MouseButton.SCROLL_UP, MouseButton.SCROLL_DOWN) or self.needs_redraw:
            return
        target = pixel_to_complex(x, y, self.fractal, self.viewport)
        if button == MouseButton.SCROLL_UP:
            self.fractal.zoom_level *= ZOOM_FACTOR
        else:
            self.fractal.zoom_level /= ZOOM_FACTOR
        self.viewport.reset_shift()
        self.fractal.center = target
        self.needs_redraw = True

    def update(self) -> bool:
        """Redraw the image if something changed; return whether it was redrawn."""
        if not self.needs_redraw:
            return False
        render_fractal(self.fractal, self.viewport, self.image)
        self.needs_redraw = False
        return True


def _run_window(viewer: Viewer) -> None:
    import pygame

    try:
        pygame.init()
    except pygame.error as exc:
        raise FractolError(ErrorCode.DISPLAY) from exc
    try:
        size = (viewer.viewport.width, viewer.viewport.height)
        try:
            screen = pygame.display.set_mode(size)
        except pygame.error as exc:
            raise FractolError(ErrorCode.WINDOW) from exc
        pygame.display.set_caption(WINDOW_TITLE)
        key_map = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_UP: Key.UP,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_DOWN: Key.DOWN,
        }
        clock = pygame.time.Clock()
        show = True
        while viewer.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    viewer.running = False
                elif event.type == pygame.KEYDOWN and event.key in key_map:
                    viewer.handle_key(key_map[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    viewer.handle_mouse(event.button, *event.pos)
            if not viewer.running:
                break
            if viewer.update() or show:
                try:
                    surface = pygame.image.frombuffer(viewer.image.to_rgb_bytes(), size, "RGB")
                except (pygame.error, ValueError) as exc:
                    raise FractolError(ErrorCode.IMAGE) from exc
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                show = False
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, open the window and run until it is closed."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        fractal = parse_arguments(args)
        viewer = Viewer(fractal)
        _run_window(viewer)
    except FractolError as error:
        return int(show_error(error))
    return 0


if __name__ == "__main__":
    sys.exit(main())