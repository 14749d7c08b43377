"""Interactive wireframe viewer and its command-line entry point."""

from __future__ import annotations

import sys

from .controls import KeyState, apply_keys
from .model import WINDOW_HEIGHT, WINDOW_NAME, WINDOW_WIDTH, AnsiColor, Camera
from .parsing import MapFormatError, read_map
from .render import PutPixel, draw_lines


class Viewer:
    """Holds a point grid, a camera and the keyboard state, and draws frames."""

    def __init__(self, points, camera: Camera | None = None) -> None:
        self.points = points
        self.camera = camera if camera is not None else Camera()
        self.keys = KeyState()

    def frame(self, put_pixel: PutPixel) -> bool:
        """Apply held keys and draw one frame; return False when the viewer should close."""
        if apply_keys(self.keys.flags, self.camera):
            return False
        draw_lines(self.points, self.camera, put_pixel)
        return True

    def run(self) -> None:
        """Open a window and draw frames until escape is pressed or the window closes."""
        import pygame

        keycodes = {
            pygame.K_LEFT: 123,
            pygame.K_RIGHT: 124,
            pygame.K_DOWN: 125,
            pygame.K_UP: 126,
            pygame.K_KP8: 91,
            pygame.K_KP2: 84,
            pygame.K_KP4: 86,
            pygame.K_KP6: 88,
            pygame.K_PERIOD: 47,
            pygame.K_COMMA: 43,
            pygame.K_z: 6,
            pygame.K_x: 7,
            pygame.K_ESCAPE: 53,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_NAME)
            clock = pygame.time.Clock()

            def put_pixel(x: int, y: int, color: int) -> None:
                screen.set_at((x, y), ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))

            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key in keycodes:
                        self.keys.press(keycodes[event.key])
                    elif event.type == pygame.KEYUP and event.key in keycodes:
                        self.keys.release(keycodes[event.key])
                if not running:
                    break
                screen.fill((0, 0, 0))
                if not self.frame(put_pixel):
                    break
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()
        print(f"{AnsiColor.GREEN}Program exited correctly{AnsiColor.RESET}")


def _fail(message: str) -> int:
    print(f"{AnsiColor.RED}{message}{AnsiColor.RESET}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    """Load the map named on the command line and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("FdF usage: Invalid amount of arguements")
    try:
        points = read_map(args[0])
    except OSError:
        return _fail("File could not be opened")
    except MapFormatError as error:
        return _fail(str(error))
    Viewer(points, Camera()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())