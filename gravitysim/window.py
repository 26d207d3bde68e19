"""The window that shows the simulation, and the program entry point."""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from gravitysim.app import App, Key  # noqa: E402
from gravitysim.model import Model  # noqa: E402

DEFAULT_LOG_PATH = "output.log"
_LOGGER_NAME = "gravitysim"
_WINDOW_SIZE = (1024, 768)
_FPS = 60
_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)

_KEY_BINDINGS = {
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_y: Key.ZOOM_IN,
    pygame.K_t: Key.ZOOM_OUT,
}


def setup_logging(log_path: str | Path = DEFAULT_LOG_PATH) -> None:
    """Send the package's log records at DEBUG and above to stdout and a file."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s[%(filename)s:%(lineno)d][%(levelname)s] %(message)s",
        datefmt="[%Y-%m-%d][%H:%M:%S]",
    )
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    stream_handler = logging.StreamHandler(sys.stdout)
    for handler in (stream_handler, file_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


def _draw(screen: pygame.Surface, font: pygame.font.Font, app: App) -> None:
    screen.fill(_BLACK)
    width, height = screen.get_size()

    label = font.render("Zoom: T/Y", True, _WHITE)
    screen.blit(label, label.get_rect(center=(width / 2, 10)))

    for shape in app.shapes():
        position, radius = app.world_to_camera(shape)
        x = width / 2 + position.x
        y = height / 2 - position.y
        if not all(math.isfinite(value) for value in (x, y, radius)) or radius <= 0:
            continue
        pygame.draw.circle(screen, _WHITE, (x, y), radius)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    parser = argparse.ArgumentParser(prog="gravitysim", description="Gravity simulation.")
    parser.add_argument("--config", default=None, help="configuration file (default: config.json)")
    parser.add_argument("--log-file", default=DEFAULT_LOG_PATH, help="log file path")
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_file)
    except OSError as error:
        print(f"Logger failed: {error}")

    app = App(model=Model.from_config(args.config))

    pygame.init()
    try:
        screen = pygame.display.set_mode(_WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("gravitysim")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = _KEY_BINDINGS.get(event.key)
                    if key is not None:
                        app.handle_key(key)
            app.update(clock.tick(_FPS) / 1000.0)
            _draw(screen, font, app)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())