"""Window, event loop and rendering for the main menu."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Iterable

import pygame

from .common import Color, PositionMode
from .menu import (
    BUTTON_FILL,
    CONFIG_CLOSE_FILL,
    CONFIG_PANEL_FILL,
    INTRO_BACKGROUND,
    MENU_BACKGROUND,
    TEXT_FILL,
    TEXT_SIZE,
    TITLE,
    FrameInput,
    MainMenu,
    MenuAction,
    MenuState,
    Rect,
)

FRAME_RATE = 60
DEFAULT_WIDTH = 1600
DEFAULT_HEIGHT = 900
DEFAULT_ASSETS = "Assets"

FONT_FILE = "Exo2-Regular.ttf"
INTRO_IMAGE_FILE = "DigiPen_WHITE.png"
TITLE_IMAGE_FILE = "Hidden_Pickle_Title.png"
SOUND_FILE = "Clap.wav"

# Rectangles are placed by their top-left corner, images by their centre.
RECT_MODE = PositionMode.CORNER
IMAGE_MODE = PositionMode.CENTER

_CLICK_BUTTONS = (1, 2, 3)


def _is_pressed(keys_down: Any, key: int) -> bool:
    try:
        return bool(keys_down[key])
    except (IndexError, KeyError):
        return False


def read_input(
    events: Iterable[pygame.event.Event],
    keys_down: Any,
    mouse_pos: tuple[float, float],
) -> FrameInput:
    """Build the frame's input from pygame events, held keys and mouse position."""
    clicked = space_triggered = quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _CLICK_BUTTONS:
            clicked = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            space_triggered = True
    mouse_x, mouse_y = mouse_pos
    return FrameInput(
        mouse_x=float(mouse_x),
        mouse_y=float(mouse_y),
        mouse_clicked=clicked,
        space_down=_is_pressed(keys_down, pygame.K_SPACE),
        space_triggered=space_triggered,
        quit_requested=quit_requested,
    )


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.r, color.g, color.b, color.a)


def _origin(rect: Rect, mode: PositionMode) -> tuple[float, float]:
    if mode is PositionMode.CORNER:
        return rect.x, rect.y
    return rect.x - rect.width / 2, rect.y - rect.height / 2


def _load_image(path: Path, rect: Rect) -> pygame.Surface | None:
    if not path.is_file():
        return None
    try:
        image = pygame.image.load(str(path)).convert_alpha()
    except pygame.error:
        return None
    return pygame.transform.smoothscale(image, (int(rect.width), int(rect.height)))


def _load_sound(path: Path) -> pygame.mixer.Sound | None:
    if not path.is_file():
        return None
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def _load_font(path: Path) -> pygame.font.Font:
    return pygame.font.Font(str(path) if path.is_file() else None, int(TEXT_SIZE))


def _draw_image(screen: pygame.Surface, image: pygame.Surface | None,
                rect: Rect, alpha: int) -> None:
    if image is None:
        return
    image.set_alpha(max(0, min(255, alpha)))
    screen.blit(image, _origin(rect, IMAGE_MODE))


def _fill_rect(screen: pygame.Surface, color: Color, rect: Rect) -> None:
    surface = pygame.Surface((int(rect.width), int(rect.height)), pygame.SRCALPHA)
    surface.fill(_rgba(color))
    screen.blit(surface, _origin(rect, RECT_MODE))


def _draw_text(screen: pygame.Surface, font: pygame.font.Font, text: str,
               x: float, y: float) -> None:
    rendered = font.render(text, True, _rgba(TEXT_FILL))
    screen.blit(rendered, rendered.get_rect(center=(int(x), int(y))))


def _draw(screen: pygame.Surface, menu: MainMenu, font: pygame.font.Font,
          intro_image: pygame.Surface | None,
          title_image: pygame.Surface | None) -> None:
    if menu.state is MenuState.INTRO:
        screen.fill(_rgba(INTRO_BACKGROUND))
        _draw_image(screen, intro_image, menu.intro_image, menu.intro_alpha)
        return

    screen.fill(_rgba(MENU_BACKGROUND))
    _draw_image(screen, title_image, menu.title_image, menu.title_alpha)
    for _, rect in menu.buttons:
        _fill_rect(screen, BUTTON_FILL, rect)
    for label, rect in menu.buttons:
        _draw_text(screen, font, label, rect.x, rect.y)
    if menu.config_open:
        _fill_rect(screen, CONFIG_PANEL_FILL, menu.config_panel)
        _fill_rect(screen, CONFIG_CLOSE_FILL, menu.config_close_button)


def run(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
        assets_dir: str | Path = DEFAULT_ASSETS) -> None:
    """Open the window and run the menu until the player leaves it."""
    assets = Path(assets_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        font = _load_font(assets / FONT_FILE)
        menu = MainMenu(width, height)
        intro_image = _load_image(assets / INTRO_IMAGE_FILE, menu.intro_image)
        title_image = _load_image(assets / TITLE_IMAGE_FILE, menu.title_image)
        sound = _load_sound(assets / SOUND_FILE)
        clock = pygame.time.Clock()

        while True:
            dt = clock.tick(FRAME_RATE) / 1000.0
            frame_input = read_input(
                pygame.event.get(), pygame.key.get_pressed(), pygame.mouse.get_pos()
            )
            if frame_input.quit_requested:
                return
            actions = menu.update(dt, frame_input)
            if sound is not None:
                for _ in range(actions.count(MenuAction.PLAY_SOUND)):
                    sound.play()
            if MenuAction.EXIT in actions or MenuAction.PLAY in actions:
                return
            _draw(screen, menu, font, intro_image, title_image)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and start the menu."""
    parser = argparse.ArgumentParser(prog="hiddenpickle", description=TITLE)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--assets", default=DEFAULT_ASSETS,
                        help="directory holding fonts, images and sounds")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    run(args.width, args.height, args.assets)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())