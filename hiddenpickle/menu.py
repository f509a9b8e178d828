"""Main menu state machine: intro fade, menu buttons and the config panel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .common import Color
from .geometry import is_area_hit, to_screen

TITLE = "Hidden Pickle"

BUTTON_WIDTH = 600
BUTTON_HEIGHT = 100

CONFIG_WIDTH = 700
CONFIG_HEIGHT = 800
CONFIG_CLOSE_SIZE = 30

DELTA_ALPHA = 3
INTRO_FADE_IN_SECONDS = 1.5
INTRO_DURATION_SECONDS = 3.0

TEXT_SIZE = 72.0

INTRO_BACKGROUND = Color(0, 0, 0, 255)
MENU_BACKGROUND = Color(128, 128, 128, 255)
BUTTON_FILL = Color(85, 85, 85, 255)
TEXT_FILL = Color(0, 0, 0, 255)
CONFIG_PANEL_FILL = Color(85, 85, 85, 200)
CONFIG_CLOSE_FILL = Color(255, 0, 0, 255)


class MenuState(Enum):
    """Which screen the main menu is showing."""

    INTRO = auto()
    MENU = auto()


class MenuAction(Enum):
    """Things the menu asks its host to do after a frame."""

    PLAY_SOUND = auto()
    EXIT = auto()
    PLAY = auto()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle centred at (x, y) in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point lies strictly inside the rectangle."""
        return is_area_hit(self.x, self.y, self.width, self.height, x, y)


@dataclass(frozen=True)
class FrameInput:
    """The input seen during one frame."""

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    mouse_clicked: bool = False
    space_down: bool = False
    space_triggered: bool = False
    quit_requested: bool = False


def _placed(x: float, y: float, width: float, height: float,
            window_width: float, window_height: float) -> Rect:
    screen_x, screen_y = to_screen(x, y, window_width, window_height)
    return Rect(screen_x, screen_y, width, height)


class MainMenu:
    """The intro splash followed by the title menu with Exit, Config and Play."""

    def __init__(self, window_width: int, window_height: int) -> None:
        self.window_width = window_width
        self.window_height = window_height

        def place(x: float, y: float, width: float, height: float) -> Rect:
            return _placed(x, y, width, height, window_width, window_height)

        self.intro_image = place(0, 0, 800, 200)
        self.title_image = place(0, 270, 600, 500)
        self.title_alpha = 255

        self.exit_button = place(0, -300, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.config_button = place(0, -150, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.play_button = place(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)

        self.config_panel = place(0, 0, CONFIG_WIDTH, CONFIG_HEIGHT)
        self.config_close_button = place(
            (CONFIG_WIDTH - CONFIG_CLOSE_SIZE) // 2,
            (CONFIG_HEIGHT - CONFIG_CLOSE_SIZE) // 2,
            CONFIG_CLOSE_SIZE,
            CONFIG_CLOSE_SIZE,
        )

        self.state = MenuState.INTRO
        self.config_open = False
        self._sound_pending = True
        self._intro_elapsed = 0.0
        self._alpha = 0
        self._drawn_alpha = 0

    @property
    def buttons(self) -> tuple[tuple[str, Rect], ...]:
        """The labelled menu buttons in drawing order."""
        return (
            ("Exit", self.exit_button),
            ("Config", self.config_button),
            ("Play", self.play_button),
        )

    @property
    def intro_alpha(self) -> int:
        """Opacity of the intro image for the latest frame, clamped to 0-255."""
        return max(0, min(255, self._drawn_alpha))

    def _clicked(self, rect: Rect, frame_input: FrameInput) -> bool:
        return frame_input.mouse_clicked and rect.contains(
            frame_input.mouse_x, frame_input.mouse_y
        )

    def update(self, dt: float, frame_input: FrameInput) -> list[MenuAction]:
        """Advance one frame and return the actions the host should carry out."""
        actions: list[MenuAction] = []

        if self.state is MenuState.INTRO:
            if self._sound_pending:
                actions.append(MenuAction.PLAY_SOUND)
                self._sound_pending = False

            self._drawn_alpha = self._alpha
            self._intro_elapsed += dt
            if self._intro_elapsed <= INTRO_FADE_IN_SECONDS:
                self._alpha += DELTA_ALPHA
            else:
                self._alpha -= DELTA_ALPHA

            if self._intro_elapsed >= INTRO_DURATION_SECONDS or frame_input.space_down:
                self.state = MenuState.MENU
                self._sound_pending = True

        if self.state is MenuState.MENU:
            if frame_input.space_triggered:
                actions.append(MenuAction.PLAY_SOUND)

            if not self.config_open:
                if self._clicked(self.exit_button, frame_input):
                    actions.append(MenuAction.EXIT)
                    return actions
                if self._clicked(self.config_button, frame_input):
                    self.config_open = True
                if self._clicked(self.play_button, frame_input):
                    actions.append(MenuAction.PLAY)
                    return actions

            if self.config_open and self._clicked(self.config_close_button, frame_input):
                self.config_open = False

        return actions