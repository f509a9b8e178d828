import pytest

from hiddenpickle.menu import (
    FrameInput,
    MainMenu,
    MenuAction,
    MenuState,
    Rect,
)

WIDTH = 1600
HEIGHT = 900


def _click(rect):
    return FrameInput(mouse_x=rect.x, mouse_y=rect.y, mouse_clicked=True)


def _in_menu():
    menu = MainMenu(WIDTH, HEIGHT)
    menu.update(0.0, FrameInput(space_down=True))
    return menu


def test_starts_in_intro_with_config_closed():
    menu = MainMenu(WIDTH, HEIGHT)
    assert menu.state is MenuState.INTRO
    assert menu.config_open is False


def test_intro_sound_plays_once():
    menu = MainMenu(WIDTH, HEIGHT)
    assert menu.update(0.01, FrameInput()) == [MenuAction.PLAY_SOUND]
    assert menu.update(0.01, FrameInput()) == []


def test_intro_ends_after_three_seconds():
    menu = MainMenu(WIDTH, HEIGHT)
    menu.update(1.5, FrameInput())
    menu.update(1.4, FrameInput())
    assert menu.state is MenuState.INTRO
    menu.update(0.1, FrameInput())
    assert menu.state is MenuState.MENU


def test_space_held_skips_intro():
    menu = MainMenu(WIDTH, HEIGHT)
    menu.update(0.01, FrameInput(space_down=True))
    assert menu.state is MenuState.MENU


def test_intro_alpha_rises_then_falls():
    menu = MainMenu(WIDTH, HEIGHT)
    alphas = []
    while menu.state is MenuState.INTRO:
        menu.update(0.25, FrameInput())
        alphas.append(menu.intro_alpha)
    assert alphas[0] == 0
    peak = alphas.index(max(alphas))
    assert peak == 6
    assert alphas[: peak + 1] == sorted(alphas[: peak + 1])
    assert alphas[peak:] == sorted(alphas[peak:], reverse=True)


def test_intro_alpha_is_clamped():
    menu = MainMenu(WIDTH, HEIGHT)
    for _ in range(1000):
        menu.update(0.001, FrameInput())
    assert menu.intro_alpha == 255


def test_space_trigger_in_menu_plays_sound():
    menu = _in_menu()
    assert menu.update(0.01, FrameInput(space_triggered=True)) == [MenuAction.PLAY_SOUND]


def test_transition_frame_also_runs_menu_logic():
    menu = MainMenu(WIDTH, HEIGHT)
    actions = menu.update(0.01, FrameInput(space_down=True, space_triggered=True))
    assert actions == [MenuAction.PLAY_SOUND, MenuAction.PLAY_SOUND]


def test_exit_button_requests_exit():
    menu = _in_menu()
    assert menu.update(0.01, _click(menu.exit_button)) == [MenuAction.EXIT]


def test_play_button_requests_play():
    menu = _in_menu()
    assert menu.update(0.01, _click(menu.play_button)) == [MenuAction.PLAY]


def test_buttons_ignored_during_intro():
    menu = MainMenu(WIDTH, HEIGHT)
    menu.update(0.01, FrameInput())
    assert menu.update(0.01, _click(menu.exit_button)) == []
    assert menu.state is MenuState.INTRO


def test_config_button_opens_panel_and_blocks_buttons():
    menu = _in_menu()
    assert menu.update(0.01, _click(menu.config_button)) == []
    assert menu.config_open is True
    assert menu.update(0.01, _click(menu.exit_button)) == []
    assert menu.update(0.01, _click(menu.play_button)) == []


def test_close_button_closes_panel():
    menu = _in_menu()
    menu.update(0.01, _click(menu.config_button))
    menu.update(0.01, _click(menu.config_close_button))
    assert menu.config_open is False
    assert menu.update(0.01, _click(menu.exit_button)) == [MenuAction.EXIT]


def test_hover_without_click_does_nothing():
    menu = _in_menu()
    rect = menu.exit_button
    assert menu.update(0.01, FrameInput(mouse_x=rect.x, mouse_y=rect.y)) == []


def test_click_outside_buttons_does_nothing():
    menu = _in_menu()
    assert menu.update(0.01, FrameInput(mouse_x=1.0, mouse_y=1.0, mouse_clicked=True)) == []
    assert menu.config_open is False


def test_rect_contains_is_strict():
    rect = Rect(10.0, 20.0, 4.0, 6.0)
    assert rect.contains(10.0, 20.0)
    assert not rect.contains(12.0, 20.0)
    assert not rect.contains(10.0, 23.0)
    assert rect.contains(11.9, 22.9)


@pytest.mark.parametrize("size", [(1600, 900), (800, 600)])
def test_layout_invariants(size):
    width, height = size
    menu = MainMenu(width, height)
    assert menu.play_button.x == width / 2
    assert menu.play_button.y == height / 2
    assert menu.exit_button.y > menu.config_button.y > menu.play_button.y
    assert [label for label, _ in menu.buttons] == ["Exit", "Config", "Play"]
    close, panel = menu.config_close_button, menu.config_panel
    assert close.x + close.width / 2 == panel.x + panel.width / 2
    assert close.y - close.height / 2 == panel.y - panel.height / 2