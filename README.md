# Hidden Pickle

The opening screens of the Hidden Pickle game. There are two screens:

- an intro splash that fades in and out;
- a main menu with a configuration overlay.

Both are drawn with pygame, in a 1600×900 window by default.

## Installing

```
pip install .
```

## Running

```
hiddenpickle
```

Options:

- `--width` and `--height` set the window size. Both must be positive.
- `--assets DIR` sets the directory that holds the media. The default is `Assets`.

The assets directory is expected to hold these files:

- `DigiPen_WHITE.png`, the intro image
- `Hidden_Pickle_Title.png`, the title image
- `Exo2-Regular.ttf`, the button font
- `Clap.wav`, the clap sound

If an image or the sound is missing or cannot be loaded, it is left out. If the font is missing, pygame's default font is used.

## What happens

- **Intro**: a clap sound plays. The splash image fades in for 1.5 seconds and then fades out. The game moves on to the menu after 3 seconds, or at once while Space is held.
- **Menu**: there are three buttons, *Play*, *Config* and *Exit*.
  - *Play* and *Exit* both close the window.
  - *Config* opens an overlay. The small red square in its corner closes the overlay again. While the overlay is open, the three buttons do not respond.
  - Pressing Space on the menu plays the clap sound again.
- Closing the window quits at any time.

## What it does not do

There is no game behind the menu. *Play* closes the window just as *Exit* does. The configuration overlay is an empty panel: it has no settings, and nothing is stored.

## Using the pieces

`hiddenpickle.menu.MainMenu` holds the menu logic. It has no window and no sound of its own. On each frame you pass it the elapsed time and a `FrameInput`. It returns a list of `MenuAction` values for the host to carry out:

- `PLAY_SOUND`
- `EXIT`
- `PLAY`

```python
from hiddenpickle.menu import MainMenu, FrameInput, MenuAction, MenuState

menu = MainMenu(1600, 900)
actions = menu.update(0.016, FrameInput())
assert MenuAction.PLAY_SOUND in actions
assert menu.state is MenuState.INTRO
```

The menu's layout is available as `Rect` values in screen coordinates. These include `exit_button`, `config_button`, `play_button`, `config_panel` and `config_close_button`. Each `Rect` has a `contains(x, y)` method.

`hiddenpickle.geometry` provides three functions:

- `is_area_hit(center_x, center_y, width, height, x, y)` tests whether a point lies strictly inside a centred rectangle.
- `is_circle_hit(center_x, center_y, diameter, x, y)` tests whether a point lies inside or on a circle.
- `to_screen(x, y, window_width, window_height)` maps centre-origin, y-up coordinates to screen coordinates.

`hiddenpickle.common` holds shared value types:

- `Color`, an RGBA value checked to 0-255, with `with_alpha`;
- the enums `Key`, `MouseButton`, `TextAlignHorizontal`, `TextAlignVertical`, `PositionMode` and `SoundGroup`.

`hiddenpickle.app` runs the window:

- `run(width, height, assets_dir)` opens the window and runs the menu.
- `read_input(events, keys_down, mouse_pos)` turns pygame input into a `FrameInput`.
- `main(argv)` is the command line.

## Tests

```
pip install .[test]
pytest
```