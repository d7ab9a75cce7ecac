from asciiramp.model import Cell
from asciiramp.render import RESET, format_grid


def make_grid():
    return [
        [Cell(char="@", colour=(255, 0, 0)), Cell(char=" ", colour=(0, 0, 0))],
        [Cell(char=".", colour=(10, 20, 30)), Cell(char="#", colour=(200, 200, 200))],
    ]


def test_plain_output_is_characters_only():
    assert format_grid(make_grid()) == "@ \n.#"


def test_empty_grid_is_empty_string():
    assert format_grid([]) == ""


def test_colour_output_sets_foreground():
    lines = format_grid(make_grid(), colour=True).split("\n")
    assert lines[0] == f"\033[38;2;255;0;0m@\033[38;2;0;0;0m {RESET}"
    assert lines[1].startswith("\033[38;2;10;20;30m.")
    assert "\033[48;2;" not in lines[0]


def test_paint_background_uses_complement():
    result = format_grid(make_grid(), colour=True, paint_background=True)
    assert result.startswith("\033[38;2;0;255;255m\033[48;2;255;0;0m@")
    assert "\033[38;2;245;235;225m\033[48;2;10;20;30m." in result


def test_grayscale_cells_render_as_gray():
    grid = [[Cell(char="=", colour=127)]]
    assert format_grid(grid, colour=True) == f"\033[38;2;127;127;127m={RESET}"


def test_every_coloured_row_is_reset():
    result = format_grid(make_grid(), colour=True)
    assert all(line.endswith(RESET) for line in result.split("\n"))
