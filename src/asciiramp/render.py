from asciiramp.model import ColorSample, OutputGrid

RESET = "\033[0m"


def _rgb(colour: ColorSample) -> tuple[int, int, int]:
    if isinstance(colour, tuple):
        return colour
    return (colour, colour, colour)


def _format_cell(char: str, colour: ColorSample, paint_background: bool) -> str:
    r, g, b = _rgb(colour)
    if paint_background:
        return f"\033[38;2;{255 - r};{255 - g};{255 - b}m\033[48;2;{r};{g};{b}m{char}"
    return f"\033[38;2;{r};{g};{b}m{char}"


def format_grid(grid: OutputGrid, colour: bool = False, paint_background: bool = False) -> str:
    """Join a grid into printable lines, optionally wrapping cells in ANSI truecolor escapes.

    With ``paint_background`` each cell's own colour becomes the background and
    the character is drawn in its complement.
    """
    if not colour:
        return "\n".join("".join(cell.char for cell in row) for row in grid)

    out = []
    for row in grid:
        parts = [_format_cell(cell.char, cell.colour, paint_background) for cell in row]
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
