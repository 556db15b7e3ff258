"""
CLI display functions for gitcal.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from rich.box import SQUARE, Box
from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from gitcal.history_calculator import COLUMNS, CalendarGrid

MONTH_ABBREVIATIONS = {
    1: "Jan",
    2: "Feb",
    3: "Mar",
    4: "Apr",
    5: "May",
    6: "Jun",
    7: "Jul",
    8: "Aug",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Dec",
}

# Label every fourth week column
MONTH_LABEL_INTERVAL = 4

CELL = "  "  # Two spaces, coloured by background
CELL_GAP = " "

# Shades similar to GitHub's contribution graph, lowest = no activity
DEFAULT_PALETTE = ("black", "green", "bright_green", "bright_white", "white")


@dataclass(frozen=True)
class CalendarStyle:
    """Colours and frame settings for the calendar."""

    palette: tuple[str, ...] = DEFAULT_PALETTE
    box: Box = SQUARE
    border_style: str = "#ffffff"
    panel_style: str = "bold on #30383a"
    padding: tuple[int, int, int, int] = (1, 2, 0, 1)  # top, right, bottom, left

    @property
    def max_level(self) -> int:
        return len(self.palette)


def format_month_header(start_date: date, columns: int = COLUMNS) -> str:
    """
    Build the month label row shown above the grid.

    Args:
        start_date: Date of the first cell
        columns: Number of week columns

    Returns:
        Header string with a month label every fourth week
    """
    header = " "
    for week in range(columns):
        if week % MONTH_LABEL_INTERVAL == 0:
            month = (start_date + timedelta(days=week * 7)).month
            header += f"{MONTH_ABBREVIATIONS[month]} "
        else:
            header += "   "
    return header


def build_calendar_body(grid: CalendarGrid, style: CalendarStyle) -> Text:
    """Build the coloured cell rows, one line per row of the grid."""
    body = Text(no_wrap=True)
    for row in grid.levels(style.max_level):
        for level in row:
            body.append(CELL_GAP)
            body.append(CELL, style=Style(bgcolor=style.palette[level]))
        body.append("\n")
    return body


def _panel_width(grid: CalendarGrid, style: CalendarStyle) -> int:
    _, right, _, left = style.padding
    # cells, horizontal padding, one border column each side
    return grid.columns * (len(CELL_GAP) + len(CELL)) + left + right + 2


def calendar_width(grid: CalendarGrid, style: CalendarStyle) -> int:
    """Return the columns needed to print the header and frame without wrapping."""
    panel_width = _panel_width(grid, style)
    header_width = len(format_month_header(grid.start_date, grid.columns))
    return max(panel_width, header_width)


def render_calendar(grid: CalendarGrid, style: CalendarStyle | None = None) -> Group:
    """
    Render the month header and the framed grid.

    The panel is sized to the grid, not to the console, so every week
    column is always drawn.

    Args:
        grid: Aggregated calendar counts
        style: Palette and frame settings (defaults to CalendarStyle())

    Returns:
        Renderable for a rich Console
    """
    if style is None:
        style = CalendarStyle()

    panel = Panel(
        build_calendar_body(grid, style),
        box=style.box,
        border_style=style.border_style,
        style=style.panel_style,
        padding=style.padding,
        width=_panel_width(grid, style),
    )
    header = Text(format_month_header(grid.start_date, grid.columns), no_wrap=True)
    return Group(header, panel)


def display_calendar(
    grid: CalendarGrid,
    style: CalendarStyle | None = None,
    console: Console | None = None,
) -> None:
    """
    Print the calendar to the console.

    Narrow consoles (including piped output, which rich treats as 80
    columns) are widened for the duration of the print.
    """
    if style is None:
        style = CalendarStyle()
    if console is None:
        console = Console()

    required = calendar_width(grid, style)
    previous_width = console.width
    if previous_width < required:
        console.width = required
    try:
        console.print(render_calendar(grid, style), crop=False)
    finally:
        console.width = previous_width


def display_summary(
    grid: CalendarGrid, streak_info: dict, console: Console | None = None
) -> None:
    """
    Print contribution totals and streaks below the calendar.

    The total covers the calendar window, which stops the day before
    grid.end_date; the current streak may include grid.end_date itself.

    Args:
        grid: Aggregated calendar counts
        streak_info: Dictionary from calculate_streak()
    """
    if console is None:
        console = Console()

    total = grid.total
    plural = "contribution" if total == 1 else "contributions"
    console.print(
        f"{total} {plural} in the year before {grid.end_date.isoformat()}"
    )

    current = streak_info["current_streak"]
    longest = streak_info["longest_streak"]
    current_word = "day" if current == 1 else "days"
    longest_word = "day" if longest == 1 else "days"
    console.print(
        f"Current streak: {current} {current_word}  Longest streak: {longest} {longest_word}"
    )
