"""Shared helpers: keys, a cell table model, colour names and text helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from podtui.style import Color

ID_LENGTH = 12
"""Maximum number of characters of an identifier shown in a table."""

DIALOG_PADDING = 3
DIALOG_FORM_HEIGHT = 3


class Key(Enum):
    """Keyboard keys the dialogs react to."""

    ESC = auto()
    ENTER = auto()
    TAB = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PGUP = auto()
    PGDN = auto()
    CTRL_V = auto()


class Align(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


@dataclass
class TableCell:
    """One cell of a table."""

    text: str = ""
    align: Align = Align.LEFT
    expansion: int = 0
    selectable: bool = True
    max_width: int = 0
    text_color: Color | None = None
    background_color: Color | None = None


class Table:
    """A grid of cells with a single selected position."""

    def __init__(self, fixed_rows: int = 0, title: str = "") -> None:
        self._rows: list[list[TableCell | None]] = []
        self.fixed_rows = fixed_rows
        self.title = title
        self.selection: tuple[int, int] = (0, 0)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self._rows), default=0)

    def set_cell(self, row: int, column: int, cell: TableCell) -> None:
        if row < 0 or column < 0:
            raise IndexError(f"invalid cell position ({row}, {column})")
        while len(self._rows) <= row:
            self._rows.append([])
        cells = self._rows[row]
        while len(cells) <= column:
            cells.append(None)
        cells[column] = cell

    def get_cell(self, row: int, column: int) -> TableCell:
        """Return the cell at a position, or a fresh empty cell if there is none."""
        if 0 <= row < len(self._rows) and 0 <= column < len(self._rows[row]):
            cell = self._rows[row][column]
            if cell is not None:
                return cell
        return TableCell()

    def clear(self) -> None:
        self._rows = []

    def select(self, row: int, column: int) -> None:
        self.selection = (row, column)


def get_color_name(color) -> str:
    """Return the markup name of a colour, or an empty string for an unknown one."""
    try:
        return Color(color).value
    except ValueError:
        return ""


def align_string_list_width(items) -> tuple[list[str], int]:
    """Pad every string to the longest one; return the padded list and that width."""
    items = list(items)
    width = max((len(item) for item in items), default=0)
    return [item.ljust(width) for item in items], width


def parse_key_values(text: str) -> dict[str, str]:
    """Parse space separated ``key=value`` pairs, ignoring malformed ones."""
    result: dict[str, str] = {}
    for item in text.split(" "):
        if not item:
            continue
        parts = item.split("=")
        if len(parts) == 2 and parts[0] and parts[1]:
            result[parts[0]] = parts[1]
    return result