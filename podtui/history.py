"""Dialog showing the layer history of an image, and table helpers shared by dialogs."""

from __future__ import annotations

from typing import Callable

from podtui.style import STYLES
from podtui.utils import (
    DIALOG_FORM_HEIGHT,
    DIALOG_PADDING,
    ID_LENGTH,
    Align,
    Key,
    Table,
    TableCell,
    get_color_name,
)

COMMENT_CELL_MAX_WIDTH = 20


def fill_header(table, titles, header, expansion, aligns=None) -> None:
    """Clear the table and write a fixed, unselectable header row."""
    fg_name = get_color_name(header.fg_color)
    aligns = aligns or [Align.LEFT] * len(titles)
    table.clear()
    table.fixed_rows = 1
    for column, (title, align) in enumerate(zip(titles, aligns)):
        table.set_cell(
            0,
            column,
            TableCell(
                f"[{fg_name}::]{title}",
                align=align,
                expansion=expansion,
                selectable=False,
                text_color=header.fg_color,
                background_color=header.bg_color,
            ),
        )


def move_selection(table, delta) -> None:
    """Move the selected row by delta, kept within the data rows."""
    first = table.fixed_rows
    last = table.row_count - 1
    if last < first:
        return
    row, column = table.selection
    table.select(min(max(row + delta, first), last), column)


def scroll_table(table, key, page) -> bool:
    """Move the selection for an arrow or page key; return whether the key was used."""
    steps = {Key.UP: -1, Key.DOWN: 1, Key.PGUP: -page, Key.PGDN: page}
    if key not in steps:
        return False
    move_selection(table, steps[key])
    return True


class ImageHistoryDialog:
    """Table of history entries: id, created, created by, size, comment."""

    def __init__(self) -> None:
        self.title = "PODMAN IMAGE HISTORY"
        self.table_headers = ["id", "created", "create by", "size", "comment"]
        self.table = Table()
        self.results: list[list[str]] = []
        self.displayed = False
        self.rect = (0, 0, 0, 0)
        self.table_height = 1
        self._cancel_handler: Callable[[], None] | None = None
        self._init_table()

    def display(self) -> None:
        self.displayed = True

    def hide(self) -> None:
        self.displayed = False

    def set_cancel_func(self, handler) -> "ImageHistoryDialog":
        self._cancel_handler = handler
        return self

    def _init_table(self) -> None:
        fill_header(
            self.table,
            [name.upper() for name in self.table_headers],
            STYLES.image_history_dialog.header_row,
            expansion=0,
        )

    def update_results(self, data) -> None:
        """Replace the table contents with history rows of five columns."""
        self.results = [list(row) for row in data]
        self._init_table()
        for row_index, (image_id, created, created_by, size, comment) in enumerate(
            self.results, start=1
        ):
            values = [
                image_id[:ID_LENGTH],
                created,
                created_by,
                size,
                comment[:COMMENT_CELL_MAX_WIDTH],
            ]
            for column, value in enumerate(values):
                expansion = 1 if column == 2 else 0
                self.table.set_cell(row_index, column, TableCell(value, expansion=expansion))
        if self.results:
            self.table.select(1, 1)

    def created_by_width(self, width) -> int:
        """Width left for the "created by" column in a table of the given inner width."""
        id_width = created_width = size_width = comment_width = 0
        for row in self.results:
            if id_width < len(row[0]) <= ID_LENGTH:
                id_width = len(row[0])
            created_width = max(created_width, len(row[1]))
            size_width = max(size_width, len(row[3]))
            if comment_width < len(row[4]) < 40:
                comment_width = len(row[4])
        used = id_width + created_width + size_width + comment_width
        return max(width - used * 2 + 8, 0)

    def set_rect(self, x, y, width, height) -> None:
        d_x = x + DIALOG_PADDING
        d_width = width - 2 * DIALOG_PADDING
        d_height = min(len(self.results) + DIALOG_FORM_HEIGHT + 6, height)
        d_y = y + (height - d_height) // 2
        self.rect = (d_x, d_y, d_width, d_height)
        self.table_height = d_height - DIALOG_FORM_HEIGHT - 3
        # the layout border and the table border take two columns each
        max_width = self.created_by_width(d_width - 4) // 2
        for row in range(self.table.row_count):
            cell = self.table.get_cell(row, 2)
            cell.max_width = max_width
            self.table.set_cell(row, 2, cell)

    def handle_key(self, key) -> None:
        """React to a key press while the dialog has focus."""
        if key in (Key.ESC, Key.ENTER):
            if self._cancel_handler is not None:
                self._cancel_handler()
            return
        scroll_table(self.table, key, max(self.table_height - 3, 1))