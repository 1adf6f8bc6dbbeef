"""Dialog showing podman disk usage per object type."""

from __future__ import annotations

from typing import Callable

from podtui.history import fill_header, scroll_table
from podtui.style import STYLES
from podtui.utils import DIALOG_FORM_HEIGHT, DIALOG_PADDING, Key, Table, TableCell

DF_DIALOG_MAX_WIDTH = 60
_TABLE_HEIGHT = 4
_SUMMARY_FIELDS = ("type", "total", "active", "size", "reclaimable")


class DfDialog:
    """Table of disk usage summaries with a single button."""

    def __init__(self) -> None:
        self.title = ""
        self.table_headers = list(_SUMMARY_FIELDS)
        self.table = Table()
        self.displayed = False
        self.rect = (0, 0, 0, 0)
        self._done_handler: Callable[[], None] | None = None
        fill_header(
            self.table,
            [name.upper() for name in self.table_headers],
            STYLES.command_dialog.header_row,
            expansion=1,
        )

    def set_title(self, title) -> None:
        self.title = title.upper()

    def display(self) -> None:
        self.displayed = True

    def hide(self) -> None:
        self.displayed = False

    def set_done_func(self, handler) -> "DfDialog":
        self._done_handler = handler
        return self

    def update_disk_summary(self, summaries) -> None:
        """Write one row per summary; each summary has the attributes
        type, total, active, size and reclaimable."""
        for row, summary in enumerate(summaries, start=1):
            for column, field in enumerate(_SUMMARY_FIELDS):
                self.table.set_cell(
                    row, column, TableCell(str(getattr(summary, field)), expansion=1)
                )

    def set_rect(self, x, y, width, height) -> None:
        d_x = x + DIALOG_PADDING
        d_y = y
        d_width = width - 2 * DIALOG_PADDING
        if d_width > DF_DIALOG_MAX_WIDTH:
            d_width = DF_DIALOG_MAX_WIDTH
            d_x = x + (width - d_width) // 2
        d_height = DIALOG_FORM_HEIGHT + _TABLE_HEIGHT + 2
        if height > d_height:
            d_y = y + (height - d_height) // 2
            height = d_height
        self.rect = (d_x, d_y, d_width, height)

    def handle_key(self, key) -> None:
        """React to a key press while the dialog has focus."""
        if key in (Key.ESC, Key.ENTER):
            if self._done_handler is not None:
                self._done_handler()
            return
        scroll_table(self.table, key, _TABLE_HEIGHT - 1)