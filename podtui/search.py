"""Dialog for searching a registry for images and pulling one of them."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from podtui.history import fill_header, scroll_table
from podtui.style import STYLES
from podtui.utils import (
    DIALOG_FORM_HEIGHT,
    DIALOG_PADDING,
    Align,
    Key,
    Table,
    TableCell,
)

SEARCH_FIELD_MAX_SIZE = 60
SEARCH_BUTTON_WIDTH = 10
SEARCH_INPUT_LABEL_WIDTH = 13

OFFICIAL_MARK = "\u2705"

_RESULT_TITLES = ["INDEX", "NAME", "DESCRIPTION", "STARS", "OFFICIAL", "AUTOMATED"]
_RESULT_ALIGNS = [Align.LEFT] * 3 + [Align.CENTER] * 3

_CANCEL_BUTTON = 0
_PULL_BUTTON = 1


class SearchFocus(Enum):
    """The element of the search dialog that receives key presses."""

    INPUT = 1
    SEARCH_BUTTON = 2
    SEARCH_RESULT = 3
    FORM = 4


def _call(handler: Callable[[], None] | None) -> None:
    if handler is not None:
        handler()


class ImageSearchDialog:
    """Search term input, search button, result table and Cancel/Pull buttons."""

    def __init__(self) -> None:
        self.title = "PODMAN IMAGE SEARCH/PULL"
        self.search_text = ""
        self.result_table = Table(title="Search Result")
        self.results: list[list[str]] = []
        self.displayed = False
        self.focus = SearchFocus.INPUT
        self.form_button = _CANCEL_BUTTON
        self.rect = (0, 0, 0, 0)
        self.input_width = SEARCH_FIELD_MAX_SIZE
        self.result_height = 1
        self._cancel_handler: Callable[[], None] | None = None
        self._search_handler: Callable[[], None] | None = None
        self._pull_handler: Callable[[], None] | None = None
        self._init_table()

    def _init_table(self) -> None:
        fill_header(
            self.result_table,
            _RESULT_TITLES,
            STYLES.image_search_dialog.result_header_row,
            expansion=1,
            aligns=_RESULT_ALIGNS,
        )

    def display(self) -> None:
        self.displayed = True

    def hide(self) -> None:
        """Hide the dialog and reset its input, results and focus."""
        self.focus = SearchFocus.INPUT
        self.displayed = False
        self.search_text = ""
        self.results = []
        self._init_table()

    def set_cancel_func(self, handler) -> "ImageSearchDialog":
        self._cancel_handler = handler
        return self

    def set_search_func(self, handler) -> "ImageSearchDialog":
        self._search_handler = handler
        return self

    def set_pull_func(self, handler) -> "ImageSearchDialog":
        self._pull_handler = handler
        return self

    def selected_item(self) -> str:
        """Name of the image in the selected result row, or an empty string."""
        row, _ = self.result_table.selection
        if 1 <= row <= len(self.results):
            return self.results[row - 1][1]
        return ""

    def update_results(self, data) -> None:
        """Replace the result table with rows of index, name, description, stars,
        official and automated."""
        self.results = [list(row) for row in data]
        self._init_table()
        for row_index, row in enumerate(self.results, start=1):
            values = row[:4] + [OFFICIAL_MARK if v == "[OK]" else v for v in row[4:6]]
            for column, (value, align) in enumerate(zip(values, _RESULT_ALIGNS)):
                self.result_table.set_cell(
                    row_index, column, TableCell(value, align=align, expansion=1)
                )
        if self.results:
            self.result_table.select(1, 1)

    def set_rect(self, x, y, width, height) -> None:
        d_x = x + DIALOG_PADDING
        d_y = y + DIALOG_PADDING
        d_width = width - 2 * DIALOG_PADDING
        d_height = height - 2 * DIALOG_PADDING
        input_width = d_width - SEARCH_INPUT_LABEL_WIDTH - SEARCH_BUTTON_WIDTH - 2 - 2 - 1
        self.input_width = min(input_width, SEARCH_FIELD_MAX_SIZE)
        self.result_height = d_height - DIALOG_FORM_HEIGHT - 5
        self.rect = (d_x, d_y, d_width, d_height)

    def handle_key(self, key) -> None:
        """React to a key press while the dialog has focus."""
        if key is Key.ESC:
            _call(self._cancel_handler)
            return
        if self.focus is SearchFocus.INPUT:
            if key is Key.TAB:
                self.focus = SearchFocus.SEARCH_BUTTON
            elif key is Key.DOWN:
                self.focus = SearchFocus.SEARCH_RESULT
            elif key is Key.ENTER:
                _call(self._search_handler)
        elif self.focus is SearchFocus.SEARCH_BUTTON:
            if key is Key.TAB:
                self.focus = SearchFocus.SEARCH_RESULT
            elif key is Key.ENTER:
                _call(self._search_handler)
        elif self.focus is SearchFocus.SEARCH_RESULT:
            if key is Key.TAB:
                self.focus = SearchFocus.FORM
            elif key is Key.ENTER:
                _call(self._pull_handler)
            else:
                scroll_table(self.result_table, key, max(self.result_height - 3, 1))
        elif self.form_button == _CANCEL_BUTTON:
            if key is Key.TAB:
                self.form_button = _PULL_BUTTON
            elif key is Key.ENTER:
                _call(self._cancel_handler)
        elif key is Key.TAB:
            self.focus = SearchFocus.INPUT
            self.form_button = _CANCEL_BUTTON
        elif key is Key.ENTER:
            _call(self._pull_handler)