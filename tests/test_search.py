import pytest

from podtui.search import (
    OFFICIAL_MARK,
    SEARCH_FIELD_MAX_SIZE,
    ImageSearchDialog,
    SearchFocus,
)
from podtui.utils import DIALOG_FORM_HEIGHT, Key

ROWS = [
    ["docker.io", "docker.io/library/alpine", "A minimal image", "100", "[OK]", ""],
    ["quay.io", "quay.io/example/tool", "A tool", "3", "", "[OK]"],
]
ALPINE = "docker.io/library/alpine"
TOOL = "quay.io/example/tool"


@pytest.fixture
def dialog():
    return ImageSearchDialog()


def _press(dialog, *keys):
    for key in keys:
        dialog.handle_key(key)


def test_header_row(dialog):
    table = dialog.result_table
    assert table.row_count == 1
    assert table.get_cell(0, 1).text.endswith("NAME")
    assert table.get_cell(0, 5).text.endswith("AUTOMATED")
    assert not table.get_cell(0, 0).selectable


@pytest.mark.parametrize(
    "row, column, expected",
    [(1, 4, OFFICIAL_MARK), (1, 5, ""), (2, 5, OFFICIAL_MARK), (2, 1, TOOL)],
)
def test_update_results_cells(dialog, row, column, expected):
    dialog.update_results(ROWS)
    assert dialog.result_table.row_count == 3
    assert dialog.result_table.get_cell(row, column).text == expected
    assert dialog.result_table.selection == (1, 1)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ((), ALPINE),
        ((Key.DOWN,), TOOL),
        ((Key.DOWN, Key.DOWN), TOOL),
        ((Key.DOWN, Key.DOWN, Key.UP, Key.UP), ALPINE),
    ],
)
def test_selected_item(dialog, keys, expected):
    dialog.update_results(ROWS)
    dialog.focus = SearchFocus.SEARCH_RESULT
    _press(dialog, *keys)
    assert dialog.selected_item() == expected


def test_selected_item_empty(dialog):
    assert dialog.selected_item() == ""


def test_hide_resets_state(dialog):
    dialog.display()
    dialog.search_text = "alpine"
    dialog.update_results(ROWS)
    dialog.focus = SearchFocus.FORM
    dialog.hide()
    assert (dialog.displayed, dialog.search_text, dialog.results) == (False, "", [])
    assert dialog.focus is SearchFocus.INPUT
    assert dialog.result_table.row_count == 1


def test_display(dialog):
    dialog.display()
    assert dialog.displayed is True


def test_tab_cycle(dialog):
    seen = [dialog.focus]
    for _ in range(5):
        dialog.handle_key(Key.TAB)
        seen.append(dialog.focus)
    assert seen == [
        SearchFocus.INPUT,
        SearchFocus.SEARCH_BUTTON,
        SearchFocus.SEARCH_RESULT,
        SearchFocus.FORM,
        SearchFocus.FORM,
        SearchFocus.INPUT,
    ]


def test_down_from_input_goes_to_results(dialog):
    dialog.handle_key(Key.DOWN)
    assert dialog.focus is SearchFocus.SEARCH_RESULT


@pytest.mark.parametrize(
    "focus, keys, expected",
    [
        (SearchFocus.INPUT, (Key.ENTER,), ["search"]),
        (SearchFocus.SEARCH_BUTTON, (Key.ENTER,), ["search"]),
        (SearchFocus.SEARCH_RESULT, (Key.ENTER,), ["pull"]),
        (SearchFocus.FORM, (Key.ENTER,), ["cancel"]),
        (SearchFocus.FORM, (Key.TAB, Key.ENTER), ["pull"]),
        (SearchFocus.INPUT, (Key.ESC,), ["cancel"]),
    ],
)
def test_keys_trigger_handlers(dialog, focus, keys, expected):
    calls = []
    for name in ("search", "pull", "cancel"):
        setter = getattr(dialog, f"set_{name}_func")
        setter(lambda name=name: calls.append(name))
    dialog.focus = focus
    _press(dialog, *keys)
    assert calls == expected


@pytest.mark.parametrize("setter", ["set_search_func", "set_pull_func", "set_cancel_func"])
def test_setters_chain(dialog, setter):
    assert getattr(dialog, setter)(lambda: None) is dialog


def test_set_rect_caps_input_width(dialog):
    dialog.set_rect(0, 0, 400, 50)
    assert dialog.input_width == SEARCH_FIELD_MAX_SIZE
    x, y, width, height = dialog.rect
    assert x > 0 and y > 0
    assert width < 400 and height < 50
    assert dialog.result_height == height - DIALOG_FORM_HEIGHT - 5


def test_set_rect_small_width(dialog):
    dialog.set_rect(0, 0, 60, 30)
    _, _, width, _ = dialog.rect
    assert dialog.input_width < SEARCH_FIELD_MAX_SIZE
    assert dialog.input_width + 13 + 10 + 5 == width