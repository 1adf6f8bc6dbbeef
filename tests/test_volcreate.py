import pytest

from podtui.utils import Key
from podtui.volcreate import (
    VOLUME_CREATE_DIALOG_HEIGHT,
    VOLUME_CREATE_DIALOG_MAX_WIDTH,
    VolumeCreateDialog,
    VolumeCreateOptions,
    VolumeFocus,
)


@pytest.fixture
def dialog():
    d = VolumeCreateDialog()
    d.display()
    return d


def test_display_resets_fields_and_focus():
    d = VolumeCreateDialog()
    d.name = "vol1"
    d.labels = "a=b"
    d.driver = "local"
    d.driver_options = "o=v"
    d.display()
    assert d.displayed is True
    assert d.focus is VolumeFocus.NAME
    assert (d.name, d.labels, d.driver, d.driver_options) == ("", "", "", "")


def test_hide(dialog):
    dialog.hide()
    assert dialog.displayed is False


def test_next_focus_order(dialog):
    seen = []
    for _ in range(5):
        dialog.next_focus()
        seen.append(dialog.focus)
    assert seen == [
        VolumeFocus.LABELS,
        VolumeFocus.DRIVER,
        VolumeFocus.DRIVER_OPTIONS,
        VolumeFocus.FORM,
        VolumeFocus.FORM,
    ]


def test_tab_key_moves_focus(dialog):
    dialog.handle_key(Key.TAB)
    assert dialog.focus is VolumeFocus.LABELS


def test_create_options_parses_pairs(dialog):
    dialog.name = "data"
    dialog.labels = "a=b  c=d bad =x y= k=v=w"
    dialog.driver = "local"
    dialog.driver_options = "type=tmpfs o=size=1m"
    opts = dialog.create_options()
    assert opts == VolumeCreateOptions(
        name="data",
        labels={"a": "b", "c": "d"},
        driver="local",
        driver_options={"type": "tmpfs"},
    )


def test_create_options_empty(dialog):
    opts = dialog.create_options()
    assert opts.labels == {}
    assert opts.driver_options == {}
    assert opts.name == ""


def test_escape_calls_cancel(dialog):
    calls = []
    dialog.set_cancel_func(lambda: calls.append("cancel"))
    dialog.handle_key(Key.ESC)
    assert calls == ["cancel"]


def test_form_buttons(dialog):
    calls = []
    dialog.set_cancel_func(lambda: calls.append("cancel"))
    dialog.set_create_func(lambda: calls.append("create"))
    for _ in range(4):
        dialog.handle_key(Key.TAB)
    assert dialog.focus is VolumeFocus.FORM
    dialog.handle_key(Key.ENTER)
    assert calls == ["cancel"]
    dialog.handle_key(Key.TAB)
    dialog.handle_key(Key.ENTER)
    assert calls == ["cancel", "create"]
    dialog.handle_key(Key.TAB)
    assert dialog.focus is VolumeFocus.NAME


def test_setters_return_dialog():
    d = VolumeCreateDialog()
    assert d.set_cancel_func(lambda: None) is d
    assert d.set_create_func(lambda: None) is d


def test_set_rect_limits_and_centres(dialog):
    dialog.set_rect(2, 4, 100, 31)
    x, y, width, height = dialog.rect
    assert width == VOLUME_CREATE_DIALOG_MAX_WIDTH
    assert height == VOLUME_CREATE_DIALOG_HEIGHT
    assert x - 2 == (2 + 100) - (x + width)
    assert y - 4 == (4 + 31) - (y + height)


def test_set_rect_small_unchanged(dialog):
    dialog.set_rect(1, 2, 40, 10)
    assert dialog.rect == (1, 2, 40, 10)
    assert VOLUME_CREATE_DIALOG_MAX_WIDTH == 60
    assert VOLUME_CREATE_DIALOG_HEIGHT == 13