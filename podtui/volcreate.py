"""Dialog for entering the settings of a new volume."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from podtui.utils import Key, parse_key_values

VOLUME_CREATE_DIALOG_MAX_WIDTH = 60
VOLUME_CREATE_DIALOG_HEIGHT = 13

_CANCEL_BUTTON = 0
_CREATE_BUTTON = 1


class VolumeFocus(Enum):
    """The element of the volume create dialog that receives key presses."""

    FORM = 0
    NAME = 1
    LABELS = 2
    DRIVER = 3
    DRIVER_OPTIONS = 4


_NEXT_FOCUS = {
    VolumeFocus.NAME: VolumeFocus.LABELS,
    VolumeFocus.LABELS: VolumeFocus.DRIVER,
    VolumeFocus.DRIVER: VolumeFocus.DRIVER_OPTIONS,
    VolumeFocus.DRIVER_OPTIONS: VolumeFocus.FORM,
}


@dataclass
class VolumeCreateOptions:
    """Settings for a new volume."""

    name: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    driver: str = ""
    driver_options: dict[str, str] = field(default_factory=dict)


class VolumeCreateDialog:
    """Name, labels, driver and driver options fields with Cancel/Create buttons."""

    def __init__(self) -> None:
        self.title = "PODMAN VOLUME CREATE"
        self.displayed = False
        self.focus = VolumeFocus.FORM
        self.form_button = _CANCEL_BUTTON
        self.rect = (0, 0, 0, 0)
        self.name = ""
        self.labels = ""
        self.driver = ""
        self.driver_options = ""
        self._cancel_handler: Callable[[], None] | None = None
        self._create_handler: Callable[[], None] | None = None

    def display(self) -> None:
        """Show the dialog with empty fields and the name field focused."""
        self.displayed = True
        self.focus = VolumeFocus.NAME
        self._init_data()

    def hide(self) -> None:
        self.displayed = False

    def set_cancel_func(self, handler) -> "VolumeCreateDialog":
        self._cancel_handler = handler
        return self

    def set_create_func(self, handler) -> "VolumeCreateDialog":
        self._create_handler = handler
        return self

    def _init_data(self) -> None:
        self.name = ""
        self.labels = ""
        self.driver = ""
        self.driver_options = ""

    def next_focus(self) -> None:
        """Move the focus to the next input field, ending at the buttons."""
        self.focus = _NEXT_FOCUS.get(self.focus, self.focus)

    def create_options(self) -> VolumeCreateOptions:
        """Collect the entered values into volume create options."""
        return VolumeCreateOptions(
            name=self.name,
            labels=parse_key_values(self.labels),
            driver=self.driver,
            driver_options=parse_key_values(self.driver_options),
        )

    def set_rect(self, x, y, width, height) -> None:
        if width > VOLUME_CREATE_DIALOG_MAX_WIDTH:
            x += (width - VOLUME_CREATE_DIALOG_MAX_WIDTH) // 2
            width = VOLUME_CREATE_DIALOG_MAX_WIDTH
        if height > VOLUME_CREATE_DIALOG_HEIGHT:
            y += (height - VOLUME_CREATE_DIALOG_HEIGHT) // 2
            height = VOLUME_CREATE_DIALOG_HEIGHT
        self.rect = (x, y, width, height)

    @staticmethod
    def _call(handler: Callable[[], None] | None) -> None:
        if handler is not None:
            handler()

    def handle_key(self, key) -> None:
        """React to a key press while the dialog has focus."""
        if key is Key.ESC:
            self._call(self._cancel_handler)
            return
        if self.focus is VolumeFocus.FORM:
            self._handle_form_key(key)
        elif key is Key.TAB:
            self.next_focus()

    def _handle_form_key(self, key) -> None:
        if self.form_button == _CANCEL_BUTTON:
            if key is Key.TAB:
                self.form_button = _CREATE_BUTTON
            elif key is Key.ENTER:
                self._call(self._cancel_handler)
        else:
            if key is Key.TAB:
                self.focus = VolumeFocus.NAME
                self.form_button = _CANCEL_BUTTON
            elif key is Key.ENTER:
                self._call(self._create_handler)