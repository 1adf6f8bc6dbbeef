"""Dialog for entering the settings of a new network."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from podtui.utils import Key, align_string_list_width, parse_key_values

NETWORK_CREATE_DIALOG_MAX_WIDTH = 80
NETWORK_CREATE_DIALOG_HEIGHT = 19

DEFAULT_NETWORK_DRIVER = "bridge"

CATEGORY_LABELS = ("Basic Information", "IP Settings")
BASIC_INFO_PAGE_INDEX = 0
IP_SETTINGS_PAGE_INDEX = 1

_CANCEL_BUTTON = 0
_CREATE_BUTTON = 1


class NetworkFocus(Enum):
    """The element of the network create dialog that receives key presses."""

    FORM = 0
    CATEGORIES = 1
    CATEGORY_PAGES = 2
    NAME = 3
    LABELS = 4
    INTERNAL = 5
    MACVLAN = 6
    DRIVER = 7
    DRIVER_OPTIONS = 8
    IPV6 = 9
    GATEWAY = 10
    IP_RANGE = 11
    SUBNET = 12
    DISABLE_DNS = 13


_PAGE_FIELDS = {
    BASIC_INFO_PAGE_INDEX: (
        NetworkFocus.NAME,
        NetworkFocus.LABELS,
        NetworkFocus.INTERNAL,
        NetworkFocus.MACVLAN,
        NetworkFocus.DRIVER,
        NetworkFocus.DRIVER_OPTIONS,
    ),
    IP_SETTINGS_PAGE_INDEX: (
        NetworkFocus.IPV6,
        NetworkFocus.GATEWAY,
        NetworkFocus.IP_RANGE,
        NetworkFocus.SUBNET,
        NetworkFocus.DISABLE_DNS,
    ),
}

_CHECKBOXES = {
    NetworkFocus.INTERNAL: "internal",
    NetworkFocus.IPV6: "ipv6",
    NetworkFocus.DISABLE_DNS: "disable_dns",
}


@dataclass
class NetworkCreateOptions:
    """Settings for a new network."""

    name: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    internal: bool = False
    macvlan: str = ""
    drivers: str = ""
    drivers_options: dict[str, str] = field(default_factory=dict)
    ipv6: bool = False
    subnet: str = ""
    ip_range: str = ""
    disable_dns: bool = False


class NetworkCreateDialog:
    """Two category pages of network settings with Cancel/Create buttons."""

    def __init__(self) -> None:
        self.title = "PODMAN NETWORK CREATE"
        self.category_labels = list(CATEGORY_LABELS)
        self.displayed = False
        self.active_page_index = 0
        self.focus = NetworkFocus.FORM
        self.form_button = _CANCEL_BUTTON
        self.rect = (0, 0, 0, 0)
        self.name = ""
        self.labels = ""
        self.internal = False
        self.macvlan = ""
        self.drivers = ""
        self.driver_options = ""
        self.ipv6 = False
        self.gateway = ""
        self.ip_range = ""
        self.subnet = ""
        self.disable_dns = False
        self._cancel_handler: Callable[[], None] | None = None
        self._create_handler: Callable[[], None] | None = None
        self._categories_text = ""
        self.set_active_category(0)

    def display(self) -> None:
        """Show the dialog with fresh default values."""
        self.displayed = True
        self._init_data()
        self.focus = NetworkFocus.CATEGORY_PAGES

    def hide(self) -> None:
        self.displayed = False

    def set_cancel_func(self, handler) -> "NetworkCreateDialog":
        self._cancel_handler = handler
        return self

    def set_create_func(self, handler) -> "NetworkCreateDialog":
        self._create_handler = handler
        return self

    def set_active_category(self, index) -> None:
        """Switch to the category page at ``index`` and redraw the category list."""
        if not 0 <= index < len(self.category_labels):
            raise IndexError(f"invalid category index {index}")
        self.active_page_index = index
        aligned, _ = align_string_list_width(self.category_labels)
        lines = [
            f"[white:blue:b]-> {label} " if i == index else f"[-:-:-]   {label} "
            for i, label in enumerate(aligned)
        ]
        self._categories_text = "\n".join(lines)

    def next_category(self) -> None:
        self.set_active_category((self.active_page_index + 1) % len(self.category_labels))

    def previous_category(self) -> None:
        self.set_active_category((self.active_page_index - 1) % len(self.category_labels))

    def categories_text(self) -> str:
        """Markup text of the category list, with the active one highlighted."""
        return self._categories_text

    @property
    def active_page(self) -> str:
        return self.category_labels[self.active_page_index]

    @property
    def focused(self) -> NetworkFocus:
        """The element that actually holds the focus."""
        if self.focus is NetworkFocus.CATEGORY_PAGES:
            return _PAGE_FIELDS[self.active_page_index][0]
        return self.focus

    def _init_data(self) -> None:
        self.set_active_category(0)
        self.name = ""
        self.labels = ""
        self.internal = False
        self.macvlan = ""
        self.drivers = DEFAULT_NETWORK_DRIVER
        self.driver_options = ""
        self.ipv6 = False
        self.gateway = ""
        self.ip_range = ""
        self.subnet = ""
        self.disable_dns = False

    def create_options(self) -> NetworkCreateOptions:
        """Collect the entered values into network create options."""
        # driver options are read from the labels field, as the form always did
        return NetworkCreateOptions(
            name=self.name,
            labels=parse_key_values(self.labels),
            internal=self.internal,
            macvlan=self.macvlan,
            drivers=self.drivers,
            drivers_options=parse_key_values(self.labels),
            ipv6=self.ipv6,
            subnet=self.subnet,
            ip_range=self.ip_range,
            disable_dns=self.disable_dns,
        )

    def set_rect(self, x, y, width, height) -> None:
        if width > NETWORK_CREATE_DIALOG_MAX_WIDTH:
            x += (width - NETWORK_CREATE_DIALOG_MAX_WIDTH) // 2
            width = NETWORK_CREATE_DIALOG_MAX_WIDTH
        if height > NETWORK_CREATE_DIALOG_HEIGHT:
            y += (height - NETWORK_CREATE_DIALOG_HEIGHT) // 2
            height = NETWORK_CREATE_DIALOG_HEIGHT
        self.rect = (x, y, width, height)

    @staticmethod
    def _call(handler: Callable[[], None] | None) -> None:
        if handler is not None:
            handler()

    def _next_page_focus(self, current: NetworkFocus) -> NetworkFocus:
        fields = _PAGE_FIELDS[self.active_page_index]
        position = fields.index(current)
        if position + 1 < len(fields):
            return fields[position + 1]
        return NetworkFocus.FORM

    def handle_key(self, key) -> None:
        """React to a key press while the dialog has focus."""
        if key is Key.ESC:
            self._call(self._cancel_handler)
            return
        current = self.focused
        if current is NetworkFocus.FORM:
            self._handle_form_key(key)
        elif current is NetworkFocus.CATEGORIES:
            if key is Key.TAB:
                self.focus = NetworkFocus.CATEGORY_PAGES
            elif key is Key.DOWN:
                self.next_category()
            elif key is Key.UP:
                self.previous_category()
        elif key is Key.TAB:
            self.focus = self._next_page_focus(current)
        elif key is Key.ENTER and current in _CHECKBOXES:
            attribute = _CHECKBOXES[current]
            setattr(self, attribute, not getattr(self, attribute))

    def _handle_form_key(self, key) -> None:
        if self.form_button == _CANCEL_BUTTON:
            if key is Key.TAB:
                self.form_button = _CREATE_BUTTON
            elif key is Key.ENTER:
                self._call(self._cancel_handler)
        else:
            if key is Key.TAB:
                self.focus = NetworkFocus.CATEGORIES
                self.form_button = _CANCEL_BUTTON
            elif key is Key.ENTER:
                self._call(self._create_handler)