"""The information bar at the top of the screen."""

from __future__ import annotations

from podtui.style import STYLES
from podtui.utils import Table, TableCell, get_color_name

INFO_BAR_VIEW_HEIGHT = 5

_CONNECTION_ROW = 0
_HOSTNAME_ROW = 1
_OS_ROW = 2
_MEM_ROW = 3
_SWAP_ROW = 4

CONN_OK = "\u2705"
CONN_ERR = "\u274C"

PRG_CELL = "▉"
PRG_WIDTH = 20
PRG_WARN = 13
PRG_CRIT = 17


def bar_color(index: int) -> str:
    """Return the coloured markup of one filled progress bar cell."""
    bar = STYLES.info_bar.progress_bar
    if index < PRG_WARN:
        color = bar.bar_ok_color
    elif index < PRG_CRIT:
        color = bar.bar_warn_color
    else:
        color = bar.bar_crit_color
    empty = get_color_name(bar.bar_empty_color)
    return f"[{get_color_name(color)}::]{PRG_CELL}[{empty}::]"


def progress_usage_string(percentage: float) -> str:
    """Render a usage percentage as a coloured bar followed by the number."""
    filled = int(int(percentage) * PRG_WIDTH / 100)
    cells = "".join(bar_color(i) if i < filled else PRG_CELL for i in range(PRG_WIDTH))
    return cells + f"{percentage:6.2f}%"


class InfoBar:
    """Connection, host and podman version summary."""

    def __init__(self) -> None:
        self.title = "infobar"
        self.connected = False
        self.table = Table()
        header = get_color_name(STYLES.info_bar.item_fg_color)

        def label(text: str) -> TableCell:
            return TableCell(f"[{header}::]{text}")

        left = ["connection:", "Hostname:", "OS type:", "Memory usage:", "Swap usage:"]
        right = [
            "Kernel version:",
            "API version:",
            "OCI runtime:",
            "Conmon version:",
            "Buildah version:",
        ]
        for row, (left_label, right_label) in enumerate(zip(left, right)):
            self.table.set_cell(row, 0, TableCell())
            self.table.set_cell(row, 1, label(left_label))
            self.table.set_cell(row, 2, TableCell())
            self.table.set_cell(row, 3, TableCell())
            self.table.set_cell(row, 4, label(right_label))
            self.table.set_cell(row, 5, TableCell())
        self.table.get_cell(_MEM_ROW, 2).text = progress_usage_string(0.0)
        self.table.get_cell(_SWAP_ROW, 2).text = progress_usage_string(0.0)

    def update_podman_info(self, api_version, oci_runtime, conmon_version, buildah_version) -> None:
        self.table.get_cell(_HOSTNAME_ROW, 5).text = api_version
        self.table.get_cell(_OS_ROW, 5).text = oci_runtime
        self.table.get_cell(_MEM_ROW, 5).text = conmon_version
        self.table.get_cell(_SWAP_ROW, 5).text = buildah_version

    def update_basic_info(self, hostname, kernel, ostype) -> None:
        self.table.get_cell(_HOSTNAME_ROW, 2).text = hostname
        self.table.get_cell(_OS_ROW, 2).text = ostype
        self.table.get_cell(_CONNECTION_ROW, 5).text = kernel

    def update_system_usage_info(self, mem_usage, swap_usage) -> None:
        self.table.get_cell(_MEM_ROW, 2).text = progress_usage_string(mem_usage)
        self.table.get_cell(_SWAP_ROW, 2).text = progress_usage_string(swap_usage)

    def update_conn_status(self, status) -> None:
        self.connected = bool(status)
        text = f"{CONN_OK} STATUS_OK" if self.connected else f"{CONN_ERR} STATUS_ERR"
        self.table.get_cell(_CONNECTION_ROW, 2).text = text