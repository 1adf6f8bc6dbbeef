"""Colours and the default visual theme of the interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Named terminal colours; the value is the colour's markup name."""

    BLACK = "black"
    WHITE = "white"
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    NAVY = "navy"
    STEEL_BLUE = "steelblue"
    LIGHT_CYAN = "lightcyan"
    LIGHT_SKY_BLUE = "lightskyblue"


_style = dataclass(frozen=True)


@_style
class _ColorPair:
    fg_color: Color
    bg_color: Color


class HeaderRow(_ColorPair):
    """Colours of a table's header row."""


class MenuItemStyle(_ColorPair):
    """Colours of a menu entry."""


class ConfirmDialogStyle(_ColorPair):
    """Colours of the confirmation dialog."""


@_style
class _WithHeader(_ColorPair):
    header_row: HeaderRow


class PageTableStyle(_WithHeader):
    """Colours of a page's main table."""


class CommandDialogStyle(_WithHeader):
    """Colours of the command dialog."""


class ImageHistoryDialogStyle(_WithHeader):
    """Colours of the image history dialog."""


@_style
class MenuStyle(_ColorPair):
    item: MenuItemStyle


@_style
class ImageSearchDialogStyle(_ColorPair):
    result_header_row: HeaderRow
    result_table_bg_color: Color
    result_table_border_color: Color


@_style
class ProgressBarStyle:
    fg_color: Color
    bar_ok_color: Color
    bar_warn_color: Color
    bar_crit_color: Color
    bar_empty_color: Color


@_style
class InfoBarStyle:
    item_fg_color: Color
    value_fg_color: Color
    progress_bar: ProgressBarStyle


@_style
class Theme:
    info_bar: InfoBarStyle
    menu: MenuStyle
    page_table: PageTableStyle
    command_dialog: CommandDialogStyle
    confirm_dialog: ConfirmDialogStyle
    image_search_dialog: ImageSearchDialogStyle
    image_history_dialog: ImageHistoryDialogStyle


_NAVY_HEADER = HeaderRow(fg_color=Color.WHITE, bg_color=Color.NAVY)

STYLES = Theme(
    page_table=PageTableStyle(
        fg_color=Color.LIGHT_CYAN,
        bg_color=Color.STEEL_BLUE,
        header_row=HeaderRow(fg_color=Color.WHITE, bg_color=Color.STEEL_BLUE),
    ),
    info_bar=InfoBarStyle(
        item_fg_color=Color.LIGHT_SKY_BLUE,
        value_fg_color=Color.WHITE,
        progress_bar=ProgressBarStyle(
            fg_color=Color.WHITE,
            bar_empty_color=Color.WHITE,
            bar_ok_color=Color.GREEN,
            bar_warn_color=Color.ORANGE,
            bar_crit_color=Color.RED,
        ),
    ),
    menu=MenuStyle(
        fg_color=Color.WHITE,
        bg_color=Color.BLACK,
        item=MenuItemStyle(fg_color=Color.BLACK, bg_color=Color.STEEL_BLUE),
    ),
    command_dialog=CommandDialogStyle(
        bg_color=Color.STEEL_BLUE, fg_color=Color.WHITE, header_row=_NAVY_HEADER
    ),
    confirm_dialog=ConfirmDialogStyle(bg_color=Color.ORANGE, fg_color=Color.BLACK),
    image_search_dialog=ImageSearchDialogStyle(
        bg_color=Color.STEEL_BLUE,
        fg_color=Color.WHITE,
        result_table_bg_color=Color.STEEL_BLUE,
        result_table_border_color=Color.NAVY,
        result_header_row=_NAVY_HEADER,
    ),
    image_history_dialog=ImageHistoryDialogStyle(
        bg_color=Color.STEEL_BLUE, fg_color=Color.BLACK, header_row=_NAVY_HEADER
    ),
)