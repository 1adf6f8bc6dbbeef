# podtui

Screen-independent models for a terminal interface to Podman: the colour
theme, the info bar with its usage bars, and dialogs for image history, image
search and pull, disk usage, network creation and volume creation.

Each dialog keeps its own state (whether it is shown, which element has
focus, what its table holds, its computed rectangle) and reacts to key
presses through `handle_key(key)`, so it can be driven by any terminal
toolkit or tested without a screen.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `podtui.style`: the `Color` enum (its values are markup colour names), the
  frozen style dataclasses (`HeaderRow`, `PageTableStyle`, `InfoBarStyle`,
  `ProgressBarStyle`, `MenuStyle`, `MenuItemStyle`, `CommandDialogStyle`,
  `ConfirmDialogStyle`, `ImageSearchDialogStyle`, `ImageHistoryDialogStyle`)
  and the `Theme` holding them, with the default theme in `STYLES`.
- `podtui.utils`: `Key`, `Align`, `TableCell` and `Table` (a grid of cells
  with one selected position), plus:
  - `get_color_name(color)`: the markup name of a colour, or `""`;
  - `align_string_list_width(items)`: pads strings to the longest and returns
    the padded list and that width;
  - `parse_key_values(text)`: parses space separated `key=value` pairs,
    skipping malformed ones.
- `podtui.infobar`: `InfoBar`, a table of connection status, hostname, OS
  type, memory and swap usage, kernel, API, OCI runtime, conmon and buildah
  versions, updated through `update_basic_info`, `update_podman_info`,
  `update_system_usage_info` and `update_conn_status`. `progress_usage_string`
  renders a percentage as a 20-cell coloured bar followed by the number;
  `bar_color(index)` gives the markup of one filled cell (green, then orange
  from cell 13, red from cell 17).
- `podtui.history`: `ImageHistoryDialog` (id, created, created by, size,
  comment; ids cut to 12 characters and comments to 20), and the table
  helpers `fill_header`, `move_selection` and `scroll_table`.
- `podtui.search`: `ImageSearchDialog`, with focus moving through
  `SearchFocus` (input, search button, results, buttons). `[OK]` in the
  official and automated columns is shown as a check mark; `selected_item()`
  returns the name in the selected result row.
- `podtui.df`: `DfDialog`, one row per summary object that has `type`,
  `total`, `active`, `size` and `reclaimable` attributes.
- `podtui.netcreate`: `NetworkCreateDialog`, with two category pages
  ("Basic Information" and "IP Settings"), focus tracked by `NetworkFocus`,
  and `create_options()` returning `NetworkCreateOptions`. Showing the dialog
  resets the fields and sets the driver to `bridge`. The driver options in
  the result are parsed from the labels field.
- `podtui.volcreate`: `VolumeCreateDialog`, with focus tracked by
  `VolumeFocus` and `create_options()` returning `VolumeCreateOptions`.

## Example

```python
from podtui.utils import Key
from podtui.volcreate import VolumeCreateDialog

dialog = VolumeCreateDialog()
dialog.set_create_func(lambda: print(dialog.create_options()))
dialog.set_cancel_func(dialog.hide)
dialog.display()          # fields cleared, name field focused
dialog.name = "data"
dialog.labels = "env=dev team=ops"
dialog.handle_key(Key.TAB)  # focus moves to the labels field
print(dialog.create_options())
```

## What this package does not do

It draws nothing on a terminal and does not talk to Podman. There is no
command to start, no application screen, and no pages listing images,
networks, volumes or system information; the search, pull, create and prune
actions are only callbacks you pass to the dialogs. Text fields are plain
attributes that your toolkit sets; `handle_key` only moves focus, toggles
check boxes and calls the handlers.