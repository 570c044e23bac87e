# wmcore

Models for the bookkeeping of a tiling window manager: rectangles with
size limits, windows with their floating offsets and margins, workspaces
with gutters and dock avoidance, tags, scratchpads, focus history, and the
status snapshot that a bar reads.

The package has no runtime dependencies and talks to no display server.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `wmcore.xyhw`: `Xyhw`, a rectangle (`x`, `y`, `h`, `w`) with
  `minw`/`maxw`/`minh`/`maxh` limits. Setting a size or a limit clamps the
  width and height into the limits. It supports `+` and `-`,
  `contains_point`, `contains_xyhw`, `volume`, `without` (trims another
  rectangle, such as a dock strut, out of this one), `center`,
  `center_halfed`, `center_relative` and `clear_minmax`.
- `wmcore.primitives`: `WindowHandle` (`WindowHandle.mock(n)` or
  `WindowHandle.xlib(id)`), `Size` (`Size.pixel` or `Size.ratio`, with
  `into_absolute`), `Margins` (`uniform`, `from_pair`, `from_triple`),
  `Side`, `Gutter`, `WindowState`, `WindowType`, `Mode` with `ModeKind`,
  and `LayoutMode`.
- `wmcore.window`: `Window`, with its tag, type, states, border, margins
  and floating offsets. `x()`, `y()`, `width()`, `height()` and
  `calculated_xyhw()` give the geometry to draw; `exact_xyhw()` the raw
  area; `snap_to_workspace()` tiles a window onto a workspace.
- `wmcore.xyhw_change`: `XyhwChange`, optional new values for an `Xyhw`,
  applied with `update`, `update_window_floating` or `update_window_strut`.
- `wmcore.window_change`: `WindowChange`, a batch of property changes for
  one window. `update(window, container)` applies them and returns whether
  anything changed; a floating change is centred in `container` when one
  is given. `transient` and `name` use the marker `UNCHANGED` since `None`
  is a valid new value for them.
- `wmcore.screen`: `BBox` and `Screen`, with `contains_point` and
  `contains_dock_area`.
- `wmcore.dock_area`: `DockArea`, built from the twelve strut values with
  `DockArea.from_values`, and turned into a rectangle on a screen with
  `as_xyhw`.
- `wmcore.workspace`: `Workspace`, which shows one tag. Its `x()`, `y()`,
  `width()` and `height()` give the usable area after docks (`avoid`,
  applied by `update_avoided_areas`), margins and gutters.
  `select_gutters` picks one gutter per side, preferring gutters bound to
  the workspace's id.
- `wmcore.scratchpad`: `ScratchPad`, whose `xyhw` places it on a
  workspace; missing or out-of-range sizes fall back to a quarter of the
  workspace for the position and half of it for the size.
- `wmcore.focus_manager`: `FocusBehaviour` and `FocusManager`, which keeps
  workspace, window and tag focus histories.
- `wmcore.tag`: `Tag` and `Tags`. Normal tags are numbered 1, 2, 3, ...;
  hidden tags count down from `MAX_TAG_ID` and must have unique labels.
- `wmcore.dto`: `Viewport`, `ManagerState`, `TagsForWorkspace`,
  `DisplayWorkspace` and `DisplayState`. `DisplayState.from_manager_state`
  expands a summary into per-workspace tag status for a bar.
- `wmcore.moves`: `move_window` drags a window by an offset from its start
  location and snaps it onto a workspace when an edge comes within
  `SNAP_DISTANCE` pixels of the workspace's edge; `resize_window` floats a
  window and resizes it by an offset.

## Example

```python
from wmcore.primitives import WindowHandle
from wmcore.scratchpad import ScratchPad
from wmcore.screen import BBox
from wmcore.tag import Tags
from wmcore.window import Window
from wmcore.workspace import Workspace
from wmcore.xyhw import Xyhw

tags = Tags()
home = tags.add_new("home")
tags.add_new_hidden("NSP")

ws = Workspace(BBox(x=0, y=0, width=1920, height=1080), 1)
ws.show_tag(home)

win = Window(WindowHandle.mock(1))
win.tag_with(home)
assert ws.is_displaying(win)

area = Xyhw(y=5, h=1000, w=1000)
strut = Xyhw(h=10, w=100)
assert area.without(strut) == Xyhw(x=0, y=10, h=995, w=1000)

pad = ScratchPad(name="term", value="xterm")
assert pad.xyhw(Xyhw(w=1000, h=800)) == Xyhw(x=250, y=200, h=400, w=500)
```

## What it does not do

- It does not connect to an X server or any other display server, and it
  handles no events; you feed it changes from your own event loop.
- It has no layout engine: `LayoutMode` is only the setting, and nothing
  here arranges tiled windows into layouts.
- It does not read configuration files, start programs, or save and
  restore state between runs.
- It provides no command-line tool.