"""Dragging and resizing floating windows with the mouse."""

from __future__ import annotations

import copy
from typing import Sequence

from wmcore.window import Window
from wmcore.workspace import Workspace
from wmcore.xyhw import Xyhw

SNAP_DISTANCE = 10
"""How close, in pixels, a window edge must be to a workspace edge to snap."""


def move_window(
    window: Window,
    workspaces: Sequence[Workspace],
    offset_x: int,
    offset_y: int,
    disable_snap: bool,
) -> bool:
    """Move ``window`` by the offsets from where the drag started.

    Returns True if the window snapped into a workspace, so that the
    stacking order needs to be recomputed.
    """
    offset = copy.copy(window.floating_offsets) if window.floating_offsets else Xyhw()
    start = window.start_loc or Xyhw()
    offset.x = start.x + offset_x
    offset.y = start.y + offset_y
    window.set_floating_offsets(offset)
    if disable_snap:
        return False
    return _snap_to_workspace(window, workspaces)


def resize_window(window: Window, offset_w: int, offset_h: int) -> None:
    """Float ``window`` and grow it by the offsets from its size when the drag started."""
    window.set_floating(True)
    offset = copy.copy(window.floating_offsets) if window.floating_offsets else Xyhw()
    start = window.start_loc or Xyhw()
    offset.w = start.w + offset_w
    offset.h = start.h + offset_h
    window.set_floating_offsets(offset)


def _snap_to_workspace(window: Window, workspaces: Sequence[Workspace]) -> bool:
    loc = window.calculated_xyhw()
    x, y = loc.center()
    workspace = next((ws for ws in workspaces if ws.contains_point(x, y)), None)
    if workspace is None:
        return False
    return _should_snap(window, workspace, loc)


def _should_snap(window: Window, workspace: Workspace, loc: Xyhw) -> bool:
    """Snap when a window edge lies close to the matching workspace edge."""
    if window.must_float():
        return False
    win_left = loc.x
    win_right = win_left + window.width()
    win_top = loc.y
    win_bottom = win_top + window.height()
    ws_left = workspace.x()
    ws_right = ws_left + workspace.width()
    ws_top = workspace.y()
    ws_bottom = ws_top + workspace.height()
    distances = (
        win_top - ws_top,
        win_bottom - ws_bottom,
        win_left - ws_left,
        win_right - ws_right,
    )
    if any(abs(d) < SNAP_DISTANCE for d in distances):
        return window.snap_to_workspace(workspace)
    return False