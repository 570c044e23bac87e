"""Tracking of focused workspaces, tags and windows."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, TypeVar

from wmcore.primitives import WindowHandle
from wmcore.window import Window

_W = TypeVar("_W")


class FocusBehaviour(Enum):
    """How focus follows the user: with the mouse, on click, or only by command."""

    SLOPPY = "Sloppy"
    CLICK_TO = "ClickTo"
    DRIVEN = "Driven"

    def is_sloppy(self) -> bool:
        return self is FocusBehaviour.SLOPPY

    def is_clickto(self) -> bool:
        return self is FocusBehaviour.CLICK_TO

    def is_driven(self) -> bool:
        return self is FocusBehaviour.DRIVEN


@dataclass
class FocusManager:
    """Focus histories; the most recent entry of each is at the front."""

    behaviour: FocusBehaviour = FocusBehaviour.SLOPPY
    focus_new_windows: bool = False
    sloppy_mouse_follows_focus: bool = False
    workspace_history: deque[int] = field(default_factory=deque)
    window_history: deque[WindowHandle | None] = field(default_factory=deque)
    tag_history: deque[int] = field(default_factory=deque)
    tags_last_window: dict[int, WindowHandle] = field(default_factory=dict)
    last_mouse_position: tuple[int, int] | None = None

    def workspace(self, workspaces: Sequence[_W]) -> _W | None:
        """The currently focused workspace, if any."""
        if not self.workspace_history:
            return None
        index = self.workspace_history[0]
        if 0 <= index < len(workspaces):
            return workspaces[index]
        return None

    def tag(self, offset: int) -> int | None:
        """The focused tag for offset 0; larger offsets reach further back."""
        if 0 <= offset < len(self.tag_history):
            return self.tag_history[offset]
        return None

    def window(self, windows: Sequence[Window]) -> Window | None:
        """The currently focused window, if any."""
        if not self.window_history:
            return None
        handle = self.window_history[0]
        if handle is None:
            return None
        return next((w for w in windows if w.handle == handle), None)