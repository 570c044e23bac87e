"""A batch of property changes reported for a window."""

from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass
from enum import Enum

from wmcore.primitives import Margins, WindowHandle, WindowState, WindowType
from wmcore.window import Window
from wmcore.xyhw import Xyhw
from wmcore.xyhw_change import XyhwChange


class _Unchanged(Enum):
    UNCHANGED = "unchanged"


UNCHANGED = _Unchanged.UNCHANGED
"""Marks a field whose value may itself be None as not being changed."""


@dataclass
class WindowChange:
    """Changes to apply to the window with ``handle``; None means unchanged.

    ``transient`` and ``name`` may be set to None, so they use ``UNCHANGED``.
    """

    handle: WindowHandle
    transient: WindowHandle | None | _Unchanged = UNCHANGED
    never_focus: bool | None = None
    urgent: bool | None = None
    name: str | None | _Unchanged = UNCHANGED
    window_type: WindowType | None = None
    floating: XyhwChange | None = None
    strut: XyhwChange | None = None
    requested: Xyhw | None = None
    states: list[WindowState] | None = None

    def update(self, window: Window, container: Xyhw | None) -> bool:
        """Apply the changes to ``window``; True if it needs redrawing.

        A floating change is centred within ``container`` when one is given.
        """
        changed = False
        if self.transient is not UNCHANGED:
            changed_trans = window.transient is None or window.transient != self.transient
            changed = changed or changed_trans
            window.transient = self.transient
        if self.name is not UNCHANGED:
            changed_name = window.name is None or window.name != self.name
            changed = changed or changed_name
            window.name = self.name
        if self.never_focus is not None:
            changed = changed or window.never_focus != self.never_focus
            window.never_focus = self.never_focus
        if self.urgent is not None:
            changed = changed or window.urgent != self.urgent
            window.urgent = self.urgent
        if self.floating is not None:
            floating_change = dataclasses.replace(self.floating)
            if container is not None:
                xyhw = Xyhw()
                floating_change.update(xyhw)
                xyhw.center_relative(container, window.border)
                floating_change.x = xyhw.x
                floating_change.y = xyhw.y
            changed_floating = floating_change.update_window_floating(window)
            changed = changed or changed_floating
        if self.strut is not None:
            changed_strut = self.strut.update_window_strut(window)
            changed = changed or changed_strut
        if self.requested is not None:
            window.requested = copy.copy(self.requested)
        if self.window_type is not None:
            changed = changed or window.window_type != self.window_type
            window.window_type = self.window_type
            if not window.is_managed():
                window.border = 0
                window.margin = Margins.uniform(0)
        if self.states is not None:
            changed = True
            window.states = list(self.states)
        return changed