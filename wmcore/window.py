"""Managed windows and their placement."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from wmcore.primitives import Margins, WindowHandle, WindowState, WindowType
from wmcore.xyhw import Xyhw

log = logging.getLogger(__name__)

_DEFAULT_MIN_SIZE = 100


@dataclass
class Window:
    """A window known to the manager, with its tiled and floating geometry."""

    handle: WindowHandle
    name: str | None = None
    pid: int | None = None
    transient: WindowHandle | None = None
    visible: bool = False
    resizable: bool = True
    force_float: bool = False
    floating_offsets: Xyhw | None = None
    never_focus: bool = False
    urgent: bool = False
    debugging: bool = False
    legacy_name: str | None = None
    window_type: WindowType = WindowType.NORMAL
    tag: int | None = None
    border: int = 1
    margin: Margins = field(default_factory=lambda: Margins.uniform(10))
    margin_multiplier: float = 1.0
    states: list[WindowState] = field(default_factory=list)
    requested: Xyhw | None = None
    normal: Xyhw = field(default_factory=Xyhw)
    start_loc: Xyhw | None = None
    container_size: Xyhw | None = None
    strut: Xyhw | None = None
    res_name: str | None = None
    res_class: str | None = None
    _is_floating: bool = field(default=False, init=False, repr=False)

    def is_visible(self) -> bool:
        return self.visible or self.window_type in (
            WindowType.MENU,
            WindowType.SPLASH,
            WindowType.TOOLBAR,
        )

    def set_floating(self, value: bool) -> None:
        if not self._is_floating and value and self.floating_offsets is None:
            # Floating is relative to the normal position.
            self.reset_float_offset()
        self._is_floating = value

    def floating(self) -> bool:
        return self._is_floating or self.must_float()

    def reset_float_offset(self) -> None:
        offsets = Xyhw()
        offsets.clear_minmax()
        self.floating_offsets = offsets

    def set_floating_offsets(self, value: Xyhw | None) -> None:
        if value is None:
            self.floating_offsets = None
            return
        offsets = copy.copy(value)
        offsets.clear_minmax()
        self.floating_offsets = offsets

    def set_floating_exact(self, value: Xyhw) -> None:
        """Float the window at exactly ``value``."""
        offsets = value - self.normal
        offsets.clear_minmax()
        self.floating_offsets = offsets

    def is_fullscreen(self) -> bool:
        return WindowState.FULLSCREEN in self.states

    def is_sticky(self) -> bool:
        return WindowState.STICKY in self.states

    def must_float(self) -> bool:
        return (
            self.force_float
            or self.transient is not None
            or not self.is_managed()
            or self.window_type is WindowType.SPLASH
        )

    def can_move(self) -> bool:
        return self.is_managed()

    def can_resize(self) -> bool:
        return self.resizable and self.is_managed()

    def can_focus(self) -> bool:
        return not self.never_focus and self.is_managed() and self.is_visible()

    def has_state(self, state: WindowState) -> bool:
        return state in self.states

    def apply_margin_multiplier(self, value: float) -> None:
        self.margin_multiplier = abs(value)
        if value < 0:
            log.warning(
                "Negative margin multiplier detected. Will be applied as absolute: %s",
                self.margin_multiplier,
            )

    def _relative(self) -> Xyhw | None:
        if self.floating() and self.floating_offsets is not None:
            return self.normal + self.floating_offsets
        return None

    def _limited(self, value: int, requested_min: int | None) -> int:
        limit = _DEFAULT_MIN_SIZE
        if requested_min is not None and requested_min > 0 and self.floating():
            limit = requested_min
        if value < limit and self.is_managed():
            return limit
        return value

    def width(self) -> int:
        relative = self._relative()
        if self.is_fullscreen():
            value = self.normal.w
        elif relative is not None:
            value = relative.w - self.border * 2
        else:
            margins = int((self.margin.left + self.margin.right) * self.margin_multiplier)
            value = self.normal.w - margins - self.border * 2
        requested_min = self.requested.minw if self.requested is not None else None
        return self._limited(value, requested_min)

    def height(self) -> int:
        relative = self._relative()
        if self.is_fullscreen():
            value = self.normal.h
        elif relative is not None:
            value = relative.h - self.border * 2
        else:
            margins = int((self.margin.top + self.margin.bottom) * self.margin_multiplier)
            value = self.normal.h - margins - self.border * 2
        requested_min = self.requested.minh if self.requested is not None else None
        return self._limited(value, requested_min)

    def x(self) -> int:
        if self.is_fullscreen():
            return self.normal.x
        relative = self._relative()
        if relative is not None:
            return relative.x
        return self.normal.x + int(self.margin.left * self.margin_multiplier)

    def y(self) -> int:
        if self.is_fullscreen():
            return self.normal.y
        relative = self._relative()
        if relative is not None:
            return relative.y
        return self.normal.y + int(self.margin.top * self.margin_multiplier)

    def effective_border(self) -> int:
        """The border to draw: none while fullscreen."""
        return 0 if self.is_fullscreen() else self.border

    def calculated_xyhw(self) -> Xyhw:
        return Xyhw(x=self.x(), y=self.y(), h=self.height(), w=self.width())

    def exact_xyhw(self) -> Xyhw:
        relative = self._relative()
        return relative if relative is not None else copy.copy(self.normal)

    def contains_point(self, x: int, y: int) -> bool:
        return self.calculated_xyhw().contains_point(x, y)

    def tag_with(self, tag: int) -> None:
        self.tag = tag

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def untag(self) -> None:
        self.tag = None

    def is_managed(self) -> bool:
        return self.window_type not in (WindowType.DESKTOP, WindowType.DOCK)

    def snap_to_workspace(self, workspace: Any) -> bool:
        """Tile the window on ``workspace``, moving it there if it shows another tag."""
        self.set_floating(False)
        if self.tag != workspace.tag:
            self.tag = workspace.tag
            area = workspace.xyhw

            offset = copy.copy(self.floating_offsets) if self.floating_offsets else Xyhw()
            offset.x = offset.x + self.normal.x - area.x
            offset.y = offset.y + self.normal.y - area.y
            self.set_floating_offsets(offset)

            start = copy.copy(self.start_loc) if self.start_loc else Xyhw()
            start.x = start.x + self.normal.x - area.x
            start.y = start.y + self.normal.y - area.y
            self.start_loc = start
        return True