"""Workspaces: the areas of a screen that display a tag."""

from __future__ import annotations

import copy
from dataclasses import InitVar, dataclass, field
from typing import Iterable

from wmcore.primitives import Gutter, Margins, Side
from wmcore.screen import BBox
from wmcore.window import Window
from wmcore.xyhw import Xyhw


@dataclass(eq=False, repr=False)
class Workspace:
    """A division of a screen showing one tag. Workspace ids start at 1.

    Two workspaces are equal when their ids are.
    """

    bbox: InitVar[BBox]
    id: int
    tag: int | None = None
    margin: Margins = field(default_factory=lambda: Margins.uniform(10))
    margin_multiplier: float = 1.0
    gutters: list[Gutter] = field(default_factory=list)
    avoid: list[Xyhw] = field(default_factory=list)
    xyhw: Xyhw = field(init=False)
    xyhw_avoided: Xyhw = field(init=False)

    def __post_init__(self, bbox: BBox) -> None:
        self.xyhw = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)
        self.xyhw_avoided = Xyhw(x=bbox.x, y=bbox.y, h=bbox.height, w=bbox.width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Workspace):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Workspace(id={self.id}, tag={self.tag!r}, "
            f"x={self.xyhw.x}, y={self.xyhw.y})"
        )

    def select_gutters(self, gutters: Iterable[Gutter]) -> list[Gutter]:
        """The gutters that apply to this workspace, one per side.

        A gutter bound to this workspace's id wins over a general one.
        """
        selected: list[Gutter] = []
        for gutter in gutters:
            if gutter.id is not None and gutter.id != self.id:
                continue
            existing = next(
                (i for i, g in enumerate(selected) if g.side == gutter.side), None
            )
            if existing is None:
                selected.append(gutter)
            elif selected[existing].id is None:
                selected[existing] = gutter
        return selected

    def show_tag(self, tag: int) -> None:
        self.tag = tag

    def contains_point(self, x: int, y: int) -> bool:
        return self.xyhw.contains_point(x, y)

    def has_tag(self, tag: int) -> bool:
        return self.tag == tag

    def is_displaying(self, window: Window) -> bool:
        """True if the workspace shows the window's tag."""
        return window.tag is not None and self.has_tag(window.tag)

    def is_managed(self, window: Window) -> bool:
        """True if the workspace lays out the window."""
        return self.is_displaying(window) and window.is_managed()

    def _gutter(self, side: Side) -> int:
        return next((g.value for g in self.gutters if g.side == side), 0)

    def x(self) -> int:
        """Left edge of the usable area, after docks, margin and gutter."""
        margin = int(self.margin_multiplier * self.margin.left)
        return self.xyhw_avoided.x + margin + self._gutter(Side.LEFT)

    def y(self) -> int:
        """Top edge of the usable area, after docks, margin and gutter."""
        margin = int(self.margin_multiplier * self.margin.top)
        return self.xyhw_avoided.y + margin + self._gutter(Side.TOP)

    def height(self) -> int:
        margin = int(self.margin_multiplier * (self.margin.top + self.margin.bottom))
        gutter = self._gutter(Side.TOP) + self._gutter(Side.BOTTOM)
        return self.xyhw_avoided.h - margin - gutter

    def width(self) -> int:
        margin = int(self.margin_multiplier * (self.margin.left + self.margin.right))
        gutter = self._gutter(Side.LEFT) + self._gutter(Side.RIGHT)
        return self.xyhw_avoided.w - margin - gutter

    def center_halfed(self) -> Xyhw:
        return self.xyhw_avoided.center_halfed()

    def update_avoided_areas(self) -> None:
        """Recompute the area left after cutting out every rectangle in ``avoid``."""
        area = copy.copy(self.xyhw)
        for rect in self.avoid:
            area = area.without(rect)
        self.xyhw_avoided = area