"""Partial updates to a rectangle."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from wmcore.xyhw import Xyhw

if TYPE_CHECKING:
    from wmcore.window import Window


@dataclass
class XyhwChange:
    """A set of optional new values for the fields of an :class:`Xyhw`."""

    x: int | None = None
    y: int | None = None
    h: int | None = None
    w: int | None = None
    minw: int | None = None
    maxw: int | None = None
    minh: int | None = None
    maxh: int | None = None

    @classmethod
    def from_xyhw(cls, xyhw: Xyhw) -> XyhwChange:
        return cls(**{f.name: getattr(xyhw, f.name) for f in fields(cls)})

    def update(self, xyhw: Xyhw) -> bool:
        """Apply the given values to ``xyhw``; True if anything changed."""
        changed = False
        for name in ("x", "y", "w", "h", "minw", "maxw", "minh", "maxh"):
            value = getattr(self, name)
            if value is not None and getattr(xyhw, name) != value:
                setattr(xyhw, name, value)
                changed = True
        return changed

    def update_window_floating(self, window: Window) -> bool:
        if not window.floating():
            return False
        current = window.calculated_xyhw()
        changed = self.update(current)
        window.set_floating_exact(current)
        return changed

    def update_window_strut(self, window: Window) -> bool:
        changed = False
        if window.strut is None:
            window.strut = Xyhw()
            changed = True
        return self.update(window.strut) or changed