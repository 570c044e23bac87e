"""Scratchpads: floating windows summoned onto and hidden from a workspace."""

from __future__ import annotations

from dataclasses import dataclass

from wmcore.primitives import Size, SizeKind
from wmcore.xyhw import Xyhw

_DEFAULT_OFFSET_RATIO = 0.25
_DEFAULT_SIZE_RATIO = 0.50


def _sane_dimension(value: Size | None, default_ratio: float, max_pixel: int) -> int:
    """Resolve a configured size, falling back to ``default_ratio`` when out of range."""
    if value is not None:
        if value.kind is SizeKind.RATIO and 0.0 <= value.value <= 1.0:
            return value.into_absolute(max_pixel)
        if value.kind is SizeKind.PIXEL and 0 <= value.value <= max_pixel:
            return int(value.value)
    return Size.ratio(default_ratio).into_absolute(max_pixel)


@dataclass
class ScratchPad:
    """A named scratchpad and the command that starts it.

    ``x`` and ``y`` default to a quarter of the workspace, ``width`` and
    ``height`` to half of it.
    """

    name: str
    value: str
    x: Size | None = None
    y: Size | None = None
    height: Size | None = None
    width: Size | None = None

    def xyhw(self, xyhw: Xyhw) -> Xyhw:
        """Position and size of the scratchpad on a workspace of area ``xyhw``."""
        x = _sane_dimension(self.x, _DEFAULT_OFFSET_RATIO, xyhw.w)
        y = _sane_dimension(self.y, _DEFAULT_OFFSET_RATIO, xyhw.h)
        height = _sane_dimension(self.height, _DEFAULT_SIZE_RATIO, xyhw.h)
        width = _sane_dimension(self.width, _DEFAULT_SIZE_RATIO, xyhw.w)
        return Xyhw(x=xyhw.x + x, y=xyhw.y + y, h=height, w=width)