"""Rectangles with size limits used for windows, workspaces and struts."""

from __future__ import annotations

from dataclasses import dataclass, fields

UNBOUNDED_MIN = -999_999_999
UNBOUNDED_MAX = 999_999_999

_LIMITED = frozenset({"h", "w", "minw", "maxw", "minh", "maxh"})


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Xyhw:
    """A rectangle with min/max width and height; x, y is the top-left corner.

    Assigning a size or a limit clamps the width and height into the limits.
    """

    x: int = 0
    y: int = 0
    h: int = 0
    w: int = 0
    minw: int = UNBOUNDED_MIN
    maxw: int = UNBOUNDED_MAX
    minh: int = UNBOUNDED_MIN
    maxh: int = UNBOUNDED_MAX

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ready", True)
        self._update_limits()

    def __setattr__(self, name: str, value) -> None:
        object.__setattr__(self, name, value)
        if name in _LIMITED and self.__dict__.get("_ready"):
            self._update_limits()

    @classmethod
    def _raw(cls, **values: int) -> Xyhw:
        """Build an instance from all fields without applying the limits."""
        obj = cls.__new__(cls)
        for f in fields(cls):
            object.__setattr__(obj, f.name, values[f.name])
        object.__setattr__(obj, "_ready", True)
        return obj

    def _values(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def _update_limits(self) -> None:
        h, w = self.h, self.w
        if h > self.maxh:
            h = self.maxh
        if w > self.maxw:
            w = self.maxw
        if h < self.minh:
            h = self.minh
        if w < self.minw:
            w = self.minw
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "w", w)

    def _combine(self, other: Xyhw, sign: int) -> Xyhw:
        return Xyhw._raw(
            x=self.x + sign * other.x,
            y=self.y + sign * other.y,
            w=self.w + sign * other.w,
            h=self.h + sign * other.h,
            minw=max(self.minw, other.minw),
            maxw=min(self.maxw, other.maxw),
            minh=max(self.minh, other.minh),
            maxh=min(self.maxh, other.maxh),
        )

    def __add__(self, other: Xyhw) -> Xyhw:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: Xyhw) -> Xyhw:
        if not isinstance(other, Xyhw):
            return NotImplemented
        return self._combine(other, -1)

    def clear_minmax(self) -> None:
        """Remove the size limits."""
        object.__setattr__(self, "minw", UNBOUNDED_MIN)
        object.__setattr__(self, "maxw", UNBOUNDED_MAX)
        object.__setattr__(self, "minh", UNBOUNDED_MIN)
        object.__setattr__(self, "maxh", UNBOUNDED_MAX)
        self._update_limits()

    def contains_point(self, x: int, y: int) -> bool:
        max_x = self.x + self.w
        max_y = self.y + self.h
        return self.x <= x <= max_x and self.y <= y <= max_y

    def contains_xyhw(self, other: Xyhw) -> bool:
        return self.contains_point(other.x, other.y) and self.contains_point(
            other.x + other.w, other.y + other.h
        )

    def volume(self) -> int:
        mask = (1 << 64) - 1
        return ((self.h & mask) * (self.w & mask)) & mask

    def without(self, other: Xyhw) -> Xyhw:
        """Trim ``other`` out of this rectangle so that they don't overlap."""
        values = self._values()
        if other.w > other.h:
            # Horizontal trim.
            if other.y > self.y + _tdiv(self.h, 2):
                bottom_over = (self.y + self.h) - other.y
                if bottom_over > 0:
                    values["h"] = self.h - bottom_over
            else:
                top_over = (other.y + other.h) - self.y
                if top_over > 0:
                    values["y"] = self.y + top_over
                    values["h"] = self.h - top_over
        else:
            # Vertical trim.
            if other.x > self.x + _tdiv(self.w, 2):
                right_over = (self.x + self.w) - other.x
                if right_over > 0:
                    values["w"] = self.w - right_over
            else:
                left_over = (other.x + other.w) - self.x
                if left_over > 0:
                    values["x"] = self.x + left_over
                    values["w"] = self.w - left_over
        return Xyhw._raw(**values)

    def center_halfed(self) -> Xyhw:
        """A rectangle of half the size, centred in this one."""
        return Xyhw(
            x=self.x + _tdiv(self.w, 2) - _tdiv(self.w, 4),
            y=self.y + _tdiv(self.h, 2) - _tdiv(self.h, 4),
            h=_tdiv(self.h, 2),
            w=_tdiv(self.w, 2),
        )

    def center_relative(self, outer: Xyhw, border: int) -> None:
        """Move this rectangle so that it is centred within ``outer``."""
        self.x = outer.x + _tdiv(outer.w, 2) - _tdiv(self.w, 2) - border
        self.y = outer.y + _tdiv(outer.h, 2) - _tdiv(self.h, 2) - border

    def center(self) -> tuple[int, int]:
        return self.x + _tdiv(self.w, 2), self.y + _tdiv(self.h, 2)