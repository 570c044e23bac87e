"""Small value types shared by windows, workspaces and layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class HandleKind(Enum):
    MOCK = "mock"
    XLIB = "xlib"


@dataclass(frozen=True)
class WindowHandle:
    """Identifies a window: either a test handle or an X window id."""

    kind: HandleKind
    value: int

    @classmethod
    def mock(cls, value: int) -> WindowHandle:
        return cls(HandleKind.MOCK, value)

    @classmethod
    def xlib(cls, value: int) -> WindowHandle:
        return cls(HandleKind.XLIB, value)

    def xlib_handle(self) -> int | None:
        """The X window id, or None for a mock handle."""
        return self.value if self.kind is HandleKind.XLIB else None


class SizeKind(Enum):
    PIXEL = "pixel"
    RATIO = "ratio"


@dataclass(frozen=True)
class Size:
    """A size that is either absolute pixels or a ratio of a whole."""

    kind: SizeKind
    value: float

    @classmethod
    def pixel(cls, value: int) -> Size:
        return cls(SizeKind.PIXEL, int(value))

    @classmethod
    def ratio(cls, value: float) -> Size:
        return cls(SizeKind.RATIO, float(value))

    def into_absolute(self, whole: int) -> int:
        """Pixels as given; a ratio is multiplied by ``whole`` and floored."""
        if self.kind is SizeKind.PIXEL:
            return int(self.value)
        return math.floor(whole * self.value)


@dataclass
class Margins:
    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def uniform(cls, size: int) -> Margins:
        return cls(top=size, right=size, bottom=size, left=size)

    @classmethod
    def from_pair(cls, top_and_bottom: int, left_and_right: int) -> Margins:
        return cls(
            top=top_and_bottom,
            right=left_and_right,
            bottom=top_and_bottom,
            left=left_and_right,
        )

    @classmethod
    def from_triple(cls, top: int, left_and_right: int, bottom: int) -> Margins:
        return cls(top=top, right=left_and_right, bottom=bottom, left=left_and_right)


class Side(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"


@dataclass
class Gutter:
    """Extra space reserved along one side of a workspace."""

    side: Side = Side.TOP
    value: int = 0
    id: int | None = None


class WindowState(Enum):
    MODAL = "Modal"
    STICKY = "Sticky"
    MAXIMIZED_VERT = "MaximizedVert"
    MAXIMIZED_HORZ = "MaximizedHorz"
    SHADED = "Shaded"
    SKIP_TASKBAR = "SkipTaskbar"
    SKIP_PAGER = "SkipPager"
    HIDDEN = "Hidden"
    FULLSCREEN = "Fullscreen"
    ABOVE = "Above"
    BELOW = "Below"


class WindowType(Enum):
    DESKTOP = "Desktop"
    DOCK = "Dock"
    TOOLBAR = "Toolbar"
    MENU = "Menu"
    UTILITY = "Utility"
    SPLASH = "Splash"
    DIALOG = "Dialog"
    NORMAL = "Normal"


class ModeKind(Enum):
    READY_TO_RESIZE = "ReadyToResize"
    READY_TO_MOVE = "ReadyToMove"
    RESIZING_WINDOW = "ResizingWindow"
    MOVING_WINDOW = "MovingWindow"
    NORMAL = "Normal"


@dataclass(frozen=True)
class Mode:
    """The manager's interaction mode; every mode but NORMAL names a window."""

    kind: ModeKind = ModeKind.NORMAL
    handle: WindowHandle | None = None

    def __post_init__(self) -> None:
        if self.kind is ModeKind.NORMAL and self.handle is not None:
            raise ValueError("normal mode takes no window handle")
        if self.kind is not ModeKind.NORMAL and self.handle is None:
            raise ValueError(f"{self.kind.value} mode needs a window handle")


class LayoutMode(Enum):
    """Whether layouts are remembered per tag (the default) or per workspace."""

    TAG = "Tag"
    WORKSPACE = "Workspace"