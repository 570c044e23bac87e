"""Physical screens and their bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wmcore.primitives import Size, WindowHandle

if TYPE_CHECKING:
    from wmcore.dock_area import DockArea


@dataclass
class BBox:
    """The bounding box of a screen."""

    x: int
    y: int
    width: int
    height: int

    def add(self, bbox: BBox) -> None:
        """Grow this box by the position and size of ``bbox``."""
        self.x += bbox.x
        self.y += bbox.y
        self.width += bbox.width
        self.height += bbox.height


def _default_bbox() -> BBox:
    return BBox(x=0, y=0, width=800, height=600)


@dataclass
class Screen:
    """A monitor or output that workspaces are laid out on."""

    bbox: BBox = field(default_factory=_default_bbox)
    output: str = ""
    root: WindowHandle = field(default_factory=lambda: WindowHandle.mock(0))
    id: int | None = None
    max_window_width: Size | None = None

    def contains_point(self, x: int, y: int) -> bool:
        """True if the point lies within the screen, edges included."""
        box = self.bbox
        max_x = box.x + box.width
        max_y = box.y + box.height
        return box.x <= x <= max_x and box.y <= y <= max_y

    def contains_dock_area(self, dock_area: DockArea, screens_area: tuple[int, int]) -> bool:
        """True if the dock reserving ``dock_area`` sits on this screen.

        ``screens_area`` is the combined (height, width) of all screens.
        """
        screens_height, screens_width = screens_area
        if dock_area.top > 0:
            return self.contains_point(dock_area.top_start_x, dock_area.top)
        if dock_area.bottom > 0:
            return self.contains_point(
                dock_area.bottom_start_x, screens_height - dock_area.bottom
            )
        if dock_area.left > 0:
            return self.contains_point(dock_area.left, dock_area.left_start_y)
        if dock_area.right > 0:
            return self.contains_point(
                screens_width - dock_area.right, dock_area.right_start_y
            )
        return False