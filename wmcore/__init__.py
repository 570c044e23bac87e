"""Window, workspace, tag, focus and geometry models for a tiling window manager."""

__version__ = "0.1.0"