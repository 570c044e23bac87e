import pytest

from wmcore.primitives import (
    Gutter,
    HandleKind,
    LayoutMode,
    Margins,
    Mode,
    ModeKind,
    Side,
    Size,
    SizeKind,
    WindowHandle,
    WindowState,
    WindowType,
)


def test_mock_handle_has_no_xlib_handle():
    assert WindowHandle.mock(7).xlib_handle() is None


def test_xlib_handle_returns_window_id():
    handle = WindowHandle.xlib(12345)
    assert handle.xlib_handle() == 12345
    assert handle.kind is HandleKind.XLIB


def test_handles_compare_by_kind_and_value():
    assert WindowHandle.mock(1) == WindowHandle.mock(1)
    assert WindowHandle.mock(1) != WindowHandle.xlib(1)
    assert len({WindowHandle.mock(1), WindowHandle.mock(1), WindowHandle.mock(2)}) == 2


def test_pixel_size_is_returned_as_is():
    assert Size.pixel(42).into_absolute(1000) == 42
    assert Size.pixel(42).kind is SizeKind.PIXEL


def test_ratio_size_is_floored():
    assert Size.ratio(0.25).into_absolute(10) == 2


def test_full_ratio_is_whole():
    assert Size.ratio(1.0).into_absolute(800) == 800
    assert Size.ratio(0.0).into_absolute(800) == 0


def test_uniform_margins():
    m = Margins.uniform(10)
    assert (m.top, m.right, m.bottom, m.left) == (10, 10, 10, 10)


def test_margins_from_pair():
    m = Margins.from_pair(3, 7)
    assert (m.top, m.right, m.bottom, m.left) == (3, 7, 3, 7)


def test_margins_from_triple():
    m = Margins.from_triple(1, 2, 3)
    assert (m.top, m.right, m.bottom, m.left) == (1, 2, 3, 2)


def test_gutter_defaults_to_top_without_id():
    g = Gutter()
    assert g.side is Side.TOP
    assert g.value == 0
    assert g.id is None


def test_mode_defaults_to_normal():
    assert Mode().kind is ModeKind.NORMAL
    assert Mode().handle is None


def test_mode_keeps_handle():
    handle = WindowHandle.mock(3)
    mode = Mode(ModeKind.MOVING_WINDOW, handle)
    assert mode.handle == handle


def test_non_normal_mode_requires_handle():
    with pytest.raises(ValueError):
        Mode(ModeKind.READY_TO_MOVE)


def test_normal_mode_rejects_handle():
    with pytest.raises(ValueError):
        Mode(ModeKind.NORMAL, WindowHandle.mock(1))


def test_enum_values_match_names_of_the_source():
    assert WindowState("Fullscreen") is WindowState.FULLSCREEN
    assert WindowType("Dock") is WindowType.DOCK
    assert LayoutMode("Workspace") is LayoutMode.WORKSPACE