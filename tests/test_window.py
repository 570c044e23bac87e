from types import SimpleNamespace

from wmcore.primitives import Margins, WindowHandle, WindowState, WindowType
from wmcore.window import Window
from wmcore.xyhw import Xyhw


def make_window(**kwargs):
    return Window(WindowHandle.mock(1), **kwargs)


def test_should_be_able_to_tag_a_window():
    subject = make_window()
    subject.tag_with(1)
    assert subject.has_tag(1)


def test_should_be_able_to_untag_a_window():
    subject = make_window()
    subject.tag_with(1)
    subject.untag()
    assert not subject.has_tag(1)


def test_new_window_defaults():
    w = make_window()
    assert w.border == 1
    assert w.margin == Margins.uniform(10)
    assert w.margin_multiplier == 1.0
    assert w.window_type is WindowType.NORMAL
    assert not w.floating()
    assert w.floating_offsets is None
    assert not w.is_visible()


def test_menu_windows_are_always_visible():
    w = make_window(window_type=WindowType.MENU)
    assert w.is_visible()


def test_tiled_geometry_subtracts_margins_and_border():
    w = make_window(normal=Xyhw(x=0, y=0, w=500, h=400))
    assert w.x() == 10
    assert w.y() == 10
    assert w.width() == 478
    assert w.height() == 378


def test_managed_window_has_minimum_size():
    w = make_window()
    assert w.width() == 100
    assert w.height() == 100


def test_unmanaged_window_is_not_clamped():
    w = make_window(window_type=WindowType.DOCK)
    assert w.width() == -22


def test_fullscreen_uses_normal_and_hides_border():
    w = make_window(normal=Xyhw(x=5, y=6, w=800, h=600))
    w.states = [WindowState.FULLSCREEN]
    assert w.is_fullscreen()
    assert w.x() == 5
    assert w.width() == 800
    assert w.effective_border() == 0


def test_set_floating_creates_offsets():
    w = make_window(normal=Xyhw(w=500, h=400))
    w.set_floating(True)
    assert w.floating()
    assert w.floating_offsets == Xyhw()
    assert w.exact_xyhw() == w.normal


def test_set_floating_exact_places_window_exactly():
    w = make_window(normal=Xyhw(x=10, y=20, w=500, h=400))
    w.set_floating(True)
    target = Xyhw(x=100, y=150, w=300, h=250)
    w.set_floating_exact(target)
    exact = w.exact_xyhw()
    assert (exact.x, exact.y, exact.w, exact.h) == (100, 150, 300, 250)


def test_transient_window_must_float():
    w = make_window(transient=WindowHandle.mock(2))
    assert w.must_float()
    assert w.floating()


def test_negative_margin_multiplier_is_made_absolute():
    w = make_window()
    w.apply_margin_multiplier(-2.0)
    assert w.margin_multiplier == 2.0


def test_can_focus_requires_visibility():
    w = make_window()
    assert not w.can_focus()
    w.visible = True
    assert w.can_focus()
    w.never_focus = True
    assert not w.can_focus()


def test_can_resize_only_when_managed():
    assert make_window().can_resize()
    assert not make_window(window_type=WindowType.DESKTOP).can_resize()


def test_has_state_and_sticky():
    w = make_window()
    w.states = [WindowState.STICKY]
    assert w.is_sticky()
    assert w.has_state(WindowState.STICKY)
    assert not w.has_state(WindowState.MODAL)


def test_contains_point_uses_calculated_geometry():
    w = make_window(normal=Xyhw(x=0, y=0, w=500, h=400))
    assert w.contains_point(10, 10)
    assert not w.contains_point(5, 5)


def test_snap_to_workspace_reparents_offsets():
    w = make_window(normal=Xyhw(x=10, y=20, w=300, h=200), tag=1)
    w.set_floating(True)
    w.set_floating_offsets(Xyhw(x=5, y=7))
    ws = SimpleNamespace(tag=2, xyhw=Xyhw(x=100, y=50, w=800, h=600))
    assert w.snap_to_workspace(ws)
    assert w.tag == 2
    assert not w.floating()
    assert w.floating_offsets.x + ws.xyhw.x == 5 + w.normal.x
    assert w.floating_offsets.y + ws.xyhw.y == 7 + w.normal.y
    assert w.start_loc.x + ws.xyhw.x == w.normal.x


def test_snap_to_same_tag_keeps_offsets():
    w = make_window(tag=3)
    w.set_floating(True)
    w.set_floating_offsets(Xyhw(x=5, y=7))
    ws = SimpleNamespace(tag=3, xyhw=Xyhw(x=100, y=50))
    assert w.snap_to_workspace(ws)
    assert w.floating_offsets.x == 5
    assert w.start_loc is None