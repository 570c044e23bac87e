import copy

from wmcore.xyhw import Xyhw


def test_center_halfed():
    a = Xyhw(x=10, y=10, w=2000, h=1000)
    correct = Xyhw(x=510, y=260, w=1000, h=500)
    assert a.center_halfed() == correct


def test_without_should_trim_from_the_top():
    a = Xyhw(y=5, h=1000, w=1000)
    b = Xyhw(h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=10, h=995, w=1000)


def test_without_should_trim_from_the_left():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(h=100, w=10)
    assert a.without(b) == Xyhw(x=10, y=0, w=990, h=1000)


def test_without_should_trim_from_the_bottom():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(y=990, x=0, h=10, w=100)
    assert a.without(b) == Xyhw(x=0, y=0, h=990, w=1000)


def test_without_should_trim_from_the_right():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=990, y=0, h=100, w=10)
    assert a.without(b) == Xyhw(x=0, y=0, w=990, h=1000)


def test_without_leaves_original_untouched():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    before = copy.copy(a)
    a.without(Xyhw(x=990, y=0, h=100, w=10))
    assert a == before


def test_contains_xyhw_should_detect_a_inner_window():
    a = Xyhw(x=0, y=0, h=1000, w=1000)
    b = Xyhw(x=100, y=100, h=800, w=800)
    assert a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_upper_left_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=0, y=0, h=200, w=200)
    assert not a.contains_xyhw(b)


def test_contains_xyhw_should_detect_a_lower_right_corner_outside():
    a = Xyhw(x=100, y=100, h=800, w=800)
    b = Xyhw(x=800, y=800, h=200, w=200)
    assert not a.contains_xyhw(b)


def test_contains_point_includes_edges():
    a = Xyhw(x=100, y=100, h=800, w=800)
    assert a.contains_point(100, 100)
    assert a.contains_point(900, 900)
    assert not a.contains_point(901, 500)
    assert not a.contains_point(500, 99)


def test_construction_clamps_size_into_limits():
    a = Xyhw(w=50, h=5000, minw=100, maxh=1000)
    assert a.w == 100
    assert a.h == 1000


def test_assignment_clamps_size_into_limits():
    a = Xyhw(w=100, h=100, maxw=200, minh=50)
    a.w = 300
    a.h = 10
    assert a.w == 200
    assert a.h == 50


def test_setting_a_limit_clamps_existing_size():
    a = Xyhw(w=300, h=300)
    a.maxw = 200
    a.maxh = 250
    assert (a.w, a.h) == (200, 250)


def test_clear_minmax_removes_limits():
    a = Xyhw(w=100, h=100, maxw=200, maxh=200)
    a.clear_minmax()
    a.w = 1000
    a.h = 1000
    assert (a.w, a.h) == (1000, 1000)
    assert a.minw == Xyhw().minw
    assert a.maxh == Xyhw().maxh


def test_add_and_sub_round_trip_position_and_size():
    a = Xyhw(x=10, y=20, w=300, h=400)
    b = Xyhw(x=1, y=2, w=3, h=4)
    result = (a + b) - b
    assert (result.x, result.y, result.w, result.h) == (10, 20, 300, 400)


def test_add_keeps_tightest_limits():
    a = Xyhw(minw=10, maxw=500, minh=20, maxh=600)
    b = Xyhw(minw=30, maxw=400, minh=5, maxh=700)
    result = a + b
    assert (result.minw, result.maxw, result.minh, result.maxh) == (30, 400, 20, 600)


def test_center_of_rectangle():
    a = Xyhw(x=10, y=10, w=2000, h=1000)
    assert a.center() == (1010, 510)


def test_center_relative_places_inner_in_middle_of_outer():
    outer = Xyhw(x=0, y=0, w=1000, h=1000)
    inner = Xyhw(w=200, h=200)
    inner.center_relative(outer, 0)
    assert inner.center() == outer.center()


def test_center_relative_only_moves():
    outer = Xyhw(x=0, y=0, w=1000, h=1000)
    inner = Xyhw(w=200, h=100)
    inner.center_relative(outer, 3)
    assert (inner.w, inner.h) == (200, 100)


def test_volume_is_width_times_height():
    a = Xyhw(w=800, h=1000)
    assert a.volume() == 800 * 1000