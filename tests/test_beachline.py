import math

import pytest

from fortune_voronoi import Arc, BeachLine, BreakPoint, Edge, Site, compare_arcs
from fortune_voronoi.beachline import breakpoint_point, breakpoint_x, parabola_y


def _split_configuration():
    """Beach line after site A=(0, 0) splits the arc of T=(1, 2)."""

    top = Site(1.0, 2.0, 0)
    low = Site(0.0, 0.0, 1)
    edge = Edge(top, low)
    left_bp = BreakPoint(top, low, edge, seals='start')
    right_bp = BreakPoint(low, top, edge, seals='end')
    arcs = (Arc(top, None, left_bp), Arc(low, left_bp, right_bp), Arc(top, right_bp, None))
    return arcs


def test_parabola_is_equidistant_from_focus_and_directrix():
    site = Site(1.0, 3.0)
    for x in (-2.0, 0.0, 1.0, 4.5):
        y = parabola_y(site, x, -1.0)
        assert math.isclose(math.hypot(x - site.x, y - site.y), y + 1.0)


def test_breakpoint_x_equal_heights_is_midpoint():
    assert breakpoint_x(Site(0, 0), Site(2, 0), -1.0) == 1.0


def test_breakpoint_x_site_on_sweep_line():
    assert breakpoint_x(Site(1, 2), Site(0, 0), 0.0) == 0.0
    assert breakpoint_x(Site(0, 0), Site(1, 2), 0.0) == 0.0


@pytest.mark.parametrize('offset', [0.0, -7.5, 1e3])
def test_breakpoint_x_of_stacked_sites_follows_translation(offset):
    # at offset 0 the parabola-intersection quadratic has no linear term
    high = Site(offset, 2.0)
    low = Site(offset, 0.0)
    root3 = math.sqrt(3.0)
    assert breakpoint_x(high, low, -1.0) == pytest.approx(offset - root3, rel=1e-9, abs=1e-9)
    assert breakpoint_x(low, high, -1.0) == pytest.approx(offset + root3, rel=1e-9, abs=1e-9)


def test_breakpoints_bracket_the_lower_site():
    high = Site(0.0, 1.0)
    low = Site(2.0, 0.0)
    sweep_y = -1.0
    left = breakpoint_x(high, low, sweep_y)
    right = breakpoint_x(low, high, sweep_y)
    assert left < low.x < right
    assert left == pytest.approx(0.8377, abs=1e-4)
    assert right == pytest.approx(7.1623, abs=1e-4)


@pytest.mark.parametrize('pair', [((0.0, 1.0), (2.0, 0.0)), ((2.0, 0.0), (0.0, 1.0)), ((3.0, 5.0), (-1.0, 2.0))])
def test_breakpoint_point_is_on_bisector(pair):
    s1, s2 = Site(*pair[0]), Site(*pair[1])
    sweep_y = -2.0
    x, y = breakpoint_point(s1, s2, sweep_y)
    d1 = math.hypot(x - s1.x, y - s1.y)
    d2 = math.hypot(x - s2.x, y - s2.y)
    assert math.isclose(d1, d2, rel_tol=1e-9)
    assert math.isclose(d1, y - sweep_y, rel_tol=1e-9)


def test_compare_arcs_orders_left_to_right():
    left, center, right = _split_configuration()
    sweep_y = -1.0
    assert compare_arcs(left, center, sweep_y) == -1
    assert compare_arcs(center, right, sweep_y) == -1
    assert compare_arcs(right, left, sweep_y) == 1
    assert compare_arcs(center, center, sweep_y) == 0


def test_compare_arcs_query_mode():
    _, center, _ = _split_configuration()
    sweep_y = -1.0
    assert compare_arcs(0.0, center, sweep_y) == 0
    assert compare_arcs(center, 0.0, sweep_y) == 0
    assert compare_arcs(-100.0, center, sweep_y) == -1
    assert compare_arcs(100.0, center, sweep_y) == 1
    assert compare_arcs(center, 100.0, sweep_y) == -1


def test_query_on_zero_width_arc_goes_right():
    left, center, right = _split_configuration()
    # the new site's arc has no width while the sweep sits on its site
    assert compare_arcs(0.0, center, 0.0) == 1
    assert compare_arcs(0.0, right, 0.0) == 0


def test_beachline_locate_and_neighbors():
    top = Site(1.0, 2.0, 0)
    line = BeachLine()
    first = Arc(top)
    line.insert_first(first)
    assert line.locate(123.0, 1.0) is first

    left, center, right = _split_configuration()
    line.replace(first, (left, center, right), -1.0)
    assert len(line) == 3
    assert line.locate(0.0, -1.0) is center
    assert line.locate(-50.0, -1.0) is left
    assert line.locate(50.0, -1.0) is right
    assert line.neighbors(center, -1.0) == (left, right)
    assert line.neighbors(left, -1.0) == (None, center)
    assert line.is_ordered(-1.0)

    line.remove(center, -1.0)
    assert list(line) == [left, right]


def test_beachline_errors():
    line = BeachLine()
    with pytest.raises(LookupError):
        line.locate(0.0, 0.0)
    arc = Arc(Site(0.0, 0.0))
    line.insert_first(arc)
    with pytest.raises(ValueError):
        line.insert_first(Arc(Site(1.0, 1.0)))
    with pytest.raises(LookupError):
        line.index_of(Arc(Site(0.0, 0.0)), 0.0)
