from itertools import combinations

import pytest

from gaplayouts.layouts import (
    bstack,
    bstackhoriz,
    centeredfloatingmaster,
    centeredmaster,
    deck,
    dwindle,
    fibonacci,
    grid,
    nrowgrid,
    spiral,
    tile,
)
from gaplayouts.model import Client, Monitor

ALL_LAYOUTS = [
    tile,
    bstack,
    bstackhoriz,
    centeredmaster,
    centeredfloatingmaster,
    deck,
    dwindle,
    spiral,
    grid,
    nrowgrid,
]
DISJOINT_LAYOUTS = [tile, bstack, bstackhoriz, centeredmaster, dwindle, spiral, grid, nrowgrid]
COVERING_LAYOUTS = [tile, bstack, bstackhoriz, grid]

WW, WH = 1000, 800


def make_monitor(n, *, gap=0, nmaster=1, mfact=0.5, bw=0, ww=WW, wh=WH, **kw):
    clients = [Client(bw=bw, name=f"c{i}") for i in range(n)]
    return Monitor(
        wx=0, wy=0, ww=ww, wh=wh, mfact=mfact, nmaster=nmaster, clients=clients,
        gap_oh=gap, gap_ov=gap, gap_ih=gap, gap_iv=gap, **kw,
    )


def rect(c):
    return (c.x, c.y, c.x + c.width, c.y + c.height)


def overlap(a, b):
    ax0, ay0, ax1, ay1 = rect(a)
    bx0, by0, bx1, by1 = rect(b)
    return ax0 < bx1 and bx0 < ax1 and ay0 < by1 and by0 < ay1


@pytest.mark.parametrize("layout", ALL_LAYOUTS)
def test_no_tiled_clients_leaves_geometry_alone(layout):
    m = make_monitor(2, ltsymbol="[]=")
    for c in m.clients:
        c.floating = True
        c.resize(3, 4, 5, 6)
    layout(m)
    assert [rect(c) for c in m.clients] == [(3, 4, 8, 10), (3, 4, 8, 10)]
    assert m.ltsymbol == "[]="


@pytest.mark.parametrize("layout", DISJOINT_LAYOUTS)
@pytest.mark.parametrize("n", range(1, 8))
@pytest.mark.parametrize("gap,bw", [(0, 0), (10, 2)])
def test_clients_inside_area_and_disjoint(layout, n, gap, bw):
    m = make_monitor(n, gap=gap, bw=bw)
    layout(m)
    for c in m.clients:
        x0, y0, x1, y1 = rect(c)
        assert x0 >= gap and y0 >= gap
        assert x1 <= WW - gap and y1 <= WH - gap
        assert c.w > 0 and c.h > 0
    for a, b in combinations(m.clients, 2):
        assert not overlap(a, b)


@pytest.mark.parametrize("layout", ALL_LAYOUTS)
def test_single_client_fills_gapped_area(layout):
    m = make_monitor(1, gap=10, bw=2)
    layout(m)
    c = m.clients[0]
    assert (c.x, c.y) == (10, 10)
    assert c.width == WW - 20
    assert c.height == WH - 20


def test_smart_gaps_single_client_fills_monitor():
    m = make_monitor(1, gap=10, smartgaps=True)
    tile(m)
    assert rect(m.clients[0]) == (0, 0, WW, WH)


def test_tile_master_left_of_stack_with_gap():
    m = make_monitor(3, gap=10)
    tile(m)
    master, s1, s2 = m.clients
    assert s1.x == master.x + master.width + 10
    assert s2.x == s1.x
    assert s2.y == s1.y + s1.height + 10


def test_bstack_master_above_stack():
    m = make_monitor(3, gap=10)
    bstack(m)
    master, s1, s2 = m.clients
    assert s1.y == master.y + master.height + 10
    assert s2.y == s1.y
    assert s2.x == s1.x + s1.width + 10


def test_bstackhoriz_stack_rows_span_width():
    m = make_monitor(4, gap=10)
    bstackhoriz(m)
    master, *stack = m.clients
    assert all(c.width == WW - 20 for c in stack)
    assert stack[0].y == master.y + master.height + 10
    assert stack[-1].y + stack[-1].height == WH - 10


def test_tile_stack_follows_cfact():
    m = make_monitor(3)
    m.clients[2].cfact = 3.0
    tile(m)
    assert m.clients[2].height == 3 * m.clients[1].height
    assert m.clients[1].height + m.clients[2].height == WH


def test_deck_stack_clients_share_geometry():
    m = make_monitor(4, gap=10, ltsymbol="[D]")
    deck(m)
    master, *stack = m.clients
    assert len({rect(c) for c in stack}) == 1
    assert stack[0].x == master.x + master.width + 10
    assert m.ltsymbol == "D 3"


def test_deck_symbol_with_more_masters_than_clients():
    m = make_monitor(2, nmaster=3, ltsymbol="[D]")
    deck(m)
    assert m.ltsymbol == "D -1"


def test_centeredmaster_places_master_between_stacks():
    m = make_monitor(3, gap=10)
    centeredmaster(m)
    master, right, left = m.clients
    assert left.x < master.x < right.x
    assert left.x + left.width + 10 == master.x
    assert master.x + master.width + 10 == right.x
    assert right.x + right.width == WW - 10


def test_centeredmaster_without_masters_stacks_full_width():
    m = make_monitor(3, gap=10, nmaster=0)
    centeredmaster(m)
    assert all(c.x == 10 and c.width == WW - 20 for c in m.clients)
    assert m.clients[-1].y + m.clients[-1].height == WH - 10


def test_centeredfloatingmaster_master_centered_over_stack():
    m = make_monitor(3)
    centeredfloatingmaster(m)
    master, s1, s2 = m.clients
    assert 2 * master.x + master.width == WW
    assert s1.width + s2.width == WW
    assert s1.height == WH
    assert master.height < WH


def test_dwindle_and_spiral_differ_in_direction():
    d = make_monitor(4)
    s = make_monitor(4)
    dwindle(d)
    spiral(s)
    assert d.clients[3].x > d.clients[2].x
    assert s.clients[3].x < s.clients[2].x
    assert rect(d.clients[0]) == rect(s.clients[0])


def test_fibonacci_flag_selects_dwindle():
    a = make_monitor(5, gap=6)
    b = make_monitor(5, gap=6)
    fibonacci(a, 1)
    dwindle(b)
    assert [rect(c) for c in a.clients] == [rect(c) for c in b.clients]


def test_grid_four_clients_form_two_by_two():
    m = make_monitor(4)
    grid(m)
    assert len({c.x for c in m.clients}) == 2
    assert len({c.y for c in m.clients}) == 2
    assert all(c.width == WW // 2 and c.height == WH // 2 for c in m.clients)


def test_nrowgrid_two_clients_side_by_side():
    m = make_monitor(2, nmaster=3)
    nrowgrid(m)
    a, b = m.clients
    assert a.y == b.y
    assert a.height == WH
    assert a.width + b.width == WW


def test_nrowgrid_rows_follow_nmaster():
    m = make_monitor(4, nmaster=1)
    nrowgrid(m)
    ys = [c.y for c in m.clients]
    assert ys[0] == ys[1] and ys[2] == ys[3]
    assert ys[2] == m.clients[0].height


def test_monitor_arrange_uses_layout():
    m = make_monitor(2, layout=tile)
    m.arrange()
    a, b = m.clients
    assert a.width + b.width == WW
    assert a.height == b.height == WH