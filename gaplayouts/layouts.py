"""Tiling layouts that leave vanity gaps between windows and screen edges."""

from __future__ import annotations

from gaplayouts.gaps import get_facts, get_gaps
from gaplayouts.model import Monitor

FORCE_VSPLIT = True
"""Lay out exactly two clients side by side in the row grid."""

_U32 = 0xFFFFFFFF


def _ult(a: int, b: int) -> int:
    """1 if ``a < b`` when both are read as unsigned 32-bit values, else 0."""
    return int((a & _U32) < (b & _U32))


def _cdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def tile(monitor: Monitor) -> None:
    """Masters in a column on the left, the stack in a column on the right."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster

    mx = sx = monitor.wx + g.ov
    my = sy = monitor.wy + g.oh
    mh = monitor.wh - 2 * g.oh - g.ih * (min(n, nmaster) - 1)
    sh = monitor.wh - 2 * g.oh - g.ih * (n - nmaster - 1)
    mw = sw = monitor.ww - 2 * g.ov

    if nmaster and n > nmaster:
        sw = int((mw - g.iv) * (1 - monitor.mfact))
        mw = mw - g.iv - sw
        sx = mx + mw + g.iv

    f = get_facts(monitor, mh, sh)

    for i, c in enumerate(monitor.tiled()):
        if i < nmaster:
            c.resize(mx, my, mw - 2 * c.bw,
                     mh * (c.cfact / f.mfacts) + _ult(i, f.mrest) - 2 * c.bw)
            my += c.height + g.ih
        else:
            c.resize(sx, sy, sw - 2 * c.bw,
                     sh * (c.cfact / f.sfacts) + _ult(i - nmaster, f.srest) - 2 * c.bw)
            sy += c.height + g.ih


def bstack(monitor: Monitor) -> None:
    """Masters in a row on top, the stack in a row below."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster

    sx = mx = monitor.wx + g.ov
    sy = my = monitor.wy + g.oh
    sh = mh = monitor.wh - 2 * g.oh
    mw = monitor.ww - 2 * g.ov - g.iv * (min(n, nmaster) - 1)
    sw = monitor.ww - 2 * g.ov - g.iv * (n - nmaster - 1)

    if nmaster and n > nmaster:
        sh = int((mh - g.ih) * (1 - monitor.mfact))
        mh = mh - g.ih - sh
        sx = mx
        sy = my + mh + g.ih

    f = get_facts(monitor, mw, sw)

    for i, c in enumerate(monitor.tiled()):
        if i < nmaster:
            c.resize(mx, my,
                     mw * (c.cfact / f.mfacts) + _ult(i, f.mrest) - 2 * c.bw,
                     mh - 2 * c.bw)
            mx += c.width + g.iv
        else:
            c.resize(sx, sy,
                     sw * (c.cfact / f.sfacts) + _ult(i - nmaster, f.srest) - 2 * c.bw,
                     sh - 2 * c.bw)
            sx += c.width + g.iv


def bstackhoriz(monitor: Monitor) -> None:
    """Masters in a row on top, the stack as full-width rows below."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster

    sx = mx = monitor.wx + g.ov
    sy = my = monitor.wy + g.oh
    mh = monitor.wh - 2 * g.oh
    sh = monitor.wh - 2 * g.oh - g.ih * (n - nmaster - 1)
    mw = monitor.ww - 2 * g.ov - g.iv * (min(n, nmaster) - 1)
    sw = monitor.ww - 2 * g.ov

    if nmaster and n > nmaster:
        sh = int((mh - g.ih) * (1 - monitor.mfact))
        mh = mh - g.ih - sh
        sy = my + mh + g.ih
        sh = monitor.wh - mh - 2 * g.oh - g.ih * (n - nmaster)

    f = get_facts(monitor, mw, sh)

    for i, c in enumerate(monitor.tiled()):
        if i < nmaster:
            c.resize(mx, my,
                     mw * (c.cfact / f.mfacts) + _ult(i, f.mrest) - 2 * c.bw,
                     mh - 2 * c.bw)
            mx += c.width + g.iv
        else:
            c.resize(sx, sy, sw - 2 * c.bw,
                     sh * (c.cfact / f.sfacts) + _ult(i - nmaster, f.srest) - 2 * c.bw)
            sy += c.height + g.ih


def centeredmaster(monitor: Monitor) -> None:
    """Masters in a centre column, the stack split between left and right."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv
    stack = n - nmaster

    mx = monitor.wx + ov
    my = monitor.wy + oh
    mh = monitor.wh - 2 * oh - ih * ((n if not nmaster else min(n, nmaster)) - 1)
    mw = monitor.ww - 2 * ov
    lh = monitor.wh - 2 * oh - ih * (stack // 2 - 1)
    rh = monitor.wh - 2 * oh - ih * (stack // 2 - (0 if stack % 2 else 1))
    lx = ly = lw = 0
    rx = ry = rw = 0

    if nmaster and n > nmaster:
        if stack > 1:
            mw = int((monitor.ww - 2 * ov - 2 * iv) * monitor.mfact)
            lw = _cdiv(monitor.ww - mw - 2 * ov - 2 * iv, 2)
            rw = (monitor.ww - mw - 2 * ov - 2 * iv) - lw
            mx += lw + iv
        else:
            mw = int((mw - iv) * monitor.mfact)
            lw = 0
            rw = monitor.ww - mw - iv - 2 * ov
        lx = monitor.wx + ov
        ly = monitor.wy + oh
        rx = mx + mw + iv
        ry = monitor.wy + oh

    clients = list(monitor.tiled())

    def is_master(k: int) -> bool:
        return not nmaster or k < nmaster

    def is_left(k: int) -> bool:
        return (k - nmaster) % 2 == 1

    mfacts = lfacts = rfacts = 0.0
    for k, c in enumerate(clients):
        if is_master(k):
            mfacts += c.cfact
        elif is_left(k):
            lfacts += c.cfact
        else:
            rfacts += c.cfact

    mtotal = ltotal = rtotal = 0
    for k, c in enumerate(clients):
        if is_master(k):
            mtotal = int(mtotal + mh * (c.cfact / mfacts))
        elif is_left(k):
            ltotal = int(ltotal + lh * (c.cfact / lfacts))
        else:
            rtotal = int(rtotal + rh * (c.cfact / rfacts))

    mrest = mh - mtotal
    lrest = lh - ltotal
    rrest = rh - rtotal

    for i, c in enumerate(clients):
        if is_master(i):
            c.resize(mx, my, mw - 2 * c.bw,
                     mh * (c.cfact / mfacts) + _ult(i, mrest) - 2 * c.bw)
            my += c.height + ih
        elif is_left(i):
            c.resize(lx, ly, lw - 2 * c.bw,
                     lh * (c.cfact / lfacts) + _ult(i - 2 * nmaster, 2 * lrest) - 2 * c.bw)
            ly += c.height + ih
        else:
            c.resize(rx, ry, rw - 2 * c.bw,
                     rh * (c.cfact / rfacts) + _ult(i - 2 * nmaster, 2 * rrest) - 2 * c.bw)
            ry += c.height + ih


def centeredfloatingmaster(monitor: Monitor) -> None:
    """Masters float in a centred box over a row of stack clients."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster
    oh, ov, iv = g.oh, g.ov, g.iv
    mivf = 1.0

    sx = mx = monitor.wx + ov
    sy = my = monitor.wy + oh
    sh = mh = monitor.wh - 2 * oh
    mw = monitor.ww - 2 * ov - iv * (n - 1)
    sw = monitor.ww - 2 * ov - iv * (n - nmaster - 1)

    if nmaster and n > nmaster:
        mivf = 0.8
        if monitor.ww > monitor.wh:
            mw = int(monitor.ww * monitor.mfact - iv * mivf * (min(n, nmaster) - 1))
            mh = int(monitor.wh * 0.9)
        else:
            mw = int(monitor.ww * 0.9 - iv * mivf * (min(n, nmaster) - 1))
            mh = int(monitor.wh * monitor.mfact)
        mx = monitor.wx + _cdiv(monitor.ww - mw, 2)
        my = monitor.wy + _cdiv(monitor.wh - mh - 2 * oh, 2)
        sx = monitor.wx + ov
        sy = monitor.wy + oh
        sh = monitor.wh - 2 * oh

    f = get_facts(monitor, mw, sw)

    for i, c in enumerate(monitor.tiled()):
        if i < nmaster:
            c.resize(mx, my,
                     mw * (c.cfact / f.mfacts) + _ult(i, f.mrest) - 2 * c.bw,
                     mh - 2 * c.bw)
            mx = int(mx + c.width + iv * mivf)
        else:
            c.resize(sx, sy,
                     sw * (c.cfact / f.sfacts) + _ult(i - nmaster, f.srest) - 2 * c.bw,
                     sh - 2 * c.bw)
            sx += c.width + iv


def deck(monitor: Monitor) -> None:
    """Masters on the left; stack clients share one area on the right."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    nmaster = monitor.nmaster

    sx = mx = monitor.wx + g.ov
    sy = my = monitor.wy + g.oh
    sh = mh = monitor.wh - 2 * g.oh - g.ih * (min(n, nmaster) - 1)
    sw = mw = monitor.ww - 2 * g.ov

    if nmaster and n > nmaster:
        sw = int((mw - g.iv) * (1 - monitor.mfact))
        mw = mw - g.iv - sw
        sx = mx + mw + g.iv
        sh = monitor.wh - 2 * g.oh

    f = get_facts(monitor, mh, sh)

    if n != nmaster:
        monitor.ltsymbol = f"D {n - nmaster}"

    for i, c in enumerate(monitor.tiled()):
        if i < nmaster:
            c.resize(mx, my, mw - 2 * c.bw,
                     mh * (c.cfact / f.mfacts) + _ult(i, f.mrest) - 2 * c.bw)
            my += c.height + g.ih
        else:
            c.resize(sx, sy, sw - 2 * c.bw, sh - 2 * c.bw)


def fibonacci(monitor: Monitor, s) -> None:
    """Split the area by halves; ``s`` true gives dwindle, false gives spiral."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv
    bh = monitor.bar_height

    nx = monitor.wx + ov
    ny = monitor.wy + oh
    nw = monitor.ww - 2 * ov
    nh = monitor.wh - 2 * oh
    hrest = wrest = 0
    splitting = True
    i = 0

    for c in monitor.tiled():
        if splitting:
            if (i % 2 and _cdiv(nh - ih, 2) <= bh + 2 * c.bw) or (
                not i % 2 and _cdiv(nw - iv, 2) <= bh + 2 * c.bw
            ):
                splitting = False
            if splitting and i < n - 1:
                if i % 2:
                    nv = _cdiv(nh - ih, 2)
                    hrest = nh - 2 * nv - ih
                    nh = nv
                else:
                    nv = _cdiv(nw - iv, 2)
                    wrest = nw - 2 * nv - iv
                    nw = nv

                if i % 4 == 2 and not s:
                    nx += nw + iv
                elif i % 4 == 3 and not s:
                    ny += nh + ih

            quarter = i % 4
            if quarter == 0:
                if s:
                    ny += nh + ih
                    nh += hrest
                else:
                    nh -= hrest
                    ny -= nh + ih
            elif quarter == 1:
                nx += nw + iv
                nw += wrest
            elif quarter == 2:
                ny += nh + ih
                nh += hrest
                if i < n - 1:
                    nw += wrest
            else:
                if s:
                    nx += nw + iv
                    nw -= wrest
                else:
                    nw -= wrest
                    nx -= nw + iv
                    nh += hrest

            if i == 0:
                if n != 1:
                    span = monitor.ww - iv - 2 * ov
                    nw = int(span - span * (1 - monitor.mfact))
                    wrest = 0
                ny = monitor.wy + oh
            elif i == 1:
                nw = monitor.ww - nw - iv - 2 * ov
            i += 1

        c.resize(nx, ny, nw - 2 * c.bw, nh - 2 * c.bw)


def dwindle(monitor: Monitor) -> None:
    """Fibonacci layout that shrinks toward the bottom right."""
    fibonacci(monitor, 1)


def spiral(monitor: Monitor) -> None:
    """Fibonacci layout that spirals inward."""
    fibonacci(monitor, 0)


def grid(monitor: Monitor) -> None:
    """Arrange clients column by column in a near-square grid."""
    g = get_gaps(monitor)
    n = g.n
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    rows = 0
    while rows <= n // 2:
        if rows * rows >= n:
            break
        rows += 1
    cols = rows - 1 if rows and (rows - 1) * rows >= n else rows

    avail_h = monitor.wh - 2 * oh - ih * (rows - 1)
    avail_w = monitor.ww - 2 * ov - iv * (cols - 1)
    ch = _cdiv(avail_h, rows or 1)
    cw = _cdiv(avail_w, cols or 1)
    chrest = avail_h - ch * rows
    cwrest = avail_w - cw * cols

    for i, c in enumerate(monitor.tiled()):
        cc, cr = divmod(i, rows)
        cx = monitor.wx + ov + cc * (cw + iv) + min(cc, cwrest)
        cy = monitor.wy + oh + cr * (ch + ih) + min(cr, chrest)
        c.resize(cx, cy,
                 cw + (1 if cc < cwrest else 0) - 2 * c.bw,
                 ch + (1 if cr < chrest else 0) - 2 * c.bw)


def nrowgrid(monitor: Monitor) -> None:
    """Arrange clients in ``nmaster + 1`` rows of evenly split cells."""
    g = get_gaps(monitor)
    n = g.n
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    rows = monitor.nmaster + 1
    if FORCE_VSPLIT and n == 2:
        rows = 1
    if n < rows:
        rows = n

    cols = n // rows
    used_cols = cols
    cy = monitor.wy + oh
    ch = _cdiv(monitor.wh - 2 * oh - ih * (rows - 1), rows)
    used_h = ch
    used_w = 0
    row = 0
    col = 0

    for c in monitor.tiled():
        if col == cols:
            used_w = 0
            col = 0
            row += 1
            cols = (n - used_cols) // (rows - row)
            used_cols += cols
            cy = monitor.wy + oh + used_h + ih
            used_h += ch + ih

        cx = monitor.wx + ov + used_w
        cw = _cdiv(monitor.ww - 2 * ov - used_w, cols - col)
        used_w += cw + iv

        c.resize(cx, cy, cw - 2 * c.bw, ch - 2 * c.bw)
        col += 1