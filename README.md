# gaplayouts

Tiling window layouts with "vanity gaps": configurable outer and inner
spacing around and between windows. The package computes window
geometries for a monitor's tiled clients and stores them on the client
objects. It also includes two colour palettes for bars and borders.

## Installation

```
pip install gaplayouts
```

## The model (`gaplayouts.model`)

- `Client` is a dataclass for a window. Its fields are `x`, `y`, `w`, `h`,
  the border width `bw`, the size factor `cfact` (default `1.0`), which
  weights the client's share of its area, `floating`, `visible` and
  `name`. `width` and `height` give the outer size, borders included.
  `is_tiled` is true for visible clients that are not floating.
  `resize(x, y, w, h)` stores a new geometry and truncates fractional
  values to integers.
- `Monitor` is a dataclass for a screen area. Its fields are the work area
  `wx`, `wy`, `ww`, `wh`, the master factor `mfact` (default `0.55`), the
  master count `nmaster` (default `1`), `clients`, the gap sizes `gap_oh`,
  `gap_ov`, `gap_ih`, `gap_iv`, the switches `enablegaps` and `smartgaps`,
  `bar_height`, the layout symbol `ltsymbol` and the current `layout`
  (a function taking the monitor, or `None`). `tiled()` yields the tiled
  clients in order; `arrange()` calls the layout, if one is set.

## Gaps (`gaplayouts.gaps`)

- `set_gaps(monitor, oh, ov, ih, iv)` sets all four gaps (outer
  horizontal, outer vertical, inner horizontal, inner vertical), turning
  negative values into zero, and then calls `monitor.arrange()`.
- `default_gaps(monitor, defaults)` sets the gaps from a sequence of four
  values in that same order.
- `incr_oh_gaps`, `incr_ov_gaps`, `incr_ih_gaps` and `incr_iv_gaps`
  `(monitor, delta)` change a single gap by `delta`.
- `get_gaps(monitor)` returns a frozen `Gaps(oh, ov, ih, iv, n)`: the gaps
  in effect and the number `n` of tiled clients. With `enablegaps` off all
  gaps are zero; with `smartgaps` on, a lone client gets no outer gaps.
- `get_facts(monitor, msize, ssize)` returns `Facts(mfacts, sfacts, mrest,
  srest)`: the summed `cfact` of the master and stack clients and the
  pixels left over after splitting `msize` and `ssize` by those factors.

## Layouts (`gaplayouts.layouts`)

Each layout takes a `Monitor` and resizes its tiled clients:

| function | arrangement |
| --- | --- |
| `tile(monitor)` | master column on the left, stack column on the right |
| `bstack(monitor)` | master row on top, stack row below |
| `bstackhoriz(monitor)` | master row on top, full-width stack rows below |
| `centeredmaster(monitor)` | master column in the centre, stack split left and right |
| `centeredfloatingmaster(monitor)` | master box centred over a row of stack clients |
| `deck(monitor)` | master column; stack clients share one area, and `ltsymbol` becomes `"D <count>"` |
| `fibonacci(monitor, s)` | halving splits; a true `s` dwindles, a false one spirals |
| `dwindle(monitor)` / `spiral(monitor)` | `fibonacci` with `s` true / false |
| `grid(monitor)` | near-square grid, filled column by column |
| `nrowgrid(monitor)` | `nmaster + 1` rows of evenly split cells |

`FORCE_VSPLIT` (true) makes `nrowgrid` put exactly two clients side by side.

```python
from gaplayouts.model import Client, Monitor
from gaplayouts.layouts import tile
from gaplayouts.gaps import set_gaps

mon = Monitor(ww=1920, wh=1080, clients=[Client(), Client(), Client()], layout=tile)
set_gaps(mon, 10, 10, 10, 10)   # stores the gaps and re-arranges
for c in mon.clients:
    print(c.x, c.y, c.w, c.h)
```

## Themes (`gaplayouts.themes`)

`Theme` is a frozen dataclass of hex colours: `black`, `white`, `gray2`,
`gray3`, `gray4`, `blue`, `green`, `red`, `orange`, `yellow`, `pink` and
`col_borderbar`, plus the properties `focused_border` (`blue`),
`unfocused_border` (`gray2`) and `inner_border` (`col_borderbar`).
`CATPPUCCIN` and `NORD` are the two palettes, and `THEMES` maps their
names to them. `get_theme(name)` looks a theme up, ignoring case, and
raises `KeyError` for an unknown name.

## What it does not do

The package only computes geometries. It does not connect to a display
server, manage or draw windows, render a bar, or handle key bindings;
moving real windows to the computed positions is up to the caller.

## Running the tests

```
pip install gaplayouts[test]
pytest
```