"""Vanity gap settings and the helpers that layouts share."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from gaplayouts.model import Monitor


@dataclass(frozen=True)
class Gaps:
    """Effective gaps of a monitor and the number of tiled clients."""

    oh: int
    ov: int
    ih: int
    iv: int
    n: int


class Facts(NamedTuple):
    """Total size factors and leftover pixels of master and stack areas."""

    mfacts: float
    sfacts: float
    mrest: int
    srest: int


def set_gaps(monitor: Monitor, oh: int, ov: int, ih: int, iv: int) -> None:
    """Set the monitor's gaps, clamping negatives to zero, and re-arrange."""
    monitor.gap_oh = max(oh, 0)
    monitor.gap_ov = max(ov, 0)
    monitor.gap_ih = max(ih, 0)
    monitor.gap_iv = max(iv, 0)
    monitor.arrange()


def default_gaps(monitor: Monitor, defaults: Sequence[int]) -> None:
    """Restore the gaps given as (outer h, outer v, inner h, inner v)."""
    oh, ov, ih, iv = defaults
    set_gaps(monitor, oh, ov, ih, iv)


def incr_oh_gaps(monitor: Monitor, delta: int) -> None:
    """Change the outer horizontal gap by ``delta``."""
    set_gaps(monitor, monitor.gap_oh + delta, monitor.gap_ov, monitor.gap_ih, monitor.gap_iv)


def incr_ov_gaps(monitor: Monitor, delta: int) -> None:
    """Change the outer vertical gap by ``delta``."""
    set_gaps(monitor, monitor.gap_oh, monitor.gap_ov + delta, monitor.gap_ih, monitor.gap_iv)


def incr_ih_gaps(monitor: Monitor, delta: int) -> None:
    """Change the inner horizontal gap by ``delta``."""
    set_gaps(monitor, monitor.gap_oh, monitor.gap_ov, monitor.gap_ih + delta, monitor.gap_iv)


def incr_iv_gaps(monitor: Monitor, delta: int) -> None:
    """Change the inner vertical gap by ``delta``."""
    set_gaps(monitor, monitor.gap_oh, monitor.gap_ov, monitor.gap_ih, monitor.gap_iv + delta)


def get_gaps(monitor: Monitor) -> Gaps:
    """Return the gaps in effect and the count of tiled clients.

    With smart gaps on, a lone client gets no outer gaps.
    """
    n = sum(1 for _ in monitor.tiled())
    inner = int(monitor.enablegaps)
    outer = 0 if monitor.smartgaps and n == 1 else inner
    return Gaps(
        oh=monitor.gap_oh * outer,
        ov=monitor.gap_ov * outer,
        ih=monitor.gap_ih * inner,
        iv=monitor.gap_iv * inner,
        n=n,
    )


def get_facts(monitor: Monitor, msize: int, ssize: int) -> Facts:
    """Sum client factors per area and the pixels a factor split leaves over."""
    clients = list(monitor.tiled())
    masters = clients[: monitor.nmaster]
    stack = clients[monitor.nmaster :]
    mfacts = sum((c.cfact for c in masters), 0.0)
    sfacts = sum((c.cfact for c in stack), 0.0)

    mtotal = 0
    for c in masters:
        mtotal = int(mtotal + msize * (c.cfact / mfacts))
    stotal = 0
    for c in stack:
        stotal = int(stotal + ssize * (c.cfact / sfacts))

    return Facts(mfacts, sfacts, msize - mtotal, ssize - stotal)