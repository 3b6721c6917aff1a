"""Clients and monitors that the tiling layouts operate on."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class Client:
    """A managed window with geometry, border width and size factor."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    bw: int = 0
    cfact: float = 1.0
    floating: bool = False
    visible: bool = True
    name: str = ""

    @property
    def width(self) -> int:
        """Outer width, borders included."""
        return self.w + 2 * self.bw

    @property
    def height(self) -> int:
        """Outer height, borders included."""
        return self.h + 2 * self.bw

    @property
    def is_tiled(self) -> bool:
        """Whether the client takes part in tiling."""
        return self.visible and not self.floating

    def resize(self, x, y, w, h) -> None:
        """Move and resize the client; fractional values are truncated."""
        self.x = int(x)
        self.y = int(y)
        self.w = int(w)
        self.h = int(h)


@dataclass
class Monitor:
    """A screen area holding clients, gap settings and the active layout."""

    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    mfact: float = 0.55
    nmaster: int = 1
    clients: list[Client] = field(default_factory=list)
    gap_oh: int = 0
    gap_ov: int = 0
    gap_ih: int = 0
    gap_iv: int = 0
    enablegaps: bool = True
    smartgaps: bool = False
    bar_height: int = 0
    ltsymbol: str = ""
    layout: Callable[[Monitor], None] | None = None

    def tiled(self) -> Iterator[Client]:
        """Yield the clients that are visible and not floating, in order."""
        return (c for c in self.clients if c.is_tiled)

    def arrange(self) -> None:
        """Apply the current layout, if any, to the monitor's clients."""
        if self.layout is not None:
            self.layout(self)