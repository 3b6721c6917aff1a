"""Colour themes for bars and window borders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """A named palette of hex colours."""

    name: str
    black: str
    white: str
    gray2: str
    gray3: str
    gray4: str
    blue: str
    green: str
    red: str
    orange: str
    yellow: str
    pink: str
    col_borderbar: str

    @property
    def focused_border(self) -> str:
        """Border colour of the focused window."""
        return self.blue

    @property
    def unfocused_border(self) -> str:
        """Border colour of unfocused windows."""
        return self.gray2

    @property
    def inner_border(self) -> str:
        """Colour of the inner border."""
        return self.col_borderbar


CATPPUCCIN = Theme(
    name="catppuccin",
    black="#1E1D2D",
    white="#f8f8f2",
    gray2="#282737",
    gray3="#585767",
    gray4="#282737",
    blue="#96CDFB",
    green="#ABE9B3",
    red="#F28FAD",
    orange="#F8BD96",
    yellow="#FAE3B0",
    pink="#d5aeea",
    col_borderbar="#1E1D2D",
)

NORD = Theme(
    name="nord",
    black="#2A303C",
    white="#D8DEE9",
    gray2="#3B4252",
    gray3="#606672",
    gray4="#6d8dad",
    blue="#81A1C1",
    green="#89b482",
    red="#d57780",
    orange="#caaa6a",
    yellow="#EBCB8B",
    pink="#e39a83",
    col_borderbar="#2A303C",
)

THEMES: dict[str, Theme] = {t.name: t for t in (CATPPUCCIN, NORD)}


def get_theme(name: str) -> Theme:
    """Return the theme with the given name, ignoring case."""
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise KeyError(f"unknown theme: {name!r}") from None