"""Colour themes for receipts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """A primary/light colour pair."""

    name: str
    primary: RGB
    """Borders, headings and accents."""
    light: RGB
    """Header background and highlighted boxes."""


DEFAULT_THEME = "saffron"

THEMES = MappingProxyType(
    {
        "saffron": Theme("saffron", primary=(255, 153, 51), light=(255, 245, 230)),
        "blue": Theme("blue", primary=(37, 99, 235), light=(239, 246, 255)),
        "green": Theme("green", primary=(5, 150, 105), light=(236, 253, 245)),
        "rose": Theme("rose", primary=(225, 29, 72), light=(255, 241, 242)),
    }
)


def resolve_theme(name: Any = None) -> Theme:
    """Return the theme for a name, falling back to saffron."""
    if isinstance(name, str):
        theme = THEMES.get(name.strip().lower())
        if theme is not None:
            return theme

    if name is not None:
        logger.debug(f"Unknown theme {name!r}, using {DEFAULT_THEME}.")
    return THEMES[DEFAULT_THEME]
