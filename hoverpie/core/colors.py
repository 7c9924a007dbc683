"""
Color assignment policies for pie chart wedges.

A policy is any callable taking (index, span) and returning a "#rrggbb" string.
"""

import colorsys
import random
import re
from typing import Callable, Dict, Optional, Sequence

from hoverpie.core.domain.models import AngleSpan

ColorPolicy = Callable[[int, AngleSpan], str]

HUE_DIVISOR = 365.0
DEFAULT_SATURATION = 0.6
DEFAULT_BRIGHTNESS = 0.8

DEFAULT_PALETTE = (
    "#0078d4",
    "#107c10",
    "#ffb900",
    "#d83b01",
    "#8764b8",
    "#00b7c3",
    "#e3008c",
    "#498205",
)

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Converts HSV to HEX."""
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return f"#{int(r*255):02x}{int(g*255):02x}{int(b*255):02x}"

class HueColorPolicy:
    """Hue follows the wedge's start angle, so neighbours shift gradually."""

    def __init__(
        self, saturation: float = DEFAULT_SATURATION, brightness: float = DEFAULT_BRIGHTNESS
    ):
        self.saturation = saturation
        self.brightness = brightness

    def __call__(self, index: int, span: AngleSpan) -> str:
        hue = (span.start_angle / HUE_DIVISOR) % 1.0
        return hsv_to_hex(hue, self.saturation, self.brightness)

class PaletteColorPolicy:
    """Cycles through a fixed palette by wedge index."""

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE):
        if not palette:
            raise ValueError("Palette cannot be empty")
        for color in palette:
            if not _HEX_COLOR_RE.match(color):
                raise ValueError(f"Invalid palette color: {color!r}")
        self.palette = tuple(color.lower() for color in palette)

    def __call__(self, index: int, span: AngleSpan) -> str:
        return self.palette[index % len(self.palette)]

class SeededRandomColorPolicy:
    """
    Uniform random RGB per wedge index from a seeded generator.

    Colors are drawn lazily in index order and cached, so a given seed
    always maps the same index to the same color.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self._colors: Dict[int, str] = {}
        self._next_index = 0

    def __call__(self, index: int, span: AngleSpan) -> str:
        while self._next_index <= index:
            r, g, b = (self._rng.random() for _ in range(3))
            self._colors[self._next_index] = (
                f"#{int(r*255):02x}{int(g*255):02x}{int(b*255):02x}"
            )
            self._next_index += 1
        return self._colors[index]

COLOR_POLICY_NAMES = ("hue", "palette", "random")

def color_policy_from_name(name: str, seed: Optional[int] = None) -> ColorPolicy:
    """Builds a color policy from its settings name."""
    if name == "hue":
        return HueColorPolicy()
    if name == "palette":
        return PaletteColorPolicy()
    if name == "random":
        return SeededRandomColorPolicy(seed)
    raise ValueError(
        f"Unknown color policy: {name!r} (expected one of {', '.join(COLOR_POLICY_NAMES)})"
    )
