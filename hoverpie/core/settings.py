"""
Chart settings.

Layers defaults, environment variables and explicit overrides
(usually parsed CLI arguments). Nothing is read from or written to disk.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from hoverpie.core.application.chart_service import BoundsMode
from hoverpie.core.colors import COLOR_POLICY_NAMES, ColorPolicy, color_policy_from_name

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")

ENV_THEME = "APP_THEME"
ENV_BOUNDS = "HOVERPIE_BOUNDS"
ENV_COLORS = "HOVERPIE_COLORS"
ENV_SEED = "HOVERPIE_SEED"
ENV_DEBUG = "DEBUG"

@dataclass(frozen=True)
class ChartSettings:
    """Settings for one chart and the demo application hosting it."""

    theme: str = "light"
    bounds_mode: BoundsMode = BoundsMode.EUCLIDEAN
    color_policy: str = "hue"
    color_seed: Optional[int] = None
    inset: float = 0.0
    highlight_enabled: bool = True
    debug: bool = False

    def __post_init__(self):
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme: {self.theme!r}")
        if self.color_policy not in COLOR_POLICY_NAMES:
            raise ValueError(f"Unknown color policy: {self.color_policy!r}")
        if not 0.0 <= self.inset < 1.0:
            raise ValueError("Inset must be in [0, 1)")

    def build_color_policy(self) -> ColorPolicy:
        return color_policy_from_name(self.color_policy, self.color_seed)

def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")

def settings_from_environment(environ: Mapping[str, str]) -> Dict[str, Any]:
    """
    Extracts settings overrides from environment variables.

    Unknown values are logged and ignored so a stale variable
    never prevents the chart from starting.
    """
    config: Dict[str, Any] = {}

    theme = environ.get(ENV_THEME, "").lower()
    if theme in THEMES:
        config["theme"] = theme
    elif theme:
        logger.warning(f"Ignoring {ENV_THEME}={theme!r}")

    bounds = environ.get(ENV_BOUNDS, "").lower()
    if bounds:
        try:
            config["bounds_mode"] = BoundsMode(bounds)
        except ValueError:
            logger.warning(f"Ignoring {ENV_BOUNDS}={bounds!r}")

    colors = environ.get(ENV_COLORS, "").lower()
    if colors in COLOR_POLICY_NAMES:
        config["color_policy"] = colors
    elif colors:
        logger.warning(f"Ignoring {ENV_COLORS}={colors!r}")

    seed = environ.get(ENV_SEED, "")
    if seed:
        try:
            config["color_seed"] = int(seed)
        except ValueError:
            logger.warning(f"Ignoring {ENV_SEED}={seed!r}")

    if ENV_DEBUG in environ:
        config["debug"] = _parse_bool(environ[ENV_DEBUG])

    return config

def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ChartSettings:
    """
    Builds settings from defaults, environment and overrides.

    Args:
        environ: Environment mapping (default: os.environ)
        overrides: Values taking precedence over the environment; None values are skipped

    Returns:
        ChartSettings: Merged settings

    Raises:
        ValueError: If an override has an unknown key or invalid value
    """
    environ = os.environ if environ is None else environ

    merged = settings_from_environment(environ)
    known = {f.name for f in fields(ChartSettings)}

    for key, value in (overrides or {}).items():
        if key not in known:
            raise ValueError(f"Unknown setting: {key}")
        if value is not None:
            merged[key] = value

    if isinstance(merged.get("bounds_mode"), str):
        merged["bounds_mode"] = BoundsMode(merged["bounds_mode"])

    return replace(ChartSettings(), **merged)
