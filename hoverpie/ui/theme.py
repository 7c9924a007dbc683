"""
Theme management for the pie chart.

Palettes map color keys to QColor objects; the manager hands out
fresh copies and announces theme switches through a signal.
"""

import copy
import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

theme_logger = logging.getLogger("ThemeManager")

LIGHT_THEME_PALETTE = {
    "Window": QColor("#ffffff"),
    "WindowText": QColor("#1f1f1f"),
    "ToolTipBase": QColor("#ffffff"),
    "ToolTipText": QColor("#1f1f1f"),
    "chart.background": QColor("#ffffff"),
    "chart.edge": QColor("#ffffff"),
    "chart.shadow": QColor("#000000"),
    "tooltip.background": QColor("#F2F3F3F3"),
    "tooltip.text": QColor("#1f1f1f"),
    "tooltip.border": QColor("#1E000000"),
}

DARK_THEME_PALETTE = {
    "Window": QColor("#202020"),
    "WindowText": QColor("#ffffff"),
    "ToolTipBase": QColor("#2b2b2b"),
    "ToolTipText": QColor("#ffffff"),
    "chart.background": QColor("#202020"),
    "chart.edge": QColor("#202020"),
    "chart.shadow": QColor("#000000"),
    "tooltip.background": QColor("#F22B2B2B"),
    "tooltip.text": QColor("#ffffff"),
    "tooltip.border": QColor("#32FFFFFF"),
}

TOOLTIP_QSS = """
QLabel {{
    background-color: {background};
    color: {text};
    border: 1px solid {border};
    border-radius: 8px;
    padding: 8px;
}}
"""

class ThemeManager(QObject):
    """Theme manager holding the light and dark palettes."""

    theme_changed = pyqtSignal()

    _instance: Optional["ThemeManager"] = None

    def __init__(self):
        super().__init__()
        self._current_theme = "light"
        self._light_palette = copy.deepcopy(LIGHT_THEME_PALETTE)
        self._dark_palette = copy.deepcopy(DARK_THEME_PALETTE)

    @classmethod
    def get_instance(cls) -> "ThemeManager":
        """Get the singleton instance of ThemeManager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_color(self, color_key: str) -> QColor:
        """
        Get a color from the current theme palette.

        Returns:
            QColor object for the requested color (always a fresh copy)
        """
        palette = self._dark_palette if self.is_dark() else self._light_palette
        value = palette.get(color_key)

        if isinstance(value, QColor):
            return QColor(value)
        if isinstance(value, str):
            return QColor(value)

        theme_logger.warning(f"Color key '{color_key}' not found in palette")
        return QColor("#000000")

    def get_hex(self, color_key: str) -> str:
        """Returns the color as #rrggbb for matplotlib."""
        return self.get_color(color_key).name()

    def is_dark(self) -> bool:
        return self._current_theme == "dark"

    def set_theme(self, theme_name: str, app: Optional[QApplication] = None):
        """
        Set the current theme.

        Args:
            theme_name: "light" or "dark"
            app: QApplication whose palette should follow (optional)
        """
        if theme_name not in ("light", "dark"):
            raise ValueError(f"Unknown theme: {theme_name!r}")

        changed = self._current_theme != theme_name
        self._current_theme = theme_name

        if app is not None:
            self.apply_theme_to_app(app)

        if changed:
            theme_logger.debug(f"Theme switched to {theme_name}")
            self.theme_changed.emit()

    def apply_theme_to_app(self, app: QApplication):
        """Apply the current palette to the QApplication."""
        palette_data = self._dark_palette if self.is_dark() else self._light_palette

        q_palette = QPalette()
        color_roles = {
            "Window": QPalette.ColorRole.Window,
            "WindowText": QPalette.ColorRole.WindowText,
            "ToolTipBase": QPalette.ColorRole.ToolTipBase,
            "ToolTipText": QPalette.ColorRole.ToolTipText,
        }

        for name, role in color_roles.items():
            if name in palette_data:
                q_palette.setColor(role, QColor(palette_data[name]))

        app.setPalette(q_palette)

    def tooltip_stylesheet(self) -> str:
        """Returns the QSS for the hover tooltip label."""
        return TOOLTIP_QSS.format(
            background=self.get_color("tooltip.background").name(QColor.NameFormat.HexArgb),
            text=self.get_color("tooltip.text").name(QColor.NameFormat.HexArgb),
            border=self.get_color("tooltip.border").name(QColor.NameFormat.HexArgb),
        )
